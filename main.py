"""Main application entry point: applies an order file to product stock."""

import json
import logging
import sys

from src.catalog_domain.infrastructure.persistence.mysql_product_repository import (
    MySQLCategoryRepository,
    MySQLProductRepository,
)
from src.common.exceptions.custom_exceptions import (
    ApplicationError,
    DatabaseError,
    InvalidOrderError,
)
from src.common.logger_config import setup_logging
from src.stock_domain.application.order_stock_service import OrderStockApplicationService
from src.stock_domain.application.stock_adjustment_service import StockAdjustmentService
from src.stock_domain.infrastructure.persistence.mysql_stock_history_repository import (
    MySQLStockHistoryRepository,
)

logger = logging.getLogger(__name__)


def setup_stock_dependencies() -> OrderStockApplicationService:
    """Initializes and wires up stock domain dependencies."""
    product_repository = MySQLProductRepository()
    history_repository = MySQLStockHistoryRepository()
    stock_service = StockAdjustmentService(product_repo=product_repository, history_repo=history_repository)
    return OrderStockApplicationService(stock_service=stock_service)


def create_db_tables() -> None:
    """Creates the catalog and stock history tables."""
    for repo in (MySQLProductRepository(), MySQLCategoryRepository(), MySQLStockHistoryRepository()):
        try:
            repo.create_tables()
        except DatabaseError as e:
            logger.error(f"Error creating database tables: {e}")
            raise
        finally:
            repo.close()


def load_order_items(path: str) -> list:
    """Reads order items from a JSON file holding ``{"items": [...]}`` or a bare list."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ApplicationError(f"Order file not found at {path}")
    except json.JSONDecodeError:
        raise ApplicationError(f"Error decoding order file {path}")

    if isinstance(data, dict):
        return data.get("items")
    return data


def run_stock_update_process(order_path: str) -> int:
    order_stock_service = setup_stock_dependencies()

    try:
        create_db_tables()
        response = order_stock_service.update_stock_for_order(load_order_items(order_path))
    except InvalidOrderError as e:
        logger.error(f"Order rejected: {e}")
        print(json.dumps(e.to_response(), ensure_ascii=False))
        return 1
    except ApplicationError as e:
        logger.error(f"An error occurred during stock update: {e}")
        return 1

    print(json.dumps(response, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) != 2:
        print("Usage: python main.py <order.json>")
        sys.exit(2)

    sys.exit(run_stock_update_process(sys.argv[1]))
