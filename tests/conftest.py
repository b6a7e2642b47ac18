# tests/conftest.py
import pytest
from unittest.mock import Mock

from src.catalog_domain.application.catalog_service import CatalogApplicationService
from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.entities.variant import Variant
from src.catalog_domain.infrastructure.persistence.mysql_product_repository import (
    MySQLCategoryRepository,
    MySQLProductRepository,
)
from src.common.config.settings import settings
from src.stock_domain.application.order_stock_service import OrderStockApplicationService
from src.stock_domain.application.stock_adjustment_service import StockAdjustmentService
from src.stock_domain.infrastructure.persistence.mysql_stock_history_repository import (
    MySQLStockHistoryRepository,
)

PLACEHOLDER_IMAGE = "https://via.placeholder.com/400x300"


def make_product(product_id: int, quantities: list[int], title: str | None = None) -> Product:
    """Builds a product whose variants carry the given quantities, in order."""
    return Product(
        id=product_id,
        title=title or f"Produto {product_id}",
        category="pods",
        price=49.9,
        description="",
        status="available",
        display_order=product_id,
        sabores=[
            Variant(name=f"Sabor {index}", image=PLACEHOLDER_IMAGE, quantity=quantity)
            for index, quantity in enumerate(quantities)
        ],
    )


@pytest.fixture(autouse=True)
def mock_settings_db_info(mocker) -> None:
    """Points the settings at a test database so nothing real is reached."""
    mocker.patch.object(settings, "DB_HOST", "localhost")
    mocker.patch.object(settings, "DB_DATABASE", "test_db")
    mocker.patch.object(settings, "DB_USER", "test_user")
    mocker.patch.object(settings, "DB_PASSWORD", "test_password")


@pytest.fixture
def mock_product_repository() -> Mock:
    """Mock for MySQLProductRepository."""
    return Mock(spec=MySQLProductRepository)


@pytest.fixture
def mock_category_repository() -> Mock:
    """Mock for MySQLCategoryRepository."""
    return Mock(spec=MySQLCategoryRepository)


@pytest.fixture
def mock_history_repository() -> Mock:
    """Mock for MySQLStockHistoryRepository."""
    return Mock(spec=MySQLStockHistoryRepository)


@pytest.fixture
def stock_service(mock_product_repository, mock_history_repository) -> StockAdjustmentService:
    """Instance of StockAdjustmentService with mocked dependencies."""
    return StockAdjustmentService(product_repo=mock_product_repository, history_repo=mock_history_repository)


@pytest.fixture
def order_stock_service(stock_service) -> OrderStockApplicationService:
    return OrderStockApplicationService(stock_service=stock_service)


@pytest.fixture
def catalog_service(mock_product_repository, mock_category_repository) -> CatalogApplicationService:
    return CatalogApplicationService(product_repo=mock_product_repository, category_repo=mock_category_repository)


@pytest.fixture
def sample_product() -> Product:
    """Product 1 with variants at 10, 0 and 5 units."""
    return make_product(1, [10, 0, 5], title="Pod Descartável 5000")


@pytest.fixture
def sample_product_row() -> dict:
    """A products table row as returned by a dictionary cursor."""
    return {
        "id": 1,
        "title": "Pod Descartável 5000",
        "category": "pods",
        "price": 89.9,
        "description": "Pod descartável",
        "status": "available",
        "display_order": 1,
        "sabores": '[{"name": "Menta", "image": "", "quantity": 0, "description": ""},'
        ' {"name": "Uva", "image": "img/uva.png", "quantity": 12, "description": "Uva gelada"}]',
    }


@pytest.fixture
def product_factory():
    """Returns ``make_product`` so tests can build products with chosen quantities."""
    return make_product
