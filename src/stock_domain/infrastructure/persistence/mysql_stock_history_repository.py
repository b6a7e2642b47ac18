# src/stock_domain/infrastructure/persistence/mysql_stock_history_repository.py
"""MySQL implementation of the stock adjustment audit trail."""

import logging

from mysql.connector import Error

from src.common.exceptions.custom_exceptions import DatabaseError
from src.common.persistence.mysql_connection import MySQLConnectionMixin
from src.common.utils.date_utils import format_datetime_for_db, parse_db_datetime
from src.stock_domain.domain.entities.stock_adjustment import StockAdjustmentRecord
from src.stock_domain.domain.repositories.stock_history_repository import (
    IStockHistoryRepository,
)

logger = logging.getLogger(__name__)


class MySQLStockHistoryRepository(MySQLConnectionMixin, IStockHistoryRepository):
    """MySQL implementation of the Stock History Repository."""

    def __init__(self) -> None:
        """Initializes the repository."""
        self._connection = None

    def create_tables(self) -> None:
        create_history_table_query = """
        CREATE TABLE IF NOT EXISTS stock_updates_history (
            id BIGINT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            product_id BIGINT UNSIGNED NOT NULL,
            sabor_index INT UNSIGNED NOT NULL,
            sabor_name VARCHAR(255),
            product_title VARCHAR(255),
            old_stock INT UNSIGNED NOT NULL,
            new_stock INT UNSIGNED NOT NULL,
            quantity_ordered INT UNSIGNED NOT NULL,
            updated_at DATETIME NOT NULL,
            INDEX idx_product_id (product_id),
            INDEX idx_updated_at (updated_at)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_history_table_query, "stock_updates_history")
        logger.info("Stock updates history table checked/created.")

    def append_adjustments(self, records: list[StockAdjustmentRecord]) -> None:
        if not records:
            return

        conn = self._get_connection()
        cursor = conn.cursor()

        insert_query = """
        INSERT INTO stock_updates_history
        (product_id, sabor_index, sabor_name, product_title, old_stock, new_stock, quantity_ordered, updated_at)
        VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
        """

        params_list = [
            (
                record.product_id,
                record.variant_index,
                record.variant_name,
                record.product_title,
                record.quantity_before,
                record.quantity_after,
                record.quantity_ordered,
                format_datetime_for_db(record.timestamp),
            )
            for record in records
        ]

        try:
            cursor.executemany(insert_query, params_list)
            conn.commit()
            logger.debug(f"Appended {len(records)} stock adjustment records")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error appending stock adjustment history: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_history_for_product(self, product_id: int, limit: int = 50) -> list[StockAdjustmentRecord]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)

        try:
            query = """
            SELECT product_id, sabor_index, sabor_name, product_title,
                   old_stock, new_stock, quantity_ordered, updated_at
            FROM stock_updates_history
            WHERE product_id = %s
            ORDER BY updated_at DESC, id DESC
            LIMIT %s
            """
            cursor.execute(query, (product_id, limit))
            rows = cursor.fetchall()
            return [
                StockAdjustmentRecord(
                    product_id=row["product_id"],
                    variant_index=row["sabor_index"],
                    variant_name=row["sabor_name"],
                    product_title=row["product_title"],
                    quantity_before=row["old_stock"],
                    quantity_after=row["new_stock"],
                    quantity_ordered=row["quantity_ordered"],
                    timestamp=parse_db_datetime(row["updated_at"]),
                )
                for row in rows
            ]
        except Error as e:
            raise DatabaseError(f"Error fetching stock history for product {product_id}: {e}", original_exception=e)
        finally:
            cursor.close()
