# src/catalog_domain/infrastructure/persistence/mysql_product_repository.py
"""MySQL implementation of the product and category repositories."""

import json
import logging
from decimal import Decimal
from typing import Optional

from mysql.connector import Error

from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.repositories.product_repository import (
    ICategoryRepository,
    IProductRepository,
)
from src.catalog_domain.domain.services.catalog_normalizer import (
    normalize_categories,
    read_stored_variants,
)
from src.common.exceptions.custom_exceptions import DatabaseError
from src.common.persistence.mysql_connection import MySQLConnectionMixin

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "id, title, category, price, description, status, display_order, sabores"


def _row_to_product(row: dict) -> Product:
    """Builds a Product from a database row, keeping every variant slot where it is stored."""
    price = row.get("price")
    if isinstance(price, Decimal):
        price = float(price)
    return Product(
        id=row["id"],
        title=row.get("title") or "",
        category=row.get("category"),
        price=price if price is not None else 0.0,
        description=row.get("description") or "",
        status=row.get("status") or "available",
        display_order=row.get("display_order") or 0,
        sabores=read_stored_variants(row.get("sabores"), row["id"]),
    )


def _variants_json(product: Product) -> str:
    return json.dumps(product.to_dict()["sabores"], ensure_ascii=False)


class MySQLProductRepository(MySQLConnectionMixin, IProductRepository):
    """MySQL implementation of the Product Repository."""

    def __init__(self) -> None:
        """Initializes the repository."""
        self._connection = None

    def create_tables(self) -> None:
        """Creates the products table; variants live in a JSON column."""
        create_products_table_query = """
        CREATE TABLE IF NOT EXISTS products (
            id BIGINT UNSIGNED PRIMARY KEY AUTO_INCREMENT,
            title VARCHAR(255) NOT NULL,
            category VARCHAR(255),
            price DECIMAL(10, 2) NOT NULL DEFAULT 0,
            description TEXT,
            status VARCHAR(50),
            display_order INT NOT NULL DEFAULT 0,
            sabores JSON NOT NULL,
            updated_at DATETIME DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
            INDEX idx_display_order (display_order),
            INDEX idx_category (category)
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_products_table_query, "products")
        logger.info("Products table checked/created.")

    def get_products_by_ids(self, product_ids: list[int]) -> list[Product]:
        if not product_ids:
            return []

        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)

        try:
            placeholders = ",".join(["%s"] * len(product_ids))
            query = f"SELECT {PRODUCT_COLUMNS} FROM products WHERE id IN ({placeholders})"
            cursor.execute(query, tuple(product_ids))
            rows = cursor.fetchall()
            return [_row_to_product(row) for row in rows]
        except Error as e:
            raise DatabaseError(f"Error fetching products {product_ids}: {e}", original_exception=e)
        finally:
            cursor.close()

    def batch_upsert_products(self, products: list[Product]) -> None:
        """
        Writes full product records in one statement.

        Rows are replaced wholesale; there is no version check, so the last
        writer wins when two batches touch the same product.
        """
        if not products:
            return

        conn = self._get_connection()
        cursor = conn.cursor()

        upsert_query = """
        INSERT INTO products
        (id, title, category, price, description, status, display_order, sabores)
        VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
        ON DUPLICATE KEY UPDATE
        title = VALUES(title),
        category = VALUES(category),
        price = VALUES(price),
        description = VALUES(description),
        status = VALUES(status),
        display_order = VALUES(display_order),
        sabores = VALUES(sabores)
        """

        params_list = [
            (
                product.id,
                product.title,
                product.category,
                product.price,
                product.description,
                product.status,
                product.display_order,
                _variants_json(product),
            )
            for product in products
        ]

        try:
            cursor.executemany(upsert_query, params_list)
            conn.commit()
            logger.info(f"Batch upserted {len(products)} products")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error batch upserting products: {e}", original_exception=e)
        finally:
            cursor.close()

    def replace_all_products(self, products: list[Product]) -> None:
        """Deletes every product and inserts ``products`` in one transaction; ids are reassigned."""
        conn = self._get_connection()
        cursor = conn.cursor()

        insert_query = """
        INSERT INTO products
        (title, category, price, description, status, display_order, sabores)
        VALUES (%s, %s, %s, %s, %s, %s, %s)
        """

        params_list = [
            (
                product.title,
                product.category,
                product.price,
                product.description,
                product.status,
                product.display_order,
                _variants_json(product),
            )
            for product in products
        ]

        try:
            cursor.execute("DELETE FROM products")
            if params_list:
                cursor.executemany(insert_query, params_list)
            conn.commit()
            logger.info(f"Replaced catalog with {len(products)} products")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error replacing products: {e}", original_exception=e)
        finally:
            cursor.close()

    def move_products_to_category(self, from_category_id: str, to_category_id: str) -> int:
        conn = self._get_connection()
        cursor = conn.cursor()

        try:
            cursor.execute(
                "UPDATE products SET category = %s WHERE category = %s", (to_category_id, from_category_id)
            )
            conn.commit()
            return cursor.rowcount
        except Error as e:
            conn.rollback()
            raise DatabaseError(
                f"Error moving products from category {from_category_id} to {to_category_id}: {e}",
                original_exception=e,
            )
        finally:
            cursor.close()

    def get_all_products(self) -> list[Product]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)

        try:
            cursor.execute(f"SELECT {PRODUCT_COLUMNS} FROM products ORDER BY display_order ASC, id ASC")
            rows = cursor.fetchall()
            return [_row_to_product(row) for row in rows]
        except Error as e:
            raise DatabaseError(f"Error fetching products: {e}", original_exception=e)
        finally:
            cursor.close()


class MySQLCategoryRepository(MySQLConnectionMixin, ICategoryRepository):
    """MySQL implementation of the Category Repository."""

    def __init__(self) -> None:
        self._connection = None

    def create_tables(self) -> None:
        create_categories_table_query = """
        CREATE TABLE IF NOT EXISTS categories (
            id VARCHAR(255) PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            description TEXT
        ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4;
        """
        self._execute_ddl(create_categories_table_query, "categories")
        logger.info("Categories table checked/created.")

    def get_all_categories(self) -> list[Category]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)

        try:
            cursor.execute("SELECT id, name, description FROM categories ORDER BY name")
            return normalize_categories(cursor.fetchall())
        except Error as e:
            raise DatabaseError(f"Error fetching categories: {e}", original_exception=e)
        finally:
            cursor.close()

    def get_category(self, category_id: str) -> Optional[Category]:
        conn = self._get_connection()
        cursor = conn.cursor(dictionary=True)

        try:
            cursor.execute("SELECT id, name, description FROM categories WHERE id = %s LIMIT 1", (category_id,))
            row = cursor.fetchone()
        except Error as e:
            raise DatabaseError(f"Error fetching category {category_id}: {e}", original_exception=e)
        finally:
            cursor.close()

        if not row:
            return None
        return Category(id=row["id"], name=row["name"], description=row.get("description") or "")

    def _upsert(self, cursor, categories: list[Category]) -> None:
        upsert_query = """
        INSERT INTO categories (id, name, description)
        VALUES (%s, %s, %s)
        ON DUPLICATE KEY UPDATE
        name = VALUES(name),
        description = VALUES(description)
        """
        cursor.executemany(
            upsert_query, [(category.id, category.name, category.description) for category in categories]
        )

    def upsert_categories(self, categories: list[Category]) -> None:
        if not categories:
            return

        conn = self._get_connection()
        cursor = conn.cursor()

        try:
            self._upsert(cursor, categories)
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error saving categories: {e}", original_exception=e)
        finally:
            cursor.close()

    def replace_all_categories(self, categories: list[Category]) -> None:
        """Removes categories missing from ``categories`` and upserts the rest, in one transaction."""
        if not categories:
            raise ValueError("Refusing to replace categories with an empty set.")

        conn = self._get_connection()
        cursor = conn.cursor()

        try:
            placeholders = ",".join(["%s"] * len(categories))
            cursor.execute(
                f"DELETE FROM categories WHERE id NOT IN ({placeholders})",
                tuple(category.id for category in categories),
            )
            self._upsert(cursor, categories)
            conn.commit()
            logger.info(f"Replaced categories with {len(categories)} entries")
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error replacing categories: {e}", original_exception=e)
        finally:
            cursor.close()

    def delete_category(self, category_id: str) -> None:
        conn = self._get_connection()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM categories WHERE id = %s", (category_id,))
            conn.commit()
        except Error as e:
            conn.rollback()
            raise DatabaseError(f"Error deleting category {category_id}: {e}", original_exception=e)
        finally:
            cursor.close()
