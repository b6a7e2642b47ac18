# src/catalog_domain/domain/repositories/product_repository.py
"""Product and category repository interfaces."""
from abc import ABC, abstractmethod
from typing import Optional

from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.domain.entities.product import Product


class IProductRepository(ABC):

    @abstractmethod
    def create_tables(self) -> None:
        """Creates the products table if it does not exist."""
        pass

    @abstractmethod
    def get_products_by_ids(self, product_ids: list[int]) -> list[Product]:
        """Fetches the full records of the given products in a single read."""
        pass

    @abstractmethod
    def batch_upsert_products(self, products: list[Product]) -> None:
        """Inserts or fully replaces the given products, keyed by id, in a single write."""
        pass

    @abstractmethod
    def replace_all_products(self, products: list[Product]) -> None:
        """Replaces the whole product set with ``products``."""
        pass

    @abstractmethod
    def move_products_to_category(self, from_category_id: str, to_category_id: str) -> int:
        """Reassigns every product of one category to another; returns the number moved."""
        pass

    @abstractmethod
    def get_all_products(self) -> list[Product]:
        """Retrieves every product ordered by display order, then id."""
        pass


class ICategoryRepository(ABC):

    @abstractmethod
    def create_tables(self) -> None:
        """Creates the categories table if it does not exist."""
        pass

    @abstractmethod
    def get_all_categories(self) -> list[Category]:
        """Retrieves every category ordered by name."""
        pass

    @abstractmethod
    def get_category(self, category_id: str) -> Optional[Category]:
        pass

    @abstractmethod
    def upsert_categories(self, categories: list[Category]) -> None:
        """Inserts or updates categories keyed by id."""
        pass

    @abstractmethod
    def replace_all_categories(self, categories: list[Category]) -> None:
        """Makes ``categories`` the complete category set."""
        pass

    @abstractmethod
    def delete_category(self, category_id: str) -> None:
        pass
