# src/catalog_domain/application/catalog_service.py
"""Application service for reading and maintaining the product catalog."""

import logging

from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.repositories.product_repository import (
    ICategoryRepository,
    IProductRepository,
)
from src.catalog_domain.domain.services.catalog_normalizer import (
    load_sample_catalog,
    normalize_categories,
    normalize_products,
    normalize_variants,
)
from src.common.config.settings import settings
from src.common.exceptions.custom_exceptions import (
    ApplicationError,
    CategoryNotFoundError,
    InvalidCatalogDataError,
)

logger = logging.getLogger(__name__)


class CatalogApplicationService:
    """Serves products and categories, falling back to the bundled sample catalog when the store fails."""

    def __init__(self, product_repo: IProductRepository, category_repo: ICategoryRepository) -> None:
        self.product_repo = product_repo
        self.category_repo = category_repo

    def _load_fallback(self) -> tuple[list[Product], list[Category]]:
        try:
            return load_sample_catalog(settings.SAMPLE_CATALOG_PATH)
        except (OSError, ValueError) as e:
            logger.error(f"Sample catalog unavailable at {settings.SAMPLE_CATALOG_PATH}: {e}")
            return [], []

    def get_products(self) -> list[Product]:
        """Returns every product with available variants listed first."""
        try:
            products = self.product_repo.get_all_products()
        except ApplicationError as e:
            logger.error(f"Error fetching products, serving sample catalog: {e}")
            products, _ = self._load_fallback()
            return products

        for product in products:
            product.sabores = normalize_variants(product.to_dict()["sabores"])
        logger.info(f"{len(products)} products loaded")
        return products

    def get_categories(self) -> list[Category]:
        try:
            categories = self.category_repo.get_all_categories()
        except ApplicationError as e:
            logger.error(f"Error fetching categories, serving sample catalog: {e}")
            _, categories = self._load_fallback()
            return categories

        if not categories:
            logger.info("No categories found in the store")
        return categories

    def get_catalog(self) -> dict:
        """JSON-ready ``{"products": [...], "categories": [...]}`` payload."""
        return {
            "products": [product.to_dict() for product in self.get_products()],
            "categories": [category.to_dict() for category in self.get_categories()],
        }

    def save_products(self, raw_products) -> int:
        """Normalizes the submitted products and makes them the whole catalog; returns how many were saved."""
        products = normalize_products(raw_products)
        logger.info(f"Saving {len(products)} products...")
        self.product_repo.replace_all_products(products)
        return len(products)

    def add_category(self, raw_category) -> Category:
        """Creates or updates one category; ``id`` and ``name`` are required."""
        if not isinstance(raw_category, dict) or not raw_category.get("id") or not raw_category.get("name"):
            raise InvalidCatalogDataError("Invalid category data: id and name are required")

        name = raw_category["name"]
        category = Category(
            id=str(raw_category["id"]),
            name=name,
            description=raw_category.get("description") or f"Categoria de {name}",
        )
        self.category_repo.upsert_categories([category])
        logger.info(f"Category added: {category.name} (ID: {category.id})")
        return category

    def delete_category(self, category_id: str) -> dict:
        """
        Deletes a category after moving its products to another category.

        Products stay where they are when no other category exists. Raises
        CategoryNotFoundError for unknown ids.
        """
        category = self.category_repo.get_category(category_id)
        if category is None:
            raise CategoryNotFoundError(category_id)

        others = [other for other in self.category_repo.get_all_categories() if other.id != category_id]
        moved_to = None
        moved = 0
        if others:
            moved_to = others[0].id
            moved = self.product_repo.move_products_to_category(category_id, moved_to)
            if moved:
                logger.info(f"{moved} products moved to category {moved_to}")
        else:
            logger.warning(f"No other category found, products of {category_id} were not moved")

        self.category_repo.delete_category(category_id)
        logger.info(f"Category deleted: {category_id}")
        return {"category": category, "moved_products": moved, "moved_to": moved_to}

    def save_categories(self, raw_categories) -> int:
        """Makes the normalized ``raw_categories`` the complete category set."""
        categories = normalize_categories(raw_categories)
        if not categories:
            raise InvalidCatalogDataError("No categories provided")

        self.category_repo.replace_all_categories(categories)
        logger.info(f"{len(categories)} categories saved")
        return len(categories)
