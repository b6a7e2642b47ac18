"""Catalog entry point: prints the products and categories served to the storefront."""

import json
import logging
import sys

from src.catalog_domain.application.catalog_service import CatalogApplicationService
from src.catalog_domain.infrastructure.persistence.mysql_product_repository import (
    MySQLCategoryRepository,
    MySQLProductRepository,
)
from src.common.logger_config import setup_logging

logger = logging.getLogger(__name__)


def setup_catalog_dependencies() -> CatalogApplicationService:
    """Initializes and wires up catalog domain dependencies."""
    return CatalogApplicationService(
        product_repo=MySQLProductRepository(), category_repo=MySQLCategoryRepository()
    )


def run_catalog_listing() -> int:
    # Store failures fall back to the sample catalog inside the service
    catalog = setup_catalog_dependencies().get_catalog()
    logger.info(f"Catalog holds {len(catalog['products'])} products in {len(catalog['categories'])} categories")
    print(json.dumps(catalog, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    setup_logging()
    sys.exit(run_catalog_listing())
