# src/stock_domain/application/stock_adjustment_service.py
"""Application service that decrements variant stock for a batch of order lines."""

import copy
import logging

from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.repositories.product_repository import IProductRepository
from src.common.dtos.stock_dtos import AdjustmentResultDTO
from src.common.utils.date_utils import utc_now
from src.stock_domain.domain.entities.order_line import OrderLine
from src.stock_domain.domain.entities.stock_adjustment import StockAdjustmentRecord
from src.stock_domain.domain.repositories.stock_history_repository import (
    IStockHistoryRepository,
)

logger = logging.getLogger(__name__)


class StockAdjustmentService:
    """
    Applies order lines to product stock in one read and one write.

    Each call reads a snapshot of the referenced products, computes the new
    variant quantities in memory and upserts the full records of the products
    that changed. Concurrent calls are not coordinated: the last upsert of a
    product wins.
    """

    def __init__(self, product_repo: IProductRepository, history_repo: IStockHistoryRepository) -> None:
        self.product_repo = product_repo
        self.history_repo = history_repo

    def adjust_stock(self, lines: list[OrderLine]) -> AdjustmentResultDTO:
        """
        Decrements stock for ``lines``.

        Unknown products and out-of-range variant indexes are skipped. Read and
        write failures propagate as DatabaseError; an audit-trail failure is
        logged and reported in ``audit_error`` only.
        """
        logger.info(f"Starting stock adjustment for {len(lines)} order lines")

        if not lines:
            logger.warning("No order lines to apply")
            return AdjustmentResultDTO(success=True, message="Nothing to update")

        product_ids = list(dict.fromkeys(line.product_id for line in lines))
        logger.debug(f"Distinct products referenced: {product_ids}")

        current_products = self.product_repo.get_products_by_ids(product_ids)
        if not current_products:
            logger.warning(f"No products found for ids {product_ids}")
            return AdjustmentResultDTO(success=True, message="No matching products found")

        logger.info(f"{len(current_products)} products found for adjustment")

        working_copy: dict[int, Product] = {product.id: copy.deepcopy(product) for product in current_products}
        updates: list[StockAdjustmentRecord] = []
        changed_ids: list[int] = []
        timestamp = utc_now()

        for line in lines:
            product = working_copy.get(line.product_id)
            if product is None or not product.has_variant(line.variant_index):
                logger.debug(f"Skipping line without a matching variant: {line}")
                continue

            variant = product.sabores[line.variant_index]
            old_quantity = variant.quantity
            new_quantity = max(0, old_quantity - line.quantity)
            if new_quantity == old_quantity:
                continue

            variant.quantity = new_quantity
            updates.append(
                StockAdjustmentRecord(
                    product_id=product.id,
                    variant_index=line.variant_index,
                    variant_name=variant.name,
                    product_title=product.title,
                    quantity_before=old_quantity,
                    quantity_after=new_quantity,
                    quantity_ordered=line.quantity,
                    timestamp=timestamp,
                )
            )
            if product.id not in changed_ids:
                changed_ids.append(product.id)

        if not updates:
            logger.info("No stock updates necessary")
            return AdjustmentResultDTO(success=True, message="No stock updates necessary")

        logger.info(f"{len(updates)} stock updates to persist")

        products_to_write = [working_copy[product_id] for product_id in changed_ids]
        self.product_repo.batch_upsert_products(products_to_write)

        audit_error = None
        try:
            self.history_repo.append_adjustments(updates)
        except Exception as e:
            audit_error = str(e)
            logger.error(f"Error saving stock history, stock was updated anyway: {e}")

        logger.info(f"Stock updated: {len(updates)} items across {len(products_to_write)} products")

        return AdjustmentResultDTO(
            success=True,
            message=f"Stock updated for {len(updates)} items",
            updates_applied=len(updates),
            products_written=len(products_to_write),
            updates=updates,
            audit_error=audit_error,
        )
