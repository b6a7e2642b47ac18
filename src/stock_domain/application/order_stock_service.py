# src/stock_domain/application/order_stock_service.py
"""Order-facing entry point for stock updates."""

import logging

from src.common.exceptions.custom_exceptions import ApplicationError, InvalidOrderError
from src.stock_domain.application.stock_adjustment_service import StockAdjustmentService
from src.stock_domain.domain.entities.order_line import OrderLine

logger = logging.getLogger(__name__)

MANUAL_REVIEW_MESSAGE = "Order processed, but stock may need manual review"


class OrderStockApplicationService:
    """Validates order items and applies them to stock without ever failing the order itself."""

    def __init__(self, stock_service: StockAdjustmentService) -> None:
        self.stock_service = stock_service

    @staticmethod
    def parse_order_lines(raw_items) -> list[OrderLine]:
        """Keeps the items with integer ``id``/``saborIndex``/``quantity`` and a positive quantity."""
        if not isinstance(raw_items, list) or not raw_items:
            raise InvalidOrderError("No items to update stock")

        lines = [line for line in map(OrderLine.from_request_item, raw_items) if line is not None]
        if not lines:
            raise InvalidOrderError("No valid items to update stock")

        if len(lines) < len(raw_items):
            logger.warning(f"Dropped {len(raw_items) - len(lines)} invalid items of {len(raw_items)}")
        return lines

    def update_stock_for_order(self, raw_items) -> dict:
        """
        Applies an order's items to stock and returns the JSON response body.

        InvalidOrderError is raised for requests with nothing usable. Failures
        while adjusting are reported as a success flagged for manual review, so
        the order flow that called us is never blocked on stock bookkeeping.
        """
        lines = self.parse_order_lines(raw_items)
        logger.info(f"Processing {len(lines)} valid items")

        try:
            result = self.stock_service.adjust_stock(lines)
        except ApplicationError as e:
            logger.error(f"Error updating stock: {e}")
            return {
                "success": True,
                "message": MANUAL_REVIEW_MESSAGE,
                "error": str(e),
                "needs_manual_check": True,
            }

        return result.to_dict()
