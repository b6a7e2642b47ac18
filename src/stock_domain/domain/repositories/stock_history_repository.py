# src/stock_domain/domain/repositories/stock_history_repository.py
"""Stock adjustment audit trail repository interface."""
from abc import ABC, abstractmethod

from src.stock_domain.domain.entities.stock_adjustment import StockAdjustmentRecord


class IStockHistoryRepository(ABC):

    @abstractmethod
    def create_tables(self) -> None:
        """Creates the audit table if it does not exist."""
        pass

    @abstractmethod
    def append_adjustments(self, records: list[StockAdjustmentRecord]) -> None:
        """Inserts adjustment records in one write, independent of the product write."""
        pass

    @abstractmethod
    def get_history_for_product(self, product_id: int, limit: int = 50) -> list[StockAdjustmentRecord]:
        """Retrieves the newest adjustment records of a product."""
        pass
