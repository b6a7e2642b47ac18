"""Stock adjustment audit record."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StockAdjustmentRecord:
    """Append-only trace of one variant's quantity change."""

    product_id: int
    variant_index: int
    variant_name: str
    product_title: str
    quantity_before: int
    quantity_after: int
    quantity_ordered: int
    timestamp: datetime
