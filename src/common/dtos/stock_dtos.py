"""Data Transfer Objects for stock adjustment results."""

from dataclasses import dataclass, field

from src.stock_domain.domain.entities.stock_adjustment import StockAdjustmentRecord


@dataclass
class AdjustmentResultDTO:
    """Outcome of one stock adjustment batch.

    ``audit_error`` carries the secondary failure of the audit-trail write; it
    never changes ``success`` or the counts.
    """

    success: bool
    message: str
    updates_applied: int = 0
    products_written: int = 0
    updates: list[StockAdjustmentRecord] = field(default_factory=list)
    audit_error: str | None = None

    def to_dict(self) -> dict:
        payload = {
            "success": self.success,
            "message": self.message,
            "updatesApplied": self.updates_applied,
            "productsWritten": self.products_written,
        }
        if self.audit_error:
            payload["auditError"] = self.audit_error
        return payload
