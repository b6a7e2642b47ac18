"""Order line entity."""

from dataclasses import dataclass


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class OrderLine:
    """One requested (product, variant, quantity) triple from a customer order."""

    product_id: int
    variant_index: int
    quantity: int

    def __post_init__(self) -> None:
        if not (_is_int(self.product_id) and _is_int(self.variant_index) and _is_int(self.quantity)):
            raise ValueError("Order line fields must be integers.")
        if self.quantity <= 0:
            raise ValueError("Ordered quantity must be positive.")

    @classmethod
    def from_request_item(cls, item) -> "OrderLine | None":
        """Builds a line from an ``{id, saborIndex, quantity}`` request item, or None if it is unusable."""
        if not isinstance(item, dict):
            return None
        try:
            return cls(
                product_id=item.get("id"),
                variant_index=item.get("saborIndex"),
                quantity=item.get("quantity"),
            )
        except ValueError:
            return None
