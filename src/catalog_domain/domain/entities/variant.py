"""Variant ("sabor") entity."""

from dataclasses import asdict, dataclass


@dataclass
class Variant:
    """A purchasable sub-option of a product (e.g. a flavor) with its own stock."""

    name: str
    image: str
    quantity: int = 0
    description: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Variant quantity must be an integer, got {self.quantity!r}.")
        if self.quantity < 0:
            raise ValueError("Quantity cannot be negative.")

    @property
    def available(self) -> bool:
        return self.quantity > 0

    def to_dict(self) -> dict:
        return asdict(self)
