"""Product entity."""

from dataclasses import dataclass, field
from typing import Optional

from .variant import Variant


@dataclass
class Product:
    """A catalog product and its ordered sequence of variants ("sabores")."""

    id: Optional[int]  # None until the store assigns one
    title: str
    category: Optional[str] = None
    price: float = 0.0
    description: str = ""
    status: str = "available"
    display_order: int = 0
    # Stored records may hold unreadable slots (None); they keep their position
    sabores: list[Optional[Variant]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.id is not None and (isinstance(self.id, bool) or not isinstance(self.id, int)):
            raise ValueError(f"Product id must be an integer, got {self.id!r}.")
        if self.price is not None and self.price < 0:
            raise ValueError("Price cannot be negative.")

    def has_variant(self, index: int) -> bool:
        """True when ``index`` addresses an existing, readable variant."""
        return 0 <= index < len(self.sabores) and self.sabores[index] is not None

    @property
    def total_quantity(self) -> int:
        return sum(variant.quantity for variant in self.sabores if variant is not None)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "price": self.price,
            "description": self.description,
            "status": self.status,
            "display_order": self.display_order,
            "sabores": [variant.to_dict() if variant is not None else None for variant in self.sabores],
        }
