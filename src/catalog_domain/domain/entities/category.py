"""Category value object."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
