# src/catalog_domain/domain/services/catalog_normalizer.py
"""Domain services that turn loosely shaped catalog records into entities."""

import json
import logging
from typing import Any

from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.entities.variant import Variant

logger = logging.getLogger(__name__)

DEFAULT_VARIANT_NAME = "Sem nome"
DEFAULT_VARIANT_IMAGE = "https://via.placeholder.com/400x300"


def _coerce_quantity(value: Any) -> int:
    """Reads a stock quantity, treating missing/garbage values as 0 and clamping at 0."""
    if isinstance(value, bool) or value is None:
        return 0
    try:
        quantity = int(value)
    except (TypeError, ValueError):
        return 0
    return max(0, quantity)


def normalize_variants(raw_variants: Any) -> list[Variant]:
    """
    Builds Variant entities with defaults filled in and available variants first.

    The ordering is a stable partition: every variant with stock precedes every
    sold-out one, and relative order is kept on both sides.
    """
    if not isinstance(raw_variants, list):
        return []

    variants = [
        Variant(
            name=raw.get("name") or DEFAULT_VARIANT_NAME,
            image=raw.get("image") or DEFAULT_VARIANT_IMAGE,
            quantity=_coerce_quantity(raw.get("quantity")),
            description=raw.get("description") or "",
        )
        for raw in raw_variants
        if isinstance(raw, dict)
    ]
    # sorted() is stable, so this only moves sold-out variants to the back
    return sorted(variants, key=lambda variant: not variant.available)


def _legacy_colors_to_variants(colors: list) -> list[dict]:
    """Converts the old colors/sizes layout into plain variant records."""
    converted = []
    for color in colors:
        if not isinstance(color, dict):
            continue
        sizes = color.get("sizes")
        if isinstance(sizes, list):
            quantity = sum(_coerce_quantity(size.get("stock")) for size in sizes if isinstance(size, dict))
        else:
            quantity = _coerce_quantity(color.get("quantity"))
        converted.append(
            {
                "name": color.get("name"),
                "image": color.get("image"),
                "quantity": quantity,
                "description": color.get("description"),
            }
        )
    return converted


def _coerce_price(value: Any) -> float:
    try:
        price = float(value) if value is not None else 0.0
    except (TypeError, ValueError):
        return 0.0
    return max(0.0, price)


def decode_variants(value: Any, product_id: Any = None) -> Any:
    """Parses variants stored as JSON text; other values pass through."""
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        # JSON columns come back as text from some connectors
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning(f"Discarding unreadable variants for product {product_id}")
            return []
    return value


def read_stored_variants(value: Any, product_id: Any = None) -> list[Variant | None]:
    """
    Builds variants exactly as stored, one slot per stored entry.

    Order lines address variants by position, so nothing is dropped, reordered
    or given display defaults here. Entries that are not records become
    ``None`` slots, which stock adjustment skips and writes back unchanged.
    """
    raw_variants = decode_variants(value, product_id)
    if not isinstance(raw_variants, list):
        return []

    return [
        Variant(
            name=raw.get("name") or "",
            image=raw.get("image") or "",
            quantity=_coerce_quantity(raw.get("quantity")),
            description=raw.get("description") or "",
        )
        if isinstance(raw, dict)
        else None
        for raw in raw_variants
    ]


def normalize_product(raw: dict) -> Product:
    """Builds a Product from a submitted record, ready to be listed or saved."""
    if isinstance(raw.get("colors"), list):
        raw_variants = _legacy_colors_to_variants(raw["colors"])
    else:
        raw_variants = raw.get("sabores")

    product_id = raw.get("id")
    if isinstance(product_id, str) and product_id.isdigit():
        product_id = int(product_id)

    return Product(
        id=product_id,
        title=raw.get("title") or "",
        category=raw.get("category"),
        price=_coerce_price(raw.get("price")),
        description=raw.get("description") or "",
        status=raw.get("status") or "available",
        display_order=raw.get("display_order") or 0,
        sabores=normalize_variants(decode_variants(raw_variants, raw.get("id"))),
    )


def normalize_products(raw_products: Any) -> list[Product]:
    if not isinstance(raw_products, list):
        return []
    return [normalize_product(raw) for raw in raw_products if isinstance(raw, dict)]


def normalize_categories(raw_categories: Any) -> list[Category]:
    """
    Accepts bare category ids or category records and returns Category objects.

    Entries that are neither a string nor a dict with an ``id`` are dropped.
    """
    if not isinstance(raw_categories, list):
        return []

    categories = []
    for raw in raw_categories:
        if isinstance(raw, str) and raw:
            categories.append(Category(id=raw, name=raw[:1].upper() + raw[1:], description=f"Categoria de {raw}"))
        elif isinstance(raw, dict) and raw.get("id"):
            category_id = str(raw["id"])
            name = raw.get("name") or category_id[:1].upper() + category_id[1:]
            categories.append(
                Category(
                    id=category_id,
                    name=name,
                    description=raw.get("description") or f"Categoria de {raw.get('name') or category_id}",
                )
            )
    return categories


def load_sample_catalog(path: str) -> tuple[list[Product], list[Category]]:
    """Reads the bundled fallback catalog (``{"products": [...], "categories": [...]}``)."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return normalize_products(data.get("products")), normalize_categories(data.get("categories"))
