"""Tests for the catalog entities."""

import pytest

from src.catalog_domain.domain.entities.product import Product
from src.catalog_domain.domain.entities.variant import Variant


def test_variant_rejects_negative_quantity():
    with pytest.raises(ValueError):
        Variant(name="Uva", image="", quantity=-1)


def test_variant_rejects_non_integer_quantity():
    with pytest.raises(ValueError):
        Variant(name="Uva", image="", quantity="3")


def test_product_rejects_negative_price():
    with pytest.raises(ValueError):
        Product(id=1, title="Pod", price=-1.0)


def test_product_has_variant(sample_product):
    assert sample_product.has_variant(0)
    assert sample_product.has_variant(2)
    assert not sample_product.has_variant(3)
    assert not sample_product.has_variant(-1)


def test_product_to_dict(sample_product):
    data = sample_product.to_dict()

    assert data["id"] == 1
    assert data["display_order"] == 1
    assert [sabor["quantity"] for sabor in data["sabores"]] == [10, 0, 5]
    assert sample_product.total_quantity == 15


def test_product_unreadable_slot_is_not_a_variant(sample_product):
    sample_product.sabores[1] = None

    assert not sample_product.has_variant(1)
    assert sample_product.total_quantity == 15
    assert sample_product.to_dict()["sabores"][1] is None
