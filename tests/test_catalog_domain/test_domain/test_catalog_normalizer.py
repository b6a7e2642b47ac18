"""Tests for catalog normalization."""

import json

import pytest

from src.catalog_domain.domain.entities.category import Category
from src.catalog_domain.domain.entities.variant import Variant
from src.catalog_domain.domain.services.catalog_normalizer import (
    DEFAULT_VARIANT_IMAGE,
    DEFAULT_VARIANT_NAME,
    load_sample_catalog,
    normalize_categories,
    normalize_product,
    normalize_products,
    normalize_variants,
    read_stored_variants,
)


def test_normalize_variants_puts_available_first_and_keeps_relative_order():
    raw = [
        {"name": "A", "quantity": 0},
        {"name": "B", "quantity": 3},
        {"name": "C", "quantity": 0},
        {"name": "D", "quantity": 1},
        {"name": "E", "quantity": 9},
    ]

    names = [variant.name for variant in normalize_variants(raw)]

    assert names == ["B", "D", "E", "A", "C"]


def test_read_stored_variants_keeps_every_slot_in_place():
    stored = json.dumps(
        [
            {"name": "A", "quantity": 0},
            None,
            {"name": "", "image": "", "quantity": 7},
            "garbage",
        ]
    )

    variants = read_stored_variants(stored, product_id=1)

    assert len(variants) == 4
    assert variants[0].name == "A"
    assert variants[1] is None
    assert variants[2] == Variant(name="", image="", quantity=7, description="")
    assert variants[3] is None


def test_read_stored_variants_unreadable_or_missing():
    assert read_stored_variants("{not json") == []
    assert read_stored_variants(None) == []
    assert [v.quantity for v in read_stored_variants(b'[{"name": "A", "quantity": 2}]')] == [2]


def test_normalize_variants_fills_defaults_and_clamps():
    variant = normalize_variants([{"quantity": -4}])[0]

    assert variant == Variant(name=DEFAULT_VARIANT_NAME, image=DEFAULT_VARIANT_IMAGE, quantity=0, description="")


@pytest.mark.parametrize("raw_quantity, expected", [(None, 0), ("7", 7), ("abc", 0), (2.0, 2), (True, 0)])
def test_normalize_variants_coerces_quantity(raw_quantity, expected):
    assert normalize_variants([{"name": "X", "quantity": raw_quantity}])[0].quantity == expected


def test_normalize_variants_non_list():
    assert normalize_variants(None) == []
    assert normalize_variants({"name": "X"}) == []


def test_normalize_product_converts_legacy_colors():
    product = normalize_product(
        {
            "id": 5,
            "title": "Camiseta",
            "colors": [
                {"name": "Azul", "image": "azul.png", "sizes": [{"stock": 2}, {"stock": 3}, {}]},
                {"name": "Preto", "quantity": 4},
                {"image": "sem-nome.png"},
            ],
        }
    )

    assert [(v.name, v.quantity) for v in product.sabores] == [("Azul", 5), ("Preto", 4), (DEFAULT_VARIANT_NAME, 0)]
    assert product.sabores[0].image == "azul.png"


def test_normalize_product_reads_json_text_variants():
    product = normalize_product({"id": 2, "title": "Essência", "sabores": json.dumps([{"name": "Manga", "quantity": 4}])})

    assert product.sabores[0].name == "Manga"
    assert product.sabores[0].quantity == 4
    assert product.display_order == 0
    assert product.status == "available"


def test_normalize_product_unreadable_variants_become_empty():
    assert normalize_product({"id": 2, "title": "X", "sabores": "{not json"}).sabores == []


def test_normalize_products_skips_non_dicts():
    products = normalize_products([{"id": 1, "title": "A"}, "garbage", None])

    assert [product.id for product in products] == [1]
    assert normalize_products("nope") == []


def test_normalize_categories_mixed_input():
    categories = normalize_categories(
        [
            "pods",
            {"id": "essencias"},
            {"id": "acessorios", "name": "Acessórios", "description": "Bases e carregadores"},
            {"name": "no id"},
            42,
        ]
    )

    assert categories == [
        Category(id="pods", name="Pods", description="Categoria de pods"),
        Category(id="essencias", name="Essencias", description="Categoria de essencias"),
        Category(id="acessorios", name="Acessórios", description="Bases e carregadores"),
    ]


def test_normalize_categories_non_list():
    assert normalize_categories(None) == []


def test_load_sample_catalog(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "products": [{"id": 1, "title": "Pod", "sabores": [{"name": "A", "quantity": 0}, {"name": "B", "quantity": 1}]}],
                "categories": ["pods"],
            }
        ),
        encoding="utf-8",
    )

    products, categories = load_sample_catalog(str(path))

    assert [variant.name for variant in products[0].sabores] == ["B", "A"]
    assert categories[0].id == "pods"
