"""Tests for the catalog entry point."""

import json

import catalog_main
from src.catalog_domain.domain.entities.category import Category
from src.common.exceptions.custom_exceptions import DatabaseError


def test_run_catalog_listing_prints_catalog(
    mocker, catalog_service, mock_product_repository, mock_category_repository, sample_product, capsys
):
    mock_product_repository.get_all_products.return_value = [sample_product]
    mock_category_repository.get_all_categories.return_value = [Category(id="pods", name="Pods")]
    mocker.patch("catalog_main.setup_catalog_dependencies", return_value=catalog_service)

    assert catalog_main.run_catalog_listing() == 0

    printed = json.loads(capsys.readouterr().out)
    assert printed["products"][0]["title"] == "Pod Descartável 5000"
    assert printed["categories"] == [{"id": "pods", "name": "Pods", "description": ""}]


def test_run_catalog_listing_serves_sample_catalog_when_store_is_down(
    mocker, catalog_service, mock_product_repository, mock_category_repository, capsys
):
    mock_product_repository.get_all_products.side_effect = DatabaseError("connection refused")
    mock_category_repository.get_all_categories.side_effect = DatabaseError("connection refused")
    mocker.patch("catalog_main.setup_catalog_dependencies", return_value=catalog_service)

    assert catalog_main.run_catalog_listing() == 0

    printed = json.loads(capsys.readouterr().out)
    assert printed["products"]
    assert printed["categories"]
