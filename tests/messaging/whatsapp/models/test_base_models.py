"""
Tests for the shared building blocks: collection limits and sections.
"""

import pytest

from wacloud.messaging.whatsapp.models import (
    CatalogProduct,
    ListSection,
    Product,
    ProductSection,
    Row,
    check_limit,
)
from wacloud.messaging.whatsapp.models.base_models import require_titles_when_many


class TestCheckLimit:
    """Test bounded collection validation."""

    def test_within_bounds(self):
        check_limit("Parent", "child", [1, 2, 3], 3)

    def test_over_maximum(self):
        with pytest.raises(ValueError, match="Parent can't have more than 3 child"):
            check_limit("Parent", "child", [1, 2, 3, 4], 3)

    def test_empty(self):
        with pytest.raises(ValueError, match="Parent must have at least one child"):
            check_limit("Parent", "child", [], 3)


class TestListSection:
    """Test list sections."""

    def test_payload(self):
        section = ListSection("Menu", Row("1", "Pizza"), Row("2", "Pasta", "With sauce"))

        assert section.model_dump(mode="json", exclude_none=True) == {
            "title": "Menu",
            "rows": [
                {"id": "1", "title": "Pizza"},
                {"id": "2", "title": "Pasta", "description": "With sauce"},
            ],
        }

    def test_untitled_section(self):
        section = ListSection(None, Row("1", "Pizza"))
        assert section.title is None

    def test_too_many_rows(self):
        rows = [Row(str(i), f"Row {i}") for i in range(11)]
        with pytest.raises(ValueError, match="ListSection can't have more than 10 rows"):
            ListSection("Menu", *rows)

    def test_no_rows(self):
        with pytest.raises(ValueError, match="ListSection must have at least one rows"):
            ListSection("Menu")

    def test_title_too_long(self):
        with pytest.raises(ValueError, match="ListSection title must be 24 characters or less"):
            ListSection("x" * 25, Row("1", "Pizza"))


class TestProductSection:
    """Test catalog product sections."""

    def test_thirty_products(self):
        products = [Product(f"sku-{i}") for i in range(30)]
        section = ProductSection("All", *products)
        assert len(section.product_items) == 30

    def test_too_many_products(self):
        products = [Product(f"sku-{i}") for i in range(31)]
        with pytest.raises(
            ValueError, match="ProductSection can't have more than 30 products"
        ):
            ProductSection("All", *products)

    def test_catalog_products_keep_only_retailer_id(self):
        section = ProductSection("All", CatalogProduct("sku-1", "catalog-1"))

        assert section.model_dump(mode="json", exclude_none=True) == {
            "title": "All",
            "product_items": [{"product_retailer_id": "sku-1"}],
        }

    def test_product_requires_retailer_id(self):
        with pytest.raises(ValueError, match="Product must have a product_retailer_id"):
            Product("")


class TestRequireTitles:
    """Test the title rule for multi-section collections."""

    def test_single_untitled_section(self):
        require_titles_when_many([ListSection(None, Row("1", "A"))])

    def test_many_sections_need_titles(self):
        sections = [ListSection("A", Row("1", "A")), ListSection(None, Row("2", "B"))]
        with pytest.raises(
            ValueError,
            match="All sections must have a title if more than 1 section is provided",
        ):
            require_titles_when_many(sections)
