"""Catalog product references shared by interactive and template messages."""

from collections.abc import Sequence
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from .base_models import Section


class Product(BaseModel):
    """A catalog product, referenced by its retailer id."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "product"

    product_retailer_id: str

    def __init__(self, product_retailer_id: str, **kwargs: Any):
        super().__init__(product_retailer_id=product_retailer_id, **kwargs)

    @field_validator("product_retailer_id")
    @classmethod
    def validate_retailer_id(cls, v):
        if not v:
            raise ValueError("Product must have a product_retailer_id")
        return v


class CatalogProduct(Product):
    """A product together with the catalog it belongs to.

    Used as a template header parameter and by ActionProduct.from_catalog_product().
    """

    catalog_id: str

    def __init__(self, product_retailer_id: str, catalog_id: str, **kwargs: Any):
        super().__init__(product_retailer_id, catalog_id=catalog_id, **kwargs)

    @field_validator("catalog_id")
    @classmethod
    def validate_catalog_id(cls, v):
        if not v:
            raise ValueError("CatalogProduct must have a catalog_id")
        return v


class ProductSection(Section):
    """Section of up to 30 products, used by product lists and MPM buttons."""

    section_name: ClassVar[str] = "ProductSection"
    child_name: ClassVar[str] = "products"
    max_elements: ClassVar[int] = 30

    product_items: list[Product]

    def __init__(self, title: str | None, *products: Product, **kwargs: Any):
        # Sections only carry retailer ids, even for CatalogProduct inputs
        items = [Product(p.product_retailer_id) for p in products]
        super().__init__(title=title, product_items=items, **kwargs)

    def elements(self) -> Sequence[Product]:
        return self.product_items
