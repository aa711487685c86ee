"""Typed records for the Shopify Admin REST payloads the bot reads and writes."""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)


class ProductStatus(str, Enum):
    """Publication status of a product. Shopify hides `draft` from the storefront."""
    ACTIVE = "active"
    DRAFT = "draft"
    ARCHIVED = "archived"


class Variant(BaseModel):
    id: int
    product_id: Optional[int] = None
    price: Optional[str] = None
    inventory_quantity: Optional[int] = None
    # Shopify sends "shopify" (or a fulfillment service handle) when stock is tracked
    inventory_management: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("inventory_management", mode="before")
    @classmethod
    def _management_flag(cls, value: Any) -> Any:
        if value is True:
            return "shopify"
        if value is False or value == "":
            return None
        return value

    @property
    def is_tracked(self) -> bool:
        return bool(self.inventory_management)


class Product(BaseModel):
    id: int
    title: str = ""
    vendor: Optional[str] = None
    body_html: Optional[str] = None
    # Kept as text so a status added by Shopify later does not break parsing
    status: Optional[str] = None
    variants: List[Variant] = Field(default_factory=list)

    @property
    def is_hidden(self) -> bool:
        return self.status == ProductStatus.DRAFT.value


class ProductPage(BaseModel):
    """
    One page of `GET /products.json`.

    Products are validated one by one: a malformed item is logged and dropped
    instead of failing the page. `max_id` is the highest id found in the raw
    page, dropped items included, so the cursor still moves past them.
    """
    products: List[Product] = Field(default_factory=list)
    max_id: Optional[int] = None
    skipped: int = 0

    @model_validator(mode="before")
    @classmethod
    def _validate_items(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        products = []
        ids = []
        skipped = 0
        for item in data.get("products") or []:
            raw_id = _raw_id(item)
            if raw_id is not None:
                ids.append(raw_id)
            if isinstance(item, Product):
                products.append(item)
                continue
            try:
                products.append(Product.model_validate(item))
            except ValidationError as e:
                skipped += 1
                logger.warning(f"Skipping malformed product {raw_id}: {e.error_count()} invalid fields")
        return {
            **data,
            "products": products,
            "max_id": data.get("max_id", max(ids) if ids else None),
            "skipped": data.get("skipped", 0) + skipped,
        }


def _raw_id(item: Any) -> Optional[int]:
    if isinstance(item, Product):
        return item.id
    if not isinstance(item, dict):
        return None
    try:
        return int(item.get("id"))
    except (TypeError, ValueError):
        return None


class ProductPatch(BaseModel):
    """Partial product body for `PUT /products/{id}.json`."""
    id: int
    body_html: Optional[str] = None
    status: Optional[ProductStatus] = None

    def to_body(self) -> Dict[str, Any]:
        return {"product": self.model_dump(mode="json", exclude_none=True)}


class VariantPatch(BaseModel):
    """Partial variant body for `PUT /variants/{id}.json`."""
    id: int
    price: str

    def to_body(self) -> Dict[str, Any]:
        return {"variant": self.model_dump(mode="json", exclude_none=True)}
