"""
Per-product mutation planning for the three bulk operations.

A planner looks at one product snapshot and returns the writes needed to
bring it to its target state. Planners never talk to the store; the
BatchRunner fetches pages for them and applies what they return.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List, Optional, Tuple

from pydantic import BaseModel

from catalog_bot.schemas.catalog import (
    Product,
    ProductPatch,
    ProductStatus,
    VariantPatch,
)
from catalog_bot.schemas.results import DescriptionPreviewItem
from catalog_bot.services.catalog.descriptions import build_description
from catalog_bot.services.catalog.idempotence import (
    descriptions_match,
    needs_reprice,
    price_factor,
    reprice_value,
    should_hide,
)

logger = logging.getLogger(__name__)


class WriteIntent(BaseModel):
    """A single pending write against the store."""
    product_id: int
    title: str = ""
    product_patch: Optional[ProductPatch] = None
    variant_patch: Optional[VariantPatch] = None

    def apply(self, client):
        if self.variant_patch is not None:
            return client.update_variant(self.variant_patch)
        return client.update_product(self.product_patch)

    def preview(self) -> DescriptionPreviewItem:
        return DescriptionPreviewItem(id=self.product_id, title=self.title)


class MutationPlanner(ABC):
    """Base class: `fields` is the page projection, `plan` decides per product."""

    name: str
    fields: Optional[Tuple[str, ...]] = None

    def __init__(self, page_size: int):
        self.page_size = page_size

    @abstractmethod
    def plan(self, product: Product) -> List[WriteIntent]:
        """Return the writes this product needs; an empty list when it is up to date."""


class DescriptionPlanner(MutationPlanner):
    name = "update-descriptions"
    fields = ("id", "title", "vendor", "body_html")

    def __init__(self, page_size: int, default_brand: str):
        super().__init__(page_size)
        self.default_brand = default_brand

    def plan(self, product: Product) -> List[WriteIntent]:
        html = build_description(product.title, product.vendor, self.default_brand)
        if descriptions_match(product.body_html, html):
            return []
        return [
            WriteIntent(
                product_id=product.id,
                title=product.title,
                product_patch=ProductPatch(id=product.id, body_html=html),
            )
        ]


class StockHidePlanner(MutationPlanner):
    name = "hide-oos"
    fields = ("id", "title", "variants", "status")

    def plan(self, product: Product) -> List[WriteIntent]:
        if not should_hide(product):
            return []
        logger.debug(f"Product {product.id} is out of stock, hiding it")
        return [
            WriteIntent(
                product_id=product.id,
                title=product.title,
                product_patch=ProductPatch(id=product.id, status=ProductStatus.DRAFT),
            )
        ]


class RepricePlanner(MutationPlanner):
    name = "reprice"
    fields = ("id", "title", "variants")

    def __init__(self, page_size: int, percent=0):
        super().__init__(page_size)
        self.percent = percent
        self.factor: Decimal = price_factor(percent)

    def plan(self, product: Product) -> List[WriteIntent]:
        intents = []
        for variant in product.variants:
            new_price = reprice_value(variant.price, self.factor)
            if not needs_reprice(variant.price, new_price):
                continue
            intents.append(
                WriteIntent(
                    product_id=product.id,
                    title=product.title,
                    variant_patch=VariantPatch(id=variant.id, price=new_price),
                )
            )
        return intents
