"""Shopify Admin API services package."""

from catalog_bot.services.shopify.client import ShopifyClient

__all__ = [
    'ShopifyClient',
]
