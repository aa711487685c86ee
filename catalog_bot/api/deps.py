"""FastAPI dependencies shared by the control endpoints."""

import hmac
from typing import Optional

from fastapi import Depends, Header, Query

from catalog_bot.core.config import Settings, get_settings
from catalog_bot.core.exceptions import UnauthorizedError
from catalog_bot.services.shopify.client import ShopifyClient


def require_control_key(
    key: Optional[str] = Query(None),
    x_control_key: Optional[str] = Header(None, alias="X-Control-Key"),
    settings: Settings = Depends(get_settings)
) -> None:
    """
    Compare the caller's key (query `key` or `X-Control-Key` header) with CONTROL_SECRET.

    Raises:
        NotConfiguredError: CONTROL_SECRET is empty
        UnauthorizedError: The key is missing or wrong
    """
    secret = settings.require_control_secret()
    provided = key or x_control_key or ""
    if not hmac.compare_digest(provided.encode("utf-8"), secret.encode("utf-8")):
        raise UnauthorizedError()


def get_catalog_client(settings: Settings = Depends(get_settings)) -> ShopifyClient:
    """Dependency injection que retorna un cliente de Shopify configurado."""
    return ShopifyClient.from_settings(settings)
