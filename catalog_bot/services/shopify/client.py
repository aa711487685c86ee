"""Shopify Admin REST API client."""

import logging
from typing import Any, Dict, Iterable, Optional

import requests

from catalog_bot.core.config import Settings
from catalog_bot.core.exceptions import CatalogAPIError, CatalogTransportError
from catalog_bot.schemas.catalog import ProductPage, ProductPatch, VariantPatch

__logger__ = logging.getLogger(__name__)


class ShopifyClient:
    """
    Thin client over the Shopify Admin REST API.

    Every call is a single request/response: no retries, no back-off. Any
    non-2xx response raises CatalogAPIError, any transport failure raises
    CatalogTransportError.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
        })

    @classmethod
    def from_settings(cls, settings: Settings) -> "ShopifyClient":
        """
        Create a client from the process settings.

        Raises:
            NotConfiguredError: If the shop or the admin token is missing
        """
        settings.require_shop()
        return cls(
            base_url=settings.shop_base_url,
            access_token=settings.shopify_admin_token,
            timeout=settings.request_timeout,
        )

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Execute a request against the admin API.

        Args:
            method: HTTP method (GET, PUT, ...)
            path: API path, e.g. "/products.json"
            params: Query string parameters
            json: Request body

        Returns:
            Decoded JSON response (empty dict for an empty body)
        """
        __logger__.debug(f"Shopify request: {method} {path} params={params}")
        try:
            r = self.session.request(
                method,
                f"{self.base_url}{path}",
                params=params,
                json=json,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            __logger__.error(f"Shopify {method} {path} failed before a response: {e}")
            raise CatalogTransportError(method, path, str(e)) from e

        if not r.ok:
            __logger__.error(f"Shopify {method} error on {path}: {r.status_code} - {r.text}")
            raise CatalogAPIError(r.status_code, method, path, r.text)

        if not r.content:
            return {}
        return r.json()

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.request("GET", path, params=params)

    def put(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        return self.request("PUT", path, json=body)

    def list_products(
        self,
        limit: int,
        since_id: int = 0,
        fields: Optional[Iterable[str]] = None
    ) -> ProductPage:
        """Fetch the products with an id greater than `since_id`, ascending by id."""
        params: Dict[str, Any] = {"limit": limit, "since_id": since_id}
        if fields:
            params["fields"] = ",".join(fields)
        return ProductPage.model_validate(self.get("/products.json", params=params))

    def update_product(self, patch: ProductPatch) -> Dict[str, Any]:
        return self.put(f"/products/{patch.id}.json", patch.to_body())

    def update_variant(self, patch: VariantPatch) -> Dict[str, Any]:
        return self.put(f"/variants/{patch.id}.json", patch.to_body())
