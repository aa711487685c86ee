"""
Celery tasks running the bulk catalog operations outside the request cycle.

A failed run is not retried: writes done before the failure stay in place and
re-running starts again from the beginning of the catalog.
"""
import logging
from typing import Any, Dict

from catalog_bot.celery_app import celery_app
from catalog_bot.core.config import get_settings
from catalog_bot.services.catalog import (
    hide_out_of_stock,
    simple_reprice,
    update_all_descriptions,
)
from catalog_bot.services.shopify.client import ShopifyClient

logger = logging.getLogger(__name__)


def build_client(settings) -> ShopifyClient:
    """Crea cliente Shopify desde la configuración"""
    return ShopifyClient.from_settings(settings)


@celery_app.task(
    bind=True,
    name="catalog_bot.tasks.catalog_tasks.update_descriptions",
    max_retries=0
)
def update_descriptions_task(self, apply: bool = False) -> Dict[str, Any]:
    """
    Celery task to rewrite every product description.

    Args:
        apply: Write the descriptions; otherwise return a preview only
    """
    settings = get_settings()
    logger.info(f"Task {self.name} [{self.request.id}] started (apply={apply})")
    result = update_all_descriptions(build_client(settings), settings, apply=apply)
    logger.info(f"Task {self.name} [{self.request.id}] completed")
    return result.model_dump()


@celery_app.task(
    bind=True,
    name="catalog_bot.tasks.catalog_tasks.hide_out_of_stock",
    max_retries=0
)
def hide_out_of_stock_task(self) -> Dict[str, Any]:
    settings = get_settings()
    logger.info(f"Task {self.name} [{self.request.id}] started")
    result = hide_out_of_stock(build_client(settings), settings)
    logger.info(f"Task {self.name} [{self.request.id}] hid {result.hidden} products")
    return result.model_dump()


@celery_app.task(
    bind=True,
    name="catalog_bot.tasks.catalog_tasks.reprice",
    max_retries=0
)
def reprice_task(self, percent: float = 0) -> Dict[str, Any]:
    """Celery task to adjust every variant price by `percent`."""
    settings = get_settings()
    logger.info(f"Task {self.name} [{self.request.id}] started (percent={percent})")
    result = simple_reprice(build_client(settings), settings, percent=percent)
    logger.info(f"Task {self.name} [{self.request.id}] changed {result.changed} prices")
    return result.model_dump()
