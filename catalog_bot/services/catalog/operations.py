"""The three bulk maintenance operations exposed to the control API and the workers."""

import logging
from typing import Union

from catalog_bot.core.config import Settings
from catalog_bot.schemas.results import (
    DescriptionApplyResult,
    DescriptionPreviewResult,
    HideResult,
    RepriceResult,
)
from catalog_bot.services.catalog.planners import (
    DescriptionPlanner,
    RepricePlanner,
    StockHidePlanner,
)
from catalog_bot.services.catalog.runner import BatchRunner

logger = logging.getLogger(__name__)


def update_all_descriptions(
    client,
    settings: Settings,
    apply: bool = False
) -> Union[DescriptionApplyResult, DescriptionPreviewResult]:
    """
    Rewrite every product description with the standard template.

    Args:
        client: Shopify client (or any object with the same product methods)
        settings: Process settings
        apply: Write the changes; by default only a preview is returned

    Returns:
        `{updated}` when applying, `{preview_count, preview}` otherwise
    """
    planner = DescriptionPlanner(
        page_size=settings.description_page_size,
        default_brand=settings.default_brand,
    )
    tally = BatchRunner(client, settings.write_concurrency).run(planner, apply=apply)
    if apply:
        return DescriptionApplyResult(updated=tally.writes)
    return DescriptionPreviewResult(preview_count=len(tally.previews), preview=tally.previews)


def hide_out_of_stock(client, settings: Settings) -> HideResult:
    """Move products whose tracked stock is exhausted to draft."""
    planner = StockHidePlanner(page_size=settings.hide_page_size)
    tally = BatchRunner(client, settings.write_concurrency).run(planner)
    return HideResult(hidden=tally.writes)


def simple_reprice(client, settings: Settings, percent=0) -> RepriceResult:
    """Multiply every variant price by (1 + percent / 100), rounded to cents."""
    planner = RepricePlanner(page_size=settings.reprice_page_size, percent=percent)
    tally = BatchRunner(client, settings.write_concurrency).run(planner)
    return RepriceResult(changed=tally.writes)
