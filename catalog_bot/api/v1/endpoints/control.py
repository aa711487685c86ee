"""Control endpoints that trigger the bulk catalog operations."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from catalog_bot.api.deps import get_catalog_client, require_control_key
from catalog_bot.api.errors import error_response
from catalog_bot.core.config import Settings, get_settings
from catalog_bot.schemas.results import (
    DescriptionApplyResult,
    DescriptionPreviewResult,
    ErrorResponse,
    HealthResponse,
    HideResult,
    RepriceResult,
)
from catalog_bot.services.catalog import (
    hide_out_of_stock,
    simple_reprice,
    update_all_descriptions,
)

logger = logging.getLogger(__name__)
router = APIRouter()

_FALSY = {"", "0", "false", "no", "off"}


def parse_flag(value: Optional[str]) -> bool:
    """`?apply`, `?apply=1`, `?apply=yes` -> True; absent, `0`, `false` -> False."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSY


def _run(name: str, operation, *args, **kwargs):
    try:
        return operation(*args, **kwargs)
    except Exception as e:
        logger.error(f"Operation {name} failed: {e}")
        return error_response(500, str(e))


@router.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(ok=True, shop=settings.shopify_shop)


@router.post(
    "/run/update-descriptions",
    dependencies=[Depends(require_control_key)],
    responses={
        200: {"model": DescriptionPreviewResult},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def run_update_descriptions(
    apply: Optional[str] = Query(None),
    client=Depends(get_catalog_client),
    settings: Settings = Depends(get_settings)
):
    """
    Rewrite product descriptions.

    Without `apply` this is a dry run returning `{preview_count, preview}`;
    with it the descriptions are written and `{updated}` is returned.
    """
    return _run(
        "update-descriptions",
        update_all_descriptions,
        client,
        settings,
        apply=parse_flag(apply),
    )


@router.post(
    "/run/hide-oos",
    dependencies=[Depends(require_control_key)],
    responses={
        200: {"model": HideResult},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def run_hide_out_of_stock(
    client=Depends(get_catalog_client),
    settings: Settings = Depends(get_settings)
):
    return _run("hide-oos", hide_out_of_stock, client, settings)


@router.post(
    "/run/reprice",
    dependencies=[Depends(require_control_key)],
    responses={
        200: {"model": RepriceResult},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def run_reprice(
    percent: float = Query(0, allow_inf_nan=False),
    client=Depends(get_catalog_client),
    settings: Settings = Depends(get_settings)
):
    """Adjust every variant price by `percent` (e.g. 10 -> +10%)."""
    return _run("reprice", simple_reprice, client, settings, percent=percent)
