"""
Decisions on whether a product or variant already matches its target state.

Re-running an operation over an unchanged catalog must issue no writes, so
every planner asks these helpers before producing a write.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from catalog_bot.schemas.catalog import Product

logger = logging.getLogger(__name__)

DESCRIPTION_PREFIX_LENGTH = 160
_CENTS = Decimal("0.01")


def normalize_html(html: Optional[str]) -> str:
    """Trim and collapse every whitespace run to a single space."""
    return " ".join((html or "").split())


def descriptions_match(current: Optional[str], proposed: str) -> bool:
    """
    Compare only the first 160 normalized characters of both descriptions.

    This is a loose equality on purpose: a description whose tail was edited
    by hand still counts as up to date.
    """
    return (
        normalize_html(current)[:DESCRIPTION_PREFIX_LENGTH]
        == normalize_html(proposed)[:DESCRIPTION_PREFIX_LENGTH]
    )


def should_hide(product: Product) -> bool:
    """
    A product is hidden when every variant is tracked and out of stock.

    An untracked variant keeps the product visible. A product without variants
    passes the check vacuously and is hidden too. A tracked variant with no
    reported quantity counts as zero stock.
    """
    if product.is_hidden:
        return False
    return all(
        v.is_tracked and (v.inventory_quantity or 0) <= 0
        for v in product.variants
    )


def price_factor(percent) -> Decimal:
    """
    +10 -> 1.10, -25 -> 0.75.

    Raises:
        ValueError: If percent is not a finite number
    """
    try:
        value = Decimal(str(percent))
    except InvalidOperation as e:
        raise ValueError(f"percent must be a number, got {percent!r}") from e
    if not value.is_finite():
        raise ValueError(f"percent must be a finite number, got {percent!r}")
    return Decimal(1) + value / Decimal(100)


def reprice_value(price: Optional[str], factor: Decimal) -> Optional[str]:
    """
    Compute the adjusted price as text with two decimals.

    Returns:
        The new price, or None when the current price is not a finite number

    Raises:
        ValueError: If factor is not finite
    """
    if not factor.is_finite():
        raise ValueError(f"price factor must be finite, got {factor}")
    try:
        current = Decimal(price)
    except (InvalidOperation, TypeError, ValueError):
        logger.warning(f"Skipping unparseable price {price!r}")
        return None
    if not current.is_finite():
        logger.warning(f"Skipping non-finite price {price!r}")
        return None
    return str((current * factor).quantize(_CENTS, rounding=ROUND_HALF_UP))


def needs_reprice(price: Optional[str], new_price: Optional[str]) -> bool:
    """The stored text is compared as-is, so "10" and "10.00" differ."""
    return new_price is not None and new_price != price
