"""Rounding of surfaced monetary values."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from src.config import settings


def round_money(value: float, decimals: Optional[int] = None) -> float:
    """Round half-up to the configured number of decimals.

    Args:
        value: Unrounded amount
        decimals: Decimal places, defaults to ``settings.pricing.money_decimals``

    Returns:
        Rounded amount
    """
    if decimals is None:
        decimals = settings.pricing.money_decimals
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def to_money(value: float, decimals: Optional[int] = None) -> float:
    """Round a cost for display, clamping negatives to 0."""
    return round_money(max(0.0, value), decimals)
