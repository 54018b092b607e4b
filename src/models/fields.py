"""Lenient parsers for numbers typed into back-office forms."""

import math
from datetime import date, datetime
from typing import Any, Optional


def parse_optional_price(value: Any) -> Optional[float]:
    """Parse a catalog price, treating blanks as absent and clamping negatives to 0.

    Args:
        value: Raw price (number, numeric string, empty string or None)

    Returns:
        Non-negative price, or None when no usable price was given
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(price):
        return None
    return max(0.0, price)


def parse_price(value: Any) -> float:
    """Parse a catalog price, defaulting to 0."""
    price = parse_optional_price(value)
    return price if price is not None else 0.0


def parse_count(value: Any) -> int:
    """Parse a guest count; blanks and garbage become 0, negatives are clamped."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        count = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, count)


def parse_form_date(value: Any) -> Any:
    """Reduce ISO datetime strings and datetimes to plain dates.

    Form state stores dates as "2024-05-30T00:00:00.000Z"; only the
    calendar day matters for pricing.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if len(value) > 10:
            return value[:10]
    if isinstance(value, date):
        return value
    return value
