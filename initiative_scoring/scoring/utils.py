"""Decimal utilities for the prioritization engine.

All score calculations use Decimal arithmetic with ROUND_HALF_UP so that
identical inputs always produce identical, platform-independent outputs.
"""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Optional

ZERO = Decimal(0)
HUNDRED = Decimal(100)
ONE_PLACE = Decimal("0.1")


def to_decimal(value: Any, places: Optional[int] = 4) -> Decimal:
    """Convert a number to Decimal with explicit precision and ROUND_HALF_UP rounding.

    Args:
        value: Numeric value to convert (int, float, str or Decimal).
        places: Number of decimal places to quantize to. ``None`` keeps the
                exact value.

    Returns:
        Decimal with the specified precision.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        result = Decimal(value)
    if places is None:
        return result
    return result.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def coerce_decimal(value: Any, default: Decimal = ZERO) -> Decimal:
    """Best-effort conversion of loosely typed input; non-numeric → ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        result = to_decimal(value, places=None)
    except (InvalidOperation, TypeError, ValueError):
        return default
    return result if result.is_finite() else default


def clamp(
    value: Decimal,
    min_val: Decimal = ZERO,
    max_val: Decimal = HUNDRED,
) -> Decimal:
    """Clamp a Decimal value to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_one_decimal(value: Decimal) -> Decimal:
    """Round to one fractional digit (half-up)."""
    return value.quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


def clamp_score(value: Decimal) -> int:
    """Round a raw dimension score and clamp it into the integer range [0, 100]."""
    return round_half_up(clamp(value))


def normalize_text(value: Any) -> str:
    """Lower-cased text for keyword matching; non-strings become empty."""
    return value.lower() if isinstance(value, str) else ""


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    """True if any phrase occurs as a substring of ``text``."""
    return any(phrase in text for phrase in phrases)
