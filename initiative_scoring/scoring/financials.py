"""Financial and calendar helpers feeding the dimension scorers.

Formulas
--------
  PV  = CF / (1 + r)^t
  NPV = Σ_t PV(CF_t, WACC, t)

Month duration is counted on calendar-month granularity only:

  months = (end.year − start.year) × 12 + (end.month − start.month),  floored at 1

Day-of-month is ignored (31 Jan → 1 Feb counts as one month). The D2 timeline
thresholds are tuned against that granularity.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

import structlog

from initiative_scoring.scoring.utils import ZERO, coerce_decimal

logger = structlog.get_logger(__name__)

DEFAULT_WACC: Decimal = Decimal("0.12")
DEFAULT_DURATION_MONTHS: int = 12
MIN_DURATION_MONTHS: int = 1

DateLike = Union[date, datetime, str, None]


def present_value(cash_flow: Decimal, rate: Decimal, year_offset: int) -> Decimal:
    """Discount a single cash flow ``year_offset`` years back to today."""
    return cash_flow / (Decimal(1) + rate) ** year_offset


def npv(financial_projection: Optional[Mapping[str, Any]]) -> Decimal:
    """Net present value of a ``financial_projections`` criterion.

    The projection carries an optional ``wacc`` (defaults to 0.12) and a
    ``years`` mapping of year offset → cash flow. A missing or non-mapping
    projection, and empty or non-mapping years, yield 0. Cash flows that are
    missing or non-numeric count as 0.
    """
    if not financial_projection:
        return ZERO
    if not isinstance(financial_projection, Mapping):
        logger.debug("npv_projection_ignored", projection_type=type(financial_projection).__name__)
        return ZERO
    years = financial_projection.get("years") or {}
    if not years:
        return ZERO
    if not isinstance(years, Mapping):
        logger.debug("npv_years_ignored", years_type=type(years).__name__)
        return ZERO

    wacc = coerce_decimal(financial_projection.get("wacc")) or DEFAULT_WACC
    if wacc <= -1:
        logger.debug("npv_wacc_defaulted", wacc=str(wacc))
        wacc = DEFAULT_WACC

    total = ZERO
    for year, cash_flow in years.items():
        try:
            offset = int(year)
            total += present_value(coerce_decimal(cash_flow), wacc, offset)
        except (TypeError, ValueError, ArithmeticError):
            logger.debug("npv_year_skipped", year=str(year))
    return total


def _parse_date(value: DateLike) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).strip().replace("Z", "+00:00")).date()
    except ValueError:
        logger.debug("timeline_date_unparseable", value=value)
        return None


def months_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar months between two dates, at least 1; 12 if either is absent."""
    start_date = _parse_date(start)
    end_date = _parse_date(end)
    if start_date is None or end_date is None:
        return DEFAULT_DURATION_MONTHS
    months = (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month)
    return max(MIN_DURATION_MONTHS, months)
