"""Portfolio balance validator.

Compares the portfolio's category mix (60/15/15/10) and engine mix (60/25/15)
with their targets, each with a ±2 percentage-point tolerance band:

  actual%  = count(bucket) / total × 100
  in_range = target − 2 ≤ actual% ≤ target + 2

Purely diagnostic: it never mutates initiatives and never blocks scoring.
Initiatives without a recognised category or engine are not counted in any
bucket but still count towards the total.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Union

import structlog

from initiative_scoring.models.enums import (
    BALANCE_TOLERANCE,
    CATEGORY_TARGETS,
    ENGINE_TARGETS,
)
from initiative_scoring.models.initiative import Initiative
from initiative_scoring.scoring.snapshot import PortfolioSnapshot
from initiative_scoring.scoring.utils import HUNDRED

logger = structlog.get_logger(__name__)


@dataclass
class BucketBalance:
    """Allocation check for one category or engine bucket."""

    bucket: str
    count: int
    actual: Decimal       # percentage of all initiatives
    target: Decimal
    lower: Decimal
    upper: Decimal
    in_range: bool

    def to_dict(self) -> dict:
        return {
            "bucket": self.bucket,
            "count": self.count,
            "actual": float(self.actual),
            "target": float(self.target),
            "lower": float(self.lower),
            "upper": float(self.upper),
            "in_range": self.in_range,
        }


@dataclass
class PortfolioBalanceReport:
    """Category and engine allocation report for one portfolio snapshot."""

    total: int
    category: Dict[str, BucketBalance] = field(default_factory=dict)
    engine: Dict[str, BucketBalance] = field(default_factory=dict)

    @property
    def is_balanced(self) -> bool:
        return all(b.in_range for b in self.buckets())

    def buckets(self) -> List[BucketBalance]:
        return [*self.category.values(), *self.engine.values()]

    def out_of_range(self) -> List[BucketBalance]:
        """Buckets whose actual share falls outside the tolerance band."""
        return [b for b in self.buckets() if not b.in_range]

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "is_balanced": self.is_balanced,
            "category": {k: v.to_dict() for k, v in self.category.items()},
            "engine": {k: v.to_dict() for k, v in self.engine.items()},
        }


class PortfolioBalanceValidator:
    """Validate category and engine allocation against target bands.

    Parameters
    ----------
    tolerance:
        Override the ±percentage-point band (default 2).
    """

    def __init__(self, tolerance: Optional[Decimal] = None) -> None:
        self.tolerance = Decimal(tolerance) if tolerance is not None else BALANCE_TOLERANCE

    def _bucket(self, name: str, count: int, total: int, target: Decimal) -> BucketBalance:
        actual = Decimal(count) * HUNDRED / Decimal(total)
        lower = target - self.tolerance
        upper = target + self.tolerance
        return BucketBalance(
            bucket=name,
            count=count,
            actual=actual,
            target=target,
            lower=lower,
            upper=upper,
            in_range=lower <= actual <= upper,
        )

    def validate(
        self,
        portfolio: Union[PortfolioSnapshot, Iterable[Initiative]],
    ) -> PortfolioBalanceReport:
        """Build the balance report.

        Args:
            portfolio: A snapshot, or the initiative collection to snapshot.

        Returns:
            PortfolioBalanceReport with one entry per category and engine.

        Raises:
            InvalidInputError: If the collection is empty.
        """
        snapshot = (
            portfolio
            if isinstance(portfolio, PortfolioSnapshot)
            else PortfolioSnapshot.from_initiatives(portfolio)
        )
        total = snapshot.total

        report = PortfolioBalanceReport(
            total=total,
            category={
                c.value: self._bucket(c.value, snapshot.category_counts.get(c, 0), total, target)
                for c, target in CATEGORY_TARGETS.items()
            },
            engine={
                e.value: self._bucket(e.value, snapshot.engine_counts.get(e, 0), total, target)
                for e, target in ENGINE_TARGETS.items()
            },
        )

        logger.info(
            "portfolio_balance_validated",
            total=total,
            is_balanced=report.is_balanced,
            out_of_range=[b.bucket for b in report.out_of_range()],
        )
        return report


def validate_portfolio_balance(
    portfolio: Union[PortfolioSnapshot, Iterable[Initiative]],
) -> PortfolioBalanceReport:
    """Validate with the default tolerance."""
    return PortfolioBalanceValidator().validate(portfolio)
