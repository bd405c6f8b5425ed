"""D3: BCG i2i Advancement Calculator.

Formula
-------
  D3 = 0                                            if no dimensions selected
  D3 = round(n × 10 + avg_gain × 5 + breadth_bonus)  otherwise, clamped to [0, 100]

Where:
  n             = number of i2i dimensions the initiative advances
  avg_gain      = mean expected gain per dimension (missing gain → 3)
  breadth_bonus = 20 if n ≥ 7, 10 if n ≥ 5, else 0
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

import structlog

from initiative_scoring.scoring.utils import ZERO, clamp, clamp_score, coerce_decimal

logger = structlog.get_logger(__name__)

POINTS_PER_DIMENSION: Decimal = Decimal(10)
POINTS_PER_GAIN: Decimal = Decimal(5)
DEFAULT_GAIN: Decimal = Decimal(3)
# Larger gains saturate D3 anyway; the bound keeps the average finite
MAX_ABS_GAIN: Decimal = Decimal(1_000_000)


def breadth_bonus(count: int) -> int:
    if count >= 7:
        return 20
    if count >= 5:
        return 10
    return 0


def _gain(selection: Any) -> Decimal:
    if isinstance(selection, Mapping):
        gain = coerce_decimal(selection.get("gain")) or DEFAULT_GAIN
        return clamp(gain, -MAX_ABS_GAIN, MAX_ABS_GAIN)
    return DEFAULT_GAIN


@dataclass
class BcgAdvancementResult:
    """D3 result."""

    score: int
    dimension_count: int
    average_gain: Decimal
    breadth_bonus: int

    def to_dict(self) -> dict:
        return {
            "d3": self.score,
            "dimension_count": self.dimension_count,
            "average_gain": float(self.average_gain),
            "breadth_bonus": self.breadth_bonus,
        }


class BcgAdvancementCalculator:
    """Compute D3 from the selected ``bcg_i2i_dimensions``."""

    def calculate(self, criteria_values: Mapping[str, Any]) -> BcgAdvancementResult:
        selections = criteria_values.get("bcg_i2i_dimensions") or []
        if not isinstance(selections, (list, tuple)):
            selections = []

        count = len(selections)
        if count == 0:
            result = BcgAdvancementResult(score=0, dimension_count=0, average_gain=ZERO, breadth_bonus=0)
            logger.debug("d3_calculated", **result.to_dict())
            return result

        avg_gain = sum((_gain(s) for s in selections), ZERO) / count
        bonus = breadth_bonus(count)
        raw = POINTS_PER_DIMENSION * count + POINTS_PER_GAIN * avg_gain + bonus

        result = BcgAdvancementResult(
            score=clamp_score(raw),
            dimension_count=count,
            average_gain=avg_gain,
            breadth_bonus=bonus,
        )
        logger.debug("d3_calculated", **result.to_dict())
        return result
