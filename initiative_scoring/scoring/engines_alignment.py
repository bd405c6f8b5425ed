"""D6: Three Engines Alignment Calculator.

Formula
-------
  D6 = round(0.40 × Contribution + 0.35 × Balance + 0.25 × Coherence),  clamped

Where:
  Contribution = engine-contribution strength (critical 95 … weak 55, default 70)
  Balance      = how much adding this initiative helps the engine mix:
                   gap = target% − current%   (as fractions)
                   gap > 0 → 85 + min(gap × 100, 15)    under-allocated engine
                   gap ≤ 0 → 70 − min(|gap| × 100, 20)  at or over target
  Coherence    = share of the four strategic-coherence checks met × 100

The balance term is the only collection-dependent sub-score in the engine; it
reads a PortfolioSnapshot built once per batch.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Tuple

import structlog

from initiative_scoring.models.enums import ENGINE_TARGETS, Engine
from initiative_scoring.scoring.snapshot import PortfolioSnapshot, declared_engine
from initiative_scoring.scoring.utils import HUNDRED, clamp_score

logger = structlog.get_logger(__name__)

CONTRIBUTION_WEIGHT: Decimal = Decimal("0.40")
BALANCE_WEIGHT: Decimal = Decimal("0.35")
COHERENCE_WEIGHT: Decimal = Decimal("0.25")

ENGINE_STRENGTH_SCORES: dict[str, int] = {
    "critical": 95,
    "strong": 85,
    "solid": 75,
    "moderate": 65,
    "weak": 55,
}
DEFAULT_STRENGTH_SCORE: int = 70

DEFAULT_ENGINE: Engine = Engine.E1_SUSTAIN_GROW

UNDER_ALLOCATED_BASE: Decimal = Decimal(85)
UNDER_ALLOCATED_CAP: Decimal = Decimal(15)
OVER_ALLOCATED_BASE: Decimal = Decimal(70)
OVER_ALLOCATED_CAP: Decimal = Decimal(20)

COHERENCE_CHECKS: Tuple[str, ...] = ("ceo_priority", "aramco_address", "bcg_i2i", "vision_fit")


def contribution_score(strength: Any) -> int:
    if not isinstance(strength, str):
        return DEFAULT_STRENGTH_SCORE
    return ENGINE_STRENGTH_SCORES.get(strength, DEFAULT_STRENGTH_SCORE)


def balance_score(engine: Engine, snapshot: PortfolioSnapshot) -> Tuple[Decimal, Decimal]:
    """Portfolio-balance sub-score and the allocation gap it was derived from."""
    current = Decimal(snapshot.engine_count_with_default(engine)) / Decimal(snapshot.total)
    target = ENGINE_TARGETS[engine] / HUNDRED
    gap = target - current

    if gap > 0:
        score = UNDER_ALLOCATED_BASE + min(gap * HUNDRED, UNDER_ALLOCATED_CAP)
    else:
        score = OVER_ALLOCATED_BASE - min(abs(gap) * HUNDRED, OVER_ALLOCATED_CAP)
    return score, gap


def coherence_score(coherence: Any) -> Decimal:
    if not isinstance(coherence, Mapping):
        return Decimal(0)
    met = sum(1 for check in COHERENCE_CHECKS if coherence.get(check))
    return Decimal(met) / Decimal(len(COHERENCE_CHECKS)) * HUNDRED


@dataclass
class EnginesAlignmentResult:
    """D6 result; sub-scores are reported before weighting."""

    score: int
    engine: Engine
    contribution_score: int
    balance_score: Decimal
    allocation_gap: Decimal
    coherence_score: Decimal

    def to_dict(self) -> dict:
        return {
            "d6": self.score,
            "engine": self.engine.value,
            "contribution_score": self.contribution_score,
            "balance_score": float(self.balance_score),
            "allocation_gap": float(self.allocation_gap),
            "coherence_score": float(self.coherence_score),
        }


class EnginesAlignmentCalculator:
    """Compute D6 against a read-only snapshot of the portfolio."""

    def calculate(
        self,
        criteria_values: Mapping[str, Any],
        snapshot: PortfolioSnapshot,
    ) -> EnginesAlignmentResult:
        """Calculate D6.

        Args:
            criteria_values: The initiative's raw criteria.
            snapshot: Counts over the full initiative collection (including
                      this initiative).

        Returns:
            EnginesAlignmentResult; ``score`` is the integer D6.
        """
        engine = declared_engine(criteria_values) or DEFAULT_ENGINE

        contribution = contribution_score(criteria_values.get("engine_contribution_strength"))
        balance, gap = balance_score(engine, snapshot)
        coherence = coherence_score(criteria_values.get("strategic_coherence"))

        raw = (
            CONTRIBUTION_WEIGHT * contribution
            + BALANCE_WEIGHT * balance
            + COHERENCE_WEIGHT * coherence
        )

        result = EnginesAlignmentResult(
            score=clamp_score(raw),
            engine=engine,
            contribution_score=contribution,
            balance_score=balance,
            allocation_gap=gap,
            coherence_score=coherence,
        )
        logger.debug("d6_calculated", **result.to_dict())
        return result
