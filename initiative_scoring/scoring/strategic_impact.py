"""D1: Strategic Impact Calculator.

Formula
-------
  D1 = round(Quant × 0.6 + Qual × 4),  clamped to [0, 100]

Where:
  Quant = NPV bucket of ``financial_projections`` (55–95)
  Qual  = keyword evidence in the problem statement, stakeholder impact and
          strategic rationale (0–10, so the ×4 term carries at most 40 points)

The qualitative part is a deterministic keyword heuristic standing in for an
analyst's (or model's) reading of the free-text fields.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Mapping, Tuple

import structlog

from initiative_scoring.scoring.financials import npv
from initiative_scoring.scoring.utils import clamp_score, contains_any, normalize_text

logger = structlog.get_logger(__name__)

QUANT_WEIGHT: Decimal = Decimal("0.6")
QUAL_MULTIPLIER: Decimal = Decimal(4)

# (NPV strictly above, score), checked top-down
NPV_LADDER: Tuple[Tuple[Decimal, int], ...] = (
    (Decimal(100_000_000), 95),
    (Decimal(50_000_000), 85),
    (Decimal(20_000_000), 75),
    (Decimal(5_000_000), 65),
)
NPV_FLOOR_SCORE: int = 55

# (criterion key, phrases, points); one award per group
QUALITATIVE_SIGNALS: Tuple[Tuple[str, Tuple[str, ...], int], ...] = (
    ("problem_statement", ("sar", "million"), 3),          # problem scale
    ("problem_statement", ("critical", "urgent"), 2),      # urgency
    ("stakeholder_impact", ("ceo", "executive"), 2),
    ("stakeholder_impact", ("customer",), 2),
    ("strategic_rationale", ("vision", "strategy"), 1),
)


@dataclass
class StrategicImpactResult:
    """D1 result with audit trail."""

    score: int
    npv: Decimal
    quantitative_score: int
    qualitative_score: int
    matched_signals: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "d1": self.score,
            "npv": float(self.npv),
            "quantitative_score": self.quantitative_score,
            "qualitative_score": self.qualitative_score,
            "matched_signals": list(self.matched_signals),
        }


def npv_bucket(value: Decimal) -> int:
    """Map an NPV onto the fixed quantitative score ladder."""
    for threshold, score in NPV_LADDER:
        if value > threshold:
            return score
    return NPV_FLOOR_SCORE


class StrategicImpactCalculator:
    """Compute D1 from financial projections and qualitative text."""

    def calculate(self, criteria_values: Mapping[str, Any]) -> StrategicImpactResult:
        """Calculate D1.

        Args:
            criteria_values: The initiative's raw criteria.

        Returns:
            StrategicImpactResult; ``score`` is the integer D1.
        """
        value = npv(criteria_values.get("financial_projections"))
        quant = npv_bucket(value)

        qual = 0
        matched: List[str] = []
        for key, phrases, points in QUALITATIVE_SIGNALS:
            text = normalize_text(criteria_values.get(key))
            if contains_any(text, phrases):
                qual += points
                matched.append(f"{key}:{'|'.join(phrases)}")

        score = clamp_score(Decimal(quant) * QUANT_WEIGHT + Decimal(qual) * QUAL_MULTIPLIER)

        result = StrategicImpactResult(
            score=score,
            npv=value,
            quantitative_score=quant,
            qualitative_score=qual,
            matched_signals=matched,
        )
        logger.debug("d1_calculated", **result.to_dict())
        return result
