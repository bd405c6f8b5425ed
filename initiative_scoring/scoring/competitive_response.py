"""D4: Aramco Competitive Response Calculator.

In the dossier workflow D4 is AI-suggested and human-validated. This
calculator is the deterministic suggestion: a phrase-group matcher over the
``aramco_response`` and ``competitive_analysis`` text.

Formula
-------
  Defensive = min(100, 50 + 10 × matched defensive groups)
  Offensive = min(100, 50 + 10 × matched offensive groups + replication bonus)
  D4        = round((Defensive + Offensive) / 2)

Replication bonus: +10 when the text cites a 36-month / 3-year replication
horizon, otherwise +5 for 24 months / 2 years.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, List, Mapping, Tuple

import structlog

from initiative_scoring.scoring.utils import clamp, clamp_score, contains_any, normalize_text

logger = structlog.get_logger(__name__)

BASE_SUBSCORE: int = 50
POINTS_PER_GROUP: int = 10

DEFENSIVE_GROUPS: Tuple[Tuple[str, ...], ...] = (
    ("protect", "retain"),
    ("defend", "prevent"),
    ("customer retention", "loyalty"),
    ("switching cost",),
)

OFFENSIVE_GROUPS: Tuple[Tuple[str, ...], ...] = (
    ("lead", "first-mover"),
    ("cannot replicate", "unique"),
    ("capability gap", "advantage"),
    ("mira", "data"),
)

LONG_REPLICATION: Tuple[str, ...] = ("36 month", "3 year")
MEDIUM_REPLICATION: Tuple[str, ...] = ("24 month", "2 year")
LONG_REPLICATION_BONUS: int = 10
MEDIUM_REPLICATION_BONUS: int = 5


def _matched(text: str, groups: Tuple[Tuple[str, ...], ...]) -> List[str]:
    return ["|".join(g) for g in groups if contains_any(text, g)]


def replication_bonus(text: str) -> int:
    """Bonus for how long competitors would need to replicate the capability."""
    if contains_any(text, LONG_REPLICATION):
        return LONG_REPLICATION_BONUS
    if contains_any(text, MEDIUM_REPLICATION):
        return MEDIUM_REPLICATION_BONUS
    return 0


@dataclass
class CompetitiveResponseResult:
    """D4 result with the matched phrase groups."""

    score: int
    defensive_score: int
    offensive_score: int
    replication_bonus: int
    defensive_matches: List[str] = field(default_factory=list)
    offensive_matches: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "d4": self.score,
            "defensive_score": self.defensive_score,
            "offensive_score": self.offensive_score,
            "replication_bonus": self.replication_bonus,
            "defensive_matches": list(self.defensive_matches),
            "offensive_matches": list(self.offensive_matches),
        }


class CompetitiveResponseCalculator:
    """Compute D4 from the competitive-response narrative."""

    def calculate(self, criteria_values: Mapping[str, Any]) -> CompetitiveResponseResult:
        text = " ".join((
            normalize_text(criteria_values.get("aramco_response")),
            normalize_text(criteria_values.get("competitive_analysis")),
        ))

        defensive_matches = _matched(text, DEFENSIVE_GROUPS)
        offensive_matches = _matched(text, OFFENSIVE_GROUPS)
        bonus = replication_bonus(text)

        defensive = clamp(Decimal(BASE_SUBSCORE + POINTS_PER_GROUP * len(defensive_matches)))
        offensive = clamp(Decimal(BASE_SUBSCORE + POINTS_PER_GROUP * len(offensive_matches) + bonus))

        result = CompetitiveResponseResult(
            score=clamp_score((defensive + offensive) / 2),
            defensive_score=int(defensive),
            offensive_score=int(offensive),
            replication_bonus=bonus,
            defensive_matches=defensive_matches,
            offensive_matches=offensive_matches,
        )
        logger.debug("d4_calculated", **result.to_dict())
        return result
