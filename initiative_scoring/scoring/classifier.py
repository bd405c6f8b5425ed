"""Quadrant and tier classification.

Quadrant is a 2 × 2 split on D1 (impact) and D2 (feasibility):

                     D2 ≥ 80          D2 < 80
    D1 ≥ 75        quick_win       transformational
    D1 < 75        push_harder     moonshot

Tier rules, first match wins:
  1. ≥ 3 critical prerequisites → 1a (catastrophic dependency override)
  2. priority == critical       → 1a if final ≥ 80 else 1b
  3. final score band           → 1b ≥ 80, 1c ≥ 70, 1d ≥ 60, 2 ≥ 50, else contingent
"""
from decimal import Decimal
from typing import Any, Mapping, Tuple, Union

from initiative_scoring.models.enums import Priority, Quadrant, Tier
from initiative_scoring.scoring.execution_feasibility import count_critical_prerequisites

IMPACT_THRESHOLD: int = 75
FEASIBILITY_THRESHOLD: int = 80
CATASTROPHIC_DEPENDENCY_COUNT: int = 3
CRITICAL_MANDATE_THRESHOLD: Decimal = Decimal(80)

TIER_BANDS: Tuple[Tuple[Decimal, Tier], ...] = (
    (Decimal(80), Tier.TIER_1B),
    (Decimal(70), Tier.TIER_1C),
    (Decimal(60), Tier.TIER_1D),
    (Decimal(50), Tier.TIER_2),
)


def assign_quadrant(d1: int, d2: int) -> Quadrant:
    """Place an initiative on the impact/feasibility matrix."""
    high_impact = d1 >= IMPACT_THRESHOLD
    high_feasibility = d2 >= FEASIBILITY_THRESHOLD
    if high_impact and high_feasibility:
        return Quadrant.QUICK_WIN
    if high_feasibility:
        return Quadrant.PUSH_HARDER
    if high_impact:
        return Quadrant.TRANSFORMATIONAL
    return Quadrant.MOONSHOT


def assign_tier(criteria_values: Mapping[str, Any], final_score: Union[Decimal, float, int]) -> Tier:
    """Assign the year-1 tier from dependencies, priority and final score."""
    if count_critical_prerequisites(criteria_values) >= CATASTROPHIC_DEPENDENCY_COUNT:
        return Tier.TIER_1A

    score = Decimal(str(final_score))
    if criteria_values.get("priority") == Priority.CRITICAL.value:
        return Tier.TIER_1A if score >= CRITICAL_MANDATE_THRESHOLD else Tier.TIER_1B

    for threshold, tier in TIER_BANDS:
        if score >= threshold:
            return tier
    return Tier.CONTINGENT
