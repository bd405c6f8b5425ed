"""Composite and final score calculator.

Formula
-------
  Composite = round(Σ_i D_i × w_i(scenario), 1)
  Final     = round(Composite × QuadrantModifier(quadrant), 1)

Scenario weights and quadrant modifiers live in ``models.enums``. Both scores
are floored at 0.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping, Optional, Union

import structlog

from initiative_scoring.exceptions import InvalidInputError
from initiative_scoring.models.enums import (
    QUADRANT_MODIFIERS,
    SCENARIO_WEIGHTS,
    Dimension,
    Quadrant,
    Scenario,
)
from initiative_scoring.scoring.utils import ZERO, round_one_decimal

logger = structlog.get_logger(__name__)


def resolve_scenario(scenario: Union[Scenario, str]) -> Scenario:
    """Coerce a scenario name (case-insensitive); unknown names are a configuration error."""
    if isinstance(scenario, Scenario):
        return scenario
    if isinstance(scenario, str):
        scenario = scenario.strip().upper()
    try:
        return Scenario(scenario)
    except ValueError:
        raise InvalidInputError(
            f"Unknown scoring scenario: {scenario!r}", field="scenario"
        ) from None


@dataclass
class CompositeResult:
    """Composite score and its per-dimension contributions."""

    composite_score: Decimal
    scenario: Scenario
    contributions: dict[str, Decimal]   # dimension → weight × score

    def to_dict(self) -> dict:
        return {
            "composite_score": float(self.composite_score),
            "scenario": self.scenario.value,
            "contributions": {k: float(v) for k, v in self.contributions.items()},
        }


class CompositeCalculator:
    """Combine six dimension scores into composite and final scores.

    Parameters
    ----------
    scenario:
        Weight scenario (A, B or C).
    quadrant_modifiers:
        Override the default quadrant → multiplier table.
    """

    def __init__(
        self,
        scenario: Union[Scenario, str] = Scenario.A,
        quadrant_modifiers: Optional[Mapping[Quadrant, Decimal]] = None,
    ) -> None:
        self.scenario = resolve_scenario(scenario)
        self.weights = SCENARIO_WEIGHTS[self.scenario]
        self.quadrant_modifiers = dict(quadrant_modifiers or QUADRANT_MODIFIERS)

    def composite(self, dimension_scores: Mapping[Union[Dimension, str], Optional[int]]) -> CompositeResult:
        """Weighted sum of D1–D6 rounded to one decimal.

        Args:
            dimension_scores: Dimension (or ``"d1"``…``"d6"``) → score. Missing
                              or None scores count as 0.
        """
        scores = {Dimension(k): v for k, v in dimension_scores.items()}
        contributions = {
            dim.value: Decimal(scores.get(dim) or 0) * weight
            for dim, weight in self.weights.items()
        }
        composite = max(ZERO, round_one_decimal(sum(contributions.values(), ZERO)))

        result = CompositeResult(
            composite_score=composite,
            scenario=self.scenario,
            contributions=contributions,
        )
        logger.debug("composite_calculated", **result.to_dict())
        return result

    def final(self, composite_score: Decimal, quadrant: Quadrant) -> Decimal:
        """Apply the quadrant modifier to an already-rounded composite score."""
        modifier = self.quadrant_modifiers.get(Quadrant(quadrant), Decimal(1))
        final_score = max(ZERO, round_one_decimal(composite_score * modifier))
        logger.debug(
            "final_score_calculated",
            composite_score=float(composite_score),
            quadrant=Quadrant(quadrant).value,
            modifier=float(modifier),
            final_score=float(final_score),
        )
        return final_score
