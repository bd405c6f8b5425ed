"""Initiative scoring pipeline.

Pipeline steps per batch
------------------------
1. Snapshot the collection          → PortfolioSnapshot (once per batch)
2. Per initiative:
   a. D1–D5 from its own criteria    → dimension calculators
   b. D6 against the snapshot        → EnginesAlignmentCalculator
   c. Composite score                → CompositeCalculator.composite
   d. Quadrant from D1/D2            → assign_quadrant
   e. Final score                    → CompositeCalculator.final
   f. Tier                           → assign_tier
   g. Write derived fields back onto the initiative
3. Validate portfolio balance        → PortfolioBalanceValidator (same snapshot)

Every run recomputes from scratch; identical inputs give identical outputs.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Union

import structlog

from initiative_scoring.config import get_settings
from initiative_scoring.models.enums import Dimension, Quadrant, Scenario, Tier
from initiative_scoring.models.initiative import Initiative
from initiative_scoring.scoring.bcg_advancement import BcgAdvancementCalculator
from initiative_scoring.scoring.classifier import assign_quadrant, assign_tier
from initiative_scoring.scoring.competitive_response import CompetitiveResponseCalculator
from initiative_scoring.scoring.composite import CompositeCalculator
from initiative_scoring.scoring.engines_alignment import EnginesAlignmentCalculator
from initiative_scoring.scoring.execution_feasibility import (
    ExecutionFeasibilityCalculator,
    count_critical_prerequisites,
)
from initiative_scoring.scoring.mira_integration import MiraIntegrationCalculator
from initiative_scoring.scoring.portfolio_balance import (
    PortfolioBalanceReport,
    PortfolioBalanceValidator,
)
from initiative_scoring.scoring.snapshot import PortfolioSnapshot
from initiative_scoring.scoring.strategic_impact import StrategicImpactCalculator

logger = structlog.get_logger(__name__)


@dataclass
class InitiativeScoreResult:
    """All derived outputs for one initiative."""

    initiative_id: str
    dimension_scores: Dict[Dimension, int]
    composite_score: Decimal
    quadrant: Quadrant
    final_score: Decimal
    tier: Tier
    scenario: Scenario
    critical_prerequisites: int

    def apply_to(self, initiative: Initiative) -> Initiative:
        """Write the derived fields onto ``initiative`` in a single step."""
        for dim, score in self.dimension_scores.items():
            setattr(initiative, dim.value, score)
        initiative.composite_score = self.composite_score
        initiative.final_score = self.final_score
        initiative.quadrant = self.quadrant
        initiative.tier = self.tier
        return initiative

    def to_dict(self) -> dict:
        return {
            "initiative_id": self.initiative_id,
            **{dim.value: score for dim, score in self.dimension_scores.items()},
            "composite_score": float(self.composite_score),
            "quadrant": self.quadrant.value,
            "final_score": float(self.final_score),
            "tier": self.tier.value,
            "scenario": self.scenario.value,
            "critical_prerequisites": self.critical_prerequisites,
        }


@dataclass
class PortfolioScoringResult:
    """Scores for every initiative in a batch plus the balance report."""

    scenario: Scenario
    results: List[InitiativeScoreResult]
    balance: PortfolioBalanceReport
    snapshot: PortfolioSnapshot
    by_id: Dict[str, InitiativeScoreResult] = field(init=False)

    def __post_init__(self) -> None:
        self.by_id = {r.initiative_id: r for r in self.results}

    def ranked(self) -> List[InitiativeScoreResult]:
        """Results ordered by final score, then composite score (both descending), then id."""
        return sorted(
            self.results,
            key=lambda r: (-r.final_score, -r.composite_score, r.initiative_id),
        )


class InitiativeScoringService:
    """Score initiatives and validate the portfolio they form.

    Parameters
    ----------
    scenario:
        Weight scenario; defaults to ``Settings.scoring_scenario``.
    """

    def __init__(self, scenario: Optional[Union[Scenario, str]] = None) -> None:
        chosen = scenario if scenario is not None else get_settings().scoring_scenario
        self.composite = CompositeCalculator(chosen)
        self.scenario = self.composite.scenario
        self.d1 = StrategicImpactCalculator()
        self.d2 = ExecutionFeasibilityCalculator()
        self.d3 = BcgAdvancementCalculator()
        self.d4 = CompetitiveResponseCalculator()
        self.d5 = MiraIntegrationCalculator()
        self.d6 = EnginesAlignmentCalculator()
        self.validator = PortfolioBalanceValidator()

    def score_initiative(
        self,
        initiative: Initiative,
        snapshot: PortfolioSnapshot,
    ) -> InitiativeScoreResult:
        """Score one initiative against a snapshot and write the results back."""
        criteria = initiative.criteria_values

        dimension_scores = {
            Dimension.STRATEGIC_IMPACT: self.d1.calculate(criteria).score,
            Dimension.EXECUTION_FEASIBILITY: self.d2.calculate(criteria).score,
            Dimension.BCG_I2I_ADVANCEMENT: self.d3.calculate(criteria).score,
            Dimension.COMPETITIVE_RESPONSE: self.d4.calculate(criteria).score,
            Dimension.MIRA_INTEGRATION: self.d5.calculate(criteria).score,
            Dimension.ENGINES_ALIGNMENT: self.d6.calculate(criteria, snapshot).score,
        }

        composite = self.composite.composite(dimension_scores).composite_score
        quadrant = assign_quadrant(
            dimension_scores[Dimension.STRATEGIC_IMPACT],
            dimension_scores[Dimension.EXECUTION_FEASIBILITY],
        )
        final_score = self.composite.final(composite, quadrant)
        tier = assign_tier(criteria, final_score)

        result = InitiativeScoreResult(
            initiative_id=initiative.id,
            dimension_scores=dimension_scores,
            composite_score=composite,
            quadrant=quadrant,
            final_score=final_score,
            tier=tier,
            scenario=self.scenario,
            critical_prerequisites=count_critical_prerequisites(criteria),
        )
        result.apply_to(initiative)

        logger.info("initiative_scored", **result.to_dict())
        return result

    def score_portfolio(self, initiatives: Sequence[Initiative]) -> PortfolioScoringResult:
        """Score a whole batch against one snapshot and validate its balance.

        Raises:
            InvalidInputError: If ``initiatives`` is empty.
        """
        snapshot = PortfolioSnapshot.from_initiatives(initiatives)
        results = [self.score_initiative(i, snapshot) for i in initiatives]
        balance = self.validator.validate(snapshot)

        logger.info(
            "portfolio_scored",
            scenario=self.scenario.value,
            initiatives=len(results),
            is_balanced=balance.is_balanced,
        )
        return PortfolioScoringResult(
            scenario=self.scenario,
            results=results,
            balance=balance,
            snapshot=snapshot,
        )
