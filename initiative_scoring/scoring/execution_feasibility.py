"""D2: Execution Feasibility Calculator.

Formula
-------
  D2 = round(0.30 × TRL + 0.25 × Resources + 0.25 × Timeline + 0.20 × Dependencies)

Sub-scores
----------
  TRL          lookup on readiness level 1–9 (50–95); unknown → 70
  Resources    share of the 4-item checklist {team, budget, sponsor, skills} × 100
  Timeline     months_between(start, end) against confidence-gated thresholds
  Dependencies critical / total prerequisite counts (50–90)

Result clamped to [0, 100].
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

import structlog

from initiative_scoring.scoring.financials import months_between
from initiative_scoring.scoring.utils import HUNDRED, clamp_score

logger = structlog.get_logger(__name__)

TRL_WEIGHT: Decimal = Decimal("0.30")
RESOURCE_WEIGHT: Decimal = Decimal("0.25")
TIMELINE_WEIGHT: Decimal = Decimal("0.25")
DEPENDENCY_WEIGHT: Decimal = Decimal("0.20")

TRL_SCORES: dict[int, int] = {
    9: 95, 8: 90, 7: 85, 6: 80, 5: 75,
    4: 65, 3: 60, 2: 55, 1: 50,
}
DEFAULT_TRL_SCORE: int = 70

RESOURCE_OPTIONS: frozenset[str] = frozenset({"team", "budget", "sponsor", "skills"})

CRITICAL = "Critical"


def trl_score(level: Any) -> int:
    """Lookup score for a TRL; numeric strings are accepted."""
    try:
        return TRL_SCORES.get(int(level), DEFAULT_TRL_SCORE)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_TRL_SCORE


def resource_score(selected: Any) -> Decimal:
    """Checklist coverage × 100; each known option counts once."""
    if not isinstance(selected, (list, tuple, set, frozenset)):
        return Decimal(0)
    chosen = {item for item in selected if isinstance(item, str)} & RESOURCE_OPTIONS
    return Decimal(len(chosen)) / Decimal(len(RESOURCE_OPTIONS)) * HUNDRED


def timeline_score(duration: int, confidence: Any) -> int:
    """Tiered duration score gated by the planner's confidence flag."""
    if duration <= 4 and confidence == "high":
        return 90
    if duration <= 6 and confidence != "low":
        return 80
    if duration <= 12 and confidence != "low":
        return 70
    return 60


def _prerequisites(criteria_values: Mapping[str, Any]) -> list:
    prerequisites = criteria_values.get("prerequisites") or []
    return list(prerequisites) if isinstance(prerequisites, (list, tuple)) else []


def count_critical_prerequisites(criteria_values: Mapping[str, Any]) -> int:
    """Number of prerequisites flagged ``criticality == "Critical"``."""
    return sum(
        1 for p in _prerequisites(criteria_values)
        if isinstance(p, Mapping) and p.get("criticality") == CRITICAL
    )


def dependency_score(critical: int, total: int) -> int:
    """Score the dependency load: fewer and less critical prerequisites score higher."""
    if critical == 0 and total <= 3:
        return 90
    if critical == 0 and total <= 5:
        return 80
    if critical == 1:
        return 70
    if critical == 2:
        return 60
    return 50


@dataclass
class ExecutionFeasibilityResult:
    """D2 result; sub-scores are reported before weighting."""

    score: int
    trl_score: int
    resource_score: Decimal
    timeline_score: int
    dependency_score: int
    duration_months: int
    critical_prerequisites: int
    total_prerequisites: int

    def to_dict(self) -> dict:
        return {
            "d2": self.score,
            "trl_score": self.trl_score,
            "resource_score": float(self.resource_score),
            "timeline_score": self.timeline_score,
            "dependency_score": self.dependency_score,
            "duration_months": self.duration_months,
            "critical_prerequisites": self.critical_prerequisites,
            "total_prerequisites": self.total_prerequisites,
        }


class ExecutionFeasibilityCalculator:
    """Compute D2 from readiness, resourcing, timeline and dependency criteria."""

    def calculate(self, criteria_values: Mapping[str, Any]) -> ExecutionFeasibilityResult:
        timeline = criteria_values.get("timeline")
        if not isinstance(timeline, Mapping):
            timeline = {}

        trl = trl_score(criteria_values.get("trl_level"))
        resources = resource_score(criteria_values.get("resource_availability"))
        duration = months_between(timeline.get("start_date"), timeline.get("end_date"))
        timing = timeline_score(duration, timeline.get("confidence"))
        critical = count_critical_prerequisites(criteria_values)
        total = len(_prerequisites(criteria_values))
        deps = dependency_score(critical, total)

        raw = (
            TRL_WEIGHT * trl
            + RESOURCE_WEIGHT * resources
            + TIMELINE_WEIGHT * timing
            + DEPENDENCY_WEIGHT * deps
        )

        result = ExecutionFeasibilityResult(
            score=clamp_score(raw),
            trl_score=trl,
            resource_score=resources,
            timeline_score=timing,
            dependency_score=deps,
            duration_months=duration,
            critical_prerequisites=critical,
            total_prerequisites=total,
        )
        logger.debug("d2_calculated", **result.to_dict())
        return result
