"""Read-only aggregate view of the initiative collection.

D6 (portfolio balance sub-score) and the portfolio validator both need
collection-wide counts. The snapshot computes them in a single pass, once per
batch, so every initiative in the batch is scored against the same counts.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

import structlog

from initiative_scoring.exceptions import InvalidInputError
from initiative_scoring.models.enums import Engine, PortfolioCategory
from initiative_scoring.models.initiative import Initiative

logger = structlog.get_logger(__name__)


def _member(enum_cls, value: Any):
    try:
        return enum_cls(value)
    except ValueError:
        return None


def declared_engine(criteria_values: Mapping[str, Any]) -> Optional[Engine]:
    """Engine named in ``three_engines_alignment``, or None if absent/unknown."""
    return _member(Engine, criteria_values.get("three_engines_alignment"))


def declared_category(criteria_values: Mapping[str, Any]) -> Optional[PortfolioCategory]:
    """Category named in ``portfolio_category``, or None if absent/unknown."""
    return _member(PortfolioCategory, criteria_values.get("portfolio_category"))


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Counts over the full initiative collection at one point in time."""

    total: int
    category_counts: Mapping[PortfolioCategory, int]
    engine_counts: Mapping[Engine, int]        # declared engines only
    unassigned_engine_count: int = 0           # missing or unknown engine
    initiative_ids: tuple[str, ...] = field(default=())

    @classmethod
    def from_initiatives(cls, initiatives: Iterable[Initiative]) -> "PortfolioSnapshot":
        """Build a snapshot in one pass.

        Raises:
            InvalidInputError: If the collection is empty.
        """
        categories = {c: 0 for c in PortfolioCategory}
        engines = {e: 0 for e in Engine}
        unassigned = 0
        ids: list[str] = []

        for initiative in initiatives:
            ids.append(initiative.id)
            category = declared_category(initiative.criteria_values)
            if category is not None:
                categories[category] += 1
            engine = declared_engine(initiative.criteria_values)
            if engine is not None:
                engines[engine] += 1
            else:
                unassigned += 1

        if not ids:
            raise InvalidInputError(
                "Portfolio snapshot requires at least one initiative",
                field="initiatives",
            )

        snapshot = cls(
            total=len(ids),
            category_counts=MappingProxyType(categories),
            engine_counts=MappingProxyType(engines),
            unassigned_engine_count=unassigned,
            initiative_ids=tuple(ids),
        )
        logger.debug("portfolio_snapshot_built", **snapshot.to_dict())
        return snapshot

    def engine_count_with_default(self, engine: Engine) -> int:
        """Engine count where unassigned initiatives fall back to E1 (sustain & grow)."""
        count = self.engine_counts.get(engine, 0)
        if engine is Engine.E1_SUSTAIN_GROW:
            count += self.unassigned_engine_count
        return count

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "category_counts": {c.value: n for c, n in self.category_counts.items()},
            "engine_counts": {e.value: n for e, n in self.engine_counts.items()},
            "unassigned_engine_count": self.unassigned_engine_count,
        }
