"""D5: MiRA Integration Calculator.

Formula
-------
  D5 = 0                                                   if layer absent / 0
  D5 = Layer + Depth + MultiLayer + Monetization           otherwise, clamped

  Layer         1 → 30, 2 → 50, 3 → 70, 4 → 90 (other → 0)
  Depth         low −10, medium 0, high +10 (unknown 0)
  MultiLayer    +5 when several MiRA layers are used
  Monetization  layer 4 only: yes 0, partial −10, anything else −20
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

import structlog

from initiative_scoring.scoring.utils import clamp_score

logger = structlog.get_logger(__name__)

LAYER_SCORES: dict[int, int] = {0: 0, 1: 30, 2: 50, 3: 70, 4: 90}
DEPTH_MODIFIERS: dict[str, int] = {"low": -10, "medium": 0, "high": 10}
MULTI_LAYER_BONUS: int = 5
MONETIZATION_LAYER: int = 4
MONETIZATION_MODIFIERS: dict[str, int] = {"yes": 0, "partial": -10}
UNCLEAR_MONETIZATION: int = -20


def _layer(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _lookup(table: dict[str, int], key: Any, default: int) -> int:
    return table.get(key, default) if isinstance(key, str) else default


@dataclass
class MiraIntegrationResult:
    """D5 result."""

    score: int
    layer: Optional[int]
    layer_score: int = 0
    depth_modifier: int = 0
    multi_layer_bonus: int = 0
    monetization_modifier: int = 0

    def to_dict(self) -> dict:
        return {
            "d5": self.score,
            "layer": self.layer,
            "layer_score": self.layer_score,
            "depth_modifier": self.depth_modifier,
            "multi_layer_bonus": self.multi_layer_bonus,
            "monetization_modifier": self.monetization_modifier,
        }


class MiraIntegrationCalculator:
    """Compute D5 from the ``mira_integration`` configuration."""

    def calculate(self, criteria_values: Mapping[str, Any]) -> MiraIntegrationResult:
        config = criteria_values.get("mira_integration")
        if not isinstance(config, Mapping):
            config = {}

        layer = _layer(config.get("layer"))
        if not layer:
            result = MiraIntegrationResult(score=0, layer=layer)
            logger.debug("d5_calculated", **result.to_dict())
            return result

        base = LAYER_SCORES.get(layer, 0)
        depth = _lookup(DEPTH_MODIFIERS, config.get("depth"), 0)
        multi = MULTI_LAYER_BONUS if config.get("multiple_layers") else 0
        monetization = 0
        if layer == MONETIZATION_LAYER:
            monetization = _lookup(
                MONETIZATION_MODIFIERS, config.get("monetization_clarity"), UNCLEAR_MONETIZATION
            )

        result = MiraIntegrationResult(
            score=clamp_score(Decimal(base + depth + multi + monetization)),
            layer=layer,
            layer_score=base,
            depth_modifier=depth,
            multi_layer_bonus=multi,
            monetization_modifier=monetization,
        )
        logger.debug("d5_calculated", **result.to_dict())
        return result
