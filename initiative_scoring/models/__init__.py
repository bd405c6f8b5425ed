"""Pydantic models for the Initiative Prioritization Engine."""

# Common Models
from initiative_scoring.models.common import (
    HealthResponse,
    ErrorResponse,
)

# Enums
from initiative_scoring.models.enums import (
    Dimension,
    Scenario,
    Quadrant,
    Tier,
    Priority,
    PortfolioCategory,
    Engine,
    FieldCategory,
    SCENARIO_WEIGHTS,
    QUADRANT_MODIFIERS,
    CATEGORY_TARGETS,
    ENGINE_TARGETS,
    BALANCE_TOLERANCE,
)

# Initiative
from initiative_scoring.models.initiative import Initiative

# Scoring API
from initiative_scoring.models.score import (
    PortfolioRequest,
    PortfolioScoreRequest,
    InitiativeScoreResponse,
    BucketBalanceResponse,
    PortfolioBalanceResponse,
    PortfolioScoreResponse,
)

__all__ = [
    # Common
    "HealthResponse",
    "ErrorResponse",
    # Enums
    "Dimension",
    "Scenario",
    "Quadrant",
    "Tier",
    "Priority",
    "PortfolioCategory",
    "Engine",
    "FieldCategory",
    "SCENARIO_WEIGHTS",
    "QUADRANT_MODIFIERS",
    "CATEGORY_TARGETS",
    "ENGINE_TARGETS",
    "BALANCE_TOLERANCE",
    # Initiative
    "Initiative",
    # Scoring API
    "PortfolioRequest",
    "PortfolioScoreRequest",
    "InitiativeScoreResponse",
    "BucketBalanceResponse",
    "PortfolioBalanceResponse",
    "PortfolioScoreResponse",
]
