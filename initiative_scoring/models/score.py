"""Request/response models for the scoring endpoints."""
from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import Quadrant, Scenario, Tier
from .initiative import Initiative


class PortfolioRequest(BaseModel):
    """A batch of initiatives to score or validate."""
    initiatives: List[Initiative] = Field(..., min_length=1)


class PortfolioScoreRequest(PortfolioRequest):
    """Batch scoring request; ``scenario`` overrides the configured default."""
    scenario: Optional[Scenario] = None


class InitiativeScoreResponse(BaseModel):
    """Derived outputs for one initiative."""
    rank: int = Field(..., ge=1)
    initiative_id: str
    name: Optional[str] = None
    d1: int = Field(..., ge=0, le=100)
    d2: int = Field(..., ge=0, le=100)
    d3: int = Field(..., ge=0, le=100)
    d4: int = Field(..., ge=0, le=100)
    d5: int = Field(..., ge=0, le=100)
    d6: int = Field(..., ge=0, le=100)
    composite_score: float = Field(..., ge=0)
    final_score: float = Field(..., ge=0)
    quadrant: Quadrant
    tier: Tier
    critical_prerequisites: int = Field(..., ge=0)


class BucketBalanceResponse(BaseModel):
    """Allocation check for one category or engine."""
    bucket: str
    count: int
    actual: float = Field(..., description="Percentage of all initiatives")
    target: float
    lower: float
    upper: float
    in_range: bool


class PortfolioBalanceResponse(BaseModel):
    """Category and engine allocation report."""
    total: int
    is_balanced: bool
    category: dict[str, BucketBalanceResponse]
    engine: dict[str, BucketBalanceResponse]


class PortfolioScoreResponse(BaseModel):
    """Ranked scores for a batch plus its balance report."""
    scenario: Scenario
    initiatives: List[InitiativeScoreResponse]
    balance: PortfolioBalanceResponse
