"""Initiative Pydantic models."""
from decimal import Decimal
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .enums import Quadrant, Tier


class Initiative(BaseModel):
    """An initiative under evaluation.

    ``criteria_values`` is authored externally and treated as input. Every
    other field is derived and overwritten on each scoring run.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Initiative identifier, e.g. PET-006")
    name: Optional[str] = Field(default=None, max_length=200)
    criteria_values: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("criteria_values", "criteriaValues"),
        description="Criterion key → raw value as captured in the dossier",
    )

    # Derived fields
    d1: Optional[int] = Field(default=None, ge=0, le=100)
    d2: Optional[int] = Field(default=None, ge=0, le=100)
    d3: Optional[int] = Field(default=None, ge=0, le=100)
    d4: Optional[int] = Field(default=None, ge=0, le=100)
    d5: Optional[int] = Field(default=None, ge=0, le=100)
    d6: Optional[int] = Field(default=None, ge=0, le=100)
    composite_score: Optional[Decimal] = Field(default=None, ge=0, decimal_places=1)
    final_score: Optional[Decimal] = Field(default=None, ge=0, decimal_places=1)
    quadrant: Optional[Quadrant] = None
    tier: Optional[Tier] = None
