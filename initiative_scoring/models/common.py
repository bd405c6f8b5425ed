"""Common models used across the API."""
from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Overall health status")
    timestamp: str = Field(..., description="ISO timestamp")
    version: str = Field(..., description="Application version")
    scoring_scenario: str = Field(..., description="Active weight scenario")


class ErrorResponse(BaseModel):
    """Standard error response model."""
    detail: str
    error_code: str | None = None
    field: str | None = None
