"""Health check endpoint."""
from datetime import datetime, timezone

from fastapi import APIRouter

from initiative_scoring.config import get_settings
from initiative_scoring.models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check health status of the API and report the active weight scenario.",
)
async def health_check():
    """The engine has no external dependencies, so it is healthy whenever it answers."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        scoring_scenario=settings.scoring_scenario.value,
    )
