"""Initiative scoring endpoints."""
from fastapi import APIRouter

from initiative_scoring.models import (
    InitiativeScoreResponse,
    PortfolioScoreRequest,
    PortfolioScoreResponse,
)
from initiative_scoring.scoring.pipeline import InitiativeScoringService

from .portfolio import to_balance_response

router = APIRouter(prefix="/api/v1/scores", tags=["Scores"])


@router.post(
    "/portfolio",
    response_model=PortfolioScoreResponse,
    summary="Score Portfolio",
    description="Score every initiative against one portfolio snapshot and rank by final score.",
)
async def score_portfolio(request: PortfolioScoreRequest):
    """
    Run the full pipeline for a batch of initiatives.

    Dimension scores, composite, quadrant, final score and tier are recomputed
    from the submitted criteria; derived fields in the request are ignored.
    """
    service = InitiativeScoringService(scenario=request.scenario)
    result = service.score_portfolio(request.initiatives)
    names = {i.id: i.name for i in request.initiatives}

    ranked = [
        InitiativeScoreResponse(
            rank=position,
            initiative_id=r.initiative_id,
            name=names.get(r.initiative_id),
            **{dim.value: score for dim, score in r.dimension_scores.items()},
            composite_score=float(r.composite_score),
            final_score=float(r.final_score),
            quadrant=r.quadrant,
            tier=r.tier,
            critical_prerequisites=r.critical_prerequisites,
        )
        for position, r in enumerate(result.ranked(), start=1)
    ]
    return PortfolioScoreResponse(
        scenario=result.scenario,
        initiatives=ranked,
        balance=to_balance_response(result.balance),
    )
