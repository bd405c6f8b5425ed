"""Portfolio balance endpoints."""
from fastapi import APIRouter

from initiative_scoring.models import (
    BucketBalanceResponse,
    PortfolioBalanceResponse,
    PortfolioRequest,
)
from initiative_scoring.scoring.portfolio_balance import (
    PortfolioBalanceReport,
    validate_portfolio_balance,
)

router = APIRouter(prefix="/api/v1/portfolio", tags=["Portfolio"])


def to_balance_response(report: PortfolioBalanceReport) -> PortfolioBalanceResponse:
    return PortfolioBalanceResponse(
        total=report.total,
        is_balanced=report.is_balanced,
        category={k: BucketBalanceResponse(**v.to_dict()) for k, v in report.category.items()},
        engine={k: BucketBalanceResponse(**v.to_dict()) for k, v in report.engine.items()},
    )


@router.post(
    "/balance",
    response_model=PortfolioBalanceResponse,
    summary="Validate Portfolio Balance",
    description="Compare category (60/15/15/10) and engine (60/25/15) allocation with target bands.",
)
async def validate_balance(request: PortfolioRequest):
    """Read-only diagnostic; does not score the initiatives."""
    return to_balance_response(validate_portfolio_balance(request.initiatives))
