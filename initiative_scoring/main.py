"""FastAPI application entry point."""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from initiative_scoring.config import get_settings
from initiative_scoring.exceptions import InvalidInputError
from initiative_scoring.logging_config import configure_logging
from initiative_scoring.models import ErrorResponse
from initiative_scoring.routers import (
    catalogue_router,
    health_router,
    portfolio_router,
    scores_router,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    logger.info(
        "app_starting",
        app=settings.app_name,
        environment="DEBUG" if settings.debug else "PRODUCTION",
        scoring_scenario=settings.scoring_scenario.value,
    )
    yield
    logger.info("app_stopping", app=settings.app_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        description="""
        ## Initiative Prioritization Engine API

        Deterministic multi-criteria prioritization of a portfolio of initiatives.

        ### Features:
        - Six-dimension scoring (strategic impact, execution feasibility,
          BCG i2i advancement, competitive response, MiRA integration,
          three-engines alignment)
        - Scenario-weighted composite score and quadrant-adjusted final score
        - Quadrant and tier classification
        - Portfolio category / engine balance validation
        - Dossier field catalogue

        ### Scenarios:
        - **A**: Balanced impact / feasibility
        - **B**: Impact-led
        - **C**: Feasibility-led
        """,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(catalogue_router)
    app.include_router(scores_router)
    app.include_router(portfolio_router)

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        logger.warning("invalid_input", path=request.url.path, error=exc.message, field=exc.field)
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                detail=exc.message,
                error_code=exc.error_code,
                field=exc.field,
            ).model_dump(),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(exc)},
        )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("initiative_scoring.main:app", host="0.0.0.0", port=8000, reload=True)
