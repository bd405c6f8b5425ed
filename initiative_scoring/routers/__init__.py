"""Routers package - API endpoint routers."""

from .health import router as health_router
from .catalogue import router as catalogue_router
from .scores import router as scores_router
from .portfolio import router as portfolio_router

__all__ = [
    "health_router",
    "catalogue_router",
    "scores_router",
    "portfolio_router",
]
