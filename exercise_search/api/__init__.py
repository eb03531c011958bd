"""API endpoints for the exercise search service."""

from .search import router as search_router
from .match import router as match_router
from .exercises import router as exercises_router
from .health import router as health_router

__all__ = [
    "search_router",
    "match_router",
    "exercises_router",
    "health_router",
]
