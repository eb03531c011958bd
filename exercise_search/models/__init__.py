"""Data models for the exercise search service."""

from .exercise import (
    ExerciseRecord,
    FilterOptions,
    SearchFilters,
    SearchResult,
)
from .response import (
    SearchResponse,
    MatchResponse,
    BatchMatchResponse,
    ErrorResponse,
    HealthResponse,
)
from .request import SearchRequest, BatchMatchRequest

__all__ = [
    "ExerciseRecord",
    "FilterOptions",
    "SearchFilters",
    "SearchResult",
    "SearchResponse",
    "MatchResponse",
    "BatchMatchResponse",
    "ErrorResponse",
    "HealthResponse",
    "SearchRequest",
    "BatchMatchRequest",
]
