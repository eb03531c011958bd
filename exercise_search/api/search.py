"""Search API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from ..models.exercise import FilterOptions, SearchFilters
from ..models.response import SearchResponse
from ..models.request import SearchRequest
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _check_query_length(query: str) -> None:
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search exercises",
    description="Rank exercises against a free-text query; an empty query lists by popularity"
)
async def search(
    q: str = Query("", description="Free-text query"),
    muscle_groups: Optional[List[str]] = Query(None, description="Muscles that must all be worked"),
    equipment: Optional[List[str]] = Query(None, description="Equipment labels, any may match"),
    difficulty: Optional[List[str]] = Query(None, description="Allowed difficulty values"),
    category: Optional[List[str]] = Query(None, description="Allowed category values"),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=500,
        description="Maximum number of results to return"
    ),
    include_suggestions: bool = Query(
        True,
        description="Whether to include suggestions for no-match queries"
    )
) -> SearchResponse:
    """
    Search the exercise catalog.

    Supports typo tolerance, aliases and stemming. Filters are applied
    after ranking and never change scores.
    """
    _check_query_length(q)

    filters = SearchFilters(
        muscle_groups=muscle_groups or [],
        equipment=equipment or [],
        difficulty=difficulty or [],
        category=category or []
    )

    try:
        return search_engine.search(
            query=q,
            filters=filters,
            max_results=max_results or settings.max_results,
            include_suggestions=include_suggestions
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search exercises using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """
    Search exercises using a structured request body.

    This endpoint accepts a JSON request body with filters and options.
    """
    _check_query_length(request.query)

    try:
        return search_engine.search(
            query=request.query,
            filters=request.filters,
            max_results=request.max_results or settings.max_results,
            include_suggestions=request.include_suggestions
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/filters",
    response_model=FilterOptions,
    summary="Get filter options",
    description="Count muscles, equipment, difficulty and category labels across the catalog"
)
async def get_filter_options() -> FilterOptions:
    """
    Get label counts for building filter controls.
    """
    return search_engine.filter_options()
