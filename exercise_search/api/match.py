"""Exercise name resolution API endpoints."""

import time

from fastapi import APIRouter, HTTPException, Path

from ..models.request import BatchMatchRequest
from ..models.response import BatchMatchResponse, MatchResponse

router = APIRouter(prefix="/api/v1", tags=["match"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/match/{name}",
    response_model=MatchResponse,
    summary="Resolve an exercise name",
    description="Resolve a free-form exercise name to one catalog exercise"
)
async def match_name(
    name: str = Path(..., description="Exercise name, e.g. 'Barbell Bench Press'", min_length=1)
) -> MatchResponse:
    """
    Resolve a single name through exact, normalized, partial and fuzzy matching.
    """
    start_time = time.time()

    exercise = search_engine.find_by_name(name)
    if exercise is None:
        raise HTTPException(
            status_code=404,
            detail=f"No exercise matches '{name}'"
        )

    return MatchResponse(
        name=name,
        exercise=exercise,
        execution_time_ms=(time.time() - start_time) * 1000
    )


@router.post(
    "/match/batch",
    response_model=BatchMatchResponse,
    summary="Resolve many exercise names",
    description="Resolve a list of names; unresolved names are reported, not rejected"
)
async def match_batch(request: BatchMatchRequest) -> BatchMatchResponse:
    """
    Resolve names from a template or import in one request.

    A partially resolvable batch still succeeds; check ``unresolved``.
    """
    try:
        return search_engine.match_names(request.names)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Batch match failed: {str(e)}"
        )
