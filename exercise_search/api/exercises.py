"""Exercise catalog API endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException, Path
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..models.exercise import ExerciseRecord

router = APIRouter(prefix="/api/v1", tags=["exercises"])

# Import the global search engine instance
from ..engine_instance import search_engine


@router.get(
    "/exercises",
    response_model=List[ExerciseRecord],
    summary="List exercises",
    description="Get every exercise in catalog order"
)
async def list_exercises() -> List[ExerciseRecord]:
    """
    Get all exercises currently loaded.
    """
    return search_engine.catalog.all()


@router.get(
    "/exercises/{exercise_id}",
    response_model=ExerciseRecord,
    summary="Get exercise by id"
)
async def get_exercise(
    exercise_id: str = Path(..., description="Exercise identifier")
) -> ExerciseRecord:
    """
    Get a single exercise.
    """
    exercise = search_engine.catalog.get(exercise_id)
    if exercise is None:
        raise HTTPException(
            status_code=404,
            detail=f"Exercise '{exercise_id}' not found"
        )
    return exercise


@router.post(
    "/exercises",
    summary="Load exercise catalog",
    description="Replace the catalog with the supplied exercises"
)
async def load_exercises(exercises: List[dict]) -> JSONResponse:
    """
    Replace the exercise catalog.

    Rejects the whole payload if any exercise is invalid or ids repeat;
    the current catalog is kept in that case.
    """
    try:
        total = search_engine.load_exercises(exercises)
    except ValidationError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid exercise: {e.errors()[0]['msg']}"
        )
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail=str(e)
        )

    return JSONResponse(
        status_code=200,
        content={
            "message": "Exercises loaded successfully",
            "total_exercises": total
        }
    )
