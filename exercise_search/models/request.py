"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .exercise import SearchFilters


class SearchRequest(BaseModel):
    """Request model for exercise search."""
    
    query: str = Field(default="", max_length=100, description="Free-text query; empty browses by popularity")
    filters: Optional[SearchFilters] = Field(None, description="Structured filters applied after ranking")
    max_results: Optional[int] = Field(
        None, ge=1, le=500, description="Maximum number of results to return"
    )
    include_suggestions: bool = Field(
        default=True, description="Whether to include suggestions for no-match queries"
    )


class BatchMatchRequest(BaseModel):
    """Request model for resolving many exercise names at once."""
    
    names: List[str] = Field(..., min_length=1, max_length=500, description="Exercise names to resolve")

    @field_validator('names')
    @classmethod
    def validate_names(cls, v: List[str]) -> List[str]:
        """Reject blank names."""
        for name in v:
            if not name or not name.strip():
                raise ValueError("Exercise name cannot be empty")
        return v
