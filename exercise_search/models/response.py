"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .exercise import ExerciseRecord, SearchResult


class SearchResponse(BaseModel):
    """Response for search queries."""
    
    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    idle: bool = Field(..., description="Whether the query was empty and popularity ordering was used")
    total_results: int = Field(..., description="Number of results before truncation")
    results: List[SearchResult] = Field(..., description="Ranked results")
    suggestions: Optional[List[str]] = Field(None, description="Exercise names to suggest if no match")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class MatchResponse(BaseModel):
    """Response for a single name resolution."""
    
    name: str = Field(..., description="Name as supplied")
    exercise: ExerciseRecord = Field(..., description="Resolved catalog entry")
    execution_time_ms: float = Field(..., description="Lookup time in milliseconds")


class BatchMatchResponse(BaseModel):
    """Response for batch name resolution. Unresolved names are listed, not fatal."""
    
    matches: Dict[str, str] = Field(..., description="Resolved name to exercise id")
    unresolved: List[str] = Field(..., description="Names no tier could resolve")
    total_resolved: int = Field(..., description="Count of resolved names")
    execution_time_ms: float = Field(..., description="Batch time in milliseconds")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    catalog_size: int = Field(..., description="Number of exercises loaded")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
