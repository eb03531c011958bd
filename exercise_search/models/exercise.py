"""Exercise catalog record and search result models."""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

Difficulty = Literal["Beginner", "Intermediate", "Advanced"]
MatchType = Literal["exact", "fuzzy", "alias", "idle"]


class ExerciseRecord(BaseModel):
    """A single catalog entry. Read-only input to search and name matching."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique stable identifier")
    name: str = Field(..., min_length=1, description="Canonical display name")
    category: str = Field(..., description="Muscle group / body part label")
    equipment: str = Field(..., description="Equipment label")
    difficulty: Difficulty = Field(..., description="Beginner, Intermediate or Advanced")
    primary_muscles: List[str] = Field(default_factory=list)
    secondary_muscles: List[str] = Field(default_factory=list)
    search_aliases: Optional[str] = Field(None, description="Alternate search terms")
    popularity_rank: float = Field(default=0, ge=0, description="Higher is more popular")
    movement_type: Optional[str] = Field(None, description="compound, isolation, stretch, ...")
    instructions: Optional[str] = None
    is_custom: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject whitespace-only names."""
        if not v.strip():
            raise ValueError("Exercise name cannot be empty")
        return v


class SearchFilters(BaseModel):
    """Structured filters applied after ranking. Empty lists mean no constraint."""

    muscle_groups: List[str] = Field(
        default_factory=list, description="Every muscle must be worked (primary or secondary)"
    )
    equipment: List[str] = Field(
        default_factory=list, description="Any equipment label may match (substring)"
    )
    difficulty: List[str] = Field(default_factory=list, description="Allowed difficulty values")
    category: List[str] = Field(default_factory=list, description="Allowed category values")

    def is_empty(self) -> bool:
        return not (self.muscle_groups or self.equipment or self.difficulty or self.category)


class SearchResult(BaseModel):
    """A ranked catalog entry."""

    exercise: ExerciseRecord
    score: float = Field(..., ge=0.0, description="Relevance score, unbounded above")
    match_type: MatchType = Field(..., description="exact, fuzzy, alias or idle")


class FilterOptions(BaseModel):
    """Label occurrence counts across a catalog."""

    muscles: Dict[str, int] = Field(default_factory=dict)
    equipment: Dict[str, int] = Field(default_factory=dict)
    difficulty: Dict[str, int] = Field(default_factory=dict)
    category: Dict[str, int] = Field(default_factory=dict)
