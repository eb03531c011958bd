"""
Exercise Search - relevance ranking and name reconciliation for exercise catalogs.

This package scores a catalog of exercises against free-text queries with typo
tolerance, aliases, stemming and multi-field weighting, and resolves free-form
exercise names from templates and imports onto canonical catalog entries.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.name_matcher import batch_match_exercise_names, find_exercise_by_name
from .core.search import get_filter_options, search_exercises
from .models.exercise import ExerciseRecord, SearchFilters, SearchResult

__all__ = [
    "SearchEngine",
    "ExerciseRecord",
    "SearchFilters",
    "SearchResult",
    "search_exercises",
    "get_filter_options",
    "find_exercise_by_name",
    "batch_match_exercise_names",
]
