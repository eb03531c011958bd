"""Core exercise search and name matching functionality."""

from .catalog import ExerciseCatalog
from .engine import SearchEngine
from .fuzzy_matcher import FuzzyMatcher, fuzzy_match, levenshtein_distance
from .name_matcher import batch_match_exercise_names, find_exercise_by_name
from .normalizer import TextNormalizer
from .search import apply_filters, get_filter_options, search_exercises

__all__ = [
    "ExerciseCatalog",
    "SearchEngine",
    "FuzzyMatcher",
    "TextNormalizer",
    "fuzzy_match",
    "levenshtein_distance",
    "search_exercises",
    "apply_filters",
    "get_filter_options",
    "find_exercise_by_name",
    "batch_match_exercise_names",
]
