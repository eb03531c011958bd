"""Search engine service wrapping a catalog with usage statistics."""

import time
from typing import Any, Dict, Iterable, Optional, Sequence, Union

from ..models.exercise import ExerciseRecord, FilterOptions, SearchFilters
from ..models.response import BatchMatchResponse, SearchResponse
from .catalog import ExerciseCatalog
from .fuzzy_matcher import FuzzyMatcher
from .name_matcher import batch_match_exercise_names, find_exercise_by_name
from .search import get_filter_options, is_idle_query, search_exercises


class SearchEngine:
    """Exercise search and name resolution over an in-memory catalog."""

    def __init__(self, suggestion_cutoff: float = 60.0, max_suggestions: int = 5) -> None:
        """
        Initialize the search engine.

        Args:
            suggestion_cutoff: Minimum similarity (0-100) for "did you mean" names
            max_suggestions: Suggestions returned for a query with no results
        """
        self.catalog = ExerciseCatalog()
        self.fuzzy_matcher = FuzzyMatcher(suggestion_cutoff)
        self.max_suggestions = max_suggestions
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "idle_queries": 0,
            "empty_results": 0,
            "total_execution_time": 0.0,
            "name_lookups": 0,
            "names_resolved": 0,
            "names_unresolved": 0
        }

    def load_exercises(self, exercises: Iterable[Union[ExerciseRecord, Dict[str, Any]]]) -> int:
        """
        Replace the catalog.

        Args:
            exercises: Records or dicts

        Returns:
            Number of exercises loaded
        """
        return self.catalog.load(exercises)

    def search(
        self,
        query: str,
        filters: Optional[SearchFilters] = None,
        max_results: Optional[int] = None,
        include_suggestions: bool = True
    ) -> SearchResponse:
        """
        Search the catalog.

        Args:
            query: Free-text query; empty lists by popularity
            filters: Optional structured filters
            max_results: Truncate the ranked list to this many results
            include_suggestions: Whether to suggest names when nothing matched

        Returns:
            SearchResponse with ranked results and metadata
        """
        start_time = time.time()
        query = query or ""
        exercises = self.catalog.all()

        results = search_exercises(exercises, query, filters)
        idle = is_idle_query(query)
        total_results = len(results)

        suggestions = None
        if not results and include_suggestions:
            suggestions = self.fuzzy_matcher.suggest_names(
                query, (ex.name for ex in exercises), self.max_suggestions
            )

        if max_results is not None:
            results = results[:max_results]

        execution_time = (time.time() - start_time) * 1000

        self._stats["total_queries"] += 1
        self._stats["total_execution_time"] += execution_time
        if idle:
            self._stats["idle_queries"] += 1
        if total_results == 0:
            self._stats["empty_results"] += 1

        return SearchResponse(
            query=query,
            execution_time_ms=execution_time,
            idle=idle,
            total_results=total_results,
            results=results,
            suggestions=suggestions
        )

    def find_by_name(self, name: str) -> Optional[ExerciseRecord]:
        """
        Resolve a free-form name to one exercise.

        Args:
            name: Exercise name from a template or import

        Returns:
            The matched exercise, or None
        """
        match = find_exercise_by_name(name, self.catalog.all())

        self._stats["name_lookups"] += 1
        if match is not None:
            self._stats["names_resolved"] += 1
        else:
            self._stats["names_unresolved"] += 1

        return match

    def match_names(self, names: Sequence[str]) -> BatchMatchResponse:
        """
        Resolve many names; unresolved names are reported, not raised.

        Args:
            names: Exercise names to resolve

        Returns:
            BatchMatchResponse with matches and unresolved names
        """
        start_time = time.time()

        matches = batch_match_exercise_names(names, self.catalog.all())
        unresolved = list(dict.fromkeys(name for name in names if name not in matches))

        self._stats["name_lookups"] += len(names)
        self._stats["names_resolved"] += sum(1 for name in names if name in matches)
        self._stats["names_unresolved"] += sum(1 for name in names if name not in matches)

        return BatchMatchResponse(
            matches=matches,
            unresolved=unresolved,
            total_resolved=len(matches),
            execution_time_ms=(time.time() - start_time) * 1000
        )

    def filter_options(self) -> FilterOptions:
        """Label counts for building filter controls."""
        return get_filter_options(self.catalog.all())

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["empty_result_rate"] = stats["empty_results"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["empty_result_rate"] = 0.0

        if stats["name_lookups"] > 0:
            stats["name_resolution_rate"] = stats["names_resolved"] / stats["name_lookups"]
        else:
            stats["name_resolution_rate"] = 0.0

        stats["catalog_stats"] = self.catalog.get_stats()

        return stats

    def clear(self) -> None:
        """Clear the catalog and reset statistics."""
        self.catalog.clear()
        self._stats = self._empty_stats()
