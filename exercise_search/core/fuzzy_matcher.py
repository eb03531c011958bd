"""Edit-distance scoring for typo tolerance and approximate matching."""

from typing import Iterable, List, Optional

from rapidfuzz import fuzz, process
from rapidfuzz.distance import Levenshtein

# Similarity for 0, 1 and 2 edits. Each extra edit costs more than the last.
FUZZY_SCORES = {0: 1.0, 1: 0.9, 2: 0.7}


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``a`` into ``b``.

    Case-sensitive; callers lowercase first.
    """
    return Levenshtein.distance(a, b)


def fuzzy_match(query: str, target: str, max_distance: int = 2) -> float:
    """
    Map the edit distance between two strings onto a similarity score.

    Args:
        query: Search term
        target: Word being compared against
        max_distance: Distances above this score 0.0

    Returns:
        1.0 for an exact match, 0.9 for one edit, 0.7 for two, else 0.0
    """
    distance = levenshtein_distance(query.lower(), target.lower())
    if distance > max_distance:
        return 0.0
    return FUZZY_SCORES.get(distance, 0.0)


class FuzzyMatcher:
    """Suggests catalog names for queries that produced no results."""

    def __init__(self, cutoff: float = 60.0) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            cutoff: Minimum rapidfuzz WRatio (0-100) for a suggestion
        """
        self.cutoff = cutoff

    def suggest_names(
        self,
        query: str,
        names: Iterable[str],
        max_suggestions: int = 5,
        cutoff: Optional[float] = None
    ) -> List[str]:
        """
        Suggest exercise names for a query ("did you mean").

        Args:
            query: Query to get suggestions for
            names: Candidate exercise names
            max_suggestions: Maximum number of suggestions
            cutoff: Custom cutoff (uses instance cutoff if None)

        Returns:
            Candidate names, best first, without duplicates
        """
        if not query or not query.strip():
            return []

        candidates = list(dict.fromkeys(names))
        if not candidates:
            return []

        suggestions = process.extract(
            query.lower(),
            candidates,
            scorer=fuzz.WRatio,
            processor=str.lower,
            limit=max_suggestions,
            score_cutoff=self.cutoff if cutoff is None else cutoff
        )

        return [suggestion[0] for suggestion in suggestions]
