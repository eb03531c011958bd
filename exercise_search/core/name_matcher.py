"""Resolve free-form exercise names (templates, imports) onto catalog entries.

Resolution escalates through four tiers and stops at the first that finds
anything:

1. exact      - case-insensitive equality
2. normalized - equality after stripping equipment prefixes
3. partial    - containment, preferring the closest name length
4. fuzzy      - Levenshtein distance of 1 or 2
"""

from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from ..models.exercise import ExerciseRecord
from .fuzzy_matcher import levenshtein_distance
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)

PARTIAL_MATCH_SCALE = 80
FUZZY_MAX_DISTANCE = 2
FUZZY_BASE_SCORE = 100
FUZZY_DISTANCE_COST = 10

_normalizer = TextNormalizer()


def _exact_match(search_lower: str, exercises: Sequence[ExerciseRecord]) -> Optional[ExerciseRecord]:
    for exercise in exercises:
        if exercise.name.lower() == search_lower:
            return exercise
    return None


def _normalized_match(
    search_normalized: str,
    exercises: Sequence[ExerciseRecord]
) -> Optional[ExerciseRecord]:
    for exercise in exercises:
        if _normalizer.normalize_exercise_name(exercise.name) == search_normalized:
            return exercise
    return None


def _partial_match(
    search_name: str,
    search_lower: str,
    search_normalized: str,
    exercises: Sequence[ExerciseRecord]
) -> Optional[ExerciseRecord]:
    """Containment match; the candidate closest in length to the input wins."""
    candidates: List[Tuple[ExerciseRecord, float]] = []

    for exercise in exercises:
        exercise_lower = exercise.name.lower()
        exercise_normalized = _normalizer.normalize_exercise_name(exercise.name)

        if search_lower in exercise_lower or search_normalized in exercise_normalized:
            length_diff = abs(len(exercise.name) - len(search_name))
            candidates.append((exercise, PARTIAL_MATCH_SCALE / (length_diff + 1)))

    if not candidates:
        return None

    # Stable sort: equal scores keep catalog order
    candidates.sort(key=lambda c: c[1], reverse=True)
    return candidates[0][0]


def _fuzzy_match(
    search_lower: str,
    search_normalized: str,
    exercises: Sequence[ExerciseRecord]
) -> Optional[ExerciseRecord]:
    """Typo-tolerant match within two edits of the raw or normalized name."""
    candidates: List[Tuple[ExerciseRecord, int, int]] = []

    for exercise in exercises:
        distance = min(
            levenshtein_distance(search_lower, exercise.name.lower()),
            levenshtein_distance(search_normalized, _normalizer.normalize_exercise_name(exercise.name)),
        )

        if 0 < distance <= FUZZY_MAX_DISTANCE:
            score = FUZZY_BASE_SCORE - distance * FUZZY_DISTANCE_COST
            candidates.append((exercise, distance, score))

    if not candidates:
        return None

    candidates.sort(key=lambda c: (c[1], -c[2]))
    return candidates[0][0]


def find_exercise_by_name(
    search_name: str,
    exercises: Sequence[ExerciseRecord]
) -> Optional[ExerciseRecord]:
    """
    Find the catalog exercise a free-form name refers to.

    Args:
        search_name: Exercise name to resolve, e.g. "Barbell Bench Press"
        exercises: Catalog to search; earlier entries win ties

    Returns:
        The matched exercise, or None if no tier matched
    """
    if not search_name or not search_name.strip() or not exercises:
        return None

    search_lower = search_name.lower().strip()
    search_normalized = _normalizer.normalize_exercise_name(search_name)

    return (
        _exact_match(search_lower, exercises)
        or _normalized_match(search_normalized, exercises)
        or _partial_match(search_name, search_lower, search_normalized, exercises)
        or _fuzzy_match(search_lower, search_normalized, exercises)
    )


def batch_match_exercise_names(
    exercise_names: Sequence[str],
    exercises: Sequence[ExerciseRecord]
) -> Dict[str, str]:
    """
    Resolve many names to exercise ids, e.g. for a CSV import.

    Each name is resolved independently. Names that cannot be resolved are
    left out of the result and logged as warnings; the batch never fails
    because of them.

    Args:
        exercise_names: Names to resolve
        exercises: Catalog to search

    Returns:
        Mapping of name to exercise id, in input order
    """
    name_to_id: Dict[str, str] = {}

    for name in exercise_names:
        match = find_exercise_by_name(name, exercises)
        if match is not None:
            name_to_id[name] = match.id
        else:
            logger.warning("No exercise match found", name=name)

    return name_to_id
