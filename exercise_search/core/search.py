"""Relevance ranking of catalog exercises against a free-text query."""

from collections import defaultdict
from typing import Dict, List, NamedTuple, Optional, Sequence

from ..models.exercise import ExerciseRecord, FilterOptions, SearchFilters, SearchResult
from .fuzzy_matcher import fuzzy_match
from .normalizer import TextNormalizer

# Terms that mean the user asked for specific equipment.
EQUIPMENT_KEYWORDS = (
    "machine",
    "cable",
    "barbell",
    "dumbbell",
    "kettlebell",
    "band",
    "bodyweight",
    "ez-bar",
)

# Field weights
NAME_WEIGHT = 30
NAME_PREFIX_BONUS = 15
ALIAS_WEIGHT = 25
FUZZY_NAME_WEIGHT = 20
FUZZY_NAME_THRESHOLD = 0.6
PRIMARY_MUSCLE_WEIGHT = 20
CATEGORY_WEIGHT = 15
EQUIPMENT_QUERIED_WEIGHT = 30
EQUIPMENT_WEIGHT = 10
EQUIPMENT_FUZZY_THRESHOLD = 0.7
SECONDARY_MUSCLE_WEIGHT = 5

EQUIPMENT_MISMATCH_PENALTY = 0.5
MULTI_TERM_BONUS = 20
POPULARITY_WEIGHT = 0.003

_normalizer = TextNormalizer()


class _ExerciseFields(NamedTuple):
    """Lowercased searchable fields of one exercise."""

    name: str
    name_stems: List[str]
    aliases: str
    primary_muscles: List[str]
    secondary_muscles: List[str]
    category: str
    equipment: str
    equipment_words: List[str]

    @classmethod
    def from_record(cls, exercise: ExerciseRecord) -> "_ExerciseFields":
        name = exercise.name.lower()
        return cls(
            name=name,
            name_stems=[_normalizer.stem(word) for word in _normalizer.split_words(name)],
            aliases=(exercise.search_aliases or "").lower(),
            primary_muscles=[m.lower() for m in exercise.primary_muscles],
            secondary_muscles=[m.lower() for m in exercise.secondary_muscles],
            category=exercise.category.lower(),
            equipment=exercise.equipment.lower(),
            equipment_words=_normalizer.split_equipment(exercise.equipment),
        )


class TermScore(NamedTuple):
    """Contribution of one query term to one exercise."""

    points: float
    alias_hit: bool
    fuzzy_hit: bool
    equipment_hit: bool


def is_idle_query(query: str) -> bool:
    """True if the query has no usable terms and browses by popularity."""
    return not _normalizer.tokenize_query(query)


def query_mentions_equipment(terms: Sequence[str]) -> bool:
    """True if any term names (or nearly names) an equipment keyword."""
    return any(
        keyword in term or term in keyword or fuzzy_match(term, keyword) >= EQUIPMENT_FUZZY_THRESHOLD
        for term in terms
        for keyword in EQUIPMENT_KEYWORDS
    )


def score_term(term: str, fields: _ExerciseFields, equipment_in_query: bool) -> TermScore:
    """
    Score a single term against every weighted field of an exercise.

    Args:
        term: Lowercased, stemmed query term
        fields: Lowercased exercise fields
        equipment_in_query: Whether the query named equipment

    Returns:
        TermScore with the points earned and which fields were hit
    """
    points = 0.0
    alias_hit = False
    fuzzy_hit = False
    equipment_hit = False

    if term in fields.name:
        points += NAME_WEIGHT
        if fields.name.startswith(term):
            points += NAME_PREFIX_BONUS

    if term in fields.aliases:
        points += ALIAS_WEIGHT
        alias_hit = True

    best_fuzzy = max((fuzzy_match(term, word) for word in fields.name_stems), default=0.0)
    if best_fuzzy > FUZZY_NAME_THRESHOLD:
        points += best_fuzzy * FUZZY_NAME_WEIGHT
        fuzzy_hit = best_fuzzy < 1.0

    for muscle in fields.primary_muscles:
        if term in muscle:
            points += PRIMARY_MUSCLE_WEIGHT

    if term in fields.category:
        points += CATEGORY_WEIGHT

    if term in fields.equipment:
        points += EQUIPMENT_QUERIED_WEIGHT if equipment_in_query else EQUIPMENT_WEIGHT
        equipment_hit = True
    else:
        for word in fields.equipment_words:
            similarity = fuzzy_match(term, word)
            if similarity >= EQUIPMENT_FUZZY_THRESHOLD:
                points += similarity * EQUIPMENT_QUERIED_WEIGHT if equipment_in_query else EQUIPMENT_WEIGHT
                equipment_hit = True
                break

    for muscle in fields.secondary_muscles:
        if term in muscle:
            points += SECONDARY_MUSCLE_WEIGHT

    return TermScore(points, alias_hit, fuzzy_hit, equipment_hit)


def score_exercise(
    exercise: ExerciseRecord,
    terms: Sequence[str],
    equipment_in_query: bool
) -> Optional[SearchResult]:
    """
    Fold the per-term scores of one exercise into a ranked result.

    Returns None when no field matched any term.
    """
    fields = _ExerciseFields.from_record(exercise)
    term_scores = [score_term(term, fields, equipment_in_query) for term in terms]

    score = sum(ts.points for ts in term_scores)

    if equipment_in_query and not any(ts.equipment_hit for ts in term_scores):
        score *= EQUIPMENT_MISMATCH_PENALTY

    if score > 0 and len(terms) > 1:
        score += MULTI_TERM_BONUS

    if score <= 0:
        return None

    score += exercise.popularity_rank * POPULARITY_WEIGHT

    if any(ts.alias_hit for ts in term_scores):
        match_type = "alias"
    elif any(ts.fuzzy_hit for ts in term_scores):
        match_type = "fuzzy"
    else:
        match_type = "exact"

    return SearchResult(exercise=exercise, score=score, match_type=match_type)


def search_exercises(
    exercises: Sequence[ExerciseRecord],
    query: str,
    filters: Optional[SearchFilters] = None
) -> List[SearchResult]:
    """
    Rank catalog exercises against a query.

    An empty query (or one with no usable terms) lists every exercise by
    popularity. Otherwise each exercise is scored over name, aliases,
    fuzzy name words, muscles, category and equipment; exercises that match
    nothing are dropped. Filters narrow the ranked list without touching
    scores or order.

    Args:
        exercises: Catalog to search
        query: Free-text query
        filters: Optional structured filters

    Returns:
        Results sorted by score, highest first
    """
    terms = _normalizer.tokenize_query(query)

    if not terms:
        results = [
            SearchResult(exercise=exercise, score=exercise.popularity_rank, match_type="idle")
            for exercise in exercises
        ]
    else:
        equipment_in_query = query_mentions_equipment(terms)
        results = []
        for exercise in exercises:
            result = score_exercise(exercise, terms, equipment_in_query)
            if result is not None:
                results.append(result)

    results.sort(key=lambda r: r.score, reverse=True)

    if filters is not None and not filters.is_empty():
        return apply_filters(results, filters)
    return results


def apply_filters(results: Sequence[SearchResult], filters: SearchFilters) -> List[SearchResult]:
    """
    Keep the results that pass every filter, preserving order.

    Muscle groups must all be worked (primary or secondary, substring).
    Equipment needs any one label to match (substring). Difficulty and
    category must equal one of the allowed values. All comparisons ignore case.
    """
    muscle_groups = [m.lower() for m in filters.muscle_groups]
    equipment = [e.lower() for e in filters.equipment]
    difficulty = {d.lower() for d in filters.difficulty}
    category = {c.lower() for c in filters.category}

    def keep(exercise: ExerciseRecord) -> bool:
        if muscle_groups:
            worked = [m.lower() for m in exercise.primary_muscles + exercise.secondary_muscles]
            if not all(any(group in m for m in worked) for group in muscle_groups):
                return False

        if equipment:
            label = exercise.equipment.lower()
            if not any(e in label for e in equipment):
                return False

        if difficulty and exercise.difficulty.lower() not in difficulty:
            return False

        if category and exercise.category.lower() not in category:
            return False

        return True

    return [result for result in results if keep(result.exercise)]


def get_filter_options(exercises: Sequence[ExerciseRecord]) -> FilterOptions:
    """
    Count how often each filterable label occurs in a catalog.

    Primary and secondary muscles share one tally.
    """
    muscles: Dict[str, int] = defaultdict(int)
    equipment: Dict[str, int] = defaultdict(int)
    difficulty: Dict[str, int] = defaultdict(int)
    category: Dict[str, int] = defaultdict(int)

    for exercise in exercises:
        for muscle in exercise.primary_muscles + exercise.secondary_muscles:
            muscles[muscle] += 1
        equipment[exercise.equipment] += 1
        difficulty[exercise.difficulty] += 1
        category[exercise.category] += 1

    return FilterOptions(
        muscles=dict(muscles),
        equipment=dict(equipment),
        difficulty=dict(difficulty),
        category=dict(category),
    )
