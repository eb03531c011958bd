"""Shared fixtures for the exercise search tests."""

import pytest

from exercise_search.models.exercise import ExerciseRecord


@pytest.fixture
def make_exercise():
    """Build an ExerciseRecord with neutral defaults for unused fields."""
    counter = {"n": 0}

    def _make(name, **overrides):
        counter["n"] += 1
        fields = {
            "id": f"ex-{counter['n']}",
            "name": name,
            "category": "Misc",
            "equipment": "Other",
            "difficulty": "Beginner",
            "primary_muscles": [],
            "secondary_muscles": [],
            "search_aliases": None,
            "popularity_rank": 0,
        }
        fields.update(overrides)
        return ExerciseRecord(**fields)

    return _make
