"""Text normalization utilities for consistent exercise name processing."""

import re
from typing import List

# Leading equipment tokens removed when reconciling exercise names.
# Scanned in this order; each one that matches is stripped in turn.
EQUIPMENT_PREFIXES = (
    "barbell",
    "dumbbell",
    "cable",
    "machine",
    "smith machine",
    "smith",
    "kettlebell",
    "resistance band",
    "band",
    "ez-bar",
    "ez bar",
    "trap bar",
)


class TextNormalizer:
    """Handles stemming, tokenizing and name normalization."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        self.whitespace_regex = re.compile(r'\s+')
        self.equipment_delimiter_regex = re.compile(r'[\s-]+')
        self.alphanumeric_regex = re.compile(r'[^\W_]')

    def stem(self, word: str) -> str:
        """
        Strip common English suffixes so plurals and gerunds line up.

        "presses" -> "press", "flies" -> "fly", "rows" -> "row",
        "pressing" -> "press". First matching rule wins.

        Args:
            word: A single word

        Returns:
            Lowercased stem
        """
        lower = word.lower()

        if lower.endswith('ies') and len(lower) > 4:
            return lower[:-3] + 'y'
        if lower.endswith('es') and len(lower) > 3:
            return lower[:-2]
        if lower.endswith('s') and len(lower) > 2:
            return lower[:-1]
        if lower.endswith('ing') and len(lower) > 4:
            return lower[:-3]

        return lower

    def tokenize_query(self, query: str) -> List[str]:
        """
        Split a search query into lowercase, stemmed terms.

        Tokens without a single letter or digit are dropped, so a query of
        bare punctuation produces no terms.

        Args:
            query: Raw query text

        Returns:
            List of terms in query order
        """
        if not query:
            return []

        terms = []
        for token in query.lower().split():
            if not self.alphanumeric_regex.search(token):
                continue
            term = self.stem(token)
            if term:
                terms.append(term)

        return terms

    def split_words(self, text: str) -> List[str]:
        """Split lowercase text on whitespace."""
        return text.lower().split()

    def split_equipment(self, label: str) -> List[str]:
        """Split an equipment label on whitespace and hyphens."""
        return [word for word in self.equipment_delimiter_regex.split(label.lower()) if word]

    def normalize_exercise_name(self, name: str) -> str:
        """
        Normalize an exercise name for reconciliation.

        Lowercases, trims, removes leading equipment prefixes and collapses
        runs of whitespace, so "Barbell  Squat" and "squat" compare equal.

        Args:
            name: Exercise name as written in a template or import

        Returns:
            Normalized name
        """
        if not name:
            return ""

        normalized = name.lower().strip()

        for prefix in EQUIPMENT_PREFIXES:
            if normalized.startswith(prefix + ' '):
                normalized = normalized[len(prefix) + 1:]

        return self.whitespace_regex.sub(' ', normalized).strip()
