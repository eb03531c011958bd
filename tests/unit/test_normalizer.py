"""Unit tests for stemming, tokenizing and name normalization."""

import pytest
from exercise_search.core.normalizer import EQUIPMENT_PREFIXES, TextNormalizer


class TestTextNormalizer:
    """Test cases for the TextNormalizer class."""
    
    @pytest.fixture
    def normalizer(self):
        return TextNormalizer()
    
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("flies", "fly"),
            ("presses", "press"),
            ("rows", "row"),
            ("pressing", "press"),
            ("curl", "curl"),
            ("BENCH", "bench"),
        ],
    )
    def test_stem(self, normalizer, word, expected):
        assert normalizer.stem(word) == expected
    
    def test_stem_first_rule_wins(self, normalizer):
        """Rules are not applied cumulatively."""
        # "-es" wins over "-s"
        assert normalizer.stem("lunges") == "lung"
        # a bare "press" loses one trailing "s"
        assert normalizer.stem("press") == "pres"
    
    def test_stem_length_guards(self, normalizer):
        assert normalizer.stem("ties") == "ti"  # too short for -ies, falls to -es
        assert normalizer.stem("yes") == "ye"  # too short for -es, falls to -s
        assert normalizer.stem("as") == "as"
        assert normalizer.stem("sing") == "sing"
    
    def test_tokenize_query(self, normalizer):
        assert normalizer.tokenize_query("  Bench   Presses ") == ["bench", "press"]
    
    def test_tokenize_keeps_hyphenated_terms(self, normalizer):
        assert normalizer.tokenize_query("EZ-Bar curls") == ["ez-bar", "curl"]
    
    def test_tokenize_empty(self, normalizer):
        assert normalizer.tokenize_query("") == []
        assert normalizer.tokenize_query("   \t ") == []
    
    def test_tokenize_drops_bare_punctuation(self, normalizer):
        assert normalizer.tokenize_query("!!! - ...") == []
        assert normalizer.tokenize_query("squat !") == ["squat"]
    
    def test_split_equipment(self, normalizer):
        assert normalizer.split_equipment("Smith Machine") == ["smith", "machine"]
        assert normalizer.split_equipment("EZ-Bar") == ["ez", "bar"]
        assert normalizer.split_equipment("") == []
    
    def test_normalize_strips_prefix(self, normalizer):
        assert normalizer.normalize_exercise_name("Barbell Squat") == "squat"
        assert normalizer.normalize_exercise_name("EZ Bar Curl") == "curl"
        assert normalizer.normalize_exercise_name("Trap Bar Deadlift") == "deadlift"
    
    def test_normalize_multi_word_prefix(self, normalizer):
        assert normalizer.normalize_exercise_name("  Smith Machine   Squat ") == "squat"
    
    def test_normalize_prefix_needs_following_word(self, normalizer):
        """A prefix only counts as a whole leading token."""
        assert normalizer.normalize_exercise_name("Barbell") == "barbell"
        assert normalizer.normalize_exercise_name("Cabled Row") == "cabled row"
    
    def test_normalize_prefixes_in_list_order(self, normalizer):
        # "cable" is stripped, then "machine", which comes after it in the list
        assert normalizer.normalize_exercise_name("Cable Machine Fly") == "fly"
        # "barbell" comes before "dumbbell", so it is not checked again
        assert normalizer.normalize_exercise_name("Dumbbell Barbell Row") == "barbell row"
    
    def test_normalize_collapses_whitespace(self, normalizer):
        assert normalizer.normalize_exercise_name("Bench\t  Press") == "bench press"
    
    def test_normalize_empty(self, normalizer):
        assert normalizer.normalize_exercise_name("") == ""
    
    def test_prefix_list_is_fixed(self):
        assert isinstance(EQUIPMENT_PREFIXES, tuple)
        assert "smith machine" in EQUIPMENT_PREFIXES
