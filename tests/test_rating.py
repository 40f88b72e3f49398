"""
Rating and merge unit tests
"""

import pytest

from scanner.ingredients.models import IngredientCategory, MatchedIngredient, Severity
from scanner.merger import DATABASE_SECTION_HEADER, merge_ingredient_texts
from scanner.models import OverallRating
from scanner.rating import calculate_overall_rating, summarize_categories


def _match(severity, category=IngredientCategory.OTHER, name="x"):
    return MatchedIngredient(name=name, category=category, severity=severity, description="")


class TestOverallRating:
    """Worst severity decides the rating"""

    def test_empty_is_safe(self):
        assert calculate_overall_rating([]) == OverallRating.SAFE

    @pytest.mark.parametrize("severities,expected", [
        ([Severity.HIGH], OverallRating.AVOID),
        ([Severity.LOW, Severity.MEDIUM, Severity.HIGH], OverallRating.AVOID),
        ([Severity.MEDIUM], OverallRating.CAUTION),
        ([Severity.NEUTRAL, Severity.MEDIUM, Severity.LOW], OverallRating.CAUTION),
        ([Severity.LOW], OverallRating.SAFE),
        ([Severity.NEUTRAL, Severity.LOW], OverallRating.SAFE),
    ])
    def test_precedence(self, severities, expected):
        assert calculate_overall_rating([_match(s) for s in severities]) == expected

    def test_order_does_not_matter(self):
        matches = [_match(Severity.MEDIUM), _match(Severity.HIGH)]
        assert calculate_overall_rating(matches) == calculate_overall_rating(list(reversed(matches)))


class TestSummarizeCategories:
    """Per-category counts"""

    def test_counts(self):
        matches = [
            _match(Severity.HIGH, IngredientCategory.THICKENER),
            _match(Severity.HIGH, IngredientCategory.EMULSIFIER),
            _match(Severity.HIGH, IngredientCategory.SEED_OIL),
            _match(Severity.MEDIUM, IngredientCategory.SEED_OIL),
        ]
        counts = summarize_categories(matches)
        assert counts[IngredientCategory.SEED_OIL] == 2
        assert counts[IngredientCategory.THICKENER] == 1
        assert counts[IngredientCategory.EMULSIFIER] == 1
        assert counts[IngredientCategory.FOOD_COLOR] == 0
        assert list(counts) == list(IngredientCategory)

    def test_empty(self):
        assert set(summarize_categories([]).values()) == {0}


class TestMergeTexts:
    """Label and database text merging"""

    def test_empty_database_text(self):
        assert merge_ingredient_texts("A", "") == "A"

    def test_empty_label_text(self):
        assert merge_ingredient_texts("", "B") == "B"

    def test_both_empty(self):
        assert merge_ingredient_texts("", "") == ""

    def test_both_present(self):
        merged = merge_ingredient_texts("A", "B")
        assert merged == f"A\n\n{DATABASE_SECTION_HEADER}\nB"
        assert merged.index("B") > merged.index(DATABASE_SECTION_HEADER)
        assert merged.startswith("A")
