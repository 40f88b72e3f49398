"""
Ingredient detector unit tests

- Every catalog entry is detected by its own name
- Case-insensitive matching and word-boundary rules
- Global Butter suppression
- One detection per entry, reported in catalog order
"""

import pytest

from scanner.ingredients.constants import INGREDIENT_CATALOG, CATALOG_BY_CATEGORY
from scanner.ingredients.detector import (
    find_matching_term,
    is_butter_excluded,
    match_ingredients,
    term_pattern,
)
from scanner.ingredients.models import IngredientCategory, IngredientDefinition, Severity


def _names(matches):
    return [m.name for m in matches]


def _by_name(name):
    return next(d for d in INGREDIENT_CATALOG if d.name == name)


class TestCatalogEntries:
    """Each catalog entry is found by its own name"""

    @pytest.mark.parametrize("definition", INGREDIENT_CATALOG, ids=lambda d: f"{d.name}-{d.category.value}")
    def test_name_detected(self, definition):
        text = f"Ingredients: ({definition.name}), salt."
        matches = match_ingredients(text)
        own = [m for m in matches if m.name == definition.name and m.category == definition.category]
        assert len(own) == 1
        assert own[0].severity == definition.severity
        assert own[0].description == definition.description
        assert own[0].aliases == definition.aliases

    def test_duplicate_carrageenan_reported_for_both_roles(self):
        matches = match_ingredients("Milk, Carrageenan")
        carrageenan = [m for m in matches if m.name == "Carrageenan"]
        assert [m.category for m in carrageenan] == [
            IngredientCategory.THICKENER,
            IngredientCategory.EMULSIFIER,
        ]

    def test_every_category_lookup_follows_catalog(self):
        for category, entries in CATALOG_BY_CATEGORY.items():
            assert all(e.category == category for e in entries)
        assert CATALOG_BY_CATEGORY[IngredientCategory.OTHER] == ()


class TestMatchingRules:
    """Case handling, boundaries and aliases"""

    def test_case_insensitive(self):
        upper = match_ingredients("SUNFLOWER OIL")
        lower = match_ingredients("sunflower oil")
        assert upper == lower
        assert _names(upper) == ["Sunflower Oil"]

    def test_single_word_respects_word_boundary(self):
        definition = IngredientDefinition(
            name="oil", category=IngredientCategory.OTHER, severity=Severity.LOW, description="test"
        )
        assert match_ingredients("reboiled water", catalog=[definition]) == []
        assert _names(match_ingredients("water, oil", catalog=[definition])) == ["oil"]

    def test_phrase_has_no_boundary(self):
        definition = IngredientDefinition(
            name="corn oil", category=IngredientCategory.OTHER, severity=Severity.LOW, description="test"
        )
        assert _names(match_ingredients("popcorn oils", catalog=[definition])) == ["corn oil"]

    def test_alias_match(self):
        assert _names(match_ingredients("Contains E129 and water")) == ["Red 40"]

    def test_alias_with_punctuation_is_literal(self):
        # Terms are literal text, so the parenthesized form is required (unlike an unescaped regex)
        text = "polyoxyethylene (20) sorbitan monooleate"
        assert _names(match_ingredients(text)) == ["Polysorbate 80"]
        assert match_ingredients("polyoxyethylene 20 sorbitan monooleate") == []

    def test_name_tried_before_aliases(self):
        definition = _by_name("Soybean Oil")
        assert find_matching_term(definition, "vegetable oil, soybean oil") == "Soybean Oil"
        assert find_matching_term(definition, "vegetable oil") == "vegetable oil"
        assert find_matching_term(definition, "water") is None

    def test_single_word_alias_not_inside_word(self):
        # "Equal" is an Aspartame alias
        assert match_ingredients("inequality") == []
        assert _names(match_ingredients("sweetened with equal")) == ["Aspartame"]

    def test_term_pattern_is_cached(self):
        assert term_pattern("Lard") is term_pattern("Lard")

    def test_empty_text(self):
        assert match_ingredients("") == []


class TestMatchCardinalityAndOrder:
    """At most one match per entry, catalog order"""

    def test_one_match_per_entry(self):
        text = "Soybean Oil, vegetable oil, refined soybean oil"
        assert _names(match_ingredients(text)) == ["Soybean Oil"]

    def test_catalog_order_not_text_order(self):
        matches = match_ingredients("Aspartame, Red 40, Safflower Oil")
        assert _names(matches) == ["Safflower Oil", "Red 40", "Aspartame"]

    def test_label_scenario(self):
        matches = match_ingredients("INGREDIENTS: Water, Soybean Oil, Red 40, Natural Flavors")
        assert [(m.name, m.category, m.severity) for m in matches] == [
            ("Soybean Oil", IngredientCategory.SEED_OIL, Severity.HIGH),
            ("Red 40", IngredientCategory.FOOD_COLOR, Severity.HIGH),
            ("Natural Flavors", IngredientCategory.NATURAL_FLAVOR, Severity.MEDIUM),
        ]


class TestButterExclusion:
    """Non-dairy butters suppress Butter for the whole text"""

    def test_plain_butter_detected(self):
        assert _names(match_ingredients("Flour, Butter, Eggs")) == ["Butter"]

    def test_butter_alias_detected(self):
        assert _names(match_ingredients("cultured cream")) == []
        assert _names(match_ingredients("grass-fed butter")) == ["Butter"]

    @pytest.mark.parametrize("phrase", [
        "cocoa butter",
        "shea butter",
        "almond butter",
        "peanut butter",
        "cashew butter",
        "mango butter",
        "sunflower seed butter",
        "nut butter",
        "natural butter flavor",
        "butter flavor",
        "flavored with butter",
    ])
    def test_exclusion_phrase_suppresses(self, phrase):
        assert "Butter" not in _names(match_ingredients(phrase))

    def test_suppression_is_global(self):
        text = "Butter, Sugar, Eggs. Coating: Cocoa Butter"
        assert "Butter" not in _names(match_ingredients(text))

    def test_exclusion_allows_whitespace_runs(self):
        assert is_butter_excluded("cocoa\n  butter")
        assert not is_butter_excluded("cocoa, butter")

    def test_suppression_only_affects_butter(self):
        text = "Cocoa Butter, Palm Oil"
        assert _names(match_ingredients(text)) == ["Palm Oil"]

    def test_butter_and_cheese_flavor_counts_as_natural_flavor(self):
        matches = match_ingredients("natural butter and cheese flavor")
        assert _names(matches) == ["Natural Flavors"]
