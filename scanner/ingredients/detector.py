import logging
import re
from functools import lru_cache
from typing import List, Optional, Pattern, Sequence

from scanner.ingredients.models import IngredientDefinition, MatchedIngredient
from scanner.ingredients.constants import (
    INGREDIENT_CATALOG,
    BUTTER_NAME,
    BUTTER_EXCLUSION_PATTERNS,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


@lru_cache(maxsize=None)
def term_pattern(term: str) -> Pattern[str]:
    """
    Compile the search pattern for a catalog name or alias.
    - Single words are anchored on word boundaries ("oil" must not hit "boiled")
    - Phrases are matched as plain substrings
    """
    escaped = re.escape(term.lower())
    if _WHITESPACE.search(term):
        return re.compile(escaped, re.IGNORECASE)
    return re.compile(rf"\b{escaped}\b", re.IGNORECASE)


def is_butter_excluded(text: str) -> bool:
    """True if the text mentions a non-dairy butter or a butter flavoring anywhere."""
    return any(pattern.search(text) for pattern in BUTTER_EXCLUSION_PATTERNS)


def find_matching_term(definition: IngredientDefinition, text: str) -> Optional[str]:
    """
    Return the first of the entry's name and aliases found in text, or None.
    The name is always tried before the aliases.
    """
    for term in (definition.name, *definition.aliases):
        if term_pattern(term).search(text):
            return term
    return None


def match_ingredients(
    text: str,
    catalog: Sequence[IngredientDefinition] = INGREDIENT_CATALOG,
) -> List[MatchedIngredient]:
    """
    Detect catalog ingredients in label text.

    Args:
        text: Canonical (merged) label text
        catalog: Ingredient definitions to look for, in reporting order

    Returns:
        One MatchedIngredient per catalog entry found, in catalog order
    """
    if not text:
        return []

    lower_text = text.lower()
    butter_excluded = None  # computed on first Butter hit

    detected: List[MatchedIngredient] = []

    for definition in catalog:
        term = find_matching_term(definition, lower_text)
        if term is None:
            continue

        # Non-dairy butters suppress Butter for the whole text
        if definition.name.lower() == BUTTER_NAME:
            if butter_excluded is None:
                butter_excluded = is_butter_excluded(lower_text)
            if butter_excluded:
                logger.debug("Suppressed %r match on %r: butter exclusion present", definition.name, term)
                continue

        logger.debug("Matched %s (%s) on %r", definition.name, definition.category.value, term)
        detected.append(MatchedIngredient.from_definition(definition))

    return detected
