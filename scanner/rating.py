from typing import Dict, Sequence

from scanner.ingredients.models import IngredientCategory, MatchedIngredient, Severity
from scanner.models import OverallRating

# Rating implied by each severity on its own
SEVERITY_TO_RATING: Dict[Severity, OverallRating] = {
    Severity.HIGH: OverallRating.AVOID,
    Severity.MEDIUM: OverallRating.CAUTION,
    Severity.LOW: OverallRating.SAFE,
    Severity.NEUTRAL: OverallRating.SAFE,
}

# Worst first
_RATING_PRECEDENCE = (OverallRating.AVOID, OverallRating.CAUTION, OverallRating.SAFE)


def calculate_overall_rating(matches: Sequence[MatchedIngredient]) -> OverallRating:
    """
    Reduce matched ingredients to one rating: any high severity → avoid,
    else any medium → caution, else safe (including no matches).
    """
    ratings = {SEVERITY_TO_RATING[m.severity] for m in matches}
    for rating in _RATING_PRECEDENCE:
        if rating in ratings:
            return rating
    return OverallRating.SAFE


def summarize_categories(matches: Sequence[MatchedIngredient]) -> Dict[IngredientCategory, int]:
    """Count matches per category. Every category is present, zero if unmatched."""
    counts = {category: 0 for category in IngredientCategory}
    for m in matches:
        counts[m.category] += 1
    return counts
