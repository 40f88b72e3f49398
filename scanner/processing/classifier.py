import logging
import re
from typing import Iterable

from scanner.models import ProcessingLevel
from scanner.processing.constants import INDICATORS, IndicatorSet

logger = logging.getLogger(__name__)

# Below this many words a label is treated as a short, simple ingredient list
MIN_WORDS_FOR_STRUCTURE = 10
# More commas than this means a multi-ingredient product
MAX_COMMAS_MINIMALLY_PROCESSED = 3


def _contains_any(text: str, indicators: Iterable[str]) -> bool:
    return any(indicator.lower() in text for indicator in indicators)


def classify_processing_level(text: str, indicators: IndicatorSet = INDICATORS) -> ProcessingLevel:
    """
    Assign a processing tier to label text.

    Indicator sets are checked in priority order; the first tier with any
    indicator present wins. Without indicators the tier falls back to the
    size and shape of the ingredient list.
    Never returns UNPROCESSED.
    """
    lower_text = text.lower()

    if _contains_any(lower_text, indicators.ultra_processed):
        level = ProcessingLevel.ULTRA_PROCESSED
    elif _contains_any(lower_text, indicators.processed):
        level = ProcessingLevel.PROCESSED
    elif _contains_any(lower_text, indicators.processed_culinary):
        level = ProcessingLevel.PROCESSED_CULINARY
    elif len(re.split(r"\s+", lower_text)) < MIN_WORDS_FOR_STRUCTURE:
        level = ProcessingLevel.MINIMALLY_PROCESSED
    elif lower_text.count(",") > MAX_COMMAS_MINIMALLY_PROCESSED:
        level = ProcessingLevel.PROCESSED
    else:
        level = ProcessingLevel.MINIMALLY_PROCESSED

    logger.debug("Classified text as %s", level.value)
    return level
