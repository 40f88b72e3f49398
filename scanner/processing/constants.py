import json
import logging
from pathlib import Path
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

import config

logger = logging.getLogger(__name__)


class IndicatorSet(BaseModel):
    """
    Substrings signalling each processing tier, highest priority first:
    ultra_processed > processed > processed_culinary.
    """
    model_config = ConfigDict(frozen=True)

    ultra_processed: Tuple[str, ...] = ()
    processed: Tuple[str, ...] = ()
    processed_culinary: Tuple[str, ...] = ()

    @field_validator("ultra_processed", "processed", "processed_culinary")
    def check_no_blank_indicators(cls, v):
        # A blank indicator would be contained in every text
        if any(not indicator.strip() for indicator in v):
            raise ValueError("Indicators must be non-empty strings")
        return v


def load_indicators(path: Union[str, Path]) -> IndicatorSet:
    """
    Load indicator sets from a JSON file.
    Raises on a missing or malformed file so bad configuration fails at start-up.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    indicators = IndicatorSet.model_validate(data)
    logger.info(
        "Loaded processing indicators from %s (%d ultra-processed, %d processed, %d culinary)",
        path,
        len(indicators.ultra_processed),
        len(indicators.processed),
        len(indicators.processed_culinary),
    )
    return indicators


# Loaded once per process, read-only afterwards
INDICATORS: IndicatorSet = load_indicators(config.PROCESSING_INDICATORS_PATH)
