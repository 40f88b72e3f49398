import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from scanner.ingredients.models import MatchedIngredient

logger = logging.getLogger(__name__)


def generate_id() -> str:
    return str(uuid.uuid4())


class OverallRating(str, Enum):
    SAFE = "safe"
    CAUTION = "caution"
    AVOID = "avoid"


class ProcessingLevel(str, Enum):
    UNPROCESSED = "unprocessed"
    MINIMALLY_PROCESSED = "minimally_processed"
    PROCESSED_CULINARY = "processed_culinary"
    PROCESSED = "processed"
    ULTRA_PROCESSED = "ultra_processed"

    @property
    def label(self) -> str:
        """Human readable tier name."""
        return _PROCESSING_LEVEL_LABELS[self]


_PROCESSING_LEVEL_LABELS = {
    ProcessingLevel.UNPROCESSED: "Unprocessed",
    ProcessingLevel.MINIMALLY_PROCESSED: "Minimally Processed",
    ProcessingLevel.PROCESSED_CULINARY: "Processed Culinary",
    ProcessingLevel.PROCESSED: "Processed",
    ProcessingLevel.ULTRA_PROCESSED: "Ultra-Processed",
}


class ProductRecord(BaseModel):
    """Product data returned by the external product database."""
    model_config = ConfigDict(frozen=True)

    product_name: str = ""
    ingredients_text: str = ""

    @classmethod
    def from_open_food_facts(cls, payload: Dict[str, Any]) -> Optional["ProductRecord"]:
        """
        Normalize an already-fetched Open Food Facts v2 product response.

        Returns None when the payload reports the product as not found or
        the product record is malformed. Fields are read from the nested
        "product" object when present, otherwise from the top level.
        Ingredients fall back to the English-specific field.
        """
        if not payload or not isinstance(payload, dict):
            return None

        if payload.get("status") != 1 and payload.get("status_verbose") != "product found":
            return None

        source = payload.get("product")
        if source is None:
            source = payload
        if not isinstance(source, dict):
            logger.warning("Malformed Open Food Facts product record: expected an object, got %s", type(source).__name__)
            return None

        try:
            return cls(
                product_name=source.get("product_name") or "",
                ingredients_text=(
                    source.get("ingredients_text")
                    or source.get("ingredients_text_en")
                    or ""
                ),
            )
        except ValidationError as e:
            logger.warning("Malformed Open Food Facts product record: %s", e)
            return None


class ScanResult(BaseModel):
    """Complete result of analyzing one scan. Immutable once built."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=generate_id)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    image_uri: str
    detected_text: str
    found_ingredients: Tuple[MatchedIngredient, ...] = ()
    overall_rating: OverallRating
    processing_level: ProcessingLevel
    product_name: Optional[str] = None
    api_source: Optional[str] = None
