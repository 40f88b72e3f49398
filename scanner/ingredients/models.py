from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict


class IngredientCategory(str, Enum):
    SEED_OIL = "seed_oil"
    FRUIT_BASED_OIL = "fruit_based_oil"
    ANIMAL_FAT = "animal_fat"
    THICKENER = "thickener"
    EMULSIFIER = "emulsifier"
    FOOD_COLOR = "food_color"
    PRESERVATIVE = "preservative"
    NATURAL_FLAVOR = "natural_flavor"
    PHOSPHATE = "phosphate"
    ARTIFICIAL_SWEETENER = "artificial_sweetener"
    OTHER = "other"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NEUTRAL = "neutral"


class IngredientDefinition(BaseModel):
    """A known ingredient of concern and its risk metadata."""
    model_config = ConfigDict(frozen=True)

    name: str
    category: IngredientCategory
    severity: Severity
    description: str
    aliases: Tuple[str, ...] = ()


class MatchedIngredient(IngredientDefinition):
    """Catalog entry found in a scanned text."""

    @classmethod
    def from_definition(cls, definition: IngredientDefinition) -> "MatchedIngredient":
        return cls(**definition.model_dump())
