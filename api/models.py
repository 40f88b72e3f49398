from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from scanner.ingredients.models import IngredientCategory
from scanner.models import ProductRecord, ScanResult


class ScanRequest(BaseModel):
    imageUri: str = ""
    detectedText: str = ""  # empty when text recognition failed
    product: Optional[ProductRecord] = None  # None when the lookup found nothing


class OpenFoodFactsScanRequest(BaseModel):
    imageUri: str = ""
    detectedText: str = ""
    payload: Optional[Dict[str, Any]] = None  # raw Open Food Facts product response


class IndicatorsResponse(BaseModel):
    ultraProcessed: List[str]
    processed: List[str]
    processedCulinary: List[str]


class ScanSummaryResponse(BaseModel):
    scan: ScanResult
    categoryCounts: Dict[IngredientCategory, int]  # every category, zero when absent
    processingLevelLabel: str
