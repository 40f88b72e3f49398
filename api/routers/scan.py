import logging
from fastapi import APIRouter
from typing import List, Optional

from api.models import IndicatorsResponse, OpenFoodFactsScanRequest, ScanRequest, ScanSummaryResponse
from scanner.analyzer import analyze_product
from scanner.ingredients.constants import CATALOG_BY_CATEGORY, INGREDIENT_CATALOG
from scanner.ingredients.models import IngredientCategory, IngredientDefinition
from scanner.models import ProductRecord, ScanResult
from scanner.processing.constants import INDICATORS
from scanner.rating import summarize_categories

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["scans"])


@router.post("/scans/analyze", response_model=ScanResult)
async def analyze(data: ScanRequest):
    """Analyze recognized label text with an optional product record."""
    return analyze_product(data.imageUri, data.detectedText, data.product)


@router.post("/scans/analyze/open-food-facts", response_model=ScanResult)
async def analyze_open_food_facts(data: OpenFoodFactsScanRequest):
    """Analyze recognized label text with a raw Open Food Facts response."""
    product = ProductRecord.from_open_food_facts(data.payload) if data.payload else None
    if data.payload and product is None:
        logger.info("No usable product in Open Food Facts payload; analyzing label text only")
    return analyze_product(data.imageUri, data.detectedText, product)


@router.post("/scans/summary", response_model=ScanSummaryResponse)
async def summarize(data: ScanRequest):
    """Analyze a scan and add the per-category breakdown and processing tier name."""
    result = analyze_product(data.imageUri, data.detectedText, data.product)
    return ScanSummaryResponse(
        scan=result,
        categoryCounts=summarize_categories(result.found_ingredients),
        processingLevelLabel=result.processing_level.label,
    )


@router.get("/ingredients", response_model=List[IngredientDefinition])
async def list_ingredients(category: Optional[IngredientCategory] = None):
    """List catalog ingredients, optionally restricted to one category."""
    if category is None:
        return list(INGREDIENT_CATALOG)
    return list(CATALOG_BY_CATEGORY[category])


@router.get("/processing-indicators", response_model=IndicatorsResponse)
async def processing_indicators():
    """Indicator substrings used to classify processing level."""
    return IndicatorsResponse(
        ultraProcessed=list(INDICATORS.ultra_processed),
        processed=list(INDICATORS.processed),
        processedCulinary=list(INDICATORS.processed_culinary),
    )
