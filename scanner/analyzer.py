"""
Scan Analyzer

Turns recognized label text, plus optional product-database data, into a
ScanResult. Every step is a pure function of its inputs; empty strings are
valid everywhere and no step raises on text input.
"""

import logging
from typing import Optional

import config
from scanner.ingredients.detector import match_ingredients
from scanner.merger import merge_ingredient_texts
from scanner.models import ProductRecord, ScanResult
from scanner.processing.classifier import classify_processing_level
from scanner.rating import calculate_overall_rating

logger = logging.getLogger(__name__)

# Product names are looked for in the first few lines of the label
PRODUCT_NAME_SEARCH_LINES = 5
PRODUCT_NAME_SKIP_WORDS = ("ingredients", "nutrition facts")


def extract_product_name(text: str) -> Optional[str]:
    """
    Guess the product name from label text.

    Takes the first non-empty line among the first few lines that is not an
    ingredients or nutrition facts heading.
    """
    for line in text.split("\n")[:PRODUCT_NAME_SEARCH_LINES]:
        line = line.strip()
        lower_line = line.lower()
        if line and not any(word in lower_line for word in PRODUCT_NAME_SKIP_WORDS):
            return line
    return None


def analyze_scan(
    image_uri: str,
    detected_text: str,
    api_ingredients_text: str = "",
    api_product_name: str = "",
) -> ScanResult:
    """
    Analyze one scan.

    Args:
        image_uri: Opaque reference to the scanned image, passed through
        detected_text: Text recognized on the label (may be empty)
        api_ingredients_text: Ingredients text from the product database (may be empty)
        api_product_name: Product name from the product database (may be empty)

    Returns:
        Fully populated ScanResult
    """
    merged_text = merge_ingredient_texts(detected_text, api_ingredients_text)

    found_ingredients = match_ingredients(merged_text)
    overall_rating = calculate_overall_rating(found_ingredients)
    processing_level = classify_processing_level(merged_text)

    # Prefer the database name, otherwise read it off the label itself
    product_name = api_product_name or extract_product_name(detected_text)

    result = ScanResult(
        image_uri=image_uri,
        detected_text=merged_text,
        found_ingredients=tuple(found_ingredients),
        overall_rating=overall_rating,
        processing_level=processing_level,
        product_name=product_name,
        api_source=config.API_SOURCE_LABEL if api_ingredients_text else None,
    )

    logger.debug(
        "Scan %s: %d ingredients, rating=%s, processing=%s",
        result.id,
        len(found_ingredients),
        overall_rating.value,
        processing_level.value,
    )
    return result


def analyze_product(
    image_uri: str,
    detected_text: str,
    product: Optional[ProductRecord] = None,
) -> ScanResult:
    """Analyze a scan with an optional product record; no record means no database data."""
    if product is None:
        return analyze_scan(image_uri, detected_text)

    return analyze_scan(
        image_uri,
        detected_text,
        api_ingredients_text=product.ingredients_text,
        api_product_name=product.product_name,
    )
