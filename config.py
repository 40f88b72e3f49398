import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
# Find .env file in project root (parent of api/, scanner/, etc.)
project_root = Path(__file__).parent
load_dotenv(project_root / '.env')

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Label reported as ScanResult.api_source when database text was merged in
API_SOURCE_LABEL = os.getenv("API_SOURCE_LABEL", "Open Food Facts")

# Handle PROCESSING_INDICATORS_PATH - convert relative path to absolute
_indicators_path = os.getenv("PROCESSING_INDICATORS_PATH")
if _indicators_path:
    indicators_path = Path(_indicators_path)
    if not indicators_path.is_absolute():
        # Convert relative path to absolute from project root
        indicators_path = project_root / _indicators_path
    PROCESSING_INDICATORS_PATH = indicators_path.resolve()
else:
    # Fallback: bundled defaults shipped with the scanner package
    PROCESSING_INDICATORS_PATH = project_root / 'scanner' / 'processing' / 'indicators.json'
