"""
Configuration settings for the review statistics pipeline.

Centralized configuration for ingestion, cleaning and reporting.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Ingestion
DEFAULT_INPUT_CSV = DATA_ROOT / "multilingual_mobile_app_reviews_2025.csv"
CSV_ENCODING = os.getenv("REVIEW_STATS_CSV_ENCODING", "utf-8")

# Normalization
# "lenient": keep rows whose numbers/dates fail to parse (nan / NaT values)
# "strict": drop them
COERCION_POLICY = os.getenv("REVIEW_STATS_COERCION_POLICY", "lenient")

# Reporting
SAVE_CLEANED_REVIEWS = False

# Logging
LOG_LEVEL = os.getenv("REVIEW_STATS_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "review_stats.log"
