"""
Configuration settings for the review analytics pipeline.

Centralized configuration for dataset location, cleaning rules and
sentiment thresholds.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "data"
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Dataset
DEFAULT_DATASET = os.getenv(
    "REVIEW_DATASET",
    str(DATA_ROOT / "multilingual_mobile_app_reviews_2025.csv")
)
CSV_ENCODING = "utf-8"

# Columns every dataset must provide
REQUIRED_COLUMNS = (
    "review_id",
    "app_name",
    "rating",
    "review_date",
    "review_language",
    "device_type",
    "verified_purchase",
    "num_helpful_votes",
    "user_id",
    "user_age",
    "user_country",
    "user_gender",
)

# Columns folded into the nested user entity
USER_COLUMNS = ("user_id", "user_age", "user_country", "user_gender")

# Columns allowed to be empty without excluding the row
NULLABLE_COLUMNS = ("user_gender",)

# Only this exact token marks a verified purchase
TRUTHY_TOKEN = "True"

# Cleaning
STRICT_COERCION = os.getenv("STRICT_COERCION", "true").lower() == "true"

# Sentiment thresholds (exclusive on both ends)
POSITIVE_THRESHOLD = 4.0  # rating > this is positive
NEGATIVE_THRESHOLD = 2.0  # rating < this is negative

# Summary statistics
AVG_RATING_DECIMALS = 3

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "review_analytics.log"
