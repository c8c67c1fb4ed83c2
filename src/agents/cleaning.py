"""
Cleaning Agent.

Filters raw records with missing values and converts the survivors into
typed Review objects with a nested User.
"""

import logging
import math
from datetime import date
from typing import Iterable, List, Optional

import pandas as pd

from src.models.errors import CoercionError
from src.models.review import Review, User
import config.settings as settings

logger = logging.getLogger(__name__)

# Columns with a dedicated Review/User field; everything else goes to extras
TYPED_COLUMNS = (
    "review_id",
    "app_name",
    "rating",
    "review_date",
    "review_language",
    "device_type",
    "verified_purchase",
    "num_helpful_votes",
) + settings.USER_COLUMNS

# pandas resolves these against the wall clock
RELATIVE_DATE_TOKENS = ("now", "today")


def coerce_int(field: str, value: str) -> int:
    """
    Parse a base-10 integer.

    Integral float spellings such as "34.0" are accepted because
    spreadsheet exports often write whole numbers that way.
    """
    text = value.strip()
    if "_" in text:
        raise CoercionError(field, value, "integer")
    try:
        return int(text, 10)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise CoercionError(field, value, "integer")
    if not math.isfinite(number) or not number.is_integer():
        raise CoercionError(field, value, "integer")
    return int(number)


def coerce_float(field: str, value: str) -> float:
    try:
        number = float(value.strip())
    except ValueError:
        raise CoercionError(field, value, "float")
    if not math.isfinite(number):
        raise CoercionError(field, value, "float")
    return number


def coerce_date(field: str, value: str) -> date:
    """
    Parse an ISO 8601 date or date-time string, keeping only the calendar date.

    Relative tokens such as "now" and "today" are rejected.
    """
    text = value.strip()
    if text.lower() in RELATIVE_DATE_TOKENS:
        raise CoercionError(field, value, "date")
    try:
        parsed = pd.to_datetime(text, format="ISO8601")
    except (ValueError, OverflowError):
        raise CoercionError(field, value, "date")
    if pd.isna(parsed):
        raise CoercionError(field, value, "date")
    return parsed.date()


def coerce_bool(value: str) -> bool:
    return value == settings.TRUTHY_TOKEN


def is_complete(record: dict, required_columns=settings.REQUIRED_COLUMNS) -> bool:
    """
    True if no column other than the nullable ones is None or empty.

    Required columns absent from the record count as missing.
    """
    for column in set(required_columns) | set(record):
        if column in settings.NULLABLE_COLUMNS:
            continue
        value = record.get(column)
        if value is None or value == "":
            return False
    return True


def to_review(record: dict) -> Review:
    """
    Build a Review from a complete raw record.

    Raises:
        CoercionError: If a typed column does not parse
    """
    user = User(
        user_id=coerce_int("user_id", record["user_id"]),
        user_age=coerce_int("user_age", record["user_age"]),
        user_country=record["user_country"],
        user_gender=record.get("user_gender") or None
    )
    return Review(
        review_id=coerce_int("review_id", record["review_id"]),
        app_name=record["app_name"],
        rating=coerce_float("rating", record["rating"]),
        review_date=coerce_date("review_date", record["review_date"]),
        review_language=record["review_language"],
        device_type=record["device_type"],
        verified_purchase=coerce_bool(record["verified_purchase"]),
        num_helpful_votes=coerce_int("num_helpful_votes", record["num_helpful_votes"]),
        user=user,
        extras={
            key: value for key, value in record.items()
            if key not in TYPED_COLUMNS
        }
    )


class ReviewCleaner:
    """
    Turns raw records into Reviews.

    Rows with a missing value are dropped without error. Rows whose values
    do not parse either abort the run (strict) or are dropped with a
    warning (lenient).
    """

    def __init__(self, strict: Optional[bool] = None):
        """
        Initialize cleaner.

        Args:
            strict: Abort on unparseable values instead of dropping the row.
                Defaults to settings.STRICT_COERCION.
        """
        if strict is None:
            strict = settings.STRICT_COERCION
        self.strict = strict
        self.last_excluded = 0
        self.last_invalid = 0

    def clean(self, raw_records: Iterable[dict]) -> List[Review]:
        """
        Clean a sequence of raw records.

        Args:
            raw_records: Records as produced by the ingestion agent

        Returns:
            Reviews for the retained records, in input order

        Raises:
            CoercionError: In strict mode, on the first unparseable value
        """
        reviews = []
        excluded = 0
        invalid = 0

        for index, record in enumerate(raw_records):
            if not is_complete(record):
                logger.debug(f"Excluding row {index}: missing values")
                excluded += 1
                continue

            try:
                reviews.append(to_review(record))
            except CoercionError as e:
                error = e.at_row(index)
                if self.strict:
                    logger.error(f"Cleaning aborted: {error}")
                    raise error
                logger.warning(f"Dropping row {index}: {error}")
                invalid += 1

        self.last_excluded = excluded
        self.last_invalid = invalid

        logger.info(
            f"Cleaned {len(reviews)} reviews "
            f"({excluded} excluded for missing values, {invalid} dropped as invalid)"
        )
        return reviews


def clean_data(raw_records: Iterable[dict], strict: Optional[bool] = None) -> List[Review]:
    """Clean raw records; strict defaults to settings.STRICT_COERCION."""
    if strict is None:
        strict = settings.STRICT_COERCION
    return ReviewCleaner(strict=strict).clean(raw_records)
