"""
Sentiment labeling from star ratings.
"""

from src.models.report import NEGATIVE, NEUTRAL, POSITIVE
import config.settings as settings


def label_sentiment(rating: float) -> str:
    """
    Map a rating to a sentiment.

    Above POSITIVE_THRESHOLD is positive, below NEGATIVE_THRESHOLD is
    negative, and both thresholds themselves are neutral.
    """
    if rating > settings.POSITIVE_THRESHOLD:
        return POSITIVE
    if rating < settings.NEGATIVE_THRESHOLD:
        return NEGATIVE
    return NEUTRAL
