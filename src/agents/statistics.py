"""
Summary Statistics.

Finds the most reviewed app, its most used device and its average rating.
"""

import logging
from collections import Counter
import math
from typing import Callable, Dict, Iterable, List, Tuple

from src.models.report import SummaryStatistics
from src.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)


def count_by(reviews: Iterable[Review], key_fn: Callable[[Review], str]) -> Dict[str, int]:
    """Count reviews per key; the Counter keeps first-seen key order."""
    return Counter(key_fn(review) for review in reviews)


def most_frequent(counts: Dict[str, int]) -> Tuple[str, int]:
    """
    Return the key with the highest count and that count.

    Scans in dict order and only replaces the running best on a strictly
    greater count, so the earliest key wins a tie. Empty input gives ("", 0).
    """
    best_key = ""
    best_count = 0
    for key, count in counts.items():
        if count > best_count:
            best_key = key
            best_count = count
    return best_key, best_count


def round_half_away_from_zero(value: float, decimals: int) -> float:
    scale = 10 ** decimals
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def summary_statistics(reviews: Iterable[Review]) -> SummaryStatistics:
    """
    Summarize the most reviewed app.

    Args:
        reviews: Cleaned reviews

    Returns:
        SummaryStatistics, or SummaryStatistics.empty() if there are no reviews
    """
    reviews: List[Review] = list(reviews)
    if not reviews:
        logger.warning("No reviews to summarize, returning empty summary statistics")
        return SummaryStatistics.empty()

    app_counts = count_by(reviews, lambda r: r.app_name)
    most_reviewed_app, most_reviews = most_frequent(app_counts)

    app_reviews = [r for r in reviews if r.app_name == most_reviewed_app]

    device_counts = count_by(app_reviews, lambda r: r.device_type)
    most_used_device, most_devices = most_frequent(device_counts)

    total_rating = sum(r.rating for r in app_reviews)
    avg_rating = round_half_away_from_zero(
        total_rating / len(app_reviews),
        settings.AVG_RATING_DECIMALS
    )

    logger.info(
        f"Most reviewed app: {most_reviewed_app} ({most_reviews} reviews), "
        f"top device {most_used_device} ({most_devices}), avg rating {avg_rating}"
    )

    return SummaryStatistics(
        most_reviewed_app=most_reviewed_app,
        most_reviews=most_reviews,
        most_used_device=most_used_device,
        most_devices=most_devices,
        avg_rating=avg_rating
    )
