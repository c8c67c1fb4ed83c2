"""
Sentiment Aggregator.

Counts positive, neutral and negative reviews per group, where a group
is any key derived from a review (app name, review language).
"""

import logging
from typing import Callable, Dict, Iterable, List

from src.agents.sentiment import label_sentiment
from src.models.report import SentimentReport
from src.models.review import Review

logger = logging.getLogger(__name__)


class SentimentAggregator:
    """
    Groups reviews by a key and tallies sentiments within each group.

    Reports come back in the order their key was first seen.
    """

    def __init__(self, key_fn: Callable[[Review], str], group_field: str):
        """
        Initialize sentiment aggregator.

        Args:
            key_fn: Extracts the group key from a review
            group_field: Key name for the group in rendered reports
        """
        self.key_fn = key_fn
        self.group_field = group_field

    def aggregate(self, reviews: Iterable[Review]) -> List[SentimentReport]:
        """
        Build one SentimentReport per distinct group key.

        Args:
            reviews: Cleaned reviews

        Returns:
            Reports in first-seen key order
        """
        reports: Dict[str, SentimentReport] = {}
        review_count = 0

        for review in reviews:
            key = self.key_fn(review)
            if key not in reports:
                reports[key] = SentimentReport(group_key=key, group_field=self.group_field)
            reports[key].increment(label_sentiment(review.rating))
            review_count += 1

        logger.info(
            f"Aggregated {review_count} reviews into {len(reports)} "
            f"groups by {self.group_field}"
        )
        return list(reports.values())


def aggregate_sentiment(
    reviews: Iterable[Review],
    key_fn: Callable[[Review], str],
    group_field: str = "group_key"
) -> List[SentimentReport]:
    return SentimentAggregator(key_fn, group_field).aggregate(reviews)


def sentiment_analysis_app(reviews: Iterable[Review]) -> List[SentimentReport]:
    """Sentiment counts per app."""
    return aggregate_sentiment(reviews, lambda r: r.app_name, "app_name")


def sentiment_analysis_lang(reviews: Iterable[Review]) -> List[SentimentReport]:
    """Sentiment counts per review language."""
    return aggregate_sentiment(reviews, lambda r: r.review_language, "lang_name")
