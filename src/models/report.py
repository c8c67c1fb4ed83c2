"""
Report data models.

Sentiment breakdowns per group, summary statistics for the most reviewed
app, and the bundle produced by one pipeline run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

POSITIVE = "positive"
NEUTRAL = "neutral"
NEGATIVE = "negative"
SENTIMENTS = (POSITIVE, NEUTRAL, NEGATIVE)


@dataclass
class SentimentReport:
    """
    Sentiment counts for one group of reviews (an app or a language).
    """
    group_key: str
    positive: int = 0
    neutral: int = 0
    negative: int = 0
    group_field: str = "app_name"  # Key name used when rendered to a dict

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def increment(self, sentiment: str) -> None:
        """Add one review to the given sentiment bucket."""
        if sentiment not in SENTIMENTS:
            raise ValueError(
                f"Invalid sentiment: {sentiment}. Must be one of {', '.join(SENTIMENTS)}"
            )
        setattr(self, sentiment, getattr(self, sentiment) + 1)

    def to_dict(self) -> dict:
        return {
            self.group_field: self.group_key,
            POSITIVE: self.positive,
            NEUTRAL: self.neutral,
            NEGATIVE: self.negative,
        }


@dataclass
class SummaryStatistics:
    """
    Statistics scoped to the app with the most reviews.

    avg_rating is None only for the "no data" result returned when
    there are no reviews to summarize.
    """
    most_reviewed_app: str
    most_reviews: int
    most_used_device: str
    most_devices: int
    avg_rating: Optional[float]

    @classmethod
    def empty(cls) -> "SummaryStatistics":
        """The explicit result for an empty dataset."""
        return cls(
            most_reviewed_app="",
            most_reviews=0,
            most_used_device="",
            most_devices=0,
            avg_rating=None
        )

    @property
    def has_data(self) -> bool:
        return self.most_reviews > 0

    def to_dict(self) -> dict:
        return {
            "mostReviewedApp": self.most_reviewed_app,
            "mostReviews": self.most_reviews,
            "mostUsedDevice": self.most_used_device,
            "mostDevices": self.most_devices,
            "avgRating": self.avg_rating,
        }


@dataclass
class AnalysisReport:
    """Everything one pipeline run produces for a dataset."""
    source: str
    total_rows: int
    cleaned_rows: int
    summary: SummaryStatistics
    app_sentiment: List[SentimentReport] = field(default_factory=list)
    language_sentiment: List[SentimentReport] = field(default_factory=list)
    generated_at: str = ""

    @property
    def excluded_rows(self) -> int:
        return self.total_rows - self.cleaned_rows

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "source": self.source,
            "generated_at": self.generated_at,
            "total_rows": self.total_rows,
            "cleaned_rows": self.cleaned_rows,
            "excluded_rows": self.excluded_rows,
            "app_sentiment": [r.to_dict() for r in self.app_sentiment],
            "language_sentiment": [r.to_dict() for r in self.language_sentiment],
            "summary": self.summary.to_dict(),
        }
