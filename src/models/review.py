"""
Review data model.

Represents a cleaned, fully typed review from the app store dataset.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional


@dataclass(frozen=True)
class User:
    """
    Reviewer attributes, nested under a review.
    Built from the user_* columns of the source row.
    """
    user_id: int
    user_age: int
    user_country: str
    user_gender: Optional[str] = None  # Empty source cell becomes None


@dataclass(frozen=True)
class Review:
    """
    Cleaned review.
    Only constructed when every source column except user_gender was present.
    """
    review_id: int
    app_name: str
    rating: float  # 0.0-5.0, not range-checked
    review_date: date
    review_language: str
    device_type: str
    verified_purchase: bool
    num_helpful_votes: int
    user: User
    extras: Dict[str, str] = field(default_factory=dict)  # Pass-through columns

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict with the user nested."""
        data = {
            "review_id": self.review_id,
            "app_name": self.app_name,
            "rating": self.rating,
            "review_date": self.review_date.isoformat(),
            "review_language": self.review_language,
            "device_type": self.device_type,
            "verified_purchase": self.verified_purchase,
            "num_helpful_votes": self.num_helpful_votes,
            "user": {
                "user_id": self.user.user_id,
                "user_age": self.user.user_age,
                "user_country": self.user.user_country,
                "user_gender": self.user.user_gender,
            },
        }
        data.update(self.extras)
        return data
