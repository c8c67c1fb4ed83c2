"""
Unit tests for summary statistics.
"""

import pytest
from datetime import date
from src.agents.statistics import (
    count_by,
    most_frequent,
    round_half_away_from_zero,
    summary_statistics,
)
from src.models.review import Review, User


def make_review(app_name, device, rating):
    return Review(
        review_id=1,
        app_name=app_name,
        rating=rating,
        review_date=date(2024, 6, 1),
        review_language="en",
        device_type=device,
        verified_purchase=False,
        num_helpful_votes=0,
        user=User(user_id=1, user_age=30, user_country="US")
    )


def test_most_reviewed_app_and_device():
    """Test selection of top app, its top device and average rating."""
    reviews = [
        make_review("A", "phone", 5.0),
        make_review("B", "tablet", 1.0),
        make_review("B", "tablet", 2.0),
        make_review("B", "phone", 4.0),
        make_review("A", "phone", 3.0),
    ]

    stats = summary_statistics(reviews)

    assert stats.most_reviewed_app == "B"
    assert stats.most_reviews == 3
    assert stats.most_used_device == "tablet"
    assert stats.most_devices == 2
    assert stats.avg_rating == 2.333
    assert stats.has_data


def test_ties_resolve_to_first_seen():
    """Test that equal counts keep the earliest app and device."""
    reviews = [
        make_review("Later", "tablet", 2.0),
        make_review("First", "phone", 4.0),
        make_review("Later", "phone", 2.0),
        make_review("First", "tablet", 4.0),
    ]

    stats = summary_statistics(reviews)

    assert stats.most_reviewed_app == "Later"
    assert stats.most_used_device == "tablet"

    reordered = summary_statistics(list(reversed(reviews)))
    assert reordered.most_reviewed_app == "First"
    assert reordered.most_used_device == "tablet"


def test_end_to_end_two_rows():
    """Test the two-review example summary."""
    reviews = [
        make_review("X", "phone", 5.0),
        make_review("X", "tablet", 1.0),
    ]

    assert summary_statistics(reviews).to_dict() == {
        "mostReviewedApp": "X",
        "mostReviews": 2,
        "mostUsedDevice": "phone",
        "mostDevices": 1,
        "avgRating": 3.0,
    }


def test_empty_dataset_returns_no_data_result():
    """Test the explicit no-data summary for empty input."""
    stats = summary_statistics([])

    assert not stats.has_data
    assert stats.most_reviewed_app == ""
    assert stats.most_reviews == 0
    assert stats.most_used_device == ""
    assert stats.most_devices == 0
    assert stats.avg_rating is None


def test_accepts_generators():
    """Test that a one-shot iterable is consumed only once."""
    stats = summary_statistics(make_review("A", "phone", r) for r in (4.0, 5.0))

    assert stats.most_reviews == 2
    assert stats.avg_rating == 4.5


def test_most_frequent_strictly_greater():
    assert most_frequent({"a": 2, "b": 3, "c": 3}) == ("b", 3)
    assert most_frequent({}) == ("", 0)


def test_count_by_keeps_first_seen_order():
    reviews = [make_review(app, "phone", 3.0) for app in ("c", "a", "c", "b")]
    assert list(count_by(reviews, lambda r: r.app_name).items()) == [
        ("c", 2), ("a", 1), ("b", 1)
    ]


@pytest.mark.parametrize("value,expected", [
    (2.3334, 2.333),
    (2.3336, 2.334),
    (4.0, 4.0),
    (1.25, 1.25),
    (-1.2346, -1.235),
])
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value, 3) == expected


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
