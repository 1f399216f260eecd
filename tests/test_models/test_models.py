"""
Unit tests for review and sentiment data models.
"""

import math
from dataclasses import FrozenInstanceError
from datetime import date

import pandas as pd
import pytest

from src.models.review import ReviewRecord, UserProfile
from src.models.sentiment import SentimentTally, SummaryStatistics


def test_sentiment_tally_validation():
    """Test SentimentTally key_field validation."""
    tally = SentimentTally(key_field="app_name", key="Zoom")
    assert tally.total == 0

    with pytest.raises(ValueError):
        SentimentTally(key_field="device_type", key="phone")


def test_sentiment_tally_increment():
    tally = SentimentTally(key_field="review_language", key="en")

    tally.increment("positive")
    tally.increment("positive")
    tally.increment("negative")

    assert tally.to_dict() == {
        "review_language": "en", "positive": 2, "neutral": 0, "negative": 1
    }
    assert tally.total == 3

    with pytest.raises(ValueError):
        tally.increment("mixed")


def test_summary_wire_names():
    summary = SummaryStatistics("A", 2, "phone", 1, 2.75)

    assert list(summary.to_dict()) == [
        "mostReviewedApp", "mostReviews", "mostUsedDevice", "mostDevices", "avgRating"
    ]


def test_review_record_serialization():
    """Test that sentinels serialize as None and dates as ISO text."""
    record = ReviewRecord(
        review_id=math.nan,
        app_name="Zoom",
        review_language="en",
        device_type="phone",
        review_date=pd.NaT,
        rating=3.5,
        verified_purchase=False,
        num_helpful_votes=2,
        user=UserProfile(user_id=9, user_age=math.nan, user_country="US"),
    )

    as_dict = record.to_dict()

    assert as_dict["review_id"] is None
    assert as_dict["review_date"] is None
    assert as_dict["user"] == {
        "user_id": 9, "user_age": None, "user_country": "US", "user_gender": None
    }

    dated = ReviewRecord(**{**record.__dict__, "review_date": date(2024, 3, 1)})
    assert dated.to_dict()["review_date"] == "2024-03-01"


def test_review_record_is_immutable():
    user = UserProfile(user_id=1, user_age=30, user_country="US")

    with pytest.raises(FrozenInstanceError):
        user.user_age = 31
