"""
Sentiment data models.

Per-group sentiment counts and the fixed summary answer set.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

POSITIVE = "positive"
NEUTRAL = "neutral"
NEGATIVE = "negative"

SENTIMENTS = (POSITIVE, NEUTRAL, NEGATIVE)

# Fields reviews can be grouped on
GROUPING_KEYS = ("app_name", "review_language")


@dataclass
class SentimentTally:
    """
    Sentiment counts for one app or one language.
    """
    key_field: str  # "app_name" or "review_language"
    key: str
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    def __post_init__(self):
        if self.key_field not in GROUPING_KEYS:
            raise ValueError(
                f"Invalid key_field: {self.key_field}. Must be one of {GROUPING_KEYS}"
            )

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def increment(self, sentiment: str) -> None:
        if sentiment not in SENTIMENTS:
            raise ValueError(f"Invalid sentiment: {sentiment}")
        setattr(self, sentiment, getattr(self, sentiment) + 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            self.key_field: self.key,
            POSITIVE: self.positive,
            NEUTRAL: self.neutral,
            NEGATIVE: self.negative,
        }


@dataclass(frozen=True)
class SummaryStatistics:
    """
    Most reviewed app, its dominant device and its average rating.
    """
    most_reviewed_app: Optional[str]
    most_reviews: int
    most_used_device: Optional[str]
    most_devices: int
    avg_rating: float  # nan when the winning app has no reviews

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the report's camelCase field names."""
        return {
            "mostReviewedApp": self.most_reviewed_app,
            "mostReviews": self.most_reviews,
            "mostUsedDevice": self.most_used_device,
            "mostDevices": self.most_devices,
            "avgRating": self.avg_rating,
        }
