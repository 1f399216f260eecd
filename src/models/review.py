"""
Review data models.

RawRecord is one CSV row as produced by the parser; ReviewRecord is the
typed, cleaned form consumed by the aggregators.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional

import pandas as pd

# One CSV row: column name -> raw string value
RawRecord = Mapping[str, Optional[str]]

REVIEW_COLUMNS = (
    "review_id",
    "app_name",
    "review_language",
    "device_type",
    "review_date",
    "rating",
    "verified_purchase",
    "num_helpful_votes",
)

USER_COLUMNS = ("user_id", "user_age", "user_country", "user_gender")

EXPECTED_COLUMNS = REVIEW_COLUMNS + USER_COLUMNS

# The only column allowed to be blank
OPTIONAL_COLUMNS = frozenset({"user_gender"})


def _json_value(value: Any) -> Any:
    """Map NaN / NaT sentinels to None and dates to ISO text."""
    if value is pd.NaT:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, date):
        return value.isoformat()
    return value


@dataclass(frozen=True)
class UserProfile:
    """
    Reviewer details nested under a cleaned review.
    """
    user_id: int  # nan when the raw id was not numeric
    user_age: int  # nan when the raw age was not numeric
    user_country: str
    user_gender: Optional[str] = None  # None when left blank in the export

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": _json_value(self.user_id),
            "user_age": _json_value(self.user_age),
            "user_country": self.user_country,
            "user_gender": self.user_gender,
        }


@dataclass(frozen=True)
class ReviewRecord:
    """
    Cleaned, typed app-store review.

    Only built from rows with every required column filled in. Values that
    failed coercion hold nan (numbers) or NaT (dates) in lenient mode.
    """
    review_id: int
    app_name: str
    review_language: str
    device_type: str
    review_date: date
    rating: float  # 0-5 stars, not clamped
    verified_purchase: bool
    num_helpful_votes: int
    user: UserProfile

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable nested dict."""
        return {
            "review_id": _json_value(self.review_id),
            "app_name": self.app_name,
            "review_language": self.review_language,
            "device_type": self.device_type,
            "review_date": _json_value(self.review_date),
            "rating": _json_value(self.rating),
            "verified_purchase": self.verified_purchase,
            "num_helpful_votes": _json_value(self.num_helpful_votes),
            "user": self.user.to_dict(),
        }
