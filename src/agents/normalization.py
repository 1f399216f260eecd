"""
Record Normalization Agent.

Filters raw CSV rows and converts the survivors into typed ReviewRecords
with the reviewer fields nested under `user`.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

import pandas as pd

from src.models.review import (
    EXPECTED_COLUMNS,
    OPTIONAL_COLUMNS,
    RawRecord,
    ReviewRecord,
    UserProfile,
)
from src.utils.coercion import (
    is_blank,
    is_failure,
    or_sentinel,
    parse_bool,
    parse_date,
    parse_float,
    parse_int,
)
from src.utils.exceptions import SchemaMismatchError

logger = logging.getLogger(__name__)

LENIENT = "lenient"
STRICT = "strict"
COERCION_POLICIES = (LENIENT, STRICT)


@dataclass
class NormalizationStats:
    """Counts for the most recent batch."""
    total: int = 0
    kept: int = 0
    dropped_blank: int = 0
    dropped_invalid: int = 0

    @property
    def dropped(self) -> int:
        return self.dropped_blank + self.dropped_invalid


class RecordNormalizer:
    """
    Cleans raw review rows.

    Rows with a blank value in any column other than user_gender are dropped
    without error. Values that fail to coerce are handled by the coercion
    policy:
    - "lenient": keep the row, embed nan / NaT in place of the value
    - "strict": drop the row
    """

    def __init__(self, coercion_policy: str = LENIENT, require_columns: bool = False):
        """
        Initialize normalizer.

        Args:
            coercion_policy: "lenient" or "strict"
            require_columns: Raise SchemaMismatchError for a row missing one of
                the expected column keys. When False, absent keys are read as
                missing values and coerced like any other bad value.
        """
        if coercion_policy not in COERCION_POLICIES:
            raise ValueError(
                f"Invalid coercion_policy: {coercion_policy}. "
                f"Must be one of {COERCION_POLICIES}"
            )
        self.coercion_policy = coercion_policy
        self.require_columns = require_columns
        self.stats = NormalizationStats()

    def normalize(self, raw_records: Iterable[RawRecord]) -> List[ReviewRecord]:
        """
        Clean a batch of raw rows, preserving input order.

        Args:
            raw_records: Rows from the CSV parser

        Returns:
            Cleaned records (same length or shorter)

        Raises:
            SchemaMismatchError: If require_columns is set and a row lacks one
                of the expected column keys
        """
        self.stats = NormalizationStats()
        cleaned = []

        for raw in raw_records:
            self.stats.total += 1
            record = self.normalize_record(raw)
            if record is not None:
                cleaned.append(record)

        self.stats.kept = len(cleaned)
        logger.info(
            f"Normalized {self.stats.kept}/{self.stats.total} records "
            f"(dropped {self.stats.dropped_blank} blank, "
            f"{self.stats.dropped_invalid} invalid, policy={self.coercion_policy})"
        )
        return cleaned

    def normalize_record(self, raw: RawRecord) -> Optional[ReviewRecord]:
        """
        Clean a single raw row.

        Returns:
            ReviewRecord, or None when the row is dropped
        """
        if self.require_columns:
            missing = [column for column in EXPECTED_COLUMNS if column not in raw]
            if missing:
                raise SchemaMismatchError(missing)

        if self._has_blank_required_field(raw):
            self.stats.dropped_blank += 1
            return None

        user_id = parse_int(raw.get("user_id"), "user_id")
        user_age = parse_int(raw.get("user_age"), "user_age")
        review_id = parse_int(raw.get("review_id"), "review_id")
        num_helpful_votes = parse_int(raw.get("num_helpful_votes"), "num_helpful_votes")
        rating = parse_float(raw.get("rating"), "rating")
        review_date = parse_date(raw.get("review_date"), "review_date")

        parsed = (user_id, user_age, review_id, num_helpful_votes, rating, review_date)
        if self.coercion_policy == STRICT and any(is_failure(v) for v in parsed):
            self.stats.dropped_invalid += 1
            return None

        gender = raw.get("user_gender")
        user = UserProfile(
            user_id=or_sentinel(user_id, math.nan),
            user_age=or_sentinel(user_age, math.nan),
            user_country=raw.get("user_country"),
            user_gender=None if is_blank(gender) else gender,
        )

        return ReviewRecord(
            review_id=or_sentinel(review_id, math.nan),
            app_name=raw.get("app_name"),
            review_language=raw.get("review_language"),
            device_type=raw.get("device_type"),
            review_date=or_sentinel(review_date, pd.NaT),
            rating=or_sentinel(rating, math.nan),
            verified_purchase=parse_bool(raw.get("verified_purchase")),
            num_helpful_votes=or_sentinel(num_helpful_votes, math.nan),
            user=user,
        )

    @staticmethod
    def _has_blank_required_field(raw: RawRecord) -> bool:
        # Only keys present on the row are checked, including extra columns
        return any(
            is_blank(value)
            for key, value in raw.items()
            if key not in OPTIONAL_COLUMNS
        )


def clean_records(
    raw_records: Iterable[RawRecord],
    coercion_policy: str = LENIENT,
    require_columns: bool = False
) -> List[ReviewRecord]:
    """Normalize *raw_records* with a throwaway RecordNormalizer."""
    normalizer = RecordNormalizer(
        coercion_policy=coercion_policy,
        require_columns=require_columns
    )
    return normalizer.normalize(raw_records)
