"""
Summary Statistics.

Answers three fixed questions about the cleaned review set:
which app has the most reviews, which device dominates that app's reviews,
and what its average rating is.
"""

import logging
import math
from collections import Counter
from typing import Iterable, Optional, Sequence, Tuple

from src.agents.aggregation import sentiment_by_app
from src.models.review import ReviewRecord
from src.models.sentiment import SummaryStatistics

logger = logging.getLogger(__name__)


def _strict_max(counts: Sequence[Tuple[str, int]]) -> Tuple[Optional[str], int]:
    """
    Pick the entry with the largest count.

    Only a strictly greater count replaces the current leader, so the first
    entry wins ties. Empty input gives (None, 0).
    """
    best_key, best_count = None, 0
    for key, count in counts:
        if count > best_count:
            best_key, best_count = key, count
    return best_key, best_count


def summary_statistics(records: Iterable[ReviewRecord]) -> SummaryStatistics:
    """
    Compute the summary for *records*.

    Args:
        records: Cleaned reviews

    Returns:
        SummaryStatistics. With no records the app and device are None, the
        counts are 0 and avg_rating is nan.
    """
    # Iterated twice below
    records = list(records)
    app_tallies = sentiment_by_app(records)
    most_reviewed_app, most_reviews = _strict_max(
        [(tally.key, tally.total) for tally in app_tallies]
    )

    device_counts: Counter = Counter()
    rating_total = 0.0
    review_count = 0

    for record in records:
        if record.app_name == most_reviewed_app:
            device_counts[record.device_type] += 1
            rating_total += record.rating
            review_count += 1

    avg_rating = rating_total / review_count if review_count else math.nan

    # Counter keeps first-seen order, which drives the tie-break
    most_used_device, most_devices = _strict_max(list(device_counts.items()))

    logger.info(
        f"Most reviewed app: {most_reviewed_app} ({most_reviews} reviews), "
        f"top device {most_used_device} ({most_devices}), avg rating {avg_rating}"
    )

    return SummaryStatistics(
        most_reviewed_app=most_reviewed_app,
        most_reviews=most_reviews,
        most_used_device=most_used_device,
        most_devices=most_devices,
        avg_rating=avg_rating,
    )
