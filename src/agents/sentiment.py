"""
Sentiment Labeler.

Maps a star rating onto positive / neutral / negative.
"""

from typing import Iterable, List, Tuple

from src.models.review import ReviewRecord
from src.models.sentiment import NEGATIVE, NEUTRAL, POSITIVE


def label_sentiment(rating: float) -> str:
    """
    Label a rating.

    Args:
        rating: Star rating, normally 0-5

    Returns:
        "positive" above 4, "negative" below 2, otherwise "neutral".
        2 and 4 are neutral; nan compares false both ways and is neutral too.
    """
    if rating > 4:
        return POSITIVE
    elif rating < 2:
        return NEGATIVE
    else:
        return NEUTRAL


def label_records(records: Iterable[ReviewRecord]) -> List[Tuple[ReviewRecord, str]]:
    """Pair every record with its sentiment label, in input order."""
    return [(record, label_sentiment(record.rating)) for record in records]
