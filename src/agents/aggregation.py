"""
Sentiment Aggregators.

Group cleaned reviews by app or by language and count sentiment labels.
"""

import logging
from typing import Dict, Iterable, List

import pandas as pd

from src.agents.sentiment import label_sentiment
from src.models.review import ReviewRecord
from src.models.sentiment import GROUPING_KEYS, SENTIMENTS, SentimentTally

logger = logging.getLogger(__name__)


def tally_sentiment(
    records: Iterable[ReviewRecord],
    key_field: str
) -> List[SentimentTally]:
    """
    Count sentiment labels per distinct value of *key_field*.

    Args:
        records: Cleaned reviews
        key_field: "app_name" or "review_language"

    Returns:
        One SentimentTally per distinct key, in first-seen order
    """
    if key_field not in GROUPING_KEYS:
        raise ValueError(f"Cannot group reviews by {key_field!r}")

    # dicts keep insertion order, so output follows first appearance
    tallies: Dict[str, SentimentTally] = {}

    for record in records:
        key = getattr(record, key_field)
        tally = tallies.get(key)
        if tally is None:
            tally = SentimentTally(key_field=key_field, key=key)
            tallies[key] = tally
        tally.increment(label_sentiment(record.rating))

    logger.debug(f"Tallied sentiment for {len(tallies)} distinct {key_field} values")
    return list(tallies.values())


def sentiment_by_app(records: Iterable[ReviewRecord]) -> List[SentimentTally]:
    """Sentiment counts per app_name."""
    return tally_sentiment(records, "app_name")


def sentiment_by_language(records: Iterable[ReviewRecord]) -> List[SentimentTally]:
    """Sentiment counts per review_language."""
    return tally_sentiment(records, "review_language")


def tallies_to_frame(tallies: List[SentimentTally], key_field: str) -> pd.DataFrame:
    """
    Render tallies as a table for reporting.

    Args:
        tallies: Output of one of the aggregators
        key_field: Grouping column name, used when *tallies* is empty

    Returns:
        DataFrame with columns [key_field, positive, neutral, negative, total]
    """
    columns = [key_field, *SENTIMENTS, "total"]
    rows = [{**tally.to_dict(), "total": tally.total} for tally in tallies]
    return pd.DataFrame(rows, columns=columns)
