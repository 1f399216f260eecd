"""
Storage utility.

Writes the pipeline's report files.
"""

import json
import logging
import math
import os
from typing import Any, Dict, List

import pandas as pd

logger = logging.getLogger(__name__)


def _nan_to_none(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class StorageManager:
    """
    Manages report output.

    Handles:
    - Summary statistics (summary.json)
    - Sentiment tables (sentiment_by_app.csv, sentiment_by_language.csv)
    - Cleaned reviews (cleaned_reviews.json, optional)
    """

    def __init__(self, output_root: str):
        """
        Initialize storage manager.

        Args:
            output_root: Directory report files are written to
        """
        self.output_root = output_root
        os.makedirs(self.output_root, exist_ok=True)

        logger.info(f"Initialized StorageManager with output_root={output_root}")

    def save_summary(self, summary: Dict[str, Any]) -> str:
        """
        Save summary statistics as JSON.

        Args:
            summary: Summary dict (nan values are written as null)

        Returns:
            Path to the written file
        """
        serializable = {key: _nan_to_none(value) for key, value in summary.items()}
        return self._save_json(serializable, "summary.json")

    def save_table(self, df: pd.DataFrame, name: str) -> str:
        """
        Save a report table as CSV.

        Args:
            df: Table to write
            name: File name without extension

        Returns:
            Path to the written file
        """
        filepath = os.path.join(self.output_root, f"{name}.csv")

        try:
            df.to_csv(filepath, index=False)
            logger.info(f"Saved {len(df)} rows to {filepath}")
        except OSError as e:
            logger.error(f"Failed to save table {name}: {e}")
            raise

        return filepath

    def save_cleaned_reviews(self, reviews: List[Dict[str, Any]]) -> str:
        """Save cleaned reviews (already converted with to_dict) as JSON."""
        return self._save_json(reviews, "cleaned_reviews.json")

    def load_summary(self) -> Dict[str, Any]:
        """Load a previously written summary.json."""
        filepath = os.path.join(self.output_root, "summary.json")
        with open(filepath, 'r') as f:
            return json.load(f)

    def _save_json(self, payload: Any, filename: str) -> str:
        filepath = os.path.join(self.output_root, filename)

        try:
            with open(filepath, 'w') as f:
                json.dump(payload, f, indent=2)
            logger.info(f"Saved {filename} to {filepath}")
        except (OSError, TypeError) as e:
            logger.error(f"Failed to save {filename}: {e}")
            raise

        return filepath
