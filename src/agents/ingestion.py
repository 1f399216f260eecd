"""
CSV Ingestion Agent.

Reads an app-store review export into raw string-keyed records.
Cleaning is left to the normalization agent.
"""

import logging
import os
from typing import List

import pandas as pd

from src.models.review import EXPECTED_COLUMNS, RawRecord
from src.utils.exceptions import IngestionError, SchemaMismatchError

logger = logging.getLogger(__name__)


class CsvIngestionAgent:
    """
    Loads review CSV exports.

    Every cell is read as text and empty cells stay empty strings, so the
    normalizer sees exactly what the file holds.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize ingestion agent.

        Args:
            encoding: Text encoding of the CSV file
        """
        self.encoding = encoding

    def load(self, csv_path: str) -> List[RawRecord]:
        """
        Read *csv_path* into raw records.

        Args:
            csv_path: Path to the review export

        Returns:
            List of dicts mapping column name to raw string

        Raises:
            IngestionError: If the file is missing or cannot be parsed
            SchemaMismatchError: If the header lacks an expected column
        """
        if not os.path.exists(csv_path):
            raise IngestionError(f"CSV file not found: {csv_path}")

        try:
            df = pd.read_csv(
                csv_path,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding=self.encoding,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            logger.error(f"Failed to parse {csv_path}: {e}")
            raise IngestionError(f"Failed to parse {csv_path}: {e}") from e

        df.columns = [str(column).strip() for column in df.columns]

        missing = set(EXPECTED_COLUMNS) - set(df.columns)
        if missing:
            raise SchemaMismatchError(missing)

        records = df.to_dict(orient="records")
        logger.info(f"Loaded {len(records)} raw records from {csv_path}")
        return records
