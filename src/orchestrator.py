"""
Pipeline Orchestrator.

Runs ingestion, cleaning, aggregation and summary, then writes the report.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from src.agents.aggregation import (
    sentiment_by_app,
    sentiment_by_language,
    tallies_to_frame,
)
from src.agents.ingestion import CsvIngestionAgent
from src.agents.normalization import NormalizationStats, RecordNormalizer
from src.agents.statistics import summary_statistics
from src.models.review import ReviewRecord
from src.models.sentiment import SentimentTally, SummaryStatistics
from src.utils.storage import StorageManager
import config.settings as settings

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Everything one pipeline run produced."""
    records: List[ReviewRecord]
    by_app: List[SentimentTally]
    by_language: List[SentimentTally]
    summary: SummaryStatistics
    normalization: NormalizationStats
    output_paths: Dict[str, str] = field(default_factory=dict)


class PipelineOrchestrator:
    """
    Orchestrates a single batch run.

    1. Ingestion → 2. Normalization → 3. Sentiment by app / language
    → 4. Summary statistics → 5. Report files
    """

    def __init__(
        self,
        output_root: str,
        coercion_policy: str = settings.COERCION_POLICY,
        encoding: str = settings.CSV_ENCODING,
        save_cleaned: bool = settings.SAVE_CLEANED_REVIEWS
    ):
        """
        Initialize pipeline orchestrator.

        Args:
            output_root: Directory for report files
            coercion_policy: "lenient" or "strict" (see RecordNormalizer)
            encoding: CSV text encoding
            save_cleaned: Also write the cleaned reviews as JSON
        """
        self.save_cleaned = save_cleaned

        self.ingestion_agent = CsvIngestionAgent(encoding=encoding)
        self.normalizer = RecordNormalizer(
            coercion_policy=coercion_policy,
            require_columns=True
        )
        self.storage = StorageManager(output_root)

        logger.info(f"Pipeline initialized (coercion_policy={coercion_policy})")

    def run(self, csv_path: str) -> PipelineResult:
        """
        Run the complete pipeline over one CSV export.

        Args:
            csv_path: Path to the review export

        Returns:
            PipelineResult with aggregates and written file paths
        """
        # STAGE 1: Ingestion
        raw_records = self.ingestion_agent.load(csv_path)

        # STAGE 2: Normalization
        records = self.normalizer.normalize(raw_records)
        if not records:
            logger.warning(f"No usable reviews in {csv_path}")

        # STAGE 3: Sentiment aggregation
        by_app = sentiment_by_app(records)
        by_language = sentiment_by_language(records)
        logger.info(f"Aggregated {len(by_app)} apps, {len(by_language)} languages")

        # STAGE 4: Summary
        summary = summary_statistics(records)

        result = PipelineResult(
            records=records,
            by_app=by_app,
            by_language=by_language,
            summary=summary,
            normalization=self.normalizer.stats,
        )

        # STAGE 5: Report
        result.output_paths = self._write_report(result)

        logger.info(f"Pipeline complete for {csv_path}")
        return result

    def _write_report(self, result: PipelineResult) -> Dict[str, str]:
        paths = {
            "summary": self.storage.save_summary(result.summary.to_dict()),
            "sentiment_by_app": self.storage.save_table(
                tallies_to_frame(result.by_app, "app_name"),
                "sentiment_by_app"
            ),
            "sentiment_by_language": self.storage.save_table(
                tallies_to_frame(result.by_language, "review_language"),
                "sentiment_by_language"
            ),
        }

        if self.save_cleaned:
            paths["cleaned_reviews"] = self.storage.save_cleaned_reviews(
                [record.to_dict() for record in result.records]
            )

        return paths
