"""
End-to-end tests for the review statistics pipeline.
"""

import json
import math

import pandas as pd
import pytest

from src.agents.aggregation import sentiment_by_app, sentiment_by_language
from src.agents.normalization import clean_records
from src.agents.statistics import summary_statistics
from src.models.review import EXPECTED_COLUMNS
from src.orchestrator import PipelineOrchestrator


def test_in_memory_scenario():
    """Test the two-record scenario straight from parser output."""
    raw = [
        {"app_name": "A", "rating": "4.5", "review_language": "en",
         "device_type": "phone", "verified_purchase": "TRUE", "review_id": "1",
         "num_helpful_votes": "0", "user_id": "1", "user_age": "30",
         "user_country": "US", "user_gender": "M", "review_date": "2020-01-01"},
        {"app_name": "A", "rating": "1", "review_language": "en",
         "device_type": "tablet", "verified_purchase": "false", "review_id": "2",
         "num_helpful_votes": "0", "user_id": "2", "user_age": "22",
         "user_country": "US", "user_gender": ""},
    ]

    records = clean_records(raw)

    assert len(records) == 2
    assert records[0].verified_purchase is True
    assert records[1].verified_purchase is False
    assert records[1].user.user_gender is None
    assert [t.to_dict() for t in sentiment_by_app(records)] == [
        {"app_name": "A", "positive": 1, "neutral": 0, "negative": 1}
    ]
    assert summary_statistics(records).to_dict() == {
        "mostReviewedApp": "A",
        "mostReviews": 2,
        "mostUsedDevice": "phone",
        "mostDevices": 1,
        "avgRating": 2.75,
    }


def test_blank_rating_excluded_everywhere(example_rows, raw_row):
    """Test that a row with a blank rating affects no aggregate."""
    rows = example_rows + [raw_row(app_name="B", review_language="es", rating="")]

    records = clean_records(rows)

    assert len(records) == 2
    assert [t.key for t in sentiment_by_app(records)] == ["A"]
    assert [t.key for t in sentiment_by_language(records)] == ["en"]
    assert summary_statistics(records).most_reviews == 2


@pytest.fixture
def export_csv(tmp_path, example_rows, raw_row):
    rows = example_rows + [
        raw_row(review_id="3", app_name="B", review_language="de", rating="3"),
        raw_row(review_id="4", app_name="B", rating=" "),
        raw_row(review_id="5", app_name="C", review_language="de", rating="oops"),
    ]
    path = tmp_path / "reviews.csv"
    pd.DataFrame(rows, columns=list(EXPECTED_COLUMNS)).to_csv(path, index=False)
    return str(path)


def test_orchestrator_writes_report(tmp_path, export_csv):
    """Test a full run from CSV file to report files."""
    output_root = tmp_path / "report"
    orchestrator = PipelineOrchestrator(
        output_root=str(output_root),
        coercion_policy="lenient",
        save_cleaned=True
    )

    result = orchestrator.run(export_csv)

    assert result.normalization.total == 5
    assert result.normalization.kept == 4
    assert [t.key for t in result.by_app] == ["A", "B", "C"]
    assert [t.key for t in result.by_language] == ["en", "de"]
    assert result.summary.most_reviewed_app == "A"
    assert result.summary.avg_rating == pytest.approx(2.75)

    with open(result.output_paths["summary"]) as f:
        assert json.load(f)["mostReviews"] == 2

    by_app = pd.read_csv(result.output_paths["sentiment_by_app"])
    assert list(by_app["total"]) == [2, 1, 1]

    with open(result.output_paths["cleaned_reviews"]) as f:
        cleaned = json.load(f)
    assert cleaned[3]["rating"] is None
    assert "user_id" not in cleaned[0]
    assert cleaned[0]["review_date"] == "2020-01-01"


def test_orchestrator_strict_policy(tmp_path, export_csv):
    """Test that the strict policy drops the row with an unparseable rating."""
    orchestrator = PipelineOrchestrator(
        output_root=str(tmp_path / "report"),
        coercion_policy="strict"
    )

    result = orchestrator.run(export_csv)

    assert result.normalization.kept == 3
    assert result.normalization.dropped_invalid == 1
    assert [t.key for t in result.by_app] == ["A", "B"]
    assert "cleaned_reviews" not in result.output_paths


def test_orchestrator_empty_export(tmp_path):
    """Test that an export with only dropped rows still produces a report."""
    path = tmp_path / "reviews.csv"
    path.write_text(",".join(EXPECTED_COLUMNS) + "\n", encoding="utf-8")

    result = PipelineOrchestrator(output_root=str(tmp_path / "report")).run(str(path))

    assert result.records == []
    assert result.summary.most_reviewed_app is None
    assert math.isnan(result.summary.avg_rating)
    with open(result.output_paths["summary"]) as f:
        assert json.load(f)["avgRating"] is None
