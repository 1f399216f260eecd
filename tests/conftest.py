"""Shared fixtures for review pipeline tests."""

import pytest


def make_raw_row(**overrides):
    row = {
        "review_id": "1",
        "app_name": "A",
        "review_language": "en",
        "device_type": "phone",
        "review_date": "2020-01-01",
        "rating": "4.5",
        "verified_purchase": "TRUE",
        "num_helpful_votes": "0",
        "user_id": "1",
        "user_age": "30",
        "user_country": "US",
        "user_gender": "M",
    }
    row.update(overrides)
    return row


@pytest.fixture
def raw_row():
    """Factory for a fully populated raw CSV row."""
    return make_raw_row


@pytest.fixture
def example_rows():
    """The two-row export used in the end-to-end scenario."""
    return [
        make_raw_row(),
        make_raw_row(
            rating="1",
            device_type="tablet",
            verified_purchase="false",
            review_id="2",
            user_id="2",
            user_age="22",
            user_gender="",
        ),
    ]
