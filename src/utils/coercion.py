"""
Coercion helpers.

Turns raw CSV strings into typed values. Every parser returns either the
parsed value or a ParseFailure marker; none of them raise on bad data.
"""

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Union

import pandas as pd

# Leading ASCII numeric prefix, surrounding text is ignored ("42abc" -> 42)
_INT_PREFIX = re.compile(r"^\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


@dataclass(frozen=True)
class ParseFailure:
    """
    Marker for a raw value that could not be coerced.
    """
    field: str  # Column the value came from
    raw: Optional[str]  # Offending raw text
    reason: str  # Short human-readable cause

    def __bool__(self) -> bool:
        return False


def is_blank(value: Any) -> bool:
    """True for None, NaN, and empty or whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, str):
        return value.strip() == ""
    return False


def is_failure(value: Any) -> bool:
    return isinstance(value, ParseFailure)


def or_sentinel(value: Any, sentinel: Any) -> Any:
    """Replace a ParseFailure with *sentinel*, pass anything else through."""
    return sentinel if isinstance(value, ParseFailure) else value


def parse_int(raw: Optional[str], field: str = "") -> Union[int, ParseFailure]:
    """
    Parse the leading base-10 integer of *raw*.

    Args:
        raw: Raw CSV text
        field: Column name, recorded on failure

    Returns:
        int, or ParseFailure when no digits lead the text
    """
    if not isinstance(raw, str):
        return ParseFailure(field, raw, "not a string")

    match = _INT_PREFIX.match(raw)
    if not match:
        return ParseFailure(field, raw, "not an integer")

    try:
        return int(match.group(1))
    except ValueError:
        # Digit strings past sys.get_int_max_str_digits() are refused
        return ParseFailure(field, raw, "integer too large")


def parse_float(raw: Optional[str], field: str = "") -> Union[float, ParseFailure]:
    """
    Parse the leading decimal number of *raw* ("4.5 stars" -> 4.5).

    Args:
        raw: Raw CSV text
        field: Column name, recorded on failure

    Returns:
        float, or ParseFailure when no number leads the text
    """
    if not isinstance(raw, str):
        return ParseFailure(field, raw, "not a string")

    match = _FLOAT_PREFIX.match(raw)
    if not match:
        return ParseFailure(field, raw, "not a number")

    text = match.group(1)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_date(raw: Optional[str], field: str = "") -> Union[date, ParseFailure]:
    """
    Parse a calendar date from whatever textual form the export uses.

    Args:
        raw: Raw CSV text (e.g. "2023-07-14", "07/14/2023")
        field: Column name, recorded on failure

    Returns:
        datetime.date, or ParseFailure when pandas cannot read it
    """
    if not isinstance(raw, str) or not raw.strip():
        return ParseFailure(field, raw, "empty date")

    try:
        parsed = pd.to_datetime(raw.strip(), errors="coerce")
    except (ValueError, TypeError, OverflowError) as e:
        return ParseFailure(field, raw, f"invalid date: {e}")

    if pd.isna(parsed):
        return ParseFailure(field, raw, "invalid date")
    return parsed.date()


def parse_bool(raw: Optional[str]) -> bool:
    """True iff *raw* lower-cased equals "true"; missing values are False."""
    if not isinstance(raw, str):
        return False
    return raw.lower() == "true"
