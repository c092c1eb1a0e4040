"""Coercion helpers for the text-typed amount and date fields.

Transactions arrive with amounts as text and dates in whatever form the
store produced. None of these helpers raise on bad input: unparsable
amounts become ``0.0`` (or ``""`` for textual matching) and unparsable
dates become ``None``.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

import pandas as pd

EPOCH = pd.Timestamp(0)


def _strip_text(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def parse_amounts(values: pd.Series) -> pd.Series:
    """Parse amount text to floats, unparsable values count as ``0.0``."""
    numeric = pd.to_numeric(values.map(_strip_text), errors="coerce")
    return numeric.fillna(0.0).astype(float)


def amount_text(values: pd.Series) -> pd.Series:
    """Render amounts as written for prefix matching.

    Values that do not parse as a number are rendered as ``""`` so that
    they only satisfy an empty amount filter.
    """
    stripped = values.map(_strip_text)
    numeric = pd.to_numeric(stripped, errors="coerce")
    text = stripped.map(lambda v: v if isinstance(v, str) else str(v))
    return text.where(numeric.notna(), "").astype(str)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def parse_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """Best-effort conversion of a date-like value to a ``Timestamp``."""
    if is_blank(value):
        return None
    try:
        parsed = pd.Timestamp(_strip_text(value))
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    return parsed


def calendar_day(value: Any) -> Optional[date]:
    """Calendar day of ``value`` as written, ignoring time of day and UTC offset."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return None
    return parsed.date()


def sort_instant(value: Any) -> pd.Timestamp:
    """Naive UTC instant used for ordering; unparsable values sort as the epoch."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return EPOCH
    if parsed.tzinfo is not None:
        return parsed.tz_convert("UTC").tz_localize(None)
    return parsed
