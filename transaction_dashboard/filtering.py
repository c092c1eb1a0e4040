"""Compound, field-specific filtering of a transaction set.

Every active criterion must hold (logical AND); an empty criterion imposes
no constraint. Filtering is pure: it never mutates its input and keeps the
relative order of the rows it returns.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import pandas as pd

from .logging_setup import get_logger
from .models import FilterCriteria
from .parsing import amount_text, calendar_day, is_blank

logger = get_logger(__name__)

CriteriaLike = Union[FilterCriteria, Mapping[str, Any], None]


def filter_transactions(frame: pd.DataFrame, criteria: CriteriaLike = None) -> pd.DataFrame:
    """Return the rows of ``frame`` matching all active ``criteria``.

    ``frame`` is expected to carry normalized categories (see
    :func:`transaction_dashboard.categories.normalize_categories`).
    """
    criteria = FilterCriteria.from_mapping(criteria)
    if frame.empty or not criteria.is_active():
        return frame.copy()

    mask = pd.Series(True, index=frame.index)
    if criteria.title:
        mask &= title_matches(frame["title"], criteria.title)
    if criteria.category:
        mask &= frame["category"].astype(str).eq(criteria.category)
    if criteria.amount:
        mask &= amount_text(frame["amount"]).str.startswith(criteria.amount)
    if criteria.date:
        mask &= day_matches(frame["date"], criteria.date, field="date")
    if criteria.created_date:
        mask &= day_matches(frame["created_at"], criteria.created_date, field="created_at")

    filtered = frame[mask].copy()
    logger.debug("Filter %s kept %d of %d transactions", criteria.as_dict(), len(filtered), len(frame))
    return filtered


def title_matches(titles: pd.Series, needle: str) -> pd.Series:
    """Case-insensitive literal substring match."""
    haystack = titles.map(lambda v: "" if is_blank(v) else str(v)).str.lower()
    return haystack.str.contains(needle.lower(), regex=False).astype(bool)


def day_matches(values: pd.Series, filter_value: Any, *, field: Optional[str] = None) -> pd.Series:
    """Calendar-day equality between each value and ``filter_value``.

    An unparsable filter value matches nothing; an unparsable or missing
    transaction date does not match. Both cases are logged, never raised.
    """
    label = field or values.name
    target = calendar_day(filter_value)
    if target is None:
        logger.warning("Invalid %s filter value %r; no transactions match", label, filter_value)
        return pd.Series(False, index=values.index)

    def _matches(value: Any) -> bool:
        day = calendar_day(value)
        if day is None:
            if not is_blank(value):
                logger.warning("Invalid %s value %r; treated as non-matching", label, value)
            return False
        return day == target

    return values.map(_matches).astype(bool)
