"""Type-aware, stable ordering of a transaction set."""

from __future__ import annotations

import locale
from typing import Optional

import pandas as pd

from .models import SortConfig
from .parsing import is_blank, parse_amounts, sort_instant


def collation_key(value: str) -> str:
    """Locale collation key; case differences alone do not change the order."""
    return locale.strxfrm(value.casefold())


def _instant_seconds(value) -> float:
    return sort_instant(value).timestamp()


def _text_column(values: pd.Series) -> pd.Series:
    return values.map(lambda v: "" if is_blank(v) else str(v))


def sort_keys(frame: pd.DataFrame, key: str) -> pd.Series:
    """Comparable values for ``key``, aligned with ``frame``'s index."""
    if key == "amount":
        return parse_amounts(frame["amount"])
    if key in ("date", "created_at"):
        return frame[key].map(_instant_seconds).astype(float)
    if key not in frame.columns:
        return pd.Series("", index=frame.index)
    return _text_column(frame[key]).map(collation_key)


def sort_transactions(frame: pd.DataFrame, sort_config: Optional[SortConfig] = None) -> pd.DataFrame:
    """Return a new frame ordered by ``sort_config``.

    The sort is stable in both directions: rows whose keys compare equal
    keep their input order.
    """
    config = sort_config or SortConfig()
    if frame.empty:
        return frame.copy()
    keys = sort_keys(frame, config.key)
    order = keys.sort_values(ascending=config.ascending, kind="mergesort").index
    return frame.loc[order].copy()


def next_sort_config(current: Optional[SortConfig], key: str) -> SortConfig:
    """Sort config after a click on the ``key`` column header."""
    return (current or SortConfig()).toggled(key)
