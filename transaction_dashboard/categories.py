"""Canonicalization of the polymorphic ``category`` field.

The store sends a category either as a plain string or as a reference
object exposing ``title``. Every downstream stage only ever sees the
flat string produced here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd

from . import config
from .models import CategoryRef
from .parsing import is_blank


def normalize_category(value: Any) -> str:
    """Return the category title, ``"Unknown"`` when absent or empty."""
    if isinstance(value, str):
        title: Any = value
    elif isinstance(value, CategoryRef):
        title = value.title
    elif isinstance(value, Mapping):
        title = value.get("title")
    elif hasattr(value, "title") and not pd.api.types.is_scalar(value):
        title = getattr(value, "title")
    else:
        title = None if is_blank(value) else value

    if is_blank(title):
        return config.UNKNOWN_CATEGORY
    return str(title)


def normalize_categories(frame: pd.DataFrame) -> pd.DataFrame:
    """Return a copy of ``frame`` whose ``category`` column holds plain strings."""
    normalized = frame.copy()
    if "category" not in normalized.columns:
        normalized["category"] = config.UNKNOWN_CATEGORY
        return normalized
    normalized["category"] = normalized["category"].map(normalize_category).astype(object)
    return normalized
