from __future__ import annotations

import types

import numpy as np
import pandas as pd

from transaction_dashboard.categories import normalize_categories, normalize_category
from transaction_dashboard.models import CategoryRef


def test_string_category_is_used_directly() -> None:
    assert normalize_category("Food") == "Food"


def test_reference_objects_expose_their_title() -> None:
    assert normalize_category(CategoryRef(title="House")) == "House"
    assert normalize_category({"title": "Job", "_id": "abc"}) == "Job"
    assert normalize_category(types.SimpleNamespace(title="Travel")) == "Travel"


def test_absent_or_empty_category_is_unknown() -> None:
    for value in (None, "", "   ", np.nan, {"title": ""}, {}, CategoryRef()):
        assert normalize_category(value) == "Unknown", value


def test_normalize_categories_returns_a_copy() -> None:
    df = pd.DataFrame(
        {
            "title": ["Rent", "Groceries", "Gift"],
            "category": [{"title": "House"}, "Food", None],
        }
    )
    result = normalize_categories(df)

    assert result["category"].tolist() == ["House", "Food", "Unknown"]
    assert df["category"].iloc[0] == {"title": "House"}


def test_missing_category_column_defaults_to_unknown() -> None:
    df = pd.DataFrame({"title": ["Rent"]})
    assert normalize_categories(df)["category"].tolist() == ["Unknown"]
