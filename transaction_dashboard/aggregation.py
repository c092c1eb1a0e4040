"""Summary statistics over a transaction set."""

from __future__ import annotations

import pandas as pd

from . import config
from .models import Summary
from .parsing import parse_amounts


def category_totals(frame: pd.DataFrame) -> pd.Series:
    """Sum parsed amounts per normalized category, in first-seen order."""
    if frame.empty:
        return pd.Series(dtype=float, name="amount")
    amounts = parse_amounts(frame["amount"])
    return amounts.groupby(frame["category"].astype(str), sort=False).sum()


def top_category(frame: pd.DataFrame) -> str:
    """Category with the largest total.

    Ties go to the category encountered first in ``frame``'s row order;
    an empty set yields ``"Unknown"``.
    """
    totals = category_totals(frame)
    if totals.empty:
        return config.UNKNOWN_CATEGORY
    return str(totals.idxmax())


def summarize(frame: pd.DataFrame) -> Summary:
    """Compute total, count, average and top category.

    The average is taken from the unrounded total; both figures are
    rounded to two decimals only for the returned summary.
    """
    count = int(len(frame))
    if count == 0:
        return Summary()
    raw_total = float(parse_amounts(frame["amount"]).sum())
    average = raw_total / count
    return Summary(
        total=round(raw_total, 2),
        count=count,
        average=round(average, 2),
        top_category=top_category(frame),
    )
