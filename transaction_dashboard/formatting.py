"""Formatting utilities for currency, dates and table display."""

from __future__ import annotations

from typing import Any, Union

import pandas as pd

from .parsing import calendar_day, parse_amounts

MISSING_DATE = "N/A"

TABLE_COLUMNS = {
    "title": "Title",
    "category": "Category",
    "amount": "Amount",
    "date": "Date",
    "created_at": "Created Date",
}


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a currency amount with two decimals and thousands separators.

    Example:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(1234.56, include_sign=False)
        '1,234.56'
    """
    formatted = f"{amount:,.2f}"
    return f"${formatted}" if include_sign else formatted


def format_day(value: Any, missing: str = MISSING_DATE) -> str:
    """Render a date-like value as ``YYYY-MM-DD`` or ``missing``."""
    day = calendar_day(value)
    return day.isoformat() if day is not None else missing


def format_table_rows(rows: pd.DataFrame) -> pd.DataFrame:
    """Display copy of a page of transactions with human readable columns."""
    if rows.empty:
        return pd.DataFrame(columns=list(TABLE_COLUMNS.values()))
    display = pd.DataFrame(index=rows.index)
    display["Title"] = rows["title"].fillna("").astype(str)
    display["Category"] = rows["category"].astype(str)
    display["Amount"] = parse_amounts(rows["amount"]).map(format_currency)
    display["Date"] = rows["date"].map(format_day)
    display["Created Date"] = rows["created_at"].map(format_day)
    return display
