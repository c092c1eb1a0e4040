"""Ingestion of transaction records into the DataFrame the pipeline works on."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Union

import pandas as pd

from . import config
from .models import Transaction

TRANSACTION_COLUMNS = ["id", "title", "type", "category", "amount", "date", "created_at"]
COLUMN_ALIASES = {"createdAt": "created_at", "_id": "id"}

TransactionsLike = Union[pd.DataFrame, Iterable[Union[Transaction, Mapping[str, Any]]]]


def _as_record(item: Union[Transaction, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(item, Transaction):
        return item.to_record()
    if isinstance(item, Mapping):
        return Transaction.from_record(item).to_record()
    raise TypeError(f"Unsupported transaction record of type {type(item).__name__}")


def _merge_aliases(frame: pd.DataFrame) -> pd.DataFrame:
    """Fold alias columns into their standard names; the standard value wins."""
    for alias, column in COLUMN_ALIASES.items():
        if alias not in frame.columns:
            continue
        if column in frame.columns:
            frame[column] = frame[column].where(frame[column].notna(), frame[alias])
        else:
            frame[column] = frame[alias]
        frame = frame.drop(columns=[alias])
    return frame


def transactions_to_frame(transactions: TransactionsLike) -> pd.DataFrame:
    """Return a fresh DataFrame with the standard transaction columns.

    Input order is kept and the index is reset to a ``RangeIndex``. The
    input itself is never modified.
    """
    if transactions is None:
        return pd.DataFrame(columns=TRANSACTION_COLUMNS)
    if isinstance(transactions, pd.DataFrame):
        frame = _merge_aliases(transactions.copy())
    else:
        records: List[Dict[str, Any]] = [_as_record(item) for item in transactions]
        if not records:
            return pd.DataFrame(columns=TRANSACTION_COLUMNS)
        frame = pd.DataFrame(records)

    for column in TRANSACTION_COLUMNS:
        if column not in frame.columns:
            frame[column] = None
    return frame.reset_index(drop=True)


def split_by_type(frame: pd.DataFrame, transaction_type: str) -> pd.DataFrame:
    """Keep only the ``income`` or ``expense`` rows, preserving order."""
    if transaction_type not in config.TRANSACTION_TYPES:
        raise ValueError(
            f"Unknown transaction type '{transaction_type}'. Expected one of {', '.join(config.TRANSACTION_TYPES)}."
        )
    if frame.empty:
        return frame.copy()
    mask = frame["type"].astype("string").str.strip().str.lower().eq(transaction_type).fillna(False)
    return frame[mask.astype(bool)].copy()
