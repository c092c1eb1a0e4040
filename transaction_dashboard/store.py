"""Transaction source adapter for the dashboard page.

Reads a JSON or CSV export into a :class:`~transaction_dashboard.models.StoreState`.
Read failures are reported through ``StoreState.error`` so the page can
render them, the same way the view layer treats an upstream store error.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from .logging_setup import get_logger
from .models import StoreState

logger = get_logger(__name__)


def _records_from_json(payload: Any) -> List[Dict[str, Any]]:
    if isinstance(payload, dict):
        payload = payload.get("transactions", [])
    if not isinstance(payload, list):
        raise ValueError("Expected a list of transactions or an object with a 'transactions' list.")
    return [record for record in payload if isinstance(record, dict)]


def read_transactions(path_or_buffer) -> List[Dict[str, Any]]:
    """Load transaction records from a JSON or CSV file (or uploaded buffer).

    CSV columns are kept as text so amounts stay exactly as written.
    """
    if hasattr(path_or_buffer, "read"):
        name = getattr(path_or_buffer, "name", "uploaded_file.json").lower()
        if name.endswith(".csv"):
            df = pd.read_csv(path_or_buffer, dtype=str, keep_default_na=False)
            return df.to_dict(orient="records")
        return _records_from_json(json.load(path_or_buffer))

    path = Path(path_or_buffer)
    ext = path.suffix.lower()
    if ext == ".json":
        with path.open("r", encoding="utf-8") as handle:
            return _records_from_json(json.load(handle))
    if ext == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        return df.to_dict(orient="records")
    raise ValueError(f"Unsupported file extension '{ext}'.")


def load_transactions(path_or_buffer) -> StoreState:
    try:
        records = read_transactions(path_or_buffer)
    except (OSError, ValueError) as exc:
        logger.error("Failed to load transactions from %s: %s", path_or_buffer, exc)
        return StoreState(error=str(exc))
    logger.info("Loaded %d transactions", len(records))
    return StoreState(transactions=records)
