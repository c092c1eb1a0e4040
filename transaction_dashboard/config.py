"""Configuration management for the transaction dashboard.

This module centralizes the pipeline constants together with the paths
and logging level that can be overridden through environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in transaction_dashboard/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("TXDASH_DATA_DIR", _PROJECT_ROOT / "data"))

TRANSACTIONS_PATH = Path(
    os.getenv("TXDASH_TRANSACTIONS_PATH", DATA_DIR / "transactions.json")
).resolve()

LOG_LEVEL = os.getenv("TXDASH_LOG_LEVEL", "INFO")

# Pipeline constants
PAGE_SIZE = 10
UNKNOWN_CATEGORY = "Unknown"
TRANSACTION_TYPES = ("income", "expense")

SORT_KEYS = ("title", "category", "amount", "date", "created_at")
SORT_KEY_ALIASES = {"createdAt": "created_at"}
SORT_DIRECTIONS = ("asc", "desc")
DEFAULT_SORT_KEY = "date"
DEFAULT_SORT_DIRECTION = "desc"

# Sequential Plotly colour scales used for the category charts
CHART_COLORSCALES = {
    "income": "Greens",
    "expense": "Oranges",
}


def get_transactions_path() -> str:
    """Get the default transactions file as a string."""
    return str(TRANSACTIONS_PATH)
