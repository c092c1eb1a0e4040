"""Logging for the ``transaction_dashboard`` package.

Modules log through ``get_logger(__name__)``. Until the Streamlit page calls
:func:`configure_logging`, records go nowhere; afterwards they are written to
a single stream handler on the ``transaction_dashboard`` logger.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from . import config

_PKG_LOGGER_NAME = "transaction_dashboard"
_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    """Level from an int, a name such as ``"debug"`` or a numeric string."""
    if isinstance(level, int):
        return level
    name = str(config.LOG_LEVEL if level is None else level).strip().upper()
    if name.isdigit():
        return int(name)
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _stream_handler(stream: IO[str], level: int, fmt: str | None) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))
    return handler


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send package log records to ``stream``; later calls are ignored.

    ``level`` defaults to ``TXDASH_LOG_LEVEL`` (``INFO`` when unset).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved = _parse_level(level)
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    pkg_logger.handlers = [
        h for h in pkg_logger.handlers if not isinstance(h, logging.NullHandler)
    ]
    pkg_logger.addHandler(_stream_handler(stream, resolved, fmt))
    pkg_logger.setLevel(resolved)
    # Streamlit configures the root logger too.
    pkg_logger.propagate = False
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
