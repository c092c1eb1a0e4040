from __future__ import annotations

import io
import logging

import pytest

from transaction_dashboard import logging_setup


@pytest.fixture
def package_logger(monkeypatch):
    logger = logging.getLogger("transaction_dashboard")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    yield logger
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def test_configure_logging_attaches_one_handler(package_logger) -> None:
    stream = io.StringIO()
    logging_setup.configure_logging("DEBUG", fmt="%(levelname)s %(message)s", stream=stream)
    logging_setup.configure_logging("ERROR", stream=stream)

    logging_setup.get_logger("transaction_dashboard.filtering").debug("hello")

    stream_handlers = [h for h in package_logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert stream.getvalue().strip() == "DEBUG hello"


def test_level_falls_back_to_config(package_logger, monkeypatch) -> None:
    monkeypatch.setattr(logging_setup.config, "LOG_LEVEL", "warning")
    logging_setup.configure_logging(stream=io.StringIO())
    assert package_logger.level == logging.WARNING


def test_level_names_and_numbers_are_parsed() -> None:
    assert logging_setup._parse_level("debug") == logging.DEBUG
    assert logging_setup._parse_level(" 15 ") == 15
    assert logging_setup._parse_level("chatty") == logging.INFO


def test_get_logger_is_silent_before_configuration(package_logger) -> None:
    package_logger.handlers[:] = []
    logging_setup.get_logger("transaction_dashboard.view")
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)
