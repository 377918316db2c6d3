# clireport:header:start
#
#   project      : CliReport
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 CliReport contributors
#
# clireport:header:end

"""Logging configuration: TRACE level, env lookup and report tracing."""

from __future__ import annotations

import logging as std_logging

import pytest

from clireport import Code, Properties, Report
from clireport.config import logging
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        ("TRACE", logging.TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("10", 10),
        ("nonsense", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """CLIREPORT_LOG_LEVEL accepts names (any case) and numbers."""
    monkeypatch.setenv(logging.LOG_LEVEL_ENV, value)
    assert logging.resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable no level is resolved."""
    assert logging.resolve_env_log_level() is None


def test_get_logger_has_trace() -> None:
    """Loggers are ClireportLogger instances with a trace method."""
    logger = logging.get_logger("clireport.tests")
    assert isinstance(logger, logging.ClireportLogger)
    assert std_logging.getLevelName(logging.TRACE_LEVEL) == "TRACE"


def test_add_entry_is_traced(caplog: pytest.LogCaptureFixture) -> None:
    """Appending an entry logs a TRACE record."""
    with caplog.at_level(logging.TRACE_LEVEL, logger="clireport.report.report"):
        Report(Code.error("E1", "m")).add_entry(Properties())
    assert any(
        r.levelno == logging.TRACE_LEVEL and "Added entry #1" in r.getMessage()
        for r in caplog.records
    )


def test_chalk_formatter_keeps_message() -> None:
    """Formatted records contain the message text."""
    formatter = logging.ChalkFormatter(logging.LOG_FORMAT)
    record = std_logging.LogRecord("x", std_logging.WARNING, __file__, 1, "hello %s", ("you",), None)
    assert "[WARNING] hello you" in formatter.format(record)


@parametrize("raw", ["NOTSET", "0"])
def test_setup_logging_honors_notset_from_env(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    """An environment level of NOTSET (0) is applied, not replaced by CRITICAL."""
    monkeypatch.setenv(logging.LOG_LEVEL_ENV, raw)
    try:
        logging.setup_logging()
        assert std_logging.getLogger().level == std_logging.NOTSET
    finally:
        logging.setup_logging(level=logging.TRACE_LEVEL)
