# topmark:header:start
#
#   project      : TermWriter
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Internal logging: TRACE level, env resolution and formatter colors."""

from __future__ import annotations

import io
import logging

import pytest

from termwriter.config.logging import (
    HANDLER_NAME,
    LOGGER_NAME,
    TRACE_LEVEL,
    ChalkFormatter,
    TermwriterLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from termwriter.core.terminal import Terminal
from termwriter.providers.buffer import StringBufferTerminalProvider


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """Names (case-insensitive) and numbers are accepted; unknown names yield None."""
    monkeypatch.setenv("TERMWRITER_LOG_LEVEL", raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable, no level is resolved."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_trace_capable_logger() -> None:
    """Package loggers expose `trace`."""
    logger = get_logger("termwriter.core.terminal")
    assert isinstance(logger, TermwriterLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_terminal_traces_registration(caplog: pytest.LogCaptureFixture) -> None:
    """Provider registration is logged at TRACE level."""
    with caplog.at_level(TRACE_LEVEL, logger="termwriter.core.terminal"):
        terminal = Terminal(StringBufferTerminalProvider())
        terminal.register_provider(StringBufferTerminalProvider(supports_color=True))

    messages = [r.getMessage() for r in caplog.records if r.levelno == TRACE_LEVEL]
    assert sum("Registered provider" in m for m in messages) == 2


def test_chalk_formatter_keeps_message_text() -> None:
    """The formatter decorates, but never drops, the message."""
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "disk %s", ("full",), None)
    formatted = ChalkFormatter("[%(levelname)s] %(message)s").format(record)
    assert "[WARNING] disk full" in formatted


def test_setup_logging_writes_to_given_stream(restore_logging: None) -> None:
    """Records from package loggers reach the configured stream."""
    stream = io.StringIO()
    setup_logging(level=logging.DEBUG, stream=stream)

    get_logger("termwriter.config.color").debug("render count %d", 42)

    assert "[DEBUG]" in stream.getvalue()
    assert "render count 42" in stream.getvalue()


def test_setup_logging_replaces_its_own_handler_only(restore_logging: None) -> None:
    """Repeated setup keeps one diagnostics handler and leaves foreign handlers alone."""
    package_logger = logging.getLogger(LOGGER_NAME)
    foreign = logging.NullHandler()
    package_logger.addHandler(foreign)
    try:
        setup_logging(level=logging.INFO, stream=io.StringIO())
        setup_logging(level=logging.INFO, stream=io.StringIO())

        own = [h for h in package_logger.handlers if h.get_name() == HANDLER_NAME]
        assert len(own) == 1
        assert foreign in package_logger.handlers
    finally:
        package_logger.removeHandler(foreign)


def test_setup_logging_leaves_root_logger_alone(restore_logging: None) -> None:
    """Only the `termwriter` logger is configured."""
    root_handlers = list(logging.getLogger().handlers)
    setup_logging(level=logging.WARNING, stream=io.StringIO())
    assert logging.getLogger().handlers == root_handlers


def test_setup_logging_defaults_to_stderr(
    restore_logging: None, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without an explicit stream, diagnostics go to stderr, never stdout."""
    setup_logging(level=logging.WARNING)

    get_logger("termwriter.cli.main").warning("careful")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "careful" in captured.err
