# topmark:header:start
#
#   project      : TermWriter
#   file         : logging.py
#   file_relpath : src/termwriter/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Internal diagnostics logging for TermWriter.

TermWriter logs its own diagnostics (provider registration, render counts, CLI
state) through the `termwriter` package logger. User-facing output never goes
through logging: it is written by a
[`Terminal`][termwriter.core.terminal.Terminal] to its providers.

Sections:
    * TRACE: a level below DEBUG, used for per-write fan-out details.
    * ChalkFormatter: yachalk-colored records, one style per level band.
    * setup_logging: installs a single handler on the `termwriter` logger. The
      handler writes to ``sys.stderr`` by default, so diagnostics never mix with
      the program output a console provider writes to ``sys.stdout``.

Host programs that configure logging themselves can skip `setup_logging`:
records still propagate to the root logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, TYPE_CHECKING, Final, cast

from yachalk import chalk

from termwriter.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

# Root of every logger obtained through `get_logger(__name__)` in this package.
LOGGER_NAME: Final[str] = "termwriter"

# Name given to the handler installed by `setup_logging`, so repeated calls replace it.
HANDLER_NAME: Final[str] = "termwriter-diagnostics"


class TermwriterLogger(logging.Logger):
    """Logger class adding `trace()` for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(TermwriterLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Lowest level of each band, highest first. Records below TRACE fall through to dim red.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record with the style of its level band."""

    def format(self, record: logging.LogRecord) -> str:
        """Format `record` and color it according to its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colored, formatted record.
        """
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``TERMWRITER_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names case-insensitively (including "TRACE") and plain integers.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None, *, stream: IO[str] | None = None) -> None:
    """Configure the `termwriter` logger with a colored handler.

    Args:
        level (int | None): Level for the `termwriter` logger. If None, the environment is
            consulted via
            [`resolve_env_log_level`][termwriter.config.logging.resolve_env_log_level],
            falling back to CRITICAL.
        stream (IO[str] | None): Destination of log records. Defaults to the current
            ``sys.stderr``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)

    for existing in package_logger.handlers[:]:
        if existing.get_name() == HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(HANDLER_NAME)
    log_format = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(log_format))
    package_logger.addHandler(handler)


def get_logger(name: str) -> TermwriterLogger:
    """Return the `TermwriterLogger` called `name` (normally a module's ``__name__``).

    Args:
        name (str): The name of the logger.

    Returns:
        TermwriterLogger: The logger instance.
    """
    return cast("TermwriterLogger", logging.getLogger(name))
