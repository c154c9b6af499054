# topmark:header:start
#
#   project      : TermWriter
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Pytest configuration for the TermWriter test suite.

Sets up TRACE-level internal logging for test runs, keeps color and log-level
environment variables from leaking into tests, and provides shared fixtures.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from termwriter.config import logging
from termwriter.providers.buffer import StringBufferTerminalProvider

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: Any = pytest.hookimpl(*args, **kwargs)

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell environment out of the tests.

    Removes the variables that influence internal logging and color resolution.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in ("TERMWRITER_LOG_LEVEL", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE-level internal logging for the test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Reinstall the suite's TRACE logging after a test reconfigures it."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def plain_buffer() -> StringBufferTerminalProvider:
    """In-memory provider that asks for plain renderings."""
    return StringBufferTerminalProvider(supports_color=False)


@pytest.fixture
def color_buffer() -> StringBufferTerminalProvider:
    """In-memory provider that asks for ANSI-colored renderings."""
    return StringBufferTerminalProvider(supports_color=True)
