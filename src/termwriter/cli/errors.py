# topmark:header:start
#
#   project      : TermWriter
#   file         : errors.py
#   file_relpath : src/termwriter/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Exceptions for the TermWriter CLI.

Styling:
    Exceptions prefer the terminal stored on the Click context (see `show()`);
    if none is present, they fall back to Click's default error display.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from termwriter.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from termwriter.core.terminal import Terminal


class TermwriterError(click.ClickException):
    """Base class for all TermWriter CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        # Click pops the context before calling show(), so capture the terminal now.
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None)
        self.terminal: Terminal | None = obj.get("terminal") if isinstance(obj, dict) else None

    def format_message(self) -> str:
        """Return the plain error message text (coloring happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the captured terminal if available.

        Falls back to Click's default error display when no terminal was found.
        """
        if self.terminal is None:
            super().show(file)
            return
        self.terminal.write_error_line(f"Error: {self.format_message()}")


class TermwriterUsageError(TermwriterError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR
