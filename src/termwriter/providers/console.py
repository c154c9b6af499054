# topmark:header:start
#
#   project      : TermWriter
#   file         : console.py
#   file_relpath : src/termwriter/providers/console.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Console provider writing rendered terminal output to standard streams.

`LOG` output goes to stdout and `WARN` output to stderr. Writing uses
`click.echo`, which handles encoding quirks of Windows consoles and
non-UTF-8 streams.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

import click

from termwriter.config.color import resolve_color_mode
from termwriter.core.provider import Severity

if TYPE_CHECKING:
    from termwriter.config.color import ColorMode


class ConsoleTerminalProvider:
    """Terminal provider bound to an output and an error stream.

    Args:
        color_mode (ColorMode | None): Requested color mode. `None` behaves like
            `ColorMode.AUTO` (environment, then TTY detection of `out`).
        out (TextIO | None): Stream for `LOG` output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for `WARN` output. Defaults to `sys.stderr`.

    Attributes:
        supports_color (bool): Whether this provider receives ANSI-colored text.
            Resolved once at construction; the owner may reassign it.
        out (TextIO): Stream for `LOG` output.
        err (TextIO): Stream for `WARN` output.
    """

    supports_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        color_mode: ColorMode | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.supports_color = resolve_color_mode(color_mode_override=color_mode, stream=self.out)

    def write(self, text: str, severity: Severity) -> None:
        """Write rendered text to the stream matching `severity`.

        Args:
            text (str): Rendered text; it already carries its own line endings.
            severity (Severity): `LOG` goes to `out`, `WARN` to `err`.
        """
        stream: TextIO = self.err if severity == Severity.WARN else self.out
        click.echo(text, nl=False, file=stream, color=self.supports_color)

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"ConsoleTerminalProvider(supports_color={self.supports_color})"
