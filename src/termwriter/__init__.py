# topmark:header:start
#
#   project      : TermWriter
#   file         : __init__.py
#   file_relpath : src/termwriter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""TermWriter package.

TermWriter is a small terminal output abstraction: a single `Terminal` writer
fans messages out to registered providers, classifying them by severity and
decorating them with ANSI colors for providers that support it.

Example:
    ```python
    from termwriter import Terminal, colors
    from termwriter.providers import ConsoleTerminalProvider

    terminal = Terminal(ConsoleTerminalProvider())
    terminal.write_line("Status: ", colors.green("ok"))
    terminal.write_warning_line("disk almost full")
    ```
"""

from __future__ import annotations

from termwriter.core import colors
from termwriter.core.colors import Color, ColorableSequence, TextSegment
from termwriter.core.provider import Severity, TerminalProvider
from termwriter.core.serializer import serialize_segments
from termwriter.core.terminal import Terminal

__all__ = [
    "Color",
    "ColorableSequence",
    "Severity",
    "Terminal",
    "TerminalProvider",
    "TextSegment",
    "colors",
    "serialize_segments",
]
