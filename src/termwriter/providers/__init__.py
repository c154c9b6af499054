# topmark:header:start
#
#   project      : TermWriter
#   file         : __init__.py
#   file_relpath : src/termwriter/providers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Bundled terminal providers."""

from __future__ import annotations

from termwriter.providers.buffer import StringBufferTerminalProvider, normalize_output
from termwriter.providers.console import ConsoleTerminalProvider

__all__ = [
    "ConsoleTerminalProvider",
    "StringBufferTerminalProvider",
    "normalize_output",
]
