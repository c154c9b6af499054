# topmark:header:start
#
#   project      : TermWriter
#   file         : provider.py
#   file_relpath : src/termwriter/core/provider.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Output provider contract for the terminal writer.

A *terminal provider* is any object that accepts finished, rendered text plus
a severity tag. The protocol is structural: providers do not need to inherit
from anything, they only need the attribute and method below.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class Severity(str, Enum):
    """Routing classification attached to every write.

    Severity is orthogonal to color: it lets a provider decide *where* text
    goes (e.g. stdout vs. stderr), never how it is decorated. Error-labeled
    terminal methods route as `WARN`.

    Attributes:
        LOG: Regular program output.
        WARN: Warnings and errors.
    """

    LOG = "log"
    WARN = "warn"


@runtime_checkable
class TerminalProvider(Protocol):
    """Minimal interface for an output sink registered with a `Terminal`.

    Implementations may write to a stream, a file, an in-memory buffer, or
    anything else. The terminal does not own or inspect provider state beyond
    `supports_color`.

    Attributes:
        supports_color (bool): Whether the provider wants ANSI color codes.
    """

    supports_color: bool

    def write(self, text: str, severity: Severity) -> None:
        """Accept a rendered message.

        Args:
            text (str): Fully rendered text (plain or ANSI-escaped).
            severity (Severity): Routing classification of the message.
        """
        ...
