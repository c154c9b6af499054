# topmark:header:start
#
#   project      : TermWriter
#   file         : buffer.py
#   file_relpath : src/termwriter/providers/buffer.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""In-memory terminal provider.

`StringBufferTerminalProvider` captures everything written to it, split by
severity. It is handy in tests and in host programs that need to inspect or
post-process terminal output.

With ``normalize=True`` the read-back is made platform-independent and
readable: line endings become ``[n]`` and SGR escapes become tokens such as
``[red]``, ``[blue-bg]``, ``[default]`` and ``[default-bg]``.
"""

from __future__ import annotations

import re
from typing import Final

from termwriter.core.colors import (
    BACKGROUND_CODES,
    BACKGROUND_RESET_CODE,
    FOREGROUND_CODES,
    FOREGROUND_RESET_CODE,
)
from termwriter.core.provider import Severity

_SGR_RE: Final[re.Pattern[str]] = re.compile(r"\x1b\[(\d+)m")
_NEWLINE_RE: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")

_CODE_NAMES: Final[dict[int, str]] = {
    **{code: color.value for color, code in FOREGROUND_CODES.items()},
    **{code: f"{color.value}-bg" for color, code in BACKGROUND_CODES.items()},
    FOREGROUND_RESET_CODE: "default",
    BACKGROUND_RESET_CODE: "default-bg",
}


def normalize_output(text: str) -> str:
    """Replace line endings and SGR escapes in `text` with readable tokens.

    Args:
        text (str): Rendered terminal text.

    Returns:
        str: The normalized text.
    """

    def _sgr_token(match: re.Match[str]) -> str:
        code = int(match.group(1))
        return f"[{_CODE_NAMES.get(code, str(code))}]"

    text = _SGR_RE.sub(_sgr_token, text)
    return _NEWLINE_RE.sub("[n]", text)


class StringBufferTerminalProvider:
    """Terminal provider accumulating output in memory.

    Args:
        supports_color (bool): Whether this provider asks for colored renderings.

    Attributes:
        supports_color (bool): Whether this provider asks for colored renderings.
    """

    supports_color: bool

    def __init__(self, supports_color: bool = False) -> None:
        self.supports_color = supports_color
        self._output: list[str] = []
        self._warnings: list[str] = []

    def write(self, text: str, severity: Severity) -> None:
        """Append `text` to the buffer matching `severity`."""
        if severity == Severity.WARN:
            self._warnings.append(text)
        else:
            self._output.append(text)

    def get_output(self, *, normalize: bool = False) -> str:
        """Return everything written with `Severity.LOG`.

        Args:
            normalize (bool): If True, apply `normalize_output` to the result.

        Returns:
            str: The buffered output.
        """
        text = "".join(self._output)
        return normalize_output(text) if normalize else text

    def get_warning_output(self, *, normalize: bool = False) -> str:
        """Return everything written with `Severity.WARN`.

        Args:
            normalize (bool): If True, apply `normalize_output` to the result.

        Returns:
            str: The buffered warning output.
        """
        text = "".join(self._warnings)
        return normalize_output(text) if normalize else text

    def clear(self) -> None:
        """Discard all buffered output."""
        self._output.clear()
        self._warnings.clear()

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"StringBufferTerminalProvider(supports_color={self.supports_color})"
