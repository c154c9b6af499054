# topmark:header:start
#
#   project      : TermWriter
#   file         : color.py
#   file_relpath : src/termwriter/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Color-mode resolution for console providers.

This module decides whether a console provider should receive ANSI-colored
renderings. It is Click-free so it can be used from library code, the CLI and
tests alike.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from termwriter.config.logging import get_logger

if TYPE_CHECKING:
    from termwriter.config.logging import TermwriterLogger


logger: TermwriterLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when the stream is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _isatty(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: otherwise, whether the output stream is a TTY.

    Args:
        color_mode_override (ColorMode | None): Explicit color mode; `None` or `AUTO`
            defers to the environment and TTY detection.
        stdout_isatty (bool | None): Optional override for TTY detection.
        stream (TextIO | None): Stream checked for TTY status when `stdout_isatty`
            is None. Defaults to `sys.stdout`.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.debug("Color forced on by FORCE_COLOR=%s", force_color)
        return True
    if os.getenv("NO_COLOR") is not None:
        logger.debug("Color disabled by NO_COLOR")
        return False

    if stdout_isatty is None:
        stdout_isatty = _isatty(stream if stream is not None else sys.stdout)
    return bool(stdout_isatty)
