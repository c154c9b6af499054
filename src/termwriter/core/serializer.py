# topmark:header:start
#
#   project      : TermWriter
#   file         : serializer.py
#   file_relpath : src/termwriter/core/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Serialization of text segment sequences into plain or ANSI-escaped strings.

The serializer is stateless: the same segments always yield the same output for
a given `with_color` flag. In color mode every segment opens its colors with SGR
start codes (foreground first, then background) and closes them in reverse
order, so the most recently opened attribute is reset first.

Example:
    ```python
    from termwriter.core.colors import Color, ColorableSequence
    from termwriter.core.serializer import serialize_segments

    seg = ColorableSequence("hi", foreground_color=Color.YELLOW, background_color=Color.BLUE)
    serialize_segments([seg], with_color=True)
    # '\\x1b[33m\\x1b[44mhi\\x1b[49m\\x1b[39m'
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from termwriter.core.colors import (
    BACKGROUND_CODES,
    BACKGROUND_RESET_CODE,
    FOREGROUND_CODES,
    FOREGROUND_RESET_CODE,
    Color,
    as_sequence,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from termwriter.core.colors import ColorableSequence, TextSegment

ESC: Final[str] = "\x1b"


def sgr(code: int) -> str:
    """Return the ANSI escape sequence for a single SGR code (``ESC[<code>m``)."""
    return f"{ESC}[{code}m"


def _color_codes(segment: ColorableSequence) -> tuple[list[int], list[int]]:
    """Collect the start and end SGR codes for a segment, in push order.

    Only `Color` members are looked up. Any other value, including unhashable
    objects, contributes nothing for its channel.
    """
    start_codes: list[int] = []
    end_codes: list[int] = []

    fg_code: int | None = (
        FOREGROUND_CODES.get(segment.foreground_color)
        if isinstance(segment.foreground_color, Color)
        else None
    )
    if fg_code is not None:
        start_codes.append(fg_code)
        end_codes.append(FOREGROUND_RESET_CODE)

    bg_code: int | None = (
        BACKGROUND_CODES.get(segment.background_color)
        if isinstance(segment.background_color, Color)
        else None
    )
    if bg_code is not None:
        start_codes.append(bg_code)
        end_codes.append(BACKGROUND_RESET_CODE)

    return start_codes, end_codes


def serialize_segments(segments: Iterable[TextSegment], with_color: bool) -> str:
    """Render a sequence of text segments to a single string.

    Args:
        segments (Iterable[TextSegment]): Bare strings and/or `ColorableSequence` records,
            rendered in order.
        with_color (bool): If True, wrap each colored segment in ANSI SGR escape codes.
            If False, only the text of each segment is emitted.

    Returns:
        str: The rendered text.
    """
    parts: list[str] = []
    for segment in segments:
        if not with_color:
            parts.append(segment if isinstance(segment, str) else segment.text)
            continue

        record: ColorableSequence = as_sequence(segment)
        start_codes, end_codes = _color_codes(record)

        parts.extend(sgr(code) for code in start_codes)
        parts.append(record.text)
        parts.extend(sgr(code) for code in reversed(end_codes))

    return "".join(parts)
