# topmark:header:start
#
#   project      : TermWriter
#   file         : colors.py
#   file_relpath : src/termwriter/core/colors.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Text segment model and color primitives.

A message written through a [`Terminal`][termwriter.core.terminal.Terminal] is a
sequence of *text segments*. Each segment is either a bare `str` or a
`ColorableSequence` carrying optional foreground/background colors.

Sections:
    * Color: the nine supported terminal colors.
    * ColorableSequence: immutable text record with optional colors.
    * SGR tables: ANSI "Select Graphic Rendition" start/reset codes per channel.
    * Helpers: `red(...)`, `blue_background(...)`, ... wrapping a segment in a color.

Example:
    ```python
    from termwriter.core import colors

    seg = colors.red(colors.white_background("alert"))
    assert seg.foreground_color is colors.Color.RED
    assert seg.background_color is colors.Color.WHITE
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Final, TypeAlias


class Color(str, Enum):
    """Terminal colors supported for foreground and background decoration."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    GRAY = "gray"


@dataclass(frozen=True)
class ColorableSequence:
    """A piece of text with optional foreground and background colors.

    Attributes:
        text (str): The text to render.
        foreground_color (Color | None): Foreground color, or None when unset.
        background_color (Color | None): Background color, or None when unset.
    """

    text: str
    foreground_color: Color | None = None
    background_color: Color | None = None


TextSegment: TypeAlias = str | ColorableSequence

# SGR reset codes: 39 restores the default foreground, 49 the default background.
FOREGROUND_RESET_CODE: Final[int] = 39
BACKGROUND_RESET_CODE: Final[int] = 49

FOREGROUND_CODES: Final[dict[Color, int]] = {
    Color.BLACK: 30,
    Color.RED: 31,
    Color.GREEN: 32,
    Color.YELLOW: 33,
    Color.BLUE: 34,
    Color.MAGENTA: 35,
    Color.CYAN: 36,
    Color.WHITE: 37,
    Color.GRAY: 90,
}

BACKGROUND_CODES: Final[dict[Color, int]] = {
    Color.BLACK: 40,
    Color.RED: 41,
    Color.GREEN: 42,
    Color.YELLOW: 43,
    Color.BLUE: 44,
    Color.MAGENTA: 45,
    Color.CYAN: 46,
    Color.WHITE: 47,
    Color.GRAY: 100,
}


def as_sequence(segment: TextSegment) -> ColorableSequence:
    """Promote a bare string to an uncolored `ColorableSequence`.

    Args:
        segment (TextSegment): A bare string or an existing sequence.

    Returns:
        ColorableSequence: The sequence itself, or a new uncolored one wrapping the string.
    """
    if isinstance(segment, str):
        return ColorableSequence(text=segment)
    return segment


def with_foreground(segment: TextSegment, color: Color) -> ColorableSequence:
    """Return a copy of `segment` whose foreground is forced to `color`.

    Any existing background color is preserved; any existing foreground is
    overwritten. The input is never mutated.

    Args:
        segment (TextSegment): Segment to recolor.
        color (Color): Foreground color to apply.

    Returns:
        ColorableSequence: The recolored copy.
    """
    return replace(as_sequence(segment), foreground_color=color)


def with_background(segment: TextSegment, color: Color) -> ColorableSequence:
    """Return a copy of `segment` whose background is forced to `color`.

    Args:
        segment (TextSegment): Segment to recolor.
        color (Color): Background color to apply.

    Returns:
        ColorableSequence: The recolored copy.
    """
    return replace(as_sequence(segment), background_color=color)


# --- Foreground helpers ---


def black(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a black foreground."""
    return with_foreground(segment, Color.BLACK)


def red(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a red foreground."""
    return with_foreground(segment, Color.RED)


def green(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a green foreground."""
    return with_foreground(segment, Color.GREEN)


def yellow(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a yellow foreground."""
    return with_foreground(segment, Color.YELLOW)


def blue(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a blue foreground."""
    return with_foreground(segment, Color.BLUE)


def magenta(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a magenta foreground."""
    return with_foreground(segment, Color.MAGENTA)


def cyan(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a cyan foreground."""
    return with_foreground(segment, Color.CYAN)


def white(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a white foreground."""
    return with_foreground(segment, Color.WHITE)


def gray(segment: TextSegment) -> ColorableSequence:
    """Render `segment` with a gray foreground."""
    return with_foreground(segment, Color.GRAY)


# --- Background helpers ---


def black_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a black background."""
    return with_background(segment, Color.BLACK)


def red_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a red background."""
    return with_background(segment, Color.RED)


def green_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a green background."""
    return with_background(segment, Color.GREEN)


def yellow_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a yellow background."""
    return with_background(segment, Color.YELLOW)


def blue_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a blue background."""
    return with_background(segment, Color.BLUE)


def magenta_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a magenta background."""
    return with_background(segment, Color.MAGENTA)


def cyan_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a cyan background."""
    return with_background(segment, Color.CYAN)


def white_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a white background."""
    return with_background(segment, Color.WHITE)


def gray_background(segment: TextSegment) -> ColorableSequence:
    """Render `segment` on a gray background."""
    return with_background(segment, Color.GRAY)
