# topmark:header:start
#
#   project      : TermWriter
#   file         : test_serializer.py
#   file_relpath : tests/core/test_serializer.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Serializer: plain and ANSI-colored renderings of segment sequences."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from termwriter.core.colors import Color, ColorableSequence
from termwriter.core.serializer import serialize_segments

ESC = "\x1b"

uncolored_segments = st.lists(
    st.one_of(
        st.text(),
        st.builds(ColorableSequence, text=st.text()),
    ),
    max_size=8,
)


@given(segments=uncolored_segments)
def test_uncolored_sequences_render_identically(segments: list[str | ColorableSequence]) -> None:
    """Colored and plain renderings agree when no segment has a color."""
    assert serialize_segments(segments, with_color=True) == serialize_segments(
        segments, with_color=False
    )


def test_red_foreground_wraps_text_in_31_and_39() -> None:
    """A red foreground opens with 31 and resets with 39."""
    seg = ColorableSequence("error", foreground_color=Color.RED)
    assert serialize_segments([seg], with_color=True) == f"{ESC}[31merror{ESC}[39m"


def test_foreground_and_background_close_in_reverse_order() -> None:
    """Foreground opens first, background resets first."""
    seg = ColorableSequence("x", foreground_color=Color.YELLOW, background_color=Color.BLUE)
    assert serialize_segments([seg], with_color=True) == (
        f"{ESC}[33m{ESC}[44mx{ESC}[49m{ESC}[39m"
    )


def test_background_only() -> None:
    """A background without foreground emits only the background pair."""
    seg = ColorableSequence("x", background_color=Color.GRAY)
    assert serialize_segments([seg], with_color=True) == f"{ESC}[100mx{ESC}[49m"


@pytest.mark.parametrize(
    ("color", "fg_code", "bg_code"),
    [
        (Color.BLACK, 30, 40),
        (Color.RED, 31, 41),
        (Color.GREEN, 32, 42),
        (Color.YELLOW, 33, 43),
        (Color.BLUE, 34, 44),
        (Color.MAGENTA, 35, 45),
        (Color.CYAN, 36, 46),
        (Color.WHITE, 37, 47),
        (Color.GRAY, 90, 100),
    ],
)
def test_color_code_table(color: Color, fg_code: int, bg_code: int) -> None:
    """Each color maps to its documented foreground and background SGR codes."""
    fg = serialize_segments([ColorableSequence("t", foreground_color=color)], with_color=True)
    bg = serialize_segments([ColorableSequence("t", background_color=color)], with_color=True)
    assert fg == f"{ESC}[{fg_code}mt{ESC}[39m"
    assert bg == f"{ESC}[{bg_code}mt{ESC}[49m"


def test_plain_mode_ignores_colors() -> None:
    """Plain rendering concatenates text only."""
    segments = [
        "a",
        ColorableSequence("b", foreground_color=Color.RED),
        ColorableSequence("c", background_color=Color.CYAN),
    ]
    assert serialize_segments(segments, with_color=False) == "abc"


def test_segments_are_not_coalesced() -> None:
    """Adjacent segments with the same color are each wrapped separately."""
    segments = [
        ColorableSequence("a", foreground_color=Color.GREEN),
        ColorableSequence("b", foreground_color=Color.GREEN),
    ]
    assert serialize_segments(segments, with_color=True) == (
        f"{ESC}[32ma{ESC}[39m{ESC}[32mb{ESC}[39m"
    )


def test_unknown_color_values_emit_no_codes() -> None:
    """Values outside the color table are ignored for their channel."""
    seg = ColorableSequence(
        "x",
        foreground_color="purple",  # type: ignore[arg-type]
        background_color=Color.RED,
    )
    assert serialize_segments([seg], with_color=True) == f"{ESC}[41mx{ESC}[49m"


@pytest.mark.parametrize("bogus", [["red"], {"fg": "red"}, "red", 31])
def test_malformed_color_values_never_raise(bogus: object) -> None:
    """Unhashable or non-`Color` values render the text alone instead of raising."""
    seg = ColorableSequence(
        "x",
        foreground_color=bogus,  # type: ignore[arg-type]
        background_color=bogus,  # type: ignore[arg-type]
    )
    assert serialize_segments([seg], with_color=True) == "x"


def test_bare_strings_are_not_mutated() -> None:
    """Bare strings pass through color mode unchanged."""
    segments: list[str | ColorableSequence] = ["plain", " text"]
    assert serialize_segments(segments, with_color=True) == "plain text"
    assert segments == ["plain", " text"]


def test_empty_sequence() -> None:
    """No segments render to an empty string in both modes."""
    assert serialize_segments([], with_color=True) == ""
    assert serialize_segments([], with_color=False) == ""
