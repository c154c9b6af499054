# topmark:header:start
#
#   project      : TermWriter
#   file         : echo.py
#   file_relpath : src/termwriter/cli/commands/echo.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""TermWriter `echo` command.

Writes a message through the context terminal using the operation that matches
``--kind``. Every kind ends the message with exactly one line ending:

| kind      | terminal operation     | stream |
|-----------|------------------------|--------|
| `log`     | `write`                | stdout |
| `warning` | `write_warning_line`   | stderr |
| `error`   | `write_error_line`     | stderr |
| `verbose` | `write_verbose_line`   | stdout (only with `-v`) |
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

import click

from termwriter.cli.cli_types import EnumChoiceParam
from termwriter.cli.errors import TermwriterUsageError
from termwriter.core.colors import Color, ColorableSequence

if TYPE_CHECKING:
    from collections.abc import Callable

    from termwriter.core.colors import TextSegment
    from termwriter.core.terminal import Terminal


class EchoKind(str, Enum):
    """Kind of message written by `termwriter echo`."""

    LOG = "log"
    WARNING = "warning"
    ERROR = "error"
    VERBOSE = "verbose"


def _operation_for(terminal: Terminal, kind: EchoKind) -> Callable[..., None]:
    return {
        EchoKind.LOG: terminal.write,
        EchoKind.WARNING: terminal.write_warning_line,
        EchoKind.ERROR: terminal.write_error_line,
        EchoKind.VERBOSE: terminal.write_verbose_line,
    }[kind]


@click.command(
    name="echo",
    help="Write TEXT through the terminal, optionally colored.",
)
@click.argument("text", nargs=-1, required=True)
@click.option(
    "--kind",
    type=EnumChoiceParam(EchoKind),
    default=EchoKind.LOG.value,
    show_default=True,
    help=f"Message kind ({', '.join(k.value for k in EchoKind)}).",
)
@click.option(
    "--fg",
    "foreground",
    type=EnumChoiceParam(Color),
    default=None,
    help="Foreground color (not allowed with --kind warning/error).",
)
@click.option(
    "--bg",
    "background",
    type=EnumChoiceParam(Color),
    default=None,
    help="Background color.",
)
def echo_command(
    *,
    text: tuple[str, ...],
    kind: EchoKind,
    foreground: Color | None,
    background: Color | None,
) -> None:
    """Write a message through the context terminal.

    Args:
        text (tuple[str, ...]): Message words, joined with single spaces.
        kind (EchoKind): Which terminal operation to use.
        foreground (Color | None): Optional foreground color.
        background (Color | None): Optional background color.

    Raises:
        TermwriterUsageError: If `--fg` is combined with a kind that forces its own color.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    terminal: Terminal = ctx.obj["terminal"]

    if foreground is not None and kind in (EchoKind.WARNING, EchoKind.ERROR):
        raise TermwriterUsageError(f"'--fg' cannot be combined with '--kind {kind.value}'.")

    segment: TextSegment = ColorableSequence(
        " ".join(text),
        foreground_color=foreground,
        background_color=background,
    )
    _operation_for(terminal, kind)(segment)
