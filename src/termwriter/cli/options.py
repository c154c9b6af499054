# topmark:header:start
#
#   project      : TermWriter
#   file         : options.py
#   file_relpath : src/termwriter/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Common CLI options (verbosity, color) shared by the TermWriter group."""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from termwriter.cli.cli_types import EnumChoiceParam
from termwriter.config.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the -v/--verbose flag that enables verbose terminal output.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        is_flag=True,
        default=False,
        help="Deliver verbose-level messages.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
