# topmark:header:start
#
#   project      : TermWriter
#   file         : version.py
#   file_relpath : src/termwriter/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""TermWriter `version` command.

Prints the TermWriter version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termwriter.constants import TERMWRITER_VERSION
from termwriter.core import colors

if TYPE_CHECKING:
    from termwriter.core.terminal import Terminal


@click.command(
    name="version",
    help="Show the current version of TermWriter.",
)
def version_command() -> None:
    """Show the current version of TermWriter.

    With ``--verbose`` on the group, a labelled line precedes the bare version.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    terminal: Terminal = ctx.obj["terminal"]

    terminal.write_verbose_line("TermWriter version:")
    terminal.write(colors.green(TERMWRITER_VERSION))
