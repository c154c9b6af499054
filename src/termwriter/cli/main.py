# topmark:header:start
#
#   project      : TermWriter
#   file         : main.py
#   file_relpath : src/termwriter/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Click entry point for the TermWriter CLI.

Group-level options (verbosity, color) are resolved once and a `Terminal`
wrapping a `ConsoleTerminalProvider` is placed into ``ctx.obj["terminal"]``
for subcommands to write through.
"""

from __future__ import annotations

import click

from termwriter.cli.commands.echo import echo_command
from termwriter.cli.commands.version import version_command
from termwriter.cli.options import common_color_options, common_verbose_options
from termwriter.config.color import ColorMode
from termwriter.config.logging import get_logger, resolve_env_log_level, setup_logging
from termwriter.core.terminal import Terminal
from termwriter.providers.console import ConsoleTerminalProvider

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: bool,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, color, terminal) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (bool): Whether verbose-level terminal output is delivered.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    provider = ConsoleTerminalProvider(color_mode=effective_color_mode)
    ctx.obj["color_enabled"] = provider.supports_color
    ctx.color = provider.supports_color

    ctx.obj["terminal"] = Terminal(provider, verbose_enabled=verbose)
    logger.debug("CLI state: color=%s verbose=%s", provider.supports_color, verbose)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TermWriter CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the TermWriter CLI."""
    init_common_state(ctx, verbose=verbose, color_mode=color_mode, no_color=no_color)
    terminal: Terminal = ctx.obj["terminal"]

    if ctx.invoked_subcommand is None:
        terminal.write("Hint: use 'termwriter echo TEXT...' to write a message.")
        terminal.write(ctx.get_help())


cli.add_command(echo_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
