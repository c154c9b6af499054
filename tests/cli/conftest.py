# topmark:header:start
#
#   project      : TermWriter
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""CLI test helpers.

Provides a `run_cli` fixture invoking the Click group through
`click.testing.CliRunner`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import pytest
from click.testing import CliRunner

from termwriter.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence

    from click.testing import Result


class RunCli(Protocol):
    """Callable signature of the `run_cli` fixture."""

    def __call__(self, argv: Sequence[str]) -> Result: ...


@pytest.fixture
def run_cli() -> RunCli:
    """Return a helper that invokes the CLI with the given argument vector.

    Returns:
        RunCli: Callable returning the `click.testing.Result` of the invocation.
            ``result.output`` holds stdout and stderr interleaved.
    """

    def _run(argv: Sequence[str]) -> Result:
        runner = CliRunner()
        return runner.invoke(cli, list(argv))

    return _run
