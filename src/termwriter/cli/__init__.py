# topmark:header:start
#
#   project      : TermWriter
#   file         : __init__.py
#   file_relpath : src/termwriter/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""TermWriter CLI package.

A small Click host program around the terminal writer. The console script
entry point is defined in ``pyproject.toml`` as::

    [project.scripts]
    termwriter = "termwriter.cli.main:cli"
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
