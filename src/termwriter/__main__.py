# topmark:header:start
#
#   project      : TermWriter
#   file         : __main__.py
#   file_relpath : src/termwriter/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Entry point for `python -m termwriter`."""

from termwriter.cli.main import cli

if __name__ == "__main__":
    cli()
