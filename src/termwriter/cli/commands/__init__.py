# topmark:header:start
#
#   project      : TermWriter
#   file         : __init__.py
#   file_relpath : src/termwriter/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""TermWriter CLI subcommands."""
