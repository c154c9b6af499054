# topmark:header:start
#
#   project      : TermWriter
#   file         : __init__.py
#   file_relpath : src/termwriter/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Core terminal model: segments, serialization, provider contract and the writer."""
