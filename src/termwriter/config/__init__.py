# topmark:header:start
#
#   project      : TermWriter
#   file         : __init__.py
#   file_relpath : src/termwriter/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""Runtime configuration: internal logging and color-mode resolution."""

from __future__ import annotations

from termwriter.config.color import ColorMode, resolve_color_mode
from termwriter.config.logging import (
    TRACE_LEVEL,
    TermwriterLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)

__all__ = [
    "TRACE_LEVEL",
    "ColorMode",
    "TermwriterLogger",
    "get_logger",
    "resolve_color_mode",
    "resolve_env_log_level",
    "setup_logging",
]
