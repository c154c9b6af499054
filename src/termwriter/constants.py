# topmark:header:start
#
#   project      : TermWriter
#   file         : constants.py
#   file_relpath : src/termwriter/constants.py
#   license      : MIT
#   copyright    : (c) 2025 TermWriter contributors
#
# topmark:header:end

"""TermWriter Constants."""

from __future__ import annotations

import os
from importlib.metadata import version as get_version

TERMWRITER_VERSION: str = get_version("termwriter")

# Platform-native line ending appended by the line-oriented terminal methods.
EOL: str = os.linesep

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "TERMWRITER_LOG_LEVEL"
