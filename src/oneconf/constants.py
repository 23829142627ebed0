# topmark:header:start
#
#   project      : oneconf
#   file         : constants.py
#   file_relpath : src/oneconf/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""oneconf Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    ONECONF_VERSION: str = get_version("oneconf")
except PackageNotFoundError:  # running from a source checkout
    ONECONF_VERSION = "0.0.0"

# Environment variable selecting the internal log level (see `oneconf.core.logging`).
LOG_LEVEL_ENV_VAR: Final[str] = "ONECONF_LOG_LEVEL"

# Metadata value on `env` / `long` meaning "never resolve from this source".
SUPPRESS: Final[str] = "-"

# Terminates option parsing on the command line.
ARGS_TERMINATOR: Final[str] = "--"

# Separators used when deriving names from the path chain.
ENV_SEPARATOR: Final[str] = "_"
FLAG_SEPARATOR: Final[str] = "-"
