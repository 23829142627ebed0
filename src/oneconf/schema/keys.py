# topmark:header:start
#
#   project      : oneconf
#   file         : keys.py
#   file_relpath : src/oneconf/schema/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical metadata key names for oneconf schemas.

These keys are read from ``dataclasses.field(metadata=...)`` on every schema
field. They form the external schema API: renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Meta:
    """Metadata keys understood by the field walker and the resolvers.

    Notes:
        - Absent keys read as the empty string.
        - ``env`` and ``long`` accept the ``-`` sentinel (see
          `oneconf.constants.SUPPRESS`) meaning "never resolve from this source".
    """

    # Raw default value, applied by `load_defaults`.
    KEY_DEFAULT: Final[str] = "default"

    # Explicit environment variable name (the prefix is prepended).
    KEY_ENV: Final[str] = "env"

    # Single-character short option.
    KEY_SHORT: Final[str] = "short"

    # Long option name, without the leading dashes.
    KEY_LONG: Final[str] = "long"

    # Help text shown by `generate_help`.
    KEY_HELP: Final[str] = "help"

    # Replaces the field name in derived env/flag names and TOML keys.
    KEY_NAME: Final[str] = "name"
