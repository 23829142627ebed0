# topmark:header:start
#
#   project      : oneconf
#   file         : __init__.py
#   file_relpath : src/oneconf/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, source-agnostic primitives shared across oneconf.

Included modules:

- ``errors``
  The exception hierarchy raised by loaders (`MalformedValueError`,
  `SourceUnavailableError`) and the `fatal` sink that turns them into a
  process exit.

- ``exit_codes``
  Centralized exit codes for the fatal sink and the CLI.

- ``logging``
  Logger class with a TRACE level and colored output.
"""

from __future__ import annotations
