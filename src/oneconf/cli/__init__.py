# topmark:header:start
#
#   project      : oneconf
#   file         : __init__.py
#   file_relpath : src/oneconf/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for oneconf."""

from __future__ import annotations
