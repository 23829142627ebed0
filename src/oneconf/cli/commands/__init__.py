# topmark:header:start
#
#   project      : oneconf
#   file         : __init__.py
#   file_relpath : src/oneconf/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``oneconf`` CLI."""

from __future__ import annotations
