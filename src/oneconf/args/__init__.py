# topmark:header:start
#
#   project      : oneconf
#   file         : __init__.py
#   file_relpath : src/oneconf/args/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line argument tokenization used by the flags resolver."""

from __future__ import annotations

from .tokenizer import ParsedArgs, tokenize

__all__: list[str] = [
    "ParsedArgs",
    "tokenize",
]
