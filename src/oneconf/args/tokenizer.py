# topmark:header:start
#
#   project      : oneconf
#   file         : tokenizer.py
#   file_relpath : src/oneconf/args/tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal command-line tokenizer.

Splits an argument vector (without the program name) into boolean options,
valued options and positional arguments. The grammar is deliberately small:

- ``--`` ends option parsing; everything after it is positional.
- ``--name value`` is a valued long option when ``value`` does not start with
  ``-``; otherwise ``--name`` is a boolean long option. ``--name=value`` is
  always valued.
- ``-abc`` is a cluster of short options; ``a`` and ``b`` are boolean, ``c``
  takes the next token as its value under the same rule as long options.
- ``-`` on its own and anything else is positional.

Repeated options overwrite earlier occurrences.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from oneconf.constants import ARGS_TERMINATOR
from oneconf.core.logging import OneconfLogger, get_logger

logger: OneconfLogger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedArgs:
    """Result of tokenizing an argument vector.

    Attributes:
        booleans (frozenset[str]): Options given without a value (``-v``, ``--verbose``).
        values (Mapping[str, str]): Options given with a value (``-p 80``, ``--port 80``).
        positionals (tuple[str, ...]): Remaining arguments, in order.
    """

    booleans: frozenset[str] = frozenset()
    values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    positionals: tuple[str, ...] = ()

    def lookup(self, option: str) -> str | None:
        """Return the value of ``option``, ``"true"`` if it is boolean, or None if absent."""
        if option in self.values:
            return self.values[option]
        if option in self.booleans:
            return "true"
        return None

    def has(self, option: str) -> bool:
        """Return True if ``option`` was given in any form."""
        return option in self.booleans or option in self.values


class _Collector:
    """Mutable accumulator used while tokenizing."""

    def __init__(self) -> None:
        self.booleans: set[str] = set()
        self.values: dict[str, str] = {}
        self.positionals: list[str] = []

    def flag(self, option: str) -> None:
        self.values.pop(option, None)
        self.booleans.add(option)

    def value(self, option: str, value: str) -> None:
        self.booleans.discard(option)
        self.values[option] = value

    def freeze(self) -> ParsedArgs:
        return ParsedArgs(
            booleans=frozenset(self.booleans),
            values=MappingProxyType(dict(self.values)),
            positionals=tuple(self.positionals),
        )


def _takes_value(argv: Sequence[str], index: int) -> bool:
    """Return True if the token after ``index`` can serve as an option value."""
    return index + 1 < len(argv) and not argv[index + 1].startswith("-")


def tokenize(argv: Sequence[str] | None = None) -> ParsedArgs:
    """Split ``argv`` into boolean options, valued options and positionals.

    Args:
        argv (Sequence[str] | None): Arguments without the program name;
            defaults to ``sys.argv[1:]``.

    Returns:
        ParsedArgs: The tokenized arguments.
    """
    if argv is None:
        argv = sys.argv[1:]

    out = _Collector()
    i = 0
    while i < len(argv):
        token: str = argv[i]

        if token == ARGS_TERMINATOR:
            out.positionals.extend(argv[i + 1 :])
            break

        if token.startswith("--"):
            name: str = token[2:]
            if "=" in name:
                name, _, inline = name.partition("=")
                out.value(name, inline)
            elif _takes_value(argv, i):
                out.value(name, argv[i + 1])
                i += 1
            else:
                out.flag(name)
        elif token.startswith("-") and len(token) > 1:
            *leading, last = token[1:]
            for option in leading:
                out.flag(option)
            if _takes_value(argv, i):
                out.value(last, argv[i + 1])
                i += 1
            else:
                out.flag(last)
        else:
            out.positionals.append(token)
        i += 1

    parsed: ParsedArgs = out.freeze()
    logger.debug(
        "Tokenized %d argument(s): booleans=%s values=%s positionals=%s",
        len(argv),
        sorted(parsed.booleans),
        dict(parsed.values),
        list(parsed.positionals),
    )
    return parsed
