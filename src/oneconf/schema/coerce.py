# topmark:header:start
#
#   project      : oneconf
#   file         : coerce.py
#   file_relpath : src/oneconf/schema/coerce.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conversion of raw string values into field values.

Every leaf kind maps to exactly one rule:

- string: stored as-is.
- int: decimal digits with an optional sign, range-checked for the width.
- uint: ``0x`` (hex), ``0o`` (octal), ``0b`` (binary) or decimal, no sign,
  range-checked for the width.
- float: decimal or exponential notation, ``inf`` and ``nan``.
- bool: ``1 t T TRUE true True`` / ``0 f F FALSE false False``.

Anything else raises `MalformedValueError`.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Final

from oneconf.core.errors import MalformedValueError
from oneconf.schema.kinds import FieldKind

if TYPE_CHECKING:
    from oneconf.schema.walker import FieldDescriptor

TRUE_LITERALS: Final[frozenset[str]] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS: Final[frozenset[str]] = frozenset({"0", "f", "F", "FALSE", "false", "False"})

UINT_BASES: Final[dict[str, int]] = {"0x": 16, "0o": 8, "0b": 2}

FLOAT32_MAX: Final[float] = 3.4028234663852886e38

_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_INF_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)
_DIGITS: Final[dict[int, re.Pattern[str]]] = {
    2: re.compile(r"[01]+"),
    8: re.compile(r"[0-7]+"),
    10: re.compile(r"[0-9]+"),
    16: re.compile(r"[0-9a-fA-F]+"),
}


def int_bounds(bits: int) -> tuple[int, int]:
    """Return the inclusive range of a signed integer of ``bits`` bits."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def uint_bounds(bits: int) -> tuple[int, int]:
    """Return the inclusive range of an unsigned integer of ``bits`` bits."""
    return 0, (1 << bits) - 1


def parse_int(raw: str, bits: int = 64) -> int | None:
    """Parse a signed decimal integer; return None if malformed or out of range."""
    if not _DECIMAL_RE.fullmatch(raw):
        return None
    value = int(raw, 10)
    low, high = int_bounds(bits)
    return value if low <= value <= high else None


def split_base(raw: str) -> tuple[str, int]:
    """Strip a ``0x``/``0o``/``0b`` prefix and return ``(digits, base)``."""
    base: int | None = UINT_BASES.get(raw[:2])
    if base is None:
        return raw, 10
    return raw[2:], base


def parse_uint(raw: str, bits: int = 64) -> int | None:
    """Parse an unsigned integer in base 2, 8, 10 or 16; return None if invalid."""
    digits, base = split_base(raw)
    if not _DIGITS[base].fullmatch(digits):
        return None
    value = int(digits, base)
    low, high = uint_bounds(bits)
    return value if low <= value <= high else None


def parse_float(raw: str, bits: int = 64) -> float | None:
    """Parse a float; return None if malformed or out of range for ``bits``."""
    if not _FLOAT_RE.fullmatch(raw):
        return None
    value = float(raw)
    if math.isinf(value) and not _INF_RE.fullmatch(raw):
        # Overflowed to infinity.
        return None
    if bits == 32 and math.isfinite(value) and abs(value) > FLOAT32_MAX:
        return None
    return value


def parse_bool(raw: str) -> bool | None:
    """Parse a boolean literal; return None if not recognized."""
    if raw in TRUE_LITERALS:
        return True
    if raw in FALSE_LITERALS:
        return False
    return None


def coerce(raw: str, descriptor: FieldDescriptor) -> str | int | float | bool:
    """Convert ``raw`` into the native type of ``descriptor``.

    Args:
        raw (str): Raw value returned by a resolver.
        descriptor (FieldDescriptor): The field being assigned.

    Returns:
        str | int | float | bool: The converted value.

    Raises:
        MalformedValueError: If ``raw`` is not a valid literal for the field kind.
    """
    kind: FieldKind = descriptor.kind
    value: str | int | float | bool | None
    if kind is FieldKind.STRING:
        value = raw
    elif kind is FieldKind.INT:
        value = parse_int(raw, descriptor.bits or 64)
    elif kind is FieldKind.UINT:
        value = parse_uint(raw, descriptor.bits or 64)
    elif kind is FieldKind.FLOAT:
        value = parse_float(raw, descriptor.bits or 64)
    elif kind is FieldKind.BOOL:
        value = parse_bool(raw)
    else:
        value = None

    if value is None:
        raise MalformedValueError(raw, descriptor.name, kind.value, path=descriptor.path)
    return value
