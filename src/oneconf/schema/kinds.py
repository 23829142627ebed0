# topmark:header:start
#
#   project      : oneconf
#   file         : kinds.py
#   file_relpath : src/oneconf/schema/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field kinds and sized numeric annotations.

Python has a single ``int`` and a single ``float``; schemas that need the
width-checked or unsigned behavior annotate fields with the aliases below:

```python
@dataclass
class Server:
    port: UInt16 = setting(0, default="8080")
    retries: Int8 = setting(0, default="3")
    ratio: Float32 = setting(0.0)
```

Plain ``int`` and ``float`` behave like ``Int64`` and ``Float64``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Final, get_args, get_origin


class FieldKind(str, Enum):
    """Kind of a schema field, as seen by the walker and the coercer."""

    STRING = "string"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    BOOL = "bool"
    NESTED = "nested"


@dataclass(frozen=True)
class Width:
    """``Annotated`` marker selecting a numeric kind and bit width."""

    kind: FieldKind
    bits: int


Int8 = Annotated[int, Width(FieldKind.INT, 8)]
Int16 = Annotated[int, Width(FieldKind.INT, 16)]
Int32 = Annotated[int, Width(FieldKind.INT, 32)]
Int64 = Annotated[int, Width(FieldKind.INT, 64)]

UInt = Annotated[int, Width(FieldKind.UINT, 64)]
UInt8 = Annotated[int, Width(FieldKind.UINT, 8)]
UInt16 = Annotated[int, Width(FieldKind.UINT, 16)]
UInt32 = Annotated[int, Width(FieldKind.UINT, 32)]
UInt64 = Annotated[int, Width(FieldKind.UINT, 64)]

Float32 = Annotated[float, Width(FieldKind.FLOAT, 32)]
Float64 = Annotated[float, Width(FieldKind.FLOAT, 64)]

# Builtin leaf types and their (kind, bits).
_BUILTIN_KINDS: Final[dict[type, tuple[FieldKind, int]]] = {
    str: (FieldKind.STRING, 0),
    bool: (FieldKind.BOOL, 0),
    int: (FieldKind.INT, 64),
    float: (FieldKind.FLOAT, 64),
}

# Used when annotations cannot be evaluated and only their source text is known.
_NAMED_KINDS: Final[dict[str, tuple[FieldKind, int]]] = {
    "str": (FieldKind.STRING, 0),
    "bool": (FieldKind.BOOL, 0),
    "int": (FieldKind.INT, 64),
    "float": (FieldKind.FLOAT, 64),
    "Int8": (FieldKind.INT, 8),
    "Int16": (FieldKind.INT, 16),
    "Int32": (FieldKind.INT, 32),
    "Int64": (FieldKind.INT, 64),
    "UInt": (FieldKind.UINT, 64),
    "UInt8": (FieldKind.UINT, 8),
    "UInt16": (FieldKind.UINT, 16),
    "UInt32": (FieldKind.UINT, 32),
    "UInt64": (FieldKind.UINT, 64),
    "Float32": (FieldKind.FLOAT, 32),
    "Float64": (FieldKind.FLOAT, 64),
}


def classify(hint: Any) -> tuple[FieldKind, int] | None:
    """Return the leaf kind and bit width for a field annotation.

    Args:
        hint (Any): An evaluated annotation, or its source text when it could
            not be evaluated.

    Returns:
        tuple[FieldKind, int] | None: ``(kind, bits)`` for supported leaf
        annotations, ``None`` for anything else (containers, optionals, nested
        records). ``bits`` is ``0`` for strings and booleans.
    """
    if isinstance(hint, str):
        return _NAMED_KINDS.get(hint.strip())

    if get_origin(hint) is Annotated:
        base, *extras = get_args(hint)
        for extra in extras:
            if isinstance(extra, Width):
                return extra.kind, extra.bits
        return classify(base)

    if isinstance(hint, type):
        return _BUILTIN_KINDS.get(hint)
    return None
