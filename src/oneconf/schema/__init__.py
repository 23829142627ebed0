# topmark:header:start
#
#   project      : oneconf
#   file         : __init__.py
#   file_relpath : src/oneconf/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema declaration, traversal and value coercion.

A schema is a mutable dataclass whose fields carry oneconf metadata (see
`setting`). Every loader in `oneconf.sources` performs one `walk` over the
same instance with its own resolver callback.
"""

from __future__ import annotations

from .coerce import coerce, parse_bool, parse_float, parse_int, parse_uint
from .keys import Meta
from .kinds import (
    FieldKind,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    Width,
    classify,
)
from .metadata import Metadata, setting
from .walker import FieldDescriptor, Visit, field_key, schema_hints, walk

__all__: list[str] = [
    "FieldDescriptor",
    "FieldKind",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Meta",
    "Metadata",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Visit",
    "Width",
    "classify",
    "coerce",
    "field_key",
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_uint",
    "schema_hints",
    "setting",
    "walk",
]
