# topmark:header:start
#
#   project      : oneconf
#   file         : toml_file.py
#   file_relpath : src/oneconf/sources/toml_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load field values from a TOML document.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Tables
map onto nested records and keys onto leaf fields; the key of a field is its
``name`` metadata or its attribute name.

TOML values are typed, so the resolver turns them back into raw literals for
the coercer: integers and floats keep their notation, booleans become
``true``/``false``. Strings are accepted for every leaf kind and go through
the regular coercion rules, which lets ``port = "0x1F90"`` work for unsigned
fields.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from oneconf.core.errors import MalformedValueError, SourceUnavailableError
from oneconf.core.logging import get_logger
from oneconf.schema.kinds import FieldKind, classify
from oneconf.schema.walker import field_key, schema_hints

if TYPE_CHECKING:
    from pathlib import Path

    from oneconf.core.logging import OneconfLogger
    from oneconf.schema.walker import FieldDescriptor, Visit

TomlTable = dict[str, Any]

logger: OneconfLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        SourceUnavailableError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise SourceUnavailableError(path, str(e)) from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s as UTF-8: %s", path, e)
        raise SourceUnavailableError(path, str(e)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise SourceUnavailableError(path, str(e)) from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if is_toml_table(data_any) else {}


def _subtable(table: TomlTable, path: tuple[str, ...]) -> TomlTable | None:
    current: TomlTable = table
    for key in path:
        value: Any = current.get(key)
        if not is_toml_table(value):
            return None
        current = value
    return current


def _to_raw(value: Any, descriptor: FieldDescriptor) -> str:
    """Turn a TOML value into a raw literal for ``descriptor``."""
    if isinstance(value, str):
        return value
    if descriptor.kind is not FieldKind.STRING:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return repr(value)
    raise MalformedValueError(value, descriptor.name, descriptor.kind.value, path=descriptor.path)


def toml_resolver(table: TomlTable, seen: set[tuple[str, ...]] | None = None) -> Visit:
    """Return a resolver answering from a parsed TOML table.

    Args:
        table (TomlTable): Parsed document.
        seen (set[tuple[str, ...]] | None): If given, receives the key chain of
            every field found in ``table``.

    Returns:
        Visit: The resolver callback.
    """

    def resolve(descriptor: FieldDescriptor) -> str | None:
        sub: TomlTable | None = _subtable(table, descriptor.path)
        if sub is None or descriptor.key not in sub:
            return None
        if seen is not None:
            seen.add(descriptor.chain)
        return _to_raw(sub[descriptor.key], descriptor)

    return resolve


def to_table(record: Any) -> TomlTable:
    """Return the leaf and nested values of ``record`` keyed like a TOML document.

    Fields the walker would skip (unsupported kinds, ``None`` values) are
    left out, since TOML has no ``null``.
    """
    hints: dict[str, Any] = schema_hints(type(record))
    leaves: TomlTable = {}
    tables: TomlTable = {}
    for f in dataclasses.fields(record):
        value: Any = getattr(record, f.name)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            tables[field_key(f)] = to_table(value)
        elif value is not None and classify(hints.get(f.name, f.type)) is not None:
            leaves[field_key(f)] = value
        else:
            logger.debug("Not rendering field %s: %r", f.name, value)
    # Plain keys must precede sub-tables in a TOML document.
    return {**leaves, **tables}


def to_toml(record: Any) -> str:
    """Render the current values of ``record`` as a TOML document.

    Args:
        record (Any): Configuration dataclass instance.

    Returns:
        str: The rendered TOML document.
    """
    # tomlkit is treated as untyped here.
    return cast("str", cast("Any", tomlkit).dumps(to_table(record)))


def unknown_keys(table: TomlTable, seen: set[tuple[str, ...]]) -> list[str]:
    """Return the dotted keys of ``table`` that did not match any field."""
    prefixes: set[tuple[str, ...]] = {chain[:i] for chain in seen for i in range(1, len(chain))}
    out: list[str] = []

    def visit(sub: TomlTable, path: tuple[str, ...]) -> None:
        for key, value in sub.items():
            chain: tuple[str, ...] = (*path, key)
            if chain in seen:
                continue
            if is_toml_table(value) and chain in prefixes:
                visit(value, chain)
            else:
                out.append(".".join(chain))

    visit(table, ())
    return out
