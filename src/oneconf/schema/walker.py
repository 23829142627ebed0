# topmark:header:start
#
#   project      : oneconf
#   file         : walker.py
#   file_relpath : src/oneconf/schema/walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic traversal of schema dataclasses.

`walk` visits every leaf field of a (possibly nested) dataclass instance in
declaration order. For each leaf it calls a source-specific ``visit`` callback
with a `FieldDescriptor`; a non-``None`` result is converted by the coercer and
assigned to the field in place. Nested dataclass fields are never visited,
they are recursed into with their name appended to the path chain.

Fields with unsupported annotations (containers, optionals, arbitrary
objects) are skipped without error.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, get_type_hints

from oneconf.core.logging import get_logger
from oneconf.schema.coerce import coerce
from oneconf.schema.keys import Meta
from oneconf.schema.kinds import FieldKind, classify
from oneconf.schema.metadata import Metadata

if TYPE_CHECKING:
    from oneconf.core.logging import OneconfLogger

logger: OneconfLogger = get_logger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Transient description of the field currently being visited.

    Attributes:
        name (str): Python attribute name of the field.
        kind (FieldKind): Leaf kind.
        metadata (Metadata): Declared metadata.
        path (tuple[str, ...]): Names of the enclosing fields, root first.
        bits (int): Bit width for numeric kinds, ``0`` otherwise.
    """

    name: str
    kind: FieldKind
    metadata: Metadata
    path: tuple[str, ...] = ()
    bits: int = 0

    @property
    def key(self) -> str:
        """Name used for derived env/flag names: the ``name`` metadata or the field name."""
        return self.metadata[Meta.KEY_NAME] or self.name

    @property
    def chain(self) -> tuple[str, ...]:
        """Path chain followed by this field's key."""
        return (*self.path, self.key)


Visit = Callable[[FieldDescriptor], "str | None"]


def field_key(f: dataclasses.Field[Any]) -> str:
    """Return the ``name`` metadata of a dataclass field, or its attribute name."""
    declared: Any = f.metadata.get(Meta.KEY_NAME)
    return declared if isinstance(declared, str) and declared else f.name


def schema_hints(cls: type) -> dict[str, Any]:
    """Return the annotations of a dataclass type, evaluated when possible.

    Annotations that cannot be evaluated (e.g. names local to a function) fall
    back to their source text, which `classify` understands for builtin and
    oneconf types.
    """
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as exc:
        logger.debug("Cannot evaluate annotations of %s (%s); using raw annotations", cls, exc)
        return {f.name: f.type for f in dataclasses.fields(cls)}


def walk(record: Any, path: tuple[str, ...], visit: Visit) -> None:
    """Visit every leaf field of ``record`` and assign resolved values.

    Args:
        record (Any): A dataclass instance; mutated in place.
        path (tuple[str, ...]): Enclosing field names of ``record``.
        visit (Visit): Callback returning a raw value for a field, or ``None``.

    Raises:
        TypeError: If ``record`` is not a dataclass instance.
        MalformedValueError: If a raw value cannot be converted to the field type.
    """
    if not dataclasses.is_dataclass(record) or isinstance(record, type):
        raise TypeError(f"Expected a dataclass instance, got {type(record).__name__}")

    hints: dict[str, Any] = schema_hints(type(record))

    for f in dataclasses.fields(record):
        current: Any = getattr(record, f.name)

        if dataclasses.is_dataclass(current) and not isinstance(current, type):
            walk(current, (*path, field_key(f)), visit)
            continue

        classified = classify(hints.get(f.name, f.type))
        if classified is None:
            if dataclasses.is_dataclass(hints.get(f.name)):
                logger.debug("Skipping nested field %s: value is %r", f.name, current)
            else:
                logger.trace("Skipping unsupported field %s: %r", f.name, hints.get(f.name))
            continue

        kind, bits = classified
        descriptor = FieldDescriptor(
            name=f.name,
            kind=kind,
            metadata=Metadata.from_field_metadata(f.metadata),
            path=path,
            bits=bits,
        )
        raw: str | None = visit(descriptor)
        logger.trace("Visited %s (%s): %r", ".".join(descriptor.chain), kind.value, raw)
        if raw is None:
            continue
        if raw == "" and kind is not FieldKind.STRING:
            # An empty raw value only means something for strings.
            continue

        setattr(record, f.name, coerce(raw, descriptor))
