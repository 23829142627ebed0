# topmark:header:start
#
#   project      : oneconf
#   file         : metadata.py
#   file_relpath : src/oneconf/schema/metadata.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-field metadata declared on schema dataclasses.

Metadata is attached at schema-definition time through
``dataclasses.field(metadata=...)``; `setting` is a shorthand that builds such
a field from keyword arguments.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from oneconf.constants import SUPPRESS
from oneconf.schema.keys import Meta

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class Metadata(Mapping[str, str]):
    """Read-only view of a field's metadata with string values.

    Absent keys read as ``""``; non-string values are ignored.
    """

    entries: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_field_metadata(cls, raw: Mapping[Any, Any]) -> Metadata:
        """Build a view over ``dataclasses.Field.metadata``, keeping string pairs only."""
        return cls({k: v for k, v in raw.items() if isinstance(k, str) and isinstance(v, str)})

    def __getitem__(self, key: str) -> str:
        return self.entries.get(key, "")

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def is_suppressed(self, key: str) -> bool:
        """Return True if ``key`` carries the ``-`` sentinel."""
        return self.entries.get(key) == SUPPRESS


def setting(
    value: Any = None,
    *,
    default: str = "",
    env: str = "",
    short: str = "",
    long: str = "",
    help: str = "",  # noqa: A002
    name: str = "",
) -> Any:
    """Declare a schema field with oneconf metadata.

    Args:
        value (Any): Initial Python value of the field before any loader runs.
            Mutable values are not accepted here; use ``dataclasses.field``
            with a ``default_factory`` for those.
        default (str): Raw default applied by `load_defaults`.
        env (str): Environment variable name (without prefix), or ``-``.
        short (str): Single-character short option.
        long (str): Long option name, or ``-``.
        help (str): Help text.
        name (str): Name used instead of the field name for derived names and
            TOML keys.

    Returns:
        Any: A ``dataclasses.Field`` carrying the metadata.

    Raises:
        ValueError: If ``short`` is longer than one character.
    """
    if len(short) > 1:
        raise ValueError(f"Short option must be a single character, got {short!r}")

    declared: dict[str, str] = {
        Meta.KEY_DEFAULT: default,
        Meta.KEY_ENV: env,
        Meta.KEY_SHORT: short,
        Meta.KEY_LONG: long,
        Meta.KEY_HELP: help,
        Meta.KEY_NAME: name,
    }
    return field(default=value, metadata={k: v for k, v in declared.items() if v})
