# topmark:header:start
#
#   project      : oneconf
#   file         : defaults.py
#   file_relpath : src/oneconf/sources/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolver for declared default values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from oneconf.schema.keys import Meta

if TYPE_CHECKING:
    from oneconf.schema.walker import FieldDescriptor


def resolve_default(descriptor: FieldDescriptor) -> str | None:
    """Return the ``default`` metadata of a field, or None when not declared."""
    return descriptor.metadata[Meta.KEY_DEFAULT] or None
