# topmark:header:start
#
#   project      : oneconf
#   file         : naming.py
#   file_relpath : src/oneconf/sources/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Environment variable and long option names for schema fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

from oneconf.constants import ENV_SEPARATOR, FLAG_SEPARATOR
from oneconf.schema.keys import Meta

if TYPE_CHECKING:
    from oneconf.schema.walker import FieldDescriptor


def env_name(prefix: str, name: str) -> str:
    """Return ``uppercase(prefix + name)``."""
    return (prefix + name).upper()


def derived_env_name(prefix: str, descriptor: FieldDescriptor) -> str:
    """Return the name-derived environment variable, e.g. ``APP_DB_HOST``."""
    return env_name(prefix, ENV_SEPARATOR.join(descriptor.chain))


def derived_long_name(descriptor: FieldDescriptor) -> str:
    """Return the name-derived long option, e.g. ``db-host`` or ``db-max-conns``."""
    joined: str = FLAG_SEPARATOR.join(descriptor.chain).lower()
    return joined.replace(ENV_SEPARATOR, FLAG_SEPARATOR)


def resolve_env_name(prefix: str, descriptor: FieldDescriptor, *, use_name: bool) -> str | None:
    """Return the environment variable consulted for ``descriptor``, if any.

    The explicit ``env`` metadata wins; without it the name is derived from
    the path chain when ``use_name`` is set. ``env = "-"`` disables both.
    """
    meta = descriptor.metadata
    if meta.is_suppressed(Meta.KEY_ENV):
        return None
    explicit: str = meta[Meta.KEY_ENV]
    if explicit:
        return env_name(prefix, explicit)
    if use_name:
        return derived_env_name(prefix, descriptor)
    return None
