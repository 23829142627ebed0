# topmark:header:start
#
#   project      : oneconf
#   file         : __init__.py
#   file_relpath : src/oneconf/sources/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-source resolvers.

Each resolver turns a `FieldDescriptor` into a raw value (or ``None``) for one
configuration source. The loaders in `oneconf.loaders` pair them with a walk.
"""

from __future__ import annotations

from .defaults import resolve_default
from .env import env_resolver
from .flags import flags_resolver, option_value
from .help import HelpCollector, HelpEntry, format_help
from .naming import derived_env_name, derived_long_name, env_name, resolve_env_name
from .toml_file import (
    TomlTable,
    is_toml_table,
    load_toml_dict,
    to_table,
    to_toml,
    toml_resolver,
    unknown_keys,
)

__all__: list[str] = [
    "HelpCollector",
    "HelpEntry",
    "TomlTable",
    "derived_env_name",
    "derived_long_name",
    "env_name",
    "env_resolver",
    "flags_resolver",
    "format_help",
    "is_toml_table",
    "load_toml_dict",
    "option_value",
    "resolve_default",
    "resolve_env_name",
    "to_table",
    "to_toml",
    "toml_resolver",
    "unknown_keys",
]
