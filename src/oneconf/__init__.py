# topmark:header:start
#
#   project      : oneconf
#   file         : __init__.py
#   file_relpath : src/oneconf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""oneconf package.

oneconf populates one configuration dataclass from declared defaults, a TOML
file, environment variables and command-line options. Field metadata drives
all four sources as well as the generated usage listing:

```python
from dataclasses import dataclass, field

from oneconf import UInt16, load, setting


@dataclass
class Database:
    host: str = setting("", default="localhost", help="Database host")
    port: UInt16 = setting(0, default="5432", short="p", help="Database port")


@dataclass
class Config:
    verbose: bool = setting(False, short="v", long="verbose", env="VERBOSE")
    db: Database = field(default_factory=Database)


config = Config()
load(config, path="app.toml", prefix="APP_", use_name=True)
```
"""

from __future__ import annotations

from oneconf.args.tokenizer import ParsedArgs, tokenize
from oneconf.core.errors import (
    MalformedValueError,
    OneconfError,
    SourceUnavailableError,
    fatal,
)
from oneconf.core.exit_codes import ExitCode
from oneconf.loaders import (
    apply_toml,
    generate_help,
    get_long_arg,
    get_short_arg,
    is_asking_for_help,
    load,
    load_defaults,
    load_env,
    load_flags,
    load_toml,
)
from oneconf.schema import (
    FieldDescriptor,
    FieldKind,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Meta,
    UInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    setting,
    walk,
)
from oneconf.sources.toml_file import to_toml

__all__: list[str] = [
    "ExitCode",
    "FieldDescriptor",
    "FieldKind",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "MalformedValueError",
    "Meta",
    "OneconfError",
    "ParsedArgs",
    "SourceUnavailableError",
    "UInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "apply_toml",
    "fatal",
    "generate_help",
    "get_long_arg",
    "get_short_arg",
    "is_asking_for_help",
    "load",
    "load_defaults",
    "load_env",
    "load_flags",
    "load_toml",
    "setting",
    "to_toml",
    "tokenize",
    "walk",
]
