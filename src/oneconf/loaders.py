# topmark:header:start
#
#   project      : oneconf
#   file         : loaders.py
#   file_relpath : src/oneconf/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Populate a configuration dataclass from layered sources.

Each loader performs one complete walk over the same instance. Loaders only
assign fields their source provides, so the call order is the override order:

```python
config = Config()
load_defaults(config)
load_toml(config, Path("app.toml"))
load_env(config, "APP_", use_name=True)
args = load_flags(config, use_name=True)
```

`load` runs the four passes in that order. Errors propagate as
`MalformedValueError` / `SourceUnavailableError`; programs wanting to stop
right away pass them to `oneconf.core.errors.fatal`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from oneconf.args.tokenizer import tokenize
from oneconf.core.logging import get_logger
from oneconf.schema.walker import walk
from oneconf.sources.defaults import resolve_default
from oneconf.sources.env import env_resolver
from oneconf.sources.flags import flags_resolver
from oneconf.sources.help import HelpCollector, format_help
from oneconf.sources.toml_file import load_toml_dict, toml_resolver, unknown_keys

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from oneconf.args.tokenizer import ParsedArgs
    from oneconf.core.logging import OneconfLogger
    from oneconf.sources.toml_file import TomlTable

logger: OneconfLogger = get_logger(__name__)


def load_defaults(config: Any) -> None:
    """Assign every field its ``default`` metadata."""
    logger.debug("Loading defaults into %s", type(config).__name__)
    walk(config, (), resolve_default)


def apply_toml(config: Any, table: TomlTable) -> None:
    """Assign fields from an already parsed TOML table.

    Keys that do not match any field are logged and ignored.
    """
    seen: set[tuple[str, ...]] = set()
    walk(config, (), toml_resolver(table, seen))
    for key in unknown_keys(table, seen):
        logger.debug("Ignoring unknown TOML key %s", key)


def load_toml(config: Any, path: Path | str) -> None:
    """Assign fields from a TOML file.

    Args:
        config (Any): Configuration dataclass instance.
        path (Path | str): TOML file to read.

    Raises:
        SourceUnavailableError: If the file cannot be read or parsed.
        MalformedValueError: If a value does not fit its field.
    """
    path = Path(path)
    logger.debug("Loading TOML file %s into %s", path, type(config).__name__)
    apply_toml(config, load_toml_dict(path))


def load_env(
    config: Any,
    prefix: str = "",
    *,
    use_name: bool = False,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Assign fields from environment variables named ``PREFIX + NAME``.

    Args:
        config (Any): Configuration dataclass instance.
        prefix (str): Prefix of every variable name, e.g. ``"APP_"``.
        use_name (bool): Derive variable names for fields without ``env`` metadata.
        environ (Mapping[str, str] | None): Environment to read; ``os.environ`` by default.
    """
    logger.debug("Loading environment (prefix=%r, use_name=%s)", prefix, use_name)
    walk(config, (), env_resolver(prefix, use_name=use_name, environ=environ))


def load_flags(
    config: Any,
    *,
    use_name: bool = False,
    argv: Sequence[str] | None = None,
) -> ParsedArgs:
    """Assign fields from command-line options.

    Args:
        config (Any): Configuration dataclass instance.
        use_name (bool): Also accept name-derived long options (``--db-host``).
        argv (Sequence[str] | None): Arguments without the program name;
            ``sys.argv[1:]`` by default.

    Returns:
        ParsedArgs: The tokenized arguments, e.g. to read positionals.
    """
    parsed: ParsedArgs = tokenize(argv)
    walk(config, (), flags_resolver(parsed, use_name=use_name))
    return parsed


def load(
    config: Any,
    *,
    path: Path | str | None = None,
    prefix: str = "",
    use_name: bool = False,
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> ParsedArgs:
    """Run defaults, TOML (when ``path`` is given), environment and flags, in that order."""
    load_defaults(config)
    if path is not None:
        load_toml(config, path)
    load_env(config, prefix, use_name=use_name, environ=environ)
    return load_flags(config, use_name=use_name, argv=argv)


def generate_help(
    config: Any,
    prefix: str = "",
    *,
    use_name: bool = False,
    show_short: bool = True,
    show_long: bool = True,
    show_env: bool = True,
) -> str:
    """Return a usage listing for the options and variables of ``config``.

    The walk is a dry run: ``config`` is not modified.
    """
    collector = HelpCollector(
        prefix,
        use_name=use_name,
        show_short=show_short,
        show_long=show_long,
        show_env=show_env,
    )
    walk(config, (), collector)
    return format_help(collector.entries)


def get_short_arg(name: str, argv: Sequence[str] | None = None) -> str | None:
    """Return the value of short option ``-name``, ``"true"`` if given bare, or None.

    Short and long options share one namespace once tokenized, so this differs
    from `get_long_arg` only in rejecting names longer than one character.

    Raises:
        ValueError: If ``name`` is not a single character.
    """
    if len(name) != 1:
        raise ValueError(f"Short option must be a single character, got {name!r}")
    return tokenize(argv).lookup(name)


def get_long_arg(name: str, argv: Sequence[str] | None = None) -> str | None:
    """Return the value of long option ``--name``, ``"true"`` if given bare, or None."""
    return tokenize(argv).lookup(name)


def is_asking_for_help(argv: Sequence[str] | None = None) -> bool:
    """Return True if the command line holds ``-h`` or ``--help`` as a boolean option."""
    parsed: ParsedArgs = tokenize(argv)
    return "h" in parsed.booleans or "help" in parsed.booleans
