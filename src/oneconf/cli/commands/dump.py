# topmark:header:start
#
#   project      : oneconf
#   file         : dump.py
#   file_relpath : src/oneconf/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""oneconf `dump` command.

Resolves a schema through all four layers (defaults, TOML file, environment,
command line) and prints the effective values as TOML. Arguments after the
schema, typically placed after ``--``, are handed to the flags pass.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from oneconf.cli.errors import from_error
from oneconf.cli.options import PASSTHROUGH_SETTINGS, common_source_options, load_schema
from oneconf.core.errors import OneconfError
from oneconf.core.logging import get_logger
from oneconf.loaders import load
from oneconf.sources.toml_file import to_toml

if TYPE_CHECKING:
    from oneconf.args.tokenizer import ParsedArgs
    from oneconf.core.logging import OneconfLogger

logger: OneconfLogger = get_logger(__name__)


@click.command(
    name="dump",
    context_settings=PASSTHROUGH_SETTINGS,
    help=(
        "Print the effective configuration of MODULE:CLASS as TOML. "
        "ARGS are parsed as the program's own command line; put them after '--'."
    ),
)
@common_source_options
@click.option(
    "-f",
    "--file",
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file applied after the defaults.",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def dump_command(
    *,
    schema: str,
    prefix: str,
    use_name: bool,
    path: Path | None,
    args: tuple[str, ...],
) -> None:
    """Resolve and print the configuration of ``schema``."""
    config = load_schema(schema)
    try:
        parsed: ParsedArgs = load(
            config,
            path=path,
            prefix=prefix,
            use_name=use_name,
            argv=list(args),
        )
    except OneconfError as exc:
        raise from_error(exc) from exc

    if parsed.positionals:
        logger.info("Positional arguments: %s", " ".join(parsed.positionals))
    click.echo(to_toml(config), nl=False)
