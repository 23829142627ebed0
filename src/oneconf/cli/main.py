# topmark:header:start
#
#   project      : oneconf
#   file         : main.py
#   file_relpath : src/oneconf/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``oneconf`` command-line tool.

A small companion for schema authors: inspect the generated usage listing of a
schema and check which value each layer leaves in the final configuration.
"""

from __future__ import annotations

import click

from oneconf.cli.commands.dump import dump_command
from oneconf.cli.commands.help import help_command
from oneconf.cli.commands.version import version_command
from oneconf.cli.options import CONTEXT_SETTINGS, common_verbose_options, resolve_verbosity
from oneconf.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="oneconf CLI",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the oneconf CLI."""
    ctx.ensure_object(dict)
    # None falls back to ONECONF_LOG_LEVEL.
    level: int | None = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(help_command)

cli.add_command(dump_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
