# topmark:header:start
#
#   project      : oneconf
#   file         : help.py
#   file_relpath : src/oneconf/cli/commands/help.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""oneconf `help` command.

Prints the usage listing a program built on a schema would show for ``-h``.
"""

from __future__ import annotations

import click

from oneconf.cli.options import CONTEXT_SETTINGS, common_source_options, load_schema
from oneconf.loaders import generate_help


@click.command(
    name="help",
    context_settings=CONTEXT_SETTINGS,
    help="Show the options and environment variables of MODULE:CLASS.",
)
@common_source_options
@click.option("--no-short", is_flag=True, default=False, help="Hide short options.")
@click.option("--no-long", is_flag=True, default=False, help="Hide long options.")
@click.option("--no-env", is_flag=True, default=False, help="Hide environment variables.")
def help_command(
    *,
    schema: str,
    prefix: str,
    use_name: bool,
    no_short: bool,
    no_long: bool,
    no_env: bool,
) -> None:
    """Print the generated usage listing for ``schema``."""
    config = load_schema(schema)
    text: str = generate_help(
        config,
        prefix,
        use_name=use_name,
        show_short=not no_short,
        show_long=not no_long,
        show_env=not no_env,
    )
    click.echo(text, nl=False)
