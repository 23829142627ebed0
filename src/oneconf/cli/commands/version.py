# topmark:header:start
#
#   project      : oneconf
#   file         : version.py
#   file_relpath : src/oneconf/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""oneconf `version` command."""

from __future__ import annotations

import click

from oneconf.constants import ONECONF_VERSION


@click.command(
    name="version",
    help="Show the installed version of oneconf.",
)
def version_command() -> None:
    """Print the oneconf version."""
    click.echo(ONECONF_VERSION)
