# topmark:header:start
#
#   project      : oneconf
#   file         : errors.py
#   file_relpath : src/oneconf/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the oneconf CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors are translated with `from_error`.
"""

from __future__ import annotations

import click

from oneconf.core.errors import MalformedValueError, OneconfError, SourceUnavailableError
from oneconf.core.exit_codes import ExitCode


class OneconfCliError(click.ClickException):
    """Base class for all oneconf CLI errors."""

    exit_code = ExitCode.FAILURE


class OneconfUsageError(OneconfCliError):
    """Error for command-line invocation errors (bad schema reference, bad flags)."""

    exit_code = ExitCode.USAGE_ERROR


class OneconfConfigError(OneconfCliError):
    """Error for a configuration value that does not fit its field."""

    exit_code = ExitCode.CONFIG_ERROR


class OneconfSourceError(OneconfCliError):
    """Error for a configuration file that cannot be read."""

    exit_code = ExitCode.SOURCE_ERROR


def from_error(error: OneconfError) -> OneconfCliError:
    """Return the CLI error matching a library error."""
    if isinstance(error, MalformedValueError):
        return OneconfConfigError(str(error))
    if isinstance(error, SourceUnavailableError):
        return OneconfSourceError(str(error))
    return OneconfCliError(str(error))
