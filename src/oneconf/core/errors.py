# topmark:header:start
#
#   project      : oneconf
#   file         : errors.py
#   file_relpath : src/oneconf/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while loading configuration.

Usage:
    Loaders raise these exceptions and let them propagate to the caller. Programs
    that want the classic fail-fast behavior wrap their loading code and hand the
    error to `fatal`, which logs a diagnostic and exits with the matching
    [`ExitCode`][oneconf.core.exit_codes.ExitCode].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from oneconf.core.exit_codes import ExitCode
from oneconf.core.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from oneconf.core.logging import OneconfLogger

logger: OneconfLogger = get_logger(__name__)


class OneconfError(Exception):
    """Base class for all oneconf errors."""

    exit_code: ExitCode = ExitCode.FAILURE


class MalformedValueError(OneconfError):
    """A resolved raw value could not be converted to the field's type."""

    exit_code = ExitCode.CONFIG_ERROR

    def __init__(self, value: object, field: str, kind: str, *, path: Sequence[str] = ()) -> None:
        self.value: object = value
        self.field: str = field
        self.kind: str = kind
        self.path: tuple[str, ...] = tuple(path)
        super().__init__(f"Invalid {value!r} while setting value of {self.qualified_name} ({kind})")

    @property
    def qualified_name(self) -> str:
        """Return the dotted path of the offending field, e.g. ``db.port``."""
        return ".".join((*self.path, self.field))


class SourceUnavailableError(OneconfError):
    """The structured configuration file could not be read or decoded."""

    exit_code = ExitCode.SOURCE_ERROR

    def __init__(self, path: Path, reason: str) -> None:
        self.path: Path = path
        self.reason: str = reason
        super().__init__(f"Failed to read TOML file: {path} ({reason})")


def fatal(error: OneconfError) -> NoReturn:
    """Report ``error`` and terminate the process with its exit code.

    Args:
        error (OneconfError): The error that made configuration loading fail.

    Raises:
        SystemExit: Always, carrying ``error.exit_code``.
    """
    logger.error("%s", error)
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(int(error.exit_code))
