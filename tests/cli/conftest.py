# topmark:header:start
#
#   project      : oneconf
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running the oneconf CLI.

`run_cli` invokes the Click group in-process with a controlled environment so
that tests never depend on the variables of the calling shell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from oneconf.cli.main import cli
from oneconf.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def run_cli(argv: Sequence[str], *, env: Mapping[str, str | None] | None = None) -> Result:
    """Invoke the CLI and return the Click result.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["version"]``.
        env (Mapping[str, str | None] | None): Environment overrides applied for
            the duration of the call; a ``None`` value removes the variable.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["dump", "tests.schemas:Simple"], env={"X": "3"})
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv), env=dict(env) if env is not None else None)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 2)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 3)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_SOURCE_ERROR(result: Result) -> None:
    """Assert that the command exited with SOURCE_ERROR (code 4)."""
    assert result.exit_code == ExitCode.SOURCE_ERROR, result.output
