# topmark:header:start
#
#   project      : oneconf
#   file         : test_oneconf_cli.py
#   file_relpath : tests/cli/test_oneconf_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for the ``oneconf`` command-line tool."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from oneconf.constants import ONECONF_VERSION
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_SOURCE_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

#: Variables the schemas below could pick up from the calling shell.
CLEAN_ENV: dict[str, str | None] = {
    "X": None,
    "SCALE": None,
    "VERBOSE": None,
    "DB_POOL": None,
    "APP_VERBOSE": None,
    "APP_SCALE": None,
    "APP_DB_POOL": None,
}


def _parse(result: Result) -> Any:
    return tomlkit.parse(result.output).unwrap()


@mark_cli
def test_version() -> None:
    """``version`` prints the installed version."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == ONECONF_VERSION


@mark_cli
def test_group_without_command_prints_help() -> None:
    """Invoking the group alone lists the commands."""
    result: Result = run_cli([])

    assert_SUCCESS(result)
    for command in ("dump", "help", "version"):
        assert command in result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """Mixing ``-v`` and ``-q`` is a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)


@mark_cli
def test_help_command_lists_options() -> None:
    """``help`` prints the generated usage listing of a schema."""
    result: Result = run_cli(["help", "tests.schemas:AppConfig", "--prefix", "APP_"])

    assert_SUCCESS(result)
    assert "-v, --verbose, APP_VERBOSE=<bool> (bool)" in result.output
    assert "-p <uint> (uint) [default: 5432]" in result.output
    assert "--db-host" not in result.output


@mark_cli
def test_help_command_switches() -> None:
    """``--use-name`` adds derived names; ``--no-env`` hides variables."""
    result: Result = run_cli(
        ["help", "tests.schemas:AppConfig", "--prefix", "APP_", "--use-name", "--no-env"]
    )

    assert_SUCCESS(result)
    assert "--db-host <string> (string) [default: localhost]" in result.output
    assert "APP_" not in result.output


@mark_cli
def test_dump_defaults() -> None:
    """Without other sources, ``dump`` shows the declared defaults."""
    result: Result = run_cli(["dump", "tests.schemas:Simple"], env=CLEAN_ENV)

    assert_SUCCESS(result)
    assert _parse(result) == {"x": 12}


@mark_cli
def test_dump_env_needs_name_fallback_for_bare_fields() -> None:
    """A field without ``env`` metadata is read from the environment only with ``--use-name``."""
    env: dict[str, str | None] = {**CLEAN_ENV, "X": "3"}

    assert _parse(run_cli(["dump", "tests.schemas:Simple"], env=env)) == {"x": 12}
    assert _parse(run_cli(["dump", "tests.schemas:Simple", "--use-name"], env=env)) == {"x": 3}


@mark_cli
def test_dump_layers_file_env_and_args(tmp_path: Path) -> None:
    """File, environment and forwarded arguments apply in that order."""
    path: Path = tmp_path / "app.toml"
    path.write_text('title = "file"\nscale = 1.0\n\n[db]\nhost = "file-host"\n', encoding="utf-8")

    result: Result = run_cli(
        [
            "dump",
            "tests.schemas:AppConfig",
            "--prefix",
            "APP_",
            "--file",
            str(path),
            "--",
            "-vt",
            "flagged",
            "-p",
            "0x10",
        ],
        env={**CLEAN_ENV, "APP_SCALE": "2.5"},
    )

    assert_SUCCESS(result)
    data: Any = _parse(result)
    assert data["verbose"] is True
    assert data["title"] == "flagged"
    assert data["scale"] == 2.5
    assert data["mask"] == 0xFF
    assert data["db"]["host"] == "file-host"
    assert data["db"]["port"] == 16
    assert "tags" not in data


@mark_cli
def test_dump_malformed_env_value() -> None:
    """A value that does not fit its field exits with CONFIG_ERROR."""
    result: Result = run_cli(
        ["dump", "tests.schemas:AppConfig"], env={**CLEAN_ENV, "SCALE": "fast"}
    )

    assert_CONFIG_ERROR(result)
    assert "Invalid 'fast'" in result.output


@mark_cli
def test_dump_malformed_forwarded_arg() -> None:
    """Out-of-range values on the forwarded command line are config errors too."""
    result: Result = run_cli(
        ["dump", "tests.schemas:AppConfig", "--", "--level", "256"], env=CLEAN_ENV
    )

    assert_CONFIG_ERROR(result)


@mark_cli
def test_dump_missing_file(tmp_path: Path) -> None:
    """A configuration file that cannot be read exits with SOURCE_ERROR."""
    result: Result = run_cli(
        ["dump", "tests.schemas:AppConfig", "--file", str(tmp_path / "missing.toml")],
        env=CLEAN_ENV,
    )

    assert_SOURCE_ERROR(result)


@mark_cli
@parametrize(
    "reference",
    [
        "tests.schemas",
        "tests.schemas:",
        "tests.no_such_module:AppConfig",
        "tests.schemas:NoSuchClass",
        "tests.schemas:setting",
    ],
)
def test_bad_schema_reference(reference: str) -> None:
    """References that do not name a dataclass are usage errors."""
    result: Result = run_cli(["dump", reference], env=CLEAN_ENV)

    assert_USAGE_ERROR(result)
