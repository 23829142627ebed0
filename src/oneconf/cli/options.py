# topmark:header:start
#
#   project      : oneconf
#   file         : options.py
#   file_relpath : src/oneconf/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and schema reference resolution.

This module centralizes reusable options (verbosity, schema source settings)
so commands can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import dataclasses
import importlib
import logging
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import click

from oneconf.cli.errors import OneconfUsageError
from oneconf.core.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level from ``-v`` / ``-q`` counts.

    Returns:
        The logging level, or None when neither flag was given.

    Raises:
        OneconfUsageError: If both verbose and quiet flags are used.

    Behavior:
        Three or more -v flags set TRACE level, two DEBUG, one INFO.
        One or more -q flags set ERROR level.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise OneconfUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return None


CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}

#: Lets commands forward unknown options (after the schema) to the flags pass.
PASSTHROUGH_SETTINGS: dict[str, Any] = {
    **CONTEXT_SETTINGS,
    "ignore_unknown_options": True,
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the SCHEMA argument and the ``--prefix`` / ``--use-name`` options."""
    f = click.option(
        "--use-name",
        is_flag=True,
        default=False,
        help="Derive environment and long option names from field names.",
    )(f)
    f = click.option(
        "--prefix",
        default="",
        show_default=True,
        help="Prefix of environment variable names, e.g. 'APP_'.",
    )(f)
    f = click.argument("schema", metavar="MODULE:CLASS")(f)
    return f


def load_schema(reference: str) -> Any:
    """Import ``module:Class`` and return a fresh instance of the dataclass.

    Args:
        reference (str): Schema reference such as ``myapp.settings:Config``.

    Returns:
        Any: A new instance built with the class' own field defaults.

    Raises:
        OneconfUsageError: If the reference is malformed, cannot be imported,
            or does not name a dataclass that can be built without arguments.
    """
    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise OneconfUsageError(f"Schema must be given as MODULE:CLASS, got {reference!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise OneconfUsageError(f"Cannot import module {module_name!r}: {exc}") from exc

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise OneconfUsageError(f"{module_name!r} has no attribute {attr!r}") from exc

    if not (isinstance(target, type) and dataclasses.is_dataclass(target)):
        raise OneconfUsageError(f"{reference!r} is not a dataclass")

    try:
        instance = target()
    except TypeError as exc:
        raise OneconfUsageError(f"Cannot instantiate {reference!r}: {exc}") from exc

    logger.debug("Loaded schema %s", reference)
    return instance
