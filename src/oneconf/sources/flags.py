# topmark:header:start
#
#   project      : oneconf
#   file         : flags.py
#   file_relpath : src/oneconf/sources/flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolver reading field values from tokenized command-line arguments.

Lookup order per field:

1. the ``short`` option, exact match only;
2. the ``long`` option, unless it is ``-``;
3. the name-derived long option (``db-host``), when enabled and ``long`` is not ``-``.

Boolean fields resolve to ``"true"`` when their option is given without a
value, and to the value otherwise (``--verbose false``). A following token
that is not a boolean literal (``-v input.csv``) is reported and the field is
set to ``"true"``; the token is not turned back into a positional. Other
fields need a value; a bare option for them is reported and ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from oneconf.core.logging import get_logger
from oneconf.schema.coerce import parse_bool
from oneconf.schema.keys import Meta
from oneconf.schema.kinds import FieldKind
from oneconf.sources.naming import derived_long_name

if TYPE_CHECKING:
    from oneconf.args.tokenizer import ParsedArgs
    from oneconf.core.logging import OneconfLogger
    from oneconf.schema.walker import FieldDescriptor, Visit

logger: OneconfLogger = get_logger(__name__)


def option_value(parsed: ParsedArgs, option: str, descriptor: FieldDescriptor) -> str | None:
    """Return the raw value given for ``option`` as seen by ``descriptor``."""
    if option in parsed.values:
        value: str = parsed.values[option]
        if descriptor.kind is FieldKind.BOOL and parse_bool(value) is None:
            # The token after a bare flag was taken as its value.
            logger.warning(
                "Option %s is a boolean for %s; %r is not a boolean literal, using true",
                option,
                ".".join(descriptor.chain),
                value,
            )
            return "true"
        return value
    if option in parsed.booleans:
        if descriptor.kind is FieldKind.BOOL:
            return "true"
        logger.warning(
            "Option %s requires a value for %s (%s); ignoring it",
            option,
            ".".join(descriptor.chain),
            descriptor.kind.value,
        )
    return None


def flags_resolver(parsed: ParsedArgs, *, use_name: bool = False) -> Visit:
    """Return a resolver answering from ``parsed``.

    Args:
        parsed (ParsedArgs): Tokenized command line.
        use_name (bool): Also try the name-derived long option.

    Returns:
        Visit: The resolver callback.
    """

    def resolve(descriptor: FieldDescriptor) -> str | None:
        meta = descriptor.metadata

        short: str = meta[Meta.KEY_SHORT]
        if short:
            value: str | None = option_value(parsed, short, descriptor)
            if value is not None:
                return value

        if meta.is_suppressed(Meta.KEY_LONG):
            return None

        long: str = meta[Meta.KEY_LONG]
        if long:
            value = option_value(parsed, long, descriptor)
            if value is not None:
                return value

        if use_name:
            return option_value(parsed, derived_long_name(descriptor), descriptor)
        return None

    return resolve
