# topmark:header:start
#
#   project      : oneconf
#   file         : env.py
#   file_relpath : src/oneconf/sources/env.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolver reading field values from environment variables."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from oneconf.core.logging import get_logger
from oneconf.sources.naming import resolve_env_name

if TYPE_CHECKING:
    from collections.abc import Mapping

    from oneconf.core.logging import OneconfLogger
    from oneconf.schema.walker import FieldDescriptor, Visit

logger: OneconfLogger = get_logger(__name__)


def env_resolver(
    prefix: str = "",
    *,
    use_name: bool = False,
    environ: Mapping[str, str] | None = None,
) -> Visit:
    """Return a resolver looking up ``PREFIX + NAME`` in the environment.

    Args:
        prefix (str): Prepended to every variable name before upper-casing.
        use_name (bool): Derive names from the path chain for fields without
            ``env`` metadata.
        environ (Mapping[str, str] | None): Environment to read; defaults to
            ``os.environ`` at call time.

    Returns:
        Visit: The resolver callback.
    """
    source: Mapping[str, str] = os.environ if environ is None else environ

    def resolve(descriptor: FieldDescriptor) -> str | None:
        name: str | None = resolve_env_name(prefix, descriptor, use_name=use_name)
        if name is None:
            return None
        value: str | None = source.get(name)
        if value is not None:
            logger.debug("Environment %s provides %s", name, ".".join(descriptor.chain))
        return value

    return resolve
