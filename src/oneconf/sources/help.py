# topmark:header:start
#
#   project      : oneconf
#   file         : help.py
#   file_relpath : src/oneconf/sources/help.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Usage listing generated from schema metadata.

The help collector is a resolver that never assigns anything: it records one
`HelpEntry` per field reachable from the command line or the environment. A
field without short/long/env metadata (and without a derived name) has no
entry, which keeps internal fields out of the listing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from oneconf.schema.keys import Meta
from oneconf.schema.kinds import FieldKind
from oneconf.sources.naming import derived_long_name, resolve_env_name

if TYPE_CHECKING:
    from oneconf.schema.walker import FieldDescriptor

INDENT = "   "
HELP_INDENT = "        "


@dataclass(frozen=True)
class HelpEntry:
    """Presentation data for one documented field."""

    kind: FieldKind
    short: str = ""
    long: str = ""
    env: str = ""
    default: str = ""
    help: str = ""

    @property
    def placeholder(self) -> str:
        """Value placeholder, e.g. ``<uint>``."""
        return f"<{self.kind.value}>"

    def forms(self) -> list[str]:
        """Return the option and environment forms, in display order."""
        forms: list[str] = []
        if self.kind is FieldKind.BOOL:
            if self.short:
                forms.append(f"-{self.short}")
            if self.long:
                forms.append(f"--{self.long}")
        else:
            if self.short:
                forms.append(f"-{self.short} {self.placeholder}")
            if self.long:
                forms.append(f"--{self.long} {self.placeholder}")
        if self.env:
            forms.append(f"{self.env}={self.placeholder}")
        return forms


class HelpCollector:
    """Resolver accumulating `HelpEntry` items during a walk.

    Args:
        prefix (str): Environment variable prefix.
        use_name (bool): Document name-derived long options and variables.
        show_short (bool): Include short options.
        show_long (bool): Include long options.
        show_env (bool): Include environment variables.
    """

    def __init__(
        self,
        prefix: str = "",
        *,
        use_name: bool = False,
        show_short: bool = True,
        show_long: bool = True,
        show_env: bool = True,
    ) -> None:
        self.prefix: str = prefix
        self.use_name: bool = use_name
        self.show_short: bool = show_short
        self.show_long: bool = show_long
        self.show_env: bool = show_env
        self.entries: list[HelpEntry] = []

    def _long(self, descriptor: FieldDescriptor) -> str:
        meta = descriptor.metadata
        if not self.show_long or meta.is_suppressed(Meta.KEY_LONG):
            return ""
        if meta[Meta.KEY_LONG]:
            return meta[Meta.KEY_LONG]
        return derived_long_name(descriptor) if self.use_name else ""

    def __call__(self, descriptor: FieldDescriptor) -> None:
        meta = descriptor.metadata
        entry = HelpEntry(
            kind=descriptor.kind,
            short=meta[Meta.KEY_SHORT] if self.show_short else "",
            long=self._long(descriptor),
            env=(
                resolve_env_name(self.prefix, descriptor, use_name=self.use_name) or ""
                if self.show_env
                else ""
            ),
            default=meta[Meta.KEY_DEFAULT],
            help=meta[Meta.KEY_HELP],
        )
        if entry.short or entry.long or entry.env:
            self.entries.append(entry)
        # Never assigns.
        return None


def format_help(entries: list[HelpEntry]) -> str:
    """Render help entries, two lines per entry.

    Example:
        ```
           -p <uint>, --port <uint>, APP_PORT=<uint> (uint) [default: 8080]
                Port to listen on
        ```
    """
    lines: list[str] = []
    for entry in entries:
        head: str = f"{INDENT}{', '.join(entry.forms())} ({entry.kind.value})"
        if entry.default:
            head += f" [default: {entry.default}]"
        lines.append(head)
        if entry.help:
            lines.append(f"{HELP_INDENT}{entry.help}")
    return "".join(f"{line}\n" for line in lines)
