# topmark:header:start
#
#   project      : oneconf
#   file         : test_walker.py
#   file_relpath : tests/schema/test_walker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the generic field walker.

Covers declaration order, path chains for nested records, skipping of
unsupported fields and assignment of coerced values.
"""

from __future__ import annotations

import pytest

from oneconf.core.errors import MalformedValueError
from oneconf.schema import FieldDescriptor, FieldKind, walk
from tests.schemas import AppConfig, Renamed, Simple


def _record(visited: list[FieldDescriptor]):
    def visit(descriptor: FieldDescriptor) -> str | None:
        visited.append(descriptor)
        return None

    return visit


def test_walk_visits_leaves_in_declaration_order(app_config: AppConfig) -> None:
    """Leaves are visited in order; nested records are entered, never visited."""
    visited: list[FieldDescriptor] = []
    walk(app_config, (), _record(visited))

    assert [".".join((*d.path, d.name)) for d in visited] == [
        "verbose",
        "mask",
        "level",
        "offset",
        "scale",
        "title",
        "internal",
        "db.host",
        "db.port",
        "db.max_conns",
        "db.password",
        "server.name",
        "server.limits.ratio",
    ]


def test_walk_reports_kinds_and_widths(app_config: AppConfig) -> None:
    """Sized annotations carry their kind and bit width."""
    visited: list[FieldDescriptor] = []
    walk(app_config, (), _record(visited))
    by_name: dict[str, FieldDescriptor] = {d.name: d for d in visited}

    assert by_name["verbose"].kind is FieldKind.BOOL
    assert (by_name["mask"].kind, by_name["mask"].bits) == (FieldKind.UINT, 64)
    assert (by_name["level"].kind, by_name["level"].bits) == (FieldKind.UINT, 8)
    assert (by_name["offset"].kind, by_name["offset"].bits) == (FieldKind.INT, 64)
    assert (by_name["max_conns"].kind, by_name["max_conns"].bits) == (FieldKind.INT, 8)
    assert (by_name["ratio"].kind, by_name["ratio"].bits) == (FieldKind.FLOAT, 32)
    assert by_name["title"].kind is FieldKind.STRING


def test_walk_keeps_full_path_at_every_depth(app_config: AppConfig) -> None:
    """The path chain is complete two levels down."""
    visited: list[FieldDescriptor] = []
    walk(app_config, (), _record(visited))
    ratio = next(d for d in visited if d.name == "ratio")

    assert ratio.path == ("server", "limits")
    assert ratio.chain == ("server", "limits", "ratio")


def test_walk_skips_unsupported_fields(app_config: AppConfig) -> None:
    """Container fields are neither visited nor touched."""
    visited: list[FieldDescriptor] = []
    walk(app_config, (), _record(visited))

    assert "tags" not in {d.name for d in visited}
    assert app_config.tags == []


def test_walk_assigns_coerced_values() -> None:
    """Non-None raw values are converted and stored."""
    config = Simple()
    walk(config, (), lambda d: "42")

    assert config.x == 42


def test_walk_leaves_field_alone_when_no_value() -> None:
    """None and empty raw values leave non-string fields unchanged."""
    config = Simple(x=5)
    walk(config, (), lambda d: None)
    assert config.x == 5

    walk(config, (), lambda d: "")
    assert config.x == 5


def test_walk_assigns_empty_string_to_string_fields(app_config: AppConfig) -> None:
    """An explicit empty string is a value for string fields."""
    app_config.title = "before"
    walk(app_config, (), lambda d: "" if d.name == "title" else None)

    assert app_config.title == ""


def test_walk_uses_name_metadata_for_chains() -> None:
    """``name`` metadata replaces the field name in keys and path segments."""
    visited: list[FieldDescriptor] = []
    walk(Renamed(), (), _record(visited))

    assert visited[0].key == "loglevel"
    assert visited[1].path == ("storage",)


def test_walk_propagates_malformed_values() -> None:
    """A coercion failure stops the walk with MalformedValueError."""
    with pytest.raises(MalformedValueError) as exc_info:
        walk(Simple(), (), lambda d: "twelve")

    assert exc_info.value.field == "x"
    assert exc_info.value.value == "twelve"


def test_walk_rejects_non_dataclass() -> None:
    """Only dataclass instances can be walked."""
    with pytest.raises(TypeError):
        walk({"x": 1}, (), lambda d: None)
    with pytest.raises(TypeError):
        walk(Simple, (), lambda d: None)
