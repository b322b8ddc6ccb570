# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the compdoc consistency checks."""

from typing import Any

from compdoc.linker import link
from compdoc.registry import Registry
from compdoc.validation import ValidationResult, ValidationWarning, validate

# ###############
# Test Helpers
# ###############


def _linked(*records: dict[str, Any]) -> Registry:
    registry = Registry()
    for record in records:
        registry.register(record)
    link(registry)
    return registry


def _comp(component_id: str, interface: dict[str, Any] | None = None) -> dict[str, Any]:
    record: dict[str, Any] = {"id": component_id, "package": "p"}
    if interface is not None:
        record["interface"] = interface
    return record


# ###############
# Checks
# ###############


def test_fully_matched_registry_has_no_warnings() -> None:
    registry = _linked(
        _comp("a", {"api": {"call": {"foo": {}}}}),
        _comp("b", {"api": {"register": {"foo": {}}}}),
    )
    result = validate(registry)
    assert isinstance(result, ValidationResult)
    assert result.warnings == []
    assert not result.has_warnings


def test_unmatched_declaration_is_reported() -> None:
    registry = _linked(_comp("a", {"events": {"publish": {"toChildren": {"tick": {}}}}}))
    result = validate(registry)
    assert result.warnings == [
        ValidationWarning(
            component="a",
            leaf="a.events.publish.toChildren.tick",
            message="'a.events.publish.toChildren.tick' has no counterpart in 'events.subscribe.forParent'.",
        )
    ]


def test_self_match_is_reported() -> None:
    registry = _linked(_comp("a", {"ui": {"plug": {"w": {}}, "socket": {"w": {}}}}))
    result = validate(registry)
    assert len(result.warnings) == 2
    assert {w.leaf for w in result.warnings} == {"a.ui.plug.w", "a.ui.socket.w"}
    assert all("its own component" in w.message for w in result.warnings)


def test_self_match_alongside_foreign_match_reports_only_self_link() -> None:
    registry = _linked(
        _comp("a", {"api": {"call": {"foo": {}}, "register": {"foo": {}}}}),
        _comp("b", {"api": {"register": {"foo": {}}}}),
    )
    result = validate(registry)
    call_warnings = [w for w in result.warnings if w.leaf == "a.api.call.foo"]
    assert len(call_warnings) == 1
    assert "a.api.register.foo" in call_warnings[0].message


def test_components_without_interface_are_ignored() -> None:
    assert validate(_linked(_comp("a"))).warnings == []
