# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory registry of components for a single documentation run.

A :class:`Registry` is created by the top-level run, filled by the loader,
mutated in place by the identifier and target passes, and discarded at the
end of the run.  Iteration order is registration order, which in turn fixes
the order of target links.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from compdoc.model.entities import Component, shorten_package_name
from compdoc.registry.diagnostics import (
    DUPLICATE_ID,
    INVALID_DESCRIPTOR,
    NO_ID_AVAILABLE,
    REGISTERED,
    Diagnostics,
)

# ###############
# Public Interface
# ###############


class Registry:
    """Mapping from component identifier to component, in registration order."""

    def __init__(self, diagnostics: Diagnostics | None = None) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self._components: dict[str, Component] = {}

    def register(self, record: Any, source: str = "<record>") -> Component | None:
        """Validate *record* and add it to the registry.

        Records without an ``id``, with an ``id`` that is already registered,
        or that do not fit the descriptor schema are reported through the
        diagnostics and skipped.

        Args:
            record: A deserialized component descriptor.
            source: Label of the record's origin (usually its file name).

        Returns:
            The registered component, or None if the record was skipped.
        """
        if not isinstance(record, Mapping):
            self.diagnostics.error(
                source,
                INVALID_DESCRIPTOR,
                f"expected a mapping, got {type(record).__name__}",
                "Ensure that the component.yaml file contains a YAML mapping.",
            )
            return None

        raw_id = record.get("id")
        if not raw_id:
            self.diagnostics.error(
                source, NO_ID_AVAILABLE, str(raw_id), "Ensure that the component.yaml file has an id."
            )
            return None

        component_id = str(raw_id)
        if component_id in self._components:
            self.diagnostics.error(
                source, DUPLICATE_ID, component_id, "Ensure that the id of a component.yaml file is unique."
            )
            return None

        data = dict(record)
        data["id"] = component_id
        if data.get("package") is None:
            data["package"] = ""
        try:
            component = Component.model_validate(data)
        except ValidationError as exc:
            self.diagnostics.error(
                source,
                INVALID_DESCRIPTOR,
                f"{component_id}: {exc}",
                "Ensure that the interface section follows the component.yaml schema.",
            )
            return None

        component.short_package_name = shorten_package_name(component.package)
        self._components[component_id] = component
        self.diagnostics.verbose(source, REGISTERED, component_id)
        return component

    def get(self, component_id: str) -> Component | None:
        return self._components.get(component_id)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components.values())

    def __len__(self) -> int:
        return len(self._components)
