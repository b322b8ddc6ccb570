# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Conversion of the linked registry into the presentation payload."""

from __future__ import annotations

from typing import Any

from compdoc.model.categories import Category
from compdoc.model.entities import Component
from compdoc.registry.registry import Registry

# ###############
# Public Interface
# ###############


def normalize(registry: Registry) -> list[dict[str, Any]]:
    """Build the presentation payload from a linked registry.

    Each component is dumped with its descriptor keys (``toParent``,
    ``displayName``, ...) and every leaf map is replaced by the list of its
    leaves in insertion order.  The registry itself is left untouched; the
    returned payload is no longer addressable by name and is only meant for
    rendering.
    """
    return [_present(component) for component in registry]


# ################
# Implementation
# ################


def _present(component: Component) -> dict[str, Any]:
    data = component.model_dump(by_alias=True, exclude_unset=True)
    interface = data.get("interface")
    if not isinstance(interface, dict):
        return data
    for category in Category:
        *parents, key = category.segments
        node: Any = interface
        for segment in parents:
            node = node.get(segment) if isinstance(node, dict) else None
        if isinstance(node, dict) and isinstance(node.get(key), dict):
            node[key] = list(node[key].values())
    return data
