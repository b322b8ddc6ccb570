# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier assignment for interface declarations.

Every leaf declaration is stamped with three fields:

* ``id``: ``<componentId>.<categoryPath>.<name>``, unique across the registry
  because component ids are unique and names are unique within a leaf map;
* ``name``: the leaf map key;
* ``displayName``: ``<categoryPath>.<name>``, used for in-document links.

The pass is idempotent: ids are recomputed from the component id, the
category path and the key alone.
"""

from __future__ import annotations

from compdoc.model.categories import Category, leaf_map
from compdoc.model.entities import Component
from compdoc.registry.registry import Registry

# ###############
# Public Interface
# ###############


def assign_identifiers(registry: Registry) -> None:
    """Stamp every leaf of every registered component in place.

    Components without an interface and absent categories are skipped.
    """
    for component in registry:
        _assign_component(component)


# ################
# Implementation
# ################


def _assign_component(component: Component) -> None:
    if component.interface is None:
        return
    for category in Category:
        leaves = leaf_map(component.interface, category)
        if not leaves:
            continue
        for name, leaf in leaves.items():
            leaf.id = f"{component.id}.{category.path}.{name}"
            leaf.name = name
            leaf.display_name = f"{category.path}.{name}"
