# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic model for compdoc (components, interface trees, leaves)."""

from compdoc.model.categories import COMPLEMENTS, MODEL_KINDS, Category, leaf_map
from compdoc.model.entities import (
    ApiSection,
    Component,
    EventsSection,
    InterfaceTree,
    Leaf,
    LeafMap,
    ModelKinds,
    ModelScopes,
    ModelSection,
    PublishSection,
    SubscribeSection,
    TargetLink,
    UiSection,
    shorten_package_name,
)

__all__ = [
    # Entities
    "TargetLink",
    "Leaf",
    "LeafMap",
    "ApiSection",
    "PublishSection",
    "SubscribeSection",
    "EventsSection",
    "ModelKinds",
    "ModelScopes",
    "ModelSection",
    "UiSection",
    "InterfaceTree",
    "Component",
    "shorten_package_name",
    # Categories
    "Category",
    "COMPLEMENTS",
    "MODEL_KINDS",
    "leaf_map",
]
