# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""The fixed set of interface category paths and their complements.

Every leaf map inside an :class:`~compdoc.model.entities.InterfaceTree` is
addressed by a :class:`Category`, whose value is the dot-joined path of
descriptor keys leading to it (e.g. ``"model.define.own.state"``).
"""

from __future__ import annotations

from enum import Enum

from compdoc.model.entities import InterfaceTree, LeafMap

# ###############
# Public Interface
# ###############

MODEL_KINDS: tuple[str, ...] = ("data", "param", "state", "event", "command")


class Category(Enum):
    """A leaf map location inside the interface tree.

    Members are declared in the order in which identifiers are assigned.
    """

    API_CALL = "api.call"
    API_REGISTER = "api.register"

    EVENTS_PUBLISH_TO_PARENT = "events.publish.toParent"
    EVENTS_PUBLISH_TO_CHILDREN = "events.publish.toChildren"
    EVENTS_SUBSCRIBE_FOR_CHILDREN = "events.subscribe.forChildren"
    EVENTS_SUBSCRIBE_FOR_PARENT = "events.subscribe.forParent"

    MODEL_DEFINE_GLOBAL_DATA = "model.define.global.data"
    MODEL_DEFINE_OWN_DATA = "model.define.own.data"
    MODEL_OBSERVE_GLOBAL_DATA = "model.observe.global.data"
    MODEL_OBSERVE_OWN_DATA = "model.observe.own.data"

    MODEL_DEFINE_GLOBAL_PARAM = "model.define.global.param"
    MODEL_DEFINE_OWN_PARAM = "model.define.own.param"
    MODEL_OBSERVE_GLOBAL_PARAM = "model.observe.global.param"
    MODEL_OBSERVE_OWN_PARAM = "model.observe.own.param"

    MODEL_DEFINE_GLOBAL_STATE = "model.define.global.state"
    MODEL_DEFINE_OWN_STATE = "model.define.own.state"
    MODEL_OBSERVE_GLOBAL_STATE = "model.observe.global.state"
    MODEL_OBSERVE_OWN_STATE = "model.observe.own.state"

    MODEL_DEFINE_GLOBAL_EVENT = "model.define.global.event"
    MODEL_DEFINE_OWN_EVENT = "model.define.own.event"
    MODEL_OBSERVE_GLOBAL_EVENT = "model.observe.global.event"
    MODEL_OBSERVE_OWN_EVENT = "model.observe.own.event"

    MODEL_DEFINE_GLOBAL_COMMAND = "model.define.global.command"
    MODEL_DEFINE_OWN_COMMAND = "model.define.own.command"
    MODEL_OBSERVE_GLOBAL_COMMAND = "model.observe.global.command"
    MODEL_OBSERVE_OWN_COMMAND = "model.observe.own.command"

    UI_PLUG = "ui.plug"
    UI_SOCKET = "ui.socket"

    @property
    def path(self) -> str:
        """The dot-joined category path."""
        return self.value

    @property
    def segments(self) -> tuple[str, ...]:
        """The descriptor keys leading to the leaf map."""
        return tuple(self.value.split("."))

    @property
    def complement(self) -> Category:
        """The category whose declarations answer this one."""
        return COMPLEMENTS[self]


def leaf_map(interface: InterfaceTree | None, category: Category) -> LeafMap | None:
    """Return the leaf map at *category* inside *interface*, or None if any level is absent."""
    node: object = interface
    for segment in category.segments:
        if node is None:
            return None
        node = getattr(node, _ATTRIBUTE_NAMES.get(segment, segment), None)
    return node if isinstance(node, dict) else None


def _pairs() -> dict[Category, Category]:
    pairs = [
        (Category.API_CALL, Category.API_REGISTER),
        (Category.EVENTS_PUBLISH_TO_PARENT, Category.EVENTS_SUBSCRIBE_FOR_CHILDREN),
        (Category.EVENTS_PUBLISH_TO_CHILDREN, Category.EVENTS_SUBSCRIBE_FOR_PARENT),
        (Category.UI_SOCKET, Category.UI_PLUG),
    ]
    for scope in ("global", "own"):
        for kind in MODEL_KINDS:
            pairs.append((Category(f"model.define.{scope}.{kind}"), Category(f"model.observe.{scope}.{kind}")))
    complements: dict[Category, Category] = {}
    for source, target in pairs:
        complements[source] = target
        complements[target] = source
    return complements


# Each pair is resolved in both directions.
COMPLEMENTS: dict[Category, Category] = _pairs()


# ################
# Implementation
# ################

# Descriptor keys that differ from the pydantic attribute names.
_ATTRIBUTE_NAMES = {
    "global": "global_",
    "register": "register_",
    "toParent": "to_parent",
    "toChildren": "to_children",
    "forParent": "for_parent",
    "forChildren": "for_children",
}
