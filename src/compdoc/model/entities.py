# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Component and interface entities for the compdoc semantic model.

Field names follow Python conventions; the aliases carry the camelCase keys
used in ``component.yaml`` descriptors (``toParent``, ``displayName``, ...).
Unknown descriptor keys are kept at every level so that nothing the author
wrote is lost on the way to the rendered document.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

_OPEN = ConfigDict(extra="allow", populate_by_name=True)


class TargetLink(BaseModel):
    """A link from a declaration to a same-named declaration in the complementary category."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    target: str
    target_name: str = _Field(alias="targetName")


class Leaf(BaseModel):
    """A single named declaration: descriptor payload plus engine-assigned fields."""

    model_config = _OPEN

    id: str | None = None
    name: str | None = None
    display_name: str | None = _Field(default=None, alias="displayName")
    targets: list[TargetLink] | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce_payload(cls, data: Any) -> Any:
        # "foo:" without a body, or "foo: some text".
        if data is None:
            return {}
        if not isinstance(data, dict):
            return {"description": data}
        return data


def _leaf_name(key: Any) -> Any:
    # YAML reads "404:" as an int and "on:" or "true:" as a bool.
    if isinstance(key, bool):
        return str(key).lower()
    if isinstance(key, (int, float)):
        return str(key)
    return key


# A name-keyed mapping of declarations within one category path.
LeafMap = dict[Annotated[str, BeforeValidator(_leaf_name)], Leaf]


class ApiSection(BaseModel):
    """API calls made and registrations offered by a component."""

    model_config = _OPEN

    call: LeafMap | None = None
    register_: LeafMap | None = _Field(default=None, alias="register")


class PublishSection(BaseModel):
    model_config = _OPEN

    to_parent: LeafMap | None = _Field(default=None, alias="toParent")
    to_children: LeafMap | None = _Field(default=None, alias="toChildren")


class SubscribeSection(BaseModel):
    model_config = _OPEN

    for_parent: LeafMap | None = _Field(default=None, alias="forParent")
    for_children: LeafMap | None = _Field(default=None, alias="forChildren")


class EventsSection(BaseModel):
    """Events published to and subscribed from the component hierarchy."""

    model_config = _OPEN

    publish: PublishSection | None = None
    subscribe: SubscribeSection | None = None


class ModelKinds(BaseModel):
    """The five kinds of model entries within one scope."""

    model_config = _OPEN

    data: LeafMap | None = None
    param: LeafMap | None = None
    state: LeafMap | None = None
    event: LeafMap | None = None
    command: LeafMap | None = None


class ModelScopes(BaseModel):
    model_config = _OPEN

    global_: ModelKinds | None = _Field(default=None, alias="global")
    own: ModelKinds | None = None


class ModelSection(BaseModel):
    """Model entries a component defines and observes."""

    model_config = _OPEN

    define: ModelScopes | None = None
    observe: ModelScopes | None = None


class UiSection(BaseModel):
    """UI sockets offered and plugs provided by a component."""

    model_config = _OPEN

    plug: LeafMap | None = None
    socket: LeafMap | None = None


class InterfaceTree(BaseModel):
    """The complete interface declaration of a component."""

    model_config = _OPEN

    api: ApiSection | None = None
    events: EventsSection | None = None
    model: ModelSection | None = None
    ui: UiSection | None = None


class Component(BaseModel):
    """One documented unit with a unique identifier and an interface declaration tree."""

    model_config = _OPEN

    id: str
    package: str = ""
    short_package_name: str = _Field(default="", alias="shortPackageName")
    interface: InterfaceTree | None = None


def shorten_package_name(package: str) -> str:
    """Abbreviate every package segment except the last two to its first character.

    ``com.example.shop.cart`` becomes ``c.e.shop.cart``.
    """
    parts = package.split(".")
    keep_from = len(parts) - 2
    return ".".join(part[:1] if index < keep_from else part for index, part in enumerate(parts))
