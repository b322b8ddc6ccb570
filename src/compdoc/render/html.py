# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""HTML rendering of the presentation payload with Jinja2.

The built-in ``document.html.j2`` template lists, for every component, a
table of contents per interface group (API, Events, Model, UI) followed by a
detail entry per declaration.  Each declaration is anchored by its ``id``, so
target links resolve within the same document.

A user-supplied template takes precedence over the built-in one and may still
``{% import "_macros.html.j2" %}`` to reuse the built-in building blocks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from compdoc.model.categories import Category

# ###############
# Public Interface
# ###############

DEFAULT_TEMPLATE = "document.html.j2"
DEFAULT_TITLE = "Component Documentation"

# Display groups of category paths, in document order.
CATEGORY_GROUPS: list[tuple[str, list[str]]] = [
    ("API", [c.path for c in Category if c.path.startswith("api.")]),
    ("Events", [c.path for c in Category if c.path.startswith("events.")]),
    ("Model", [c.path for c in Category if c.path.startswith("model.")]),
    ("UI", [c.path for c in Category if c.path.startswith("ui.")]),
]

# Leaf keys produced by the engine rather than written by the author.
ENGINE_KEYS = frozenset({"id", "name", "displayName", "targets"})


class RenderError(Exception):
    """Raised when a template cannot be found, parsed, or rendered."""


def render_html(
    components: list[dict[str, Any]],
    *,
    template: Path | None = None,
    title: str = DEFAULT_TITLE,
) -> str:
    """Render the presentation payload to an HTML document.

    Args:
        components: Normalized component payloads, in document order.
        template: Optional path to a custom template file.
        title: Document title.

    Returns:
        The rendered HTML text.

    Raises:
        RenderError: If the template is missing or fails to render.
    """
    env = _environment(template.parent if template is not None else None)
    name = template.name if template is not None else DEFAULT_TEMPLATE
    try:
        return env.get_template(name).render(components=components, title=title)
    except jinja2.TemplateNotFound as exc:
        raise RenderError(f"Template not found: {exc.name}") from exc
    except jinja2.TemplateError as exc:
        raise RenderError(f"Cannot render template '{name}': {exc}") from exc


def write_html(
    components: list[dict[str, Any]],
    output_path: Path,
    *,
    template: Path | None = None,
    title: str = DEFAULT_TITLE,
) -> None:
    """Render *components* and write the document to *output_path*, creating parent directories."""
    html = render_html(components, template=template, title=title)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")


def leaves_at(interface: dict[str, Any] | None, path: str) -> list[dict[str, Any]]:
    """Return the normalized leaves at *path* inside a presented interface, or an empty list."""
    node: Any = interface
    for segment in path.split("."):
        if not isinstance(node, dict):
            return []
        node = node.get(segment)
    return node if isinstance(node, list) else []


def group_entries(interface: dict[str, Any] | None, paths: list[str]) -> list[tuple[str, list[dict[str, Any]]]]:
    """Return ``(path, leaves)`` for every path in *paths* that has at least one leaf."""
    entries = [(path, leaves_at(interface, path)) for path in paths]
    return [(path, leaves) for path, leaves in entries if leaves]


# ################
# Implementation
# ################


def _payload(leaf: dict[str, Any]) -> list[tuple[str, Any]]:
    """Return the author-written attributes of a leaf except its description, which is shown separately."""
    return [(key, value) for key, value in leaf.items() if key not in ENGINE_KEYS and key != "description"]


def _environment(custom_dir: Path | None) -> jinja2.Environment:
    loaders: list[jinja2.BaseLoader] = []
    if custom_dir is not None:
        loaders.append(jinja2.FileSystemLoader(str(custom_dir)))
    loaders.append(jinja2.PackageLoader("compdoc.render", "templates"))
    env = jinja2.Environment(
        loader=jinja2.ChoiceLoader(loaders),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals["category_groups"] = CATEGORY_GROUPS
    env.globals["group_entries"] = group_entries
    env.globals["leaves_at"] = leaves_at
    env.filters["payload"] = _payload
    return env
