# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based web UI for browsing linked components."""

from typing import Any

import dash
from dash import html

from compdoc.render.html import CATEGORY_GROUPS, DEFAULT_TITLE, group_entries

# ###############
# Public Interface
# ###############


def create_app(components: list[dict[str, Any]], title: str = DEFAULT_TITLE) -> dash.Dash:
    """Create the viewer application for a normalized component payload."""
    app = dash.Dash(
        __name__,
        title=title,
    )
    app.layout = _build_layout(components, title)
    return app


# ################
# Implementation
# ################


def _anchor(identifier: str) -> str:
    """Return a Dash-safe element id; dots are reserved by Dash callbacks."""
    return identifier.replace(".", "--")


def _build_layout(components: list[dict[str, Any]], title: str) -> html.Div:
    """Build the application layout."""
    if not components:
        body: list[Any] = [html.P("No components loaded.", style={"color": "#666"})]
    else:
        body = [_component_section(component) for component in components]
    return html.Div(
        [
            html.H1(title),
            html.Ul([html.Li(html.A(c["id"], href=f"#{_anchor(c['id'])}")) for c in components]),
            html.Hr(),
            *body,
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )


def _component_section(component: dict[str, Any]) -> html.Div:
    interface = component.get("interface")
    children: list[Any] = [
        html.H2(component.get("name") or component["id"], id=_anchor(component["id"])),
        html.P(component.get("package", ""), style={"color": "#666"}),
    ]
    for group, paths in CATEGORY_GROUPS:
        entries = group_entries(interface, paths)
        if entries:
            children.append(html.H3(group))
            children.append(_leaf_table(entries))
    return html.Div(children)


def _leaf_table(entries: list[tuple[str, list[dict[str, Any]]]]) -> html.Table:
    rows = [
        html.Tr(
            [
                html.Td(leaf["displayName"], id=_anchor(leaf["id"])),
                html.Td(str(leaf.get("description", ""))),
                html.Td(
                    [
                        html.Div(html.A(f"{link['name']}: {link['targetName']}", href=f"#{_anchor(link['target'])}"))
                        for link in leaf.get("targets") or []
                    ]
                ),
            ]
        )
        for _path, leaves in entries
        for leaf in leaves
    ]
    return html.Table(
        [html.Thead(html.Tr([html.Th("Declaration"), html.Th("Description"), html.Th("Targets")])), html.Tbody(rows)],
        style={"borderCollapse": "collapse", "width": "100%"},
    )
