# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end documentation run.

A run is strictly sequential:

1. A fresh :class:`~compdoc.registry.Registry` is filled from the descriptor
   files.  Rejected descriptors are reported and skipped.
2. Identifiers are assigned to every declaration.
3. Target links are resolved between complementary categories.
4. The linked registry is normalized into the presentation payload.
5. The payload is rendered to ``<output_folder>/<output_name>.html`` and,
   if requested, converted to ``<output_folder>/<output_name>.pdf``.

The registry lives only for the duration of the run.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from compdoc.linker.identifiers import assign_identifiers
from compdoc.linker.normalize import normalize
from compdoc.linker.targets import resolve_targets
from compdoc.registry.diagnostics import PDF_CREATION, Diagnostics
from compdoc.registry.loader import load_sources
from compdoc.registry.registry import Registry
from compdoc.render.html import DEFAULT_TITLE, write_html
from compdoc.render.pdf import PdfError, build_pdf

# ###############
# Public Interface
# ###############


@dataclass
class DocOptions:
    """Output settings for a documentation run.

    Attributes:
        output_folder: Directory receiving the generated documents.
        output_name: File name (without extension) of the generated documents.
        template: Optional custom Jinja2 template replacing the built-in one.
        build_pdf: Whether to convert the HTML document into a PDF as well.
        title: Title of the generated document.
    """

    output_folder: Path
    output_name: str = "components"
    template: Path | None = None
    build_pdf: bool = False
    title: str = DEFAULT_TITLE


@dataclass
class GeneratedDoc:
    """Result of a documentation run.

    Attributes:
        html_path: Path of the written HTML document.
        pdf_path: Path of the written PDF, or None if none was produced.
        components: The presentation payload that was rendered.
    """

    html_path: Path
    pdf_path: Path | None
    components: list[dict[str, Any]]


def link(registry: Registry) -> list[dict[str, Any]]:
    """Assign identifiers, resolve targets and normalize a freshly loaded registry.

    Must be called exactly once per registry, since target resolution is not
    idempotent.

    Returns:
        The presentation payload, one dict per component in registration order.
    """
    assign_identifiers(registry)
    resolve_targets(registry)
    return normalize(registry)


def build_registry(sources: Iterable[Path], diagnostics: Diagnostics | None = None) -> Registry:
    """Create a registry and load every descriptor in *sources* into it.

    Raises:
        DescriptorError: If a descriptor file cannot be read or parsed.
    """
    registry = Registry(diagnostics)
    load_sources(sources, registry)
    registry.diagnostics.log(f"Loaded {len(registry)} component(s)")
    return registry


def generate_doc(
    sources: Iterable[Path],
    options: DocOptions,
    diagnostics: Diagnostics | None = None,
) -> GeneratedDoc:
    """Generate the component documentation for *sources*.

    A failing PDF conversion is reported through *diagnostics* and does not
    fail the run; the HTML document is already written at that point.

    Raises:
        DescriptorError: If a descriptor file cannot be read or parsed.
        RenderError: If the HTML template cannot be rendered.
    """
    registry = build_registry(sources, diagnostics)
    components = link(registry)

    html_path = options.output_folder / f"{options.output_name}.html"
    write_html(components, html_path, template=options.template, title=options.title)
    registry.diagnostics.log(f"HTML written to {html_path}")

    pdf_path: Path | None = None
    if options.build_pdf:
        candidate = options.output_folder / f"{options.output_name}.pdf"
        try:
            build_pdf(html_path, candidate)
        except PdfError as exc:
            registry.diagnostics.error(
                str(html_path), PDF_CREATION, str(exc), "Ensure that prince is installed and on the PATH."
            )
        else:
            pdf_path = candidate
            registry.diagnostics.log(f"PDF written to {pdf_path}")

    return GeneratedDoc(html_path=html_path, pdf_path=pdf_path, components=components)
