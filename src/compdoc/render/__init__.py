# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of the presentation payload into HTML and PDF documents."""

from compdoc.render.html import DEFAULT_TEMPLATE, RenderError, render_html, write_html
from compdoc.render.pdf import PdfError, build_pdf

__all__ = [
    "DEFAULT_TEMPLATE",
    "RenderError",
    "render_html",
    "write_html",
    "PdfError",
    "build_pdf",
]
