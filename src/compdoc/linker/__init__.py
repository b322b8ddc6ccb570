# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cross-reference engine: identifier assignment, target resolution, normalization."""

from compdoc.linker.build import DocOptions, GeneratedDoc, build_registry, generate_doc, link
from compdoc.linker.identifiers import assign_identifiers
from compdoc.linker.normalize import normalize
from compdoc.linker.targets import resolve_targets

__all__ = [
    "assign_identifiers",
    "resolve_targets",
    "normalize",
    "link",
    "build_registry",
    "generate_doc",
    "DocOptions",
    "GeneratedDoc",
]
