# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Component registry, descriptor loading and diagnostics."""

from compdoc.registry.diagnostics import (
    DUPLICATE_ID,
    INVALID_DESCRIPTOR,
    NO_ID_AVAILABLE,
    PDF_CREATION,
    REGISTERED,
    Diagnostics,
)
from compdoc.registry.loader import DescriptorError, load_descriptor, load_sources
from compdoc.registry.registry import Registry

__all__ = [
    "Diagnostics",
    "NO_ID_AVAILABLE",
    "DUPLICATE_ID",
    "INVALID_DESCRIPTOR",
    "REGISTERED",
    "PDF_CREATION",
    "Registry",
    "DescriptorError",
    "load_descriptor",
    "load_sources",
]
