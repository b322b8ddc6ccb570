# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for compdoc registries."""

from compdoc.validation.checks import ValidationResult, ValidationWarning, validate

__all__ = [
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
