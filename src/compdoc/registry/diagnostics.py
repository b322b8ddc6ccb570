# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Caller-supplied diagnostic callbacks.

The core never prints and never aborts a run on a per-record problem; it
reports through these callbacks and carries on.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

# Diagnostic actions reported through on_verbose / on_error.
NO_ID_AVAILABLE = "NO ID AVAILABLE"
DUPLICATE_ID = "DUPLICATE ID"
INVALID_DESCRIPTOR = "INVALID DESCRIPTOR"
REGISTERED = "REGISTERED"
PDF_CREATION = "PDF CREATION"


@dataclass
class Diagnostics:
    """Optional sinks for log, verbose and error information.

    Attributes:
        on_log: Called with a plain progress message.
        on_verbose: Called with ``(filename, action, message)``.
        on_error: Called with ``(filename, action, message, suggested_fix)``.
        error_count: Number of errors reported so far.
    """

    on_log: Callable[[str], None] | None = None
    on_verbose: Callable[[str, str, str], None] | None = None
    on_error: Callable[[str, str, str, str], None] | None = None
    error_count: int = 0

    def log(self, message: str) -> None:
        if self.on_log is not None:
            self.on_log(message)

    def verbose(self, filename: str, action: str, message: str) -> None:
        if self.on_verbose is not None:
            self.on_verbose(filename, action, message)

    def error(self, filename: str, action: str, message: str, fix: str) -> None:
        self.error_count += 1
        if self.on_error is not None:
            self.on_error(filename, action, message, fix)

    @property
    def has_errors(self) -> bool:
        """Return True if any error has been reported."""
        return self.error_count > 0
