# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""PDF rendering of a generated HTML document via the ``prince`` formatter."""

import subprocess
from pathlib import Path

# ###############
# Public Interface
# ###############

PRINCE_EXECUTABLE = "prince"
DEFAULT_TIMEOUT = 50


class PdfError(Exception):
    """Raised when the PDF cannot be produced."""


def build_pdf(html_path: Path, pdf_path: Path, *, timeout: int = DEFAULT_TIMEOUT) -> None:
    """Convert the HTML document at *html_path* into a PDF at *pdf_path*.

    Args:
        html_path: Path to the rendered HTML document.
        pdf_path: Destination path for the PDF.
        timeout: Seconds to wait for ``prince`` before giving up.

    Raises:
        PdfError: If ``prince`` is not installed, times out, or fails.
    """
    args = [str(html_path), "-o", str(pdf_path)]
    try:
        result = subprocess.run(
            [PRINCE_EXECUTABLE, *args],
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise PdfError(f"{PRINCE_EXECUTABLE} executable not found on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise PdfError(f"{PRINCE_EXECUTABLE} timed out after {timeout}s: {html_path}") from exc

    if result.returncode != 0:
        raise PdfError(f"{PRINCE_EXECUTABLE} {' '.join(args)}: {result.stderr.strip()}")
