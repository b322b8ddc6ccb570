# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for compdoc documentation."""

project = "compdoc"
author = "compdoc Contributors"
release = "0.1.0"

extensions: list[str] = []

html_theme = "alabaster"
