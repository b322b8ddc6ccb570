# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for compdoc."""

from compdoc.project.config import (
    CONFIG_FILE_NAME,
    DEFAULT_SOURCE_PATTERN,
    ProjectConfig,
    ProjectConfigError,
    dump_project_config,
    load_project_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_SOURCE_PATTERN",
    "ProjectConfig",
    "ProjectConfigError",
    "dump_project_config",
    "load_project_config",
]
