# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the compdoc project configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".compdoc.yaml"
DEFAULT_SOURCE_PATTERN = "**/component.yaml"


class ProjectConfigError(Exception):
    """Raised when a project configuration file is invalid or cannot be loaded."""


@dataclass
class ProjectConfig:
    """The parsed configuration of a compdoc project.

    Attributes:
        output_folder: Relative path (from the project root) for generated documents.
        output_name: File name, without extension, of the generated documents.
        template: Optional relative path to a custom Jinja2 template.
        build_pdf: Whether to convert the HTML document into a PDF.
        sources: Glob patterns, relative to the project root, selecting descriptor files.
    """

    output_folder: str = "build/doc"
    output_name: str = "components"
    template: str | None = None
    build_pdf: bool = False
    sources: list[str] = field(default_factory=lambda: [DEFAULT_SOURCE_PATTERN])


def load_project_config(path: Path) -> ProjectConfig:
    """Load and parse a compdoc project configuration file.

    Args:
        path: Path to the `.compdoc.yaml` file.

    Returns:
        A ProjectConfig instance populated from the file.

    Raises:
        ProjectConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ProjectConfigError(f"Project config file not found: {path}") from None
    except OSError as exc:
        raise ProjectConfigError(f"Cannot read project config file: {exc}") from exc

    return _parse_project_config(text, source_label=str(path))


def dump_project_config(config: ProjectConfig) -> str:
    """Serialize *config* to YAML text in the project file layout."""
    data: dict[str, object] = {
        "output-folder": config.output_folder,
        "output-name": config.output_name,
        "build-pdf": config.build_pdf,
        "sources": list(config.sources),
    }
    if config.template is not None:
        data["template"] = config.template
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


# ################
# Implementation
# ################


def _parse_project_config(text: str, source_label: str = "<string>") -> ProjectConfig:
    """Parse project config YAML text into a ProjectConfig.

    An empty document yields the default configuration.

    Raises:
        ProjectConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ProjectConfig()

    if not isinstance(data, dict):
        raise ProjectConfigError(f"{source_label}: project config must be a YAML mapping")

    defaults = ProjectConfig()
    config = ProjectConfig(
        output_folder=_optional_string(data, "output-folder", source_label) or defaults.output_folder,
        output_name=_optional_string(data, "output-name", source_label) or defaults.output_name,
        template=_optional_string(data, "template", source_label),
        build_pdf=_optional_bool(data, "build-pdf", source_label),
    )

    if "sources" in data:
        raw_sources = data["sources"]
        if not isinstance(raw_sources, list) or not all(isinstance(s, str) for s in raw_sources):
            raise ProjectConfigError(f"{source_label}: 'sources' must be a list of glob patterns")
        if not raw_sources:
            raise ProjectConfigError(f"{source_label}: 'sources' must not be empty")
        for pattern in raw_sources:
            if not pattern.strip():
                raise ProjectConfigError(f"{source_label}: 'sources' must not contain empty patterns")
            if Path(pattern).is_absolute():
                raise ProjectConfigError(
                    f"{source_label}: source pattern '{pattern}' must be relative to the project directory"
                )
        config.sources = raw_sources

    return config


def _optional_string(mapping: dict[str, object], key: str, source_label: str) -> str | None:
    """Extract an optional string field from a mapping, raising ProjectConfigError on a wrong type."""
    value = mapping.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ProjectConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _optional_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    value = mapping.get(key, False)
    if not isinstance(value, bool):
        raise ProjectConfigError(f"{source_label}: '{key}' must be true or false")
    return value
