# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading of ``component.yaml`` descriptor files."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from compdoc.registry.registry import Registry

# ###############
# Public Interface
# ###############


class DescriptorError(Exception):
    """Raised when a descriptor file cannot be read or is not valid YAML."""


def load_descriptor(path: Path) -> Any:
    """Read and deserialize a single descriptor file.

    An empty file yields an empty mapping.

    Args:
        path: Path to the ``component.yaml`` file.

    Returns:
        The deserialized YAML document.

    Raises:
        DescriptorError: If the file cannot be read or contains invalid YAML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DescriptorError(f"Cannot read descriptor '{path}': {exc}") from exc

    try:
        data = yaml.load(text, Loader=_DescriptorLoader)
    except yaml.YAMLError as exc:
        raise DescriptorError(f"Invalid YAML in descriptor '{path}': {exc}") from exc

    return {} if data is None else data


def load_sources(sources: Iterable[Path], registry: Registry) -> None:
    """Load every descriptor in *sources* into *registry*, in order.

    Raises:
        DescriptorError: If any file cannot be read or parsed.
    """
    for source in sources:
        registry.register(load_descriptor(source), source=str(source))


# ################
# Implementation
# ################


class _DescriptorLoader(yaml.SafeLoader):
    """Safe loader that only reads ``true``/``false`` as booleans, so ``on:`` or ``no:`` stay names."""


_BOOL_TAG = "tag:yaml.org,2002:bool"
_DescriptorLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_DescriptorLoader.add_implicit_resolver(
    _BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF")
)
