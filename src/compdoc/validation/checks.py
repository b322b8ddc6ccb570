# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Consistency checks for linked component registries.

These checks run after identifiers and targets have been assigned.  They
never reject anything; they point out declarations that the documentation
will show without a counterpart, and links that only exist because a
component answers its own declaration.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from compdoc.model.categories import Category, leaf_map
from compdoc.model.entities import Component
from compdoc.registry.registry import Registry

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal finding about a linked registry.

    Attributes:
        component: Id of the component the finding belongs to.
        leaf: Id of the declaration concerned.
        message: Human-readable description of the warning.
    """

    component: str
    leaf: str
    message: str


@dataclass
class ValidationResult:
    """Result of running the consistency checks.

    Attributes:
        warnings: Findings, in registry order.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Return True if any warning was found."""
        return len(self.warnings) > 0


def validate(registry: Registry) -> ValidationResult:
    """Run all consistency checks on a linked registry.

    Checks performed:

    1. **Unmatched declarations**: a declaration without any target link has
       no same-named counterpart in the complementary category of any
       component.

    2. **Self-matches**: a target link pointing into the declaration's own
       component (e.g. a component calling an API it registers itself).

    Args:
        registry: A registry on which identifiers and targets were resolved.

    Returns:
        A :class:`ValidationResult` containing the warnings found.
    """
    warnings: list[ValidationWarning] = []
    for component in registry:
        warnings.extend(_check_component(component))
    return ValidationResult(warnings=warnings)


# ################
# Implementation
# ################


def _check_component(component: Component) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for category in Category:
        leaves = leaf_map(component.interface, category)
        if not leaves:
            continue
        for name, leaf in leaves.items():
            leaf_id = leaf.id or f"{component.id}.{category.path}.{name}"
            if not leaf.targets:
                warnings.append(
                    ValidationWarning(
                        component=component.id,
                        leaf=leaf_id,
                        message=f"'{leaf_id}' has no counterpart in '{category.complement.path}'.",
                    )
                )
                continue
            for link in leaf.targets:
                if link.name == component.id:
                    warnings.append(
                        ValidationWarning(
                            component=component.id,
                            leaf=leaf_id,
                            message=f"'{leaf_id}' is answered by its own component ('{link.target}').",
                        )
                    )
    return warnings
