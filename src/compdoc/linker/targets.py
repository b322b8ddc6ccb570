# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Cross-reference resolution between complementary interface categories.

For every leaf ``L`` in a category that has a complement (call/register,
publish/subscribe, socket/plug, define/observe within the same scope and
kind), every component ``C`` in the registry is scanned, the owner of ``L``
included.  If ``C`` declares a leaf with exactly the same key in the
complementary category, a link ``{name: C.id, target: T.id, targetName:
T.displayName}`` is appended to ``L.targets``.

Matching is by name only: payloads are not compared and there is no package
scoping, so unrelated components that happen to share a name are linked too.
A leaf may therefore collect any number of links, ordered by registration
order of the matching components.

The scan is a full cross product, O(components² × leaves) in the worst case,
and every run recomputes from scratch.
"""

from __future__ import annotations

from compdoc.model.categories import COMPLEMENTS, leaf_map
from compdoc.model.entities import Leaf, TargetLink
from compdoc.registry.registry import Registry

# ###############
# Public Interface
# ###############


def resolve_targets(registry: Registry) -> None:
    """Append target links to every leaf that has a same-named counterpart.

    Identifiers must already be assigned.  The pass is not idempotent: running
    it twice on the same registry duplicates every link.
    """
    for component in registry:
        if component.interface is None:
            continue
        for source_category, target_category in COMPLEMENTS.items():
            sources = leaf_map(component.interface, source_category)
            if not sources:
                continue
            for name, leaf in sources.items():
                for candidate in registry:
                    candidates = leaf_map(candidate.interface, target_category)
                    if not candidates or name not in candidates:
                        continue
                    _append_target(leaf, candidate.id, candidates[name])


# ################
# Implementation
# ################


def _append_target(leaf: Leaf, component_id: str, target: Leaf) -> None:
    """Record a link from *leaf* to *target*, which belongs to *component_id*."""
    if target.id is None or target.display_name is None:
        raise ValueError(f"Leaf '{target.name}' of '{component_id}' has no identifier; assign identifiers first")
    if leaf.targets is None:
        leaf.targets = []
    leaf.targets.append(TargetLink(name=component_id, target=target.id, target_name=target.display_name))
