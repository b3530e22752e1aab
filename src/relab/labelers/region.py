"""Static region labeling: (level, preorder ordinal, right bound)."""

from __future__ import annotations

import logging
from typing import Sequence

from relab.labelers.base import Labeler
from relab.schemas import Node, RegionLabel, as_roots

logger = logging.getLogger(__name__)


class StaticRegionLabeler(Labeler):
    """Region labeling recomputed over the whole tree.

    Ordinals are a global preorder sequence, so appending a node anywhere
    shifts every later ordinal and every enclosing right bound. Any insertion
    therefore means labeling the whole tree again.

    For nodes ``A`` and ``B`` of one labeling, ``B`` is a proper descendant of
    ``A`` exactly when ``A.ordinal < B.ordinal <= A.right_bound``.
    """

    name = "static"
    label_type = RegionLabel
    requires_full_relabel = True

    def label_tree(self, tree: Node | Sequence[Node]) -> int:
        """Assign region labels to every node of one or more trees.

        Several roots are numbered as one forest in document order, each of
        them at level 0.

        Args:
            tree: A root node or a sequence of top-level roots.

        Returns:
            The number of nodes labeled.
        """
        nodes, levels, parents = _flatten(as_roots(tree))

        # Ordinal of node i is i + 1. Walking the preorder arena backwards
        # finishes every subtree before its root is read.
        right_bounds = list(range(1, len(nodes) + 1))
        for index in range(len(nodes) - 1, -1, -1):
            parent_index = parents[index]
            if parent_index >= 0 and right_bounds[index] > right_bounds[parent_index]:
                right_bounds[parent_index] = right_bounds[index]

        for index, node in enumerate(nodes):
            node.label = RegionLabel(
                level=levels[index],
                ordinal=index + 1,
                right_bound=right_bounds[index],
            )

        logger.debug("Region labeling complete", extra={"nodes": len(nodes)})
        return len(nodes)

    def label_inserted(self, tree: Node | Sequence[Node], node: Node) -> int:
        """Relabel the whole tree; ``node`` gets no special treatment."""
        return self.label_tree(tree)


def _flatten(roots: list[Node]) -> tuple[list[Node], list[int], list[int]]:
    """Lay the forest out in preorder as parallel arrays.

    Returns node, level and parent index arrays; top-level roots have
    parent index -1.
    """
    nodes: list[Node] = []
    levels: list[int] = []
    parents: list[int] = []
    stack = [(root, 0, -1) for root in reversed(roots)]
    while stack:
        node, level, parent_index = stack.pop()
        index = len(nodes)
        nodes.append(node)
        levels.append(level)
        parents.append(parent_index)
        for child in reversed(node.children):
            stack.append((child, level + 1, index))
    return nodes, levels, parents
