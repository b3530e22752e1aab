"""Dynamic path labeling: (level, binary Dewey path, region id)."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Sequence, Tuple

from relab.config import RELAB_INITIAL_REGION_ID, RELAB_SEGMENT_WIDTH
from relab.exceptions import EncodingOverflowError, InvalidOperationError
from relab.labelers.base import Labeler
from relab.schemas import Node, PathLabel, as_roots

logger = logging.getLogger(__name__)

_QueueItem = Tuple[Node, int, str, int]


def encode_segment(index: int, width: int = RELAB_SEGMENT_WIDTH) -> str:
    """Encode a 1-based sibling position as a zero-padded binary segment.

    Args:
        index: Sibling position, starting at 1.
        width: Segment width in bits.

    Returns:
        ``index`` in binary, left-padded with zeros to ``width`` characters.

    Raises:
        ValueError: If ``index`` is below 1 or ``width`` below 1.
        EncodingOverflowError: If ``index`` needs more than ``width`` bits.
    """
    if width < 1:
        raise ValueError(f"Segment width must be at least 1, got {width}")
    if index < 1:
        raise ValueError(f"Sibling positions start at 1, got {index}")
    if index >= 1 << width:
        raise EncodingOverflowError(
            f"Sibling position {index} does not fit in {width} bits "
            f"(maximum {(1 << width) - 1})"
        )
    return format(index, f"0{width}b")


class DynamicPathLabeler(Labeler):
    """Breadth-first path labeling that survives appends.

    A label only depends on the node's ancestors and sibling position, so
    appending a node never changes an existing label: only the new subtree
    needs labeling.

    Region ids follow a fixed rule: the second child of a node shares its
    parent's region id, while every other child (first, third, ...) gets the
    parent's id plus one.

    Top-level roots are numbered like siblings: root ``i`` of a forest gets
    the path ``encode_segment(i)`` rather than ``"001"`` for every root, so
    paths stay unique and prefix-ordered across the forest. A single root is
    always ``"001"``.
    """

    name = "dynamic"
    label_type = PathLabel
    requires_full_relabel = False

    def __init__(
        self,
        *,
        width: int = RELAB_SEGMENT_WIDTH,
        initial_region_id: int = RELAB_INITIAL_REGION_ID,
    ) -> None:
        if width < 1:
            raise ValueError(f"Segment width must be at least 1, got {width}")
        if initial_region_id < 0:
            raise ValueError(f"Region ids are non-negative, got {initial_region_id}")
        self.width = width
        self.initial_region_id = initial_region_id

    def __repr__(self) -> str:
        return (
            f"DynamicPathLabeler(width={self.width}, "
            f"initial_region_id={self.initial_region_id})"
        )

    def label_tree(self, tree: Node | Sequence[Node]) -> int:
        """Assign path labels to every node, breadth first.

        Args:
            tree: A root node or a sequence of top-level roots. Root ``i``
                (1-based) gets the path segment for ``i``, level 1 and region
                id ``initial_region_id + i - 1``.

        Returns:
            The number of nodes labeled.

        Raises:
            EncodingOverflowError: If some node has more siblings than the
                segment width can number. No label is changed in that case.
        """
        queue: Deque[_QueueItem] = deque(
            self._root_item(root, position)
            for position, root in enumerate(as_roots(tree), start=1)
        )
        count = self._drain(queue)
        logger.debug("Path labeling complete", extra={"nodes": count})
        return count

    def label_inserted(self, tree: Node | Sequence[Node], node: Node) -> int:
        """Label an appended node and its subtree, leaving all others alone.

        ``node`` is either one of the top-level roots of ``tree`` or the
        child of an already labeled node inside it.

        Returns:
            The number of nodes labeled (the size of ``node``'s subtree).

        Raises:
            InvalidOperationError: If ``node`` is not part of ``tree`` or its
                parent has no path label.
            EncodingOverflowError: If ``node`` or one of its descendants
                sits at a position the segment width cannot number.
        """
        roots = as_roots(tree)
        position = _position_among(node, roots)
        if position is not None:
            item = self._root_item(node, position)
        else:
            parent = node.parent
            root_ids = {id(root) for root in roots}
            if parent is None or not any(id(a) in root_ids for a in node.ancestors()):
                raise InvalidOperationError(f"Node {node.name!r} is not part of the tree")
            if not isinstance(parent.label, PathLabel):
                raise InvalidOperationError(
                    f"Parent {parent.name!r} has no path label; label the tree first"
                )
            position = _position_among(node, parent.children)
            item = self._child_item(node, parent.label, position)

        count = self._drain(deque([item]))
        logger.debug(
            "Labeled inserted subtree",
            extra={"node": node.name, "nodes": count},
        )
        return count

    def _root_item(self, root: Node, position: int) -> _QueueItem:
        region_id = self.initial_region_id + position - 1
        return root, 1, encode_segment(position, self.width), region_id

    def _child_item(self, child: Node, parent: PathLabel, position: int) -> _QueueItem:
        region_id = parent.region_id if position == 2 else parent.region_id + 1
        path = parent.path + encode_segment(position, self.width)
        return child, parent.level + 1, path, region_id

    def _drain(self, queue: Deque[_QueueItem]) -> int:
        # Every label is computed before any is assigned, so an overflow
        # leaves the tree exactly as it was.
        pending: list[tuple[Node, PathLabel]] = []
        while queue:
            node, level, path, region_id = queue.popleft()
            label = PathLabel(level=level, path=path, region_id=region_id)
            pending.append((node, label))
            for position, child in enumerate(node.children, start=1):
                queue.append(self._child_item(child, label, position))
        for node, label in pending:
            node.label = label
        return len(pending)


def _position_among(node: Node, siblings: Sequence[Node]) -> int | None:
    for position, sibling in enumerate(siblings, start=1):
        if sibling is node:
            return position
    return None
