"""Appending nodes to a labeled tree."""

from __future__ import annotations

import logging
from typing import MutableSequence

from relab.exceptions import InvalidOperationError, RelabError
from relab.labelers import Labeler
from relab.schemas import Node

logger = logging.getLogger(__name__)


def insert(parent: Node, new_node: Node) -> Node:
    """Append ``new_node`` as the last child of ``parent`` without relabeling."""
    return parent.add_child(new_node)


def attach_root(roots: MutableSequence[Node], new_node: Node) -> Node:
    """Append a detached node as a new top-level root.

    Raises:
        InvalidOperationError: If ``new_node`` already has a parent, is
            already one of the roots, or is an ancestor of one of them.
    """
    if new_node.parent is not None:
        raise InvalidOperationError(
            f"Node {new_node.name!r} is already attached to {new_node.parent.name!r}"
        )
    for root in roots:
        if root is new_node or new_node.is_ancestor_of(root):
            raise InvalidOperationError(f"Node {new_node.name!r} is already in the tree")
    roots.append(new_node)
    return new_node


def insert_and_relabel(
    labeler: Labeler,
    roots: MutableSequence[Node],
    parent: Node | None,
    new_node: Node,
) -> int:
    """Append a node and update labels the way ``labeler`` requires.

    The static strategy relabels every node; the dynamic strategy labels the
    new subtree only. If labeling fails the node is detached again, leaving
    the tree and its labels as they were before the call.

    Args:
        labeler: Strategy that labeled ``roots``.
        roots: Top-level roots of the labeled tree.
        parent: Node to append under, or None to append a top-level root.
        new_node: Freshly built node (with or without children).

    Returns:
        The number of labels written.

    Raises:
        InvalidOperationError: If ``new_node`` cannot be attached.
        EncodingOverflowError: If the new subtree cannot be labeled.
    """
    if parent is None:
        attach_root(roots, new_node)
    else:
        insert(parent, new_node)

    try:
        count = labeler.label_inserted(roots, new_node)
    except RelabError:
        _detach(roots, parent, new_node)
        logger.warning(
            "Insertion rolled back",
            extra={"strategy": labeler.name, "node": new_node.name},
        )
        raise

    logger.debug(
        "Relabeled after insertion",
        extra={
            "strategy": labeler.name,
            "node": new_node.name,
            "labeled": count,
            "full_relabel": labeler.requires_full_relabel,
        },
    )
    return count


def _detach(roots: MutableSequence[Node], parent: Node | None, node: Node) -> None:
    if parent is not None:
        parent.remove_child(node)
        return
    for index, root in enumerate(roots):
        if root is node:
            del roots[index]
            return
