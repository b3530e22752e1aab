"""Tree model shared by both labeling strategies."""

from __future__ import annotations

from typing import Any, Iterator, Sequence, Union

from pydantic import BaseModel, Field, PrivateAttr

from relab.exceptions import InvalidOperationError
from relab.schemas.labels import PathLabel, RegionLabel

Label = Union[RegionLabel, PathLabel]


class Node(BaseModel):
    """One element of a hierarchical document.

    A node exclusively owns its children: the tree is a strict hierarchy and
    a node is attached to at most one parent. Structure is compared by
    identity, so two nodes with equal fields are still different nodes.

    Attributes:
        name: Element name (local name for namespaced markup).
        children: Ordered child nodes. Append through ``add_child`` so the
            parent link stays consistent.
        label: Label assigned by the last labeler run, if any.
        element: Opaque reference to the source markup element, carried
            through unchanged for write-back.
    """

    name: str
    children: list["Node"] = Field(default_factory=list)
    label: Label | None = None
    element: Any = Field(default=None, exclude=True, repr=False)

    _parent: Node | None = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        children = self.children
        self.children = []
        for child in children:
            self.add_child(child)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def add_child(self, child: Node) -> Node:
        """Append ``child`` as the last child of this node.

        Args:
            child: A detached node (no parent) that is not this node or one
                of its ancestors.

        Returns:
            The attached child, for chaining.

        Raises:
            InvalidOperationError: If attaching would create a cycle or
                share the child between two parents.
        """
        if child is self or any(ancestor is child for ancestor in self.ancestors()):
            raise InvalidOperationError(
                f"Attaching {child.name!r} under {self.name!r} would create a cycle"
            )
        if child._parent is not None:
            raise InvalidOperationError(
                f"Node {child.name!r} is already attached to {child._parent.name!r}"
            )
        self.children.append(child)
        child._parent = self
        return child

    def remove_child(self, child: Node) -> Node:
        """Detach ``child`` from this node and return it.

        Raises:
            InvalidOperationError: If ``child`` is not a child of this node.
        """
        for index, candidate in enumerate(self.children):
            if candidate is child:
                del self.children[index]
                child._parent = None
                return child
        raise InvalidOperationError(f"Node {child.name!r} is not a child of {self.name!r}")

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent, grandparent, ... up to the root."""
        current = self._parent
        while current is not None:
            yield current
            current = current._parent

    def is_ancestor_of(self, other: Node) -> bool:
        """True if ``other`` is a proper descendant of this node."""
        return any(ancestor is self for ancestor in other.ancestors())

    def iter_preorder(self) -> Iterator[Node]:
        """Yield this node and its descendants in document order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def as_roots(tree: Node | Sequence[Node]) -> list[Node]:
    """Normalize a single root or a sequence of roots to a list of roots."""
    if isinstance(tree, Node):
        return [tree]
    return list(tree)


def iter_forest(tree: Node | Sequence[Node]) -> Iterator[Node]:
    """Yield every node of one or more trees in document order."""
    for root in as_roots(tree):
        yield from root.iter_preorder()
