"""Common interface of the labeling strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

from relab.exceptions import LabelingError
from relab.schemas import Label, Node, iter_forest


class Labeler(ABC):
    """A strategy that stamps structural labels onto a tree.

    Both strategies work on the same ``Node`` model and accept either a
    single root or a sequence of top-level roots.
    """

    name: ClassVar[str]
    label_type: ClassVar[type]
    # Whether any insertion forces every node to be labeled again.
    requires_full_relabel: ClassVar[bool]

    @abstractmethod
    def label_tree(self, tree: Node | Sequence[Node]) -> int:
        """Label every node of ``tree`` and return the number labeled."""

    @abstractmethod
    def label_inserted(self, tree: Node | Sequence[Node], node: Node) -> int:
        """Bring labels up to date after ``node`` was appended to ``tree``.

        Returns the number of nodes whose label was written.
        """

    def labels(self, tree: Node | Sequence[Node]) -> list[tuple[Node, Label | None]]:
        """Return ``(node, label)`` pairs in document order."""
        return [(node, node.label) for node in iter_forest(tree)]

    def check(self, tree: Node | Sequence[Node]) -> None:
        """Verify that every node carries a label of this strategy.

        Raises:
            LabelingError: On the first unlabeled or foreign-labeled node.
        """
        for node in iter_forest(tree):
            if node.label is None:
                raise LabelingError(f"Node {node.name!r} has no label")
            if not isinstance(node.label, self.label_type):
                raise LabelingError(
                    f"Node {node.name!r} carries a {type(node.label).__name__}, "
                    f"expected {self.label_type.__name__}"
                )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
