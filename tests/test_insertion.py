"""Tests for the insertion protocol."""

from __future__ import annotations

import pytest

from relab.exceptions import EncodingOverflowError, InvalidOperationError
from relab.insertion import attach_root, insert, insert_and_relabel
from relab.labelers import DynamicPathLabeler, StaticRegionLabeler, get_labeler
from relab.schemas import Node


class TestInsert:
    """Tests for insert function."""

    def test_appends_without_labeling(self, example_tree: dict[str, Node]) -> None:
        """insert only changes structure."""
        StaticRegionLabeler().label_tree(example_tree["root"])
        before = example_tree["root"].label

        new_node = insert(example_tree["root"], Node(name="d"))

        assert example_tree["root"].children[-1] is new_node
        assert new_node.label is None
        assert example_tree["root"].label == before

    def test_rejects_reattaching_existing_node(self, example_tree: dict[str, Node]) -> None:
        """Moving a node that already has a parent is refused."""
        with pytest.raises(InvalidOperationError):
            insert(example_tree["b"], example_tree["c"])


class TestAttachRoot:
    """Tests for attach_root function."""

    def test_appends_detached_node(self) -> None:
        """A detached node becomes the last root."""
        roots = [Node(name="a")]
        new_root = attach_root(roots, Node(name="b"))
        assert roots[-1] is new_root

    def test_rejects_duplicate_root(self) -> None:
        """The same root cannot appear twice."""
        root = Node(name="a")
        roots = [root]
        with pytest.raises(InvalidOperationError, match="already in the tree"):
            attach_root(roots, root)

    def test_rejects_attached_node(self, example_tree: dict[str, Node]) -> None:
        """A node with a parent cannot become a root."""
        with pytest.raises(InvalidOperationError, match="already attached"):
            attach_root([example_tree["root"]], example_tree["a"])

    def test_rejects_ancestor_of_a_root(self, example_tree: dict[str, Node]) -> None:
        """A root list of children cannot take their own parent."""
        root = example_tree["root"]
        with pytest.raises(InvalidOperationError):
            attach_root(root.children, root)


class TestInsertAndRelabel:
    """Tests for insert_and_relabel function."""

    def test_static_relabels_everything(self, example_tree: dict[str, Node]) -> None:
        """The static strategy writes a label for every node."""
        labeler = StaticRegionLabeler()
        roots = [example_tree["root"]]
        labeler.label_tree(roots)

        count = insert_and_relabel(labeler, roots, example_tree["a"], Node(name="d"))

        assert count == 5
        labeler.check(roots)

    def test_dynamic_labels_new_node_only(self, example_tree: dict[str, Node]) -> None:
        """The dynamic strategy writes exactly one label for a leaf."""
        labeler = DynamicPathLabeler()
        roots = [example_tree["root"]]
        labeler.label_tree(roots)
        before = {name: node.label for name, node in example_tree.items()}

        new_node = Node(name="d")
        count = insert_and_relabel(labeler, roots, example_tree["a"], new_node)

        assert count == 1
        assert {name: node.label for name, node in example_tree.items()} == before
        assert new_node.label.path == "001001010"
        labeler.check(roots)

    def test_dynamic_top_level(self, example_tree: dict[str, Node]) -> None:
        """parent=None appends a new top-level root."""
        labeler = DynamicPathLabeler()
        roots = [example_tree["root"]]
        labeler.label_tree(roots)

        new_root = Node(name="dataset")
        assert insert_and_relabel(labeler, roots, None, new_root) == 1
        assert roots[-1] is new_root
        assert new_root.label.to_text() == "1,010,2"

    def test_overflowing_child_is_rolled_back(self, make_tree) -> None:
        """An eighth child that cannot be labeled is detached again."""
        labeler = DynamicPathLabeler()
        root = make_tree(("root", [("child", [])] * 7))
        roots = [root]
        labeler.label_tree(roots)
        children = list(root.children)
        labels = [node.label for node in root.iter_preorder()]

        new_node = Node(name="new")
        with pytest.raises(EncodingOverflowError):
            insert_and_relabel(labeler, roots, root, new_node)

        assert root.children == children
        assert [node.label for node in root.iter_preorder()] == labels
        assert new_node.parent is None
        assert new_node.label is None
        labeler.check(roots)

    def test_overflowing_subtree_is_rolled_back(
        self, example_tree: dict[str, Node], make_tree
    ) -> None:
        """A new subtree with too many children leaves the tree untouched."""
        labeler = DynamicPathLabeler()
        roots = [example_tree["root"]]
        labeler.label_tree(roots)
        before = {name: node.label for name, node in example_tree.items()}

        wide = make_tree(("wide", [("leaf", [])] * 8))
        with pytest.raises(EncodingOverflowError):
            insert_and_relabel(labeler, roots, example_tree["b"], wide)

        assert example_tree["b"].children == []
        assert {name: node.label for name, node in example_tree.items()} == before
        assert all(node.label is None for node in wide.iter_preorder())

    def test_overflowing_root_is_rolled_back(self, make_tree) -> None:
        """An eighth top-level root is removed from the roots again."""
        labeler = DynamicPathLabeler()
        roots = [make_tree(("dataset", [])) for _ in range(7)]
        labeler.label_tree(roots)

        new_root = Node(name="dataset")
        with pytest.raises(EncodingOverflowError):
            insert_and_relabel(labeler, roots, None, new_root)

        assert len(roots) == 7
        assert all(root is not new_root for root in roots)
        labeler.check(roots)

    @pytest.mark.parametrize("strategy", ["static", "dynamic"])
    def test_both_strategies_leave_tree_fully_labeled(
        self, strategy: str, catalog_tree: Node, make_tree
    ) -> None:
        """Whatever the strategy, every node is labeled after the protocol."""
        labeler = get_labeler(strategy)
        roots = [catalog_tree]
        labeler.label_tree(roots)

        insert_and_relabel(labeler, roots, catalog_tree.children[3], make_tree(("x", [("y", [])])))

        labeler.check(roots)
