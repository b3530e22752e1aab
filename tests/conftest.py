"""Test setup for relab."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from relab.schemas import Node  # noqa: E402


def build_tree(shape: tuple) -> Node:
    name, children = shape
    node = Node(name=name)
    for child_shape in children:
        node.add_child(build_tree(child_shape))
    return node


@pytest.fixture
def make_tree() -> Callable[[tuple], Node]:
    """Factory building a node tree from nested (name, children) tuples."""
    return build_tree


@pytest.fixture
def example_tree() -> dict[str, Node]:
    """The tree root -> [a, b], a -> [c], keyed by node name."""
    c = Node(name="c")
    a = Node(name="a", children=[c])
    b = Node(name="b")
    root = Node(name="root", children=[a, b])
    return {"root": root, "a": a, "b": b, "c": c}


@pytest.fixture
def catalog_tree() -> Node:
    """An irregular document-like tree with uneven depth and fan-out."""
    return build_tree(
        (
            "datasets",
            [
                (
                    "dataset",
                    [
                        ("title", []),
                        ("altname", []),
                        ("altname", []),
                        (
                            "reference",
                            [("source", [("other", [("title", []), ("author", [("initial", []), ("lastName", [])])])])],
                        ),
                        ("keywords", [("keyword", []), ("keyword", [])]),
                    ],
                ),
                ("dataset", [("title", []), ("identifier", [])]),
                ("dataset", []),
                (
                    "dataset",
                    [
                        ("descriptions", [("description", [("para", [])]), ("details", [])]),
                        ("identifier", []),
                    ],
                ),
            ],
        )
    )
