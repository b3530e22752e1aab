"""Name-path queries over the tree."""

from __future__ import annotations

from typing import Sequence

from relab.schemas import Node, as_roots

WILDCARD = "*"


def query_nodes(tree: Node | Sequence[Node], pattern: str) -> list[Node]:
    """Find nodes whose name path from a root matches ``pattern``.

    The pattern is a slash-separated list of names, one per level, starting
    at the roots themselves; ``*`` matches any name. Matches are exact-depth:
    ``"a/b"`` finds the ``b`` children of root ``a``, not deeper ``b`` nodes.
    Leading and trailing slashes are ignored.

    Returns:
        Matching nodes in document order. An empty pattern matches nothing.
    """
    parts = pattern.strip("/").split("/")
    if parts == [""]:
        return []

    matches: list[Node] = []
    for root in as_roots(tree):
        _collect(root, parts, 0, matches)
    return matches


def _collect(node: Node, parts: list[str], depth: int, matches: list[Node]) -> None:
    part = parts[depth]
    if part != WILDCARD and part != node.name:
        return
    if depth == len(parts) - 1:
        matches.append(node)
        return
    for child in node.children:
        _collect(child, parts, depth + 1, matches)
