"""Build relab trees from XML markup."""

from __future__ import annotations

import logging
from pathlib import Path

from relab.config import RELAB_XML_FEATURES
from relab.exceptions import ParseError
from relab.schemas import Node

try:
    from bs4 import BeautifulSoup, FeatureNotFound
    from bs4.builder import ParserRejectedMarkup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for XML parsing (pip install beautifulsoup4 lxml)."
    ) from exc

logger = logging.getLogger(__name__)


def parse_xml(markup: str | bytes, *, features: str = RELAB_XML_FEATURES) -> Node:
    """Parse an XML document and return the tree of its root element.

    Args:
        markup: XML text or raw bytes (bytes let the parser honour the
            document's declared encoding).
        features: BeautifulSoup parser features.

    Returns:
        The root node. Every node keeps its bs4 ``Tag`` in ``element``.

    Raises:
        ParseError: If the parser is unavailable or the document has no
            root element.
    """
    try:
        soup = BeautifulSoup(markup, features)
    except FeatureNotFound as exc:
        raise ParseError(
            f"XML parser {features!r} is not available (pip install lxml)."
        ) from exc
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Markup rejected by the XML parser: {exc}") from exc

    root_element = find_root_element(soup)
    if root_element is None:
        raise ParseError("Document has no root element")

    root = build_tree(root_element)
    logger.debug("Parsed XML document", extra={"root": root.name})
    return root


def load_xml(path: str | Path, *, features: str = RELAB_XML_FEATURES) -> Node:
    """Parse an XML file from disk."""
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"XML file not found: {file_path}")
    return parse_xml(file_path.read_bytes(), features=features)


def find_root_element(soup: BeautifulSoup) -> Tag | None:
    """Return the first element at document level, skipping prolog nodes."""
    for child in soup.contents:
        if isinstance(child, Tag):
            return child
    return None


def build_tree(element: Tag) -> Node:
    """Mirror ``element`` and its descendant elements as a node tree.

    Text, comments and attributes are not copied; they stay reachable
    through each node's ``element`` for write-back.
    """
    root = Node(name=local_name(element), element=element)
    stack = [(element, root)]
    while stack:
        tag, node = stack.pop()
        for child_tag in tag.find_all(True, recursive=False):
            child = node.add_child(Node(name=local_name(child_tag), element=child_tag))
            stack.append((child_tag, child))
    return root


def local_name(tag: Tag) -> str:
    """Element name without its namespace prefix.

    The XML builder already splits off the prefix; other builders may not.
    """
    return tag.name.rsplit(":", 1)[-1]
