"""Serialize a labeled tree back to XML."""

from __future__ import annotations

import logging
from pathlib import Path

from relab.config import RELAB_LABEL_ATTRIBUTE
from relab.exceptions import ExportError
from relab.schemas import Node

try:
    from bs4 import BeautifulSoup
    from bs4.element import CData, NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ExportError(
        "BeautifulSoup4 is required for XML output (pip install beautifulsoup4 lxml)."
    ) from exc

logger = logging.getLogger(__name__)

# Character data copied from the source; comments and processing
# instructions are dropped.
_TEXT_TYPES = (NavigableString, CData)


def render_labeled_xml(root: Node, *, attribute: str = RELAB_LABEL_ATTRIBUTE) -> str:
    """Render ``root`` as an XML document with one label attribute per element.

    The label attribute comes first, followed by the source element's own
    attributes (a source attribute with the same name is replaced). Text and
    child elements keep their source order; children appended after parsing
    follow the source children.

    Raises:
        ExportError: If any node is unlabeled.
    """
    soup = BeautifulSoup("", "xml")
    nodes = list(root.iter_preorder())
    tags = {id(node): _new_tag(soup, node, attribute) for node in nodes}
    for node in nodes:
        tag = tags[id(node)]
        for content in _ordered_contents(node):
            if isinstance(content, Node):
                tag.append(tags[id(content)])
            else:
                tag.append(content)
    soup.append(tags[id(root)])
    return str(soup)


def write_labeled_xml(
    root: Node, path: str | Path, *, attribute: str = RELAB_LABEL_ATTRIBUTE
) -> Path:
    """Write the labeled document to ``path`` as UTF-8 and return the path."""
    output_path = Path(path)
    output_path.write_text(render_labeled_xml(root, attribute=attribute), encoding="utf-8")
    logger.info("Labeled XML written", extra={"path": str(output_path)})
    return output_path


def _new_tag(soup: BeautifulSoup, node: Node, attribute: str) -> Tag:
    if node.label is None:
        raise ExportError(f"Node {node.name!r} has no label")

    source = node.element if isinstance(node.element, Tag) else None
    attrs = {attribute: node.label.to_text()}
    if source is None:
        return soup.new_tag(node.name, attrs=attrs)
    for key, value in source.attrs.items():
        if key != attribute:
            attrs[key] = value
    return soup.new_tag(
        source.name, namespace=source.namespace, nsprefix=source.prefix, attrs=attrs
    )


def _ordered_contents(node: Node) -> list[Node | NavigableString]:
    """Child nodes interleaved with copies of the source text, in output order."""
    contents: list[Node | NavigableString] = []
    emitted: set[int] = set()
    if isinstance(node.element, Tag):
        by_element = {
            id(child.element): child for child in node.children if child.element is not None
        }
        for content in node.element.contents:
            if isinstance(content, Tag):
                child = by_element.get(id(content))
                if child is not None:
                    contents.append(child)
                    emitted.add(id(child))
            elif type(content) in _TEXT_TYPES:
                contents.append(type(content)(str(content)))

    contents.extend(child for child in node.children if id(child) not in emitted)
    return contents
