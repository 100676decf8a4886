"""SVG parser: facade over xml.etree.

Converts raw SVG text into a light node tree: each node exposes its attributes
and its child elements grouped by tag name (``rect``, ``path``, ``g``, ``svg``,
...). Grouping by tag drops the interleaving between different tags; the
extractor only relies on per-tag document order.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DOCUMENT_TAG = "#document"


class SvgParseError(ValueError):
    """Raised when the input is not well-formed markup."""


@dataclass(eq=False)
class SvgNode:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: dict[str, list[SvgNode]] = field(default_factory=dict)

    def children_named(self, tag: str) -> list[SvgNode]:
        return self.children.get(tag, [])

    def add_child(self, child: SvgNode) -> None:
        self.children.setdefault(child.tag, []).append(child)


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _new_node(element: ET.Element) -> SvgNode:
    return SvgNode(
        tag=_strip_ns(element.tag),
        attributes={_strip_ns(k): v for k, v in element.attrib.items()},
    )


def _build(root: ET.Element) -> SvgNode:
    # Iterative: markup nesting depth is unbounded
    top = _new_node(root)
    stack = [(root, top)]
    while stack:
        element, node = stack.pop()
        for child in element:
            # Comments and processing instructions carry a non-string tag
            if not isinstance(child.tag, str):
                continue
            child_node = _new_node(child)
            node.add_child(child_node)
            stack.append((child, child_node))
    return top


def parse_document(svg_text: str) -> SvgNode:
    """Parse SVG text into a document node whose single child is the root element.

    Raises SvgParseError when the text is not well-formed XML.
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG markup: {e}") from e

    document = SvgNode(tag=DOCUMENT_TAG)
    document.add_child(_build(root))
    logger.debug("Parsed markup tree, root <%s>", _strip_ns(root.tag))
    return document


def document_root(document: SvgNode) -> SvgNode:
    """The top-level <svg> element, or the document node itself when the root is something else."""
    svgs = document.children_named("svg")
    return svgs[0] if svgs else document
