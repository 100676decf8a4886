"""Structural walker: depth-first traversal dispatching rect, path, g and svg children.

Emission order per node is fixed: every <rect> child, then every <path>
child, then the contents of each <g>, then the contents of each nested <svg>.
A nested <svg> is only entered below the top level, so the root element is
never treated as nested inside itself.
"""

from __future__ import annotations

import logging

from app.engine.context import ExtractionContext
from app.models.design import DesignItem, ItemIssue
from app.svg.attributes import attr_float, attr_str
from app.svg.parser import SvgNode
from app.svg.path_data import path_bbox
from app.utils.geometry import exceeds_canvas

logger = logging.getLogger(__name__)


def _make_item(
    ctx: ExtractionContext, x: float, y: float, width: float, height: float, fill: str
) -> DesignItem:
    item = DesignItem(x=x, y=y, width=width, height=height, fill=fill)
    dims = ctx.dimensions
    if exceeds_canvas(x, y, width, height, dims.width, dims.height):
        item.issue = ItemIssue.OUT_OF_BOUNDS
    return item


def rect_item(ctx: ExtractionContext, rect: SvgNode) -> DesignItem:
    attrs = rect.attributes
    return _make_item(
        ctx,
        attr_float(attrs, "x"),
        attr_float(attrs, "y"),
        attr_float(attrs, "width"),
        attr_float(attrs, "height"),
        attr_str(attrs, "fill", default=ctx.config.default_rect_fill),
    )


def path_item(ctx: ExtractionContext, path: SvgNode) -> DesignItem | None:
    """Item for the path's bounding box, or None when the box is empty or flat."""
    attrs = path.attributes
    d = attrs.get("d", "")
    fill = attr_str(attrs, "fill", "stroke", default=ctx.config.default_path_fill)

    box = path_bbox(d)
    if box is None:
        return None
    x, y, width, height = box
    if width <= 0 or height <= 0:
        logger.debug("Dropping degenerate path box %.2f×%.2f (d=%.60s)", width, height, d)
        return None
    return _make_item(ctx, x, y, width, height, fill)


def walk(ctx: ExtractionContext, node: SvgNode, depth: int = 0) -> None:
    """Append every primitive under ``node`` to ``ctx.items`` in document order."""
    if depth > ctx.config.max_depth:
        ctx.depth_limit_hits += 1
        logger.warning("Max recursion depth %d reached, skipping <%s>", ctx.config.max_depth, node.tag)
        return

    if id(node) in ctx.visited:
        return
    ctx.visited.add(id(node))

    for rect in node.children_named("rect"):
        ctx.items.append(rect_item(ctx, rect))

    paths = node.children_named("path")
    if paths:
        logger.debug("Found %d path element(s) at depth %d", len(paths), depth)
    for path in paths:
        item = path_item(ctx, path)
        if item is None:
            ctx.paths_dropped += 1
            continue
        ctx.items.append(item)

    for group in node.children_named("g"):
        walk(ctx, group, depth + 1)

    if depth > 0:
        for nested in node.children_named("svg"):
            walk(ctx, nested, depth + 1)
