"""Render extracted items as a fixed-size preview SVG.

The document is scaled uniformly to fit the canvas minus padding and centred.
Out-of-bounds items get a thick red outline; everything else a black one.
"""

from __future__ import annotations

from collections.abc import Sequence
from xml.sax.saxutils import quoteattr

from app.models.design import DesignItem, Dimensions, ItemIssue
from app.utils.geometry import fit_scale

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 300
PADDING = 15

_BACKGROUND = "#ffffff"
_EMPTY_TEXT_COLOR = "#666666"
_STROKE = ("#000000", 2)
_STROKE_OUT_OF_BOUNDS = ("#ff0000", 3)
_NO_FILL = {"transparent", "none", "rgba(0,0,0,0)"}


def _fmt(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".")


def _rect_tag(item: DesignItem, scale: float, offset_x: float, offset_y: float) -> str | None:
    x = offset_x + item.x * scale
    y = offset_y + item.y * scale
    w = item.width * scale
    h = item.height * scale
    if w <= 0 or h <= 0:
        return None

    fill = item.fill or "#000000"
    fill_attr = "none" if fill in _NO_FILL else fill
    stroke, stroke_width = (
        _STROKE_OUT_OF_BOUNDS if item.issue == ItemIssue.OUT_OF_BOUNDS else _STROKE
    )
    return (
        f'  <rect x="{_fmt(x)}" y="{_fmt(y)}" width="{_fmt(w)}" height="{_fmt(h)}"'
        f" fill={quoteattr(fill_attr)} stroke=\"{stroke}\" stroke-width=\"{stroke_width}\" />"
    )


def render_preview(
    items: Sequence[DesignItem],
    dimensions: Dimensions,
    canvas_w: int = CANVAS_WIDTH,
    canvas_h: int = CANVAS_HEIGHT,
    padding: int = PADDING,
) -> str:
    """Generate preview SVG markup for a design's items."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{canvas_w}" height="{canvas_h}"'
        f' viewBox="0 0 {canvas_w} {canvas_h}">',
        f'  <rect x="0" y="0" width="{canvas_w}" height="{canvas_h}" fill="{_BACKGROUND}" />',
    ]

    if not items:
        lines.append(
            f'  <text x="{_fmt(canvas_w / 2)}" y="{_fmt(canvas_h / 2)}" fill="{_EMPTY_TEXT_COLOR}"'
            ' font-family="Arial" font-size="16" text-anchor="middle">No rectangles found</text>'
        )
    else:
        scale, offset_x, offset_y = fit_scale(
            dimensions.width, dimensions.height, canvas_w, canvas_h, padding
        )
        for item in items:
            tag = _rect_tag(item, scale, offset_x, offset_y)
            if tag is not None:
                lines.append(tag)

    lines.append("</svg>")
    return "\n".join(lines)
