"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def exceeds_canvas(
    x: float, y: float, width: float, height: float, canvas_w: float, canvas_h: float
) -> bool:
    """True when the box starts left of / above the origin or runs past the canvas."""
    return x < 0 or y < 0 or x + width > canvas_w or y + height > canvas_h


def fit_scale(
    content_w: float, content_h: float, canvas_w: float, canvas_h: float, padding: float
) -> tuple[float, float, float]:
    """Uniform scale plus (offset_x, offset_y) that centre content inside a padded canvas."""
    if content_w <= 0 or content_h <= 0:
        return (1.0, padding, padding)
    scale = min((canvas_w - 2 * padding) / content_w, (canvas_h - 2 * padding) / content_h)
    offset_x = (canvas_w - content_w * scale) / 2
    offset_y = (canvas_h - content_h * scale) / 2
    return (scale, offset_x, offset_y)
