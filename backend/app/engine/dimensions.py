"""Document dimension resolution.

Order of precedence per side: explicit width/height attribute (unit suffix
stripped), then the matching viewBox component, then (only when both sides
are unresolved) the configured default canvas.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping

from app.engine.config import ExtractionConfig
from app.models.design import Dimensions
from app.svg.attributes import is_missing, parse_number

logger = logging.getLogger(__name__)

_NON_NUMERIC_RE = re.compile(r"[^\d.]")
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


def _length(value: str | None) -> float:
    """Parse a width/height attribute, dropping every non-digit, non-dot character."""
    if value is None:
        return math.nan
    return parse_number(_NON_NUMERIC_RE.sub("", value))


def _viewbox(value: str | None) -> list[float] | None:
    if not value:
        return None
    numbers = [parse_number(part) for part in _VIEWBOX_SPLIT_RE.split(value)]
    numbers = [n for n in numbers if not math.isnan(n)]
    if len(numbers) != 4:
        return None
    return numbers


def resolve_dimensions(
    attrs: Mapping[str, str], config: ExtractionConfig | None = None
) -> Dimensions:
    config = config or ExtractionConfig()

    width = _length(attrs.get("width"))
    height = _length(attrs.get("height"))

    if is_missing(width) or is_missing(height):
        vb = _viewbox(attrs.get("viewBox"))
        if vb is not None:
            if is_missing(width):
                width = vb[2]
            if is_missing(height):
                height = vb[3]

    if is_missing(width) and is_missing(height):
        logger.debug("No usable width/height/viewBox, using default canvas")
        width, height = config.default_width, config.default_height

    # A lone unresolved side collapses to 0
    if is_missing(width):
        width = 0.0
    if is_missing(height):
        height = 0.0

    return Dimensions(width=width, height=height)
