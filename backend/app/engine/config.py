"""Extraction configuration: fallbacks and traversal limits."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionConfig:
    """Controls traversal limits and the defaults used for missing attributes."""

    # Groups / nested <svg> deeper than this are not descended into
    max_depth: int = 100

    # Canvas used when neither width/height nor viewBox yield a size
    default_width: float = 100.0
    default_height: float = 100.0

    # Fill fallbacks
    default_rect_fill: str = "#000000"
    default_path_fill: str = "transparent"
