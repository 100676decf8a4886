"""ExtractionContext: the mutable state owned by a single extraction call.

Nothing here is shared between calls; each extract() builds a fresh context.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from app.engine.config import ExtractionConfig
from app.models.design import DesignItem, Dimensions


@dataclass
class ExtractionContext:
    """Per-document traversal state."""

    dimensions: Dimensions
    config: ExtractionConfig = field(default_factory=ExtractionConfig)
    # Accumulated primitives, in emission order
    items: list[DesignItem] = field(default_factory=list)
    # id() of every node already walked
    visited: set[int] = field(default_factory=set)
    # Branches cut by the depth limit
    depth_limit_hits: int = 0
    # Path elements whose box was empty or degenerate
    paths_dropped: int = 0
