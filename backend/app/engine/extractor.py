"""Document → ExtractionResult.

extract() is pure: the same text always yields an equal result. Only
malformed markup raises (SvgParseError); every other oddity falls back to a
default or is skipped.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from app.engine.config import ExtractionConfig
from app.engine.context import ExtractionContext
from app.engine.dimensions import resolve_dimensions
from app.engine.metrics import compute_metrics
from app.engine.walker import walk
from app.models.design import ExtractionResult
from app.svg.parser import document_root, parse_document

logger = logging.getLogger(__name__)


def extract(svg_text: str, config: ExtractionConfig | None = None) -> ExtractionResult:
    """Extract rectangular primitives and quality metrics from SVG text."""
    config = config or ExtractionConfig()
    start = time.perf_counter()

    document = parse_document(svg_text)
    root = document_root(document)

    ctx = ExtractionContext(
        dimensions=resolve_dimensions(root.attributes, config),
        config=config,
    )
    walk(ctx, root, 0)

    issues, coverage = compute_metrics(ctx.items, ctx.dimensions)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Extracted %d items (%d paths dropped), canvas %.0f×%.0f, coverage %.2f%% in %.1fms",
        len(ctx.items),
        ctx.paths_dropped,
        ctx.dimensions.width,
        ctx.dimensions.height,
        coverage * 100,
        elapsed,
    )

    return ExtractionResult(
        dimensions=ctx.dimensions,
        items=ctx.items,
        items_count=len(ctx.items),
        coverage_ratio=coverage,
        issues=issues,
    )


def extract_file(path: str | Path, config: ExtractionConfig | None = None) -> ExtractionResult:
    """Read a UTF-8 SVG file and extract it."""
    return extract(Path(path).read_text(encoding="utf-8"), config)
