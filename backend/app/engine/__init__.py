"""SVG design extraction engine."""

from app.engine.config import ExtractionConfig
from app.engine.context import ExtractionContext
from app.engine.extractor import extract, extract_file

__all__ = [
    "ExtractionConfig",
    "ExtractionContext",
    "extract",
    "extract_file",
]
