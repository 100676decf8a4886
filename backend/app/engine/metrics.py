"""Post-traversal issues and coverage."""

from __future__ import annotations

from collections.abc import Sequence

from app.models.design import DesignIssue, DesignItem, Dimensions, ItemIssue


def detect_issues(items: Sequence[DesignItem]) -> list[DesignIssue]:
    """EMPTY when nothing was extracted, OUT_OF_BOUNDS when any item was flagged."""
    issues: list[DesignIssue] = []
    if not items:
        issues.append(DesignIssue.EMPTY)
    if any(item.issue == ItemIssue.OUT_OF_BOUNDS for item in items):
        issues.append(DesignIssue.OUT_OF_BOUNDS)
    return issues


def coverage_ratio(items: Sequence[DesignItem], dimensions: Dimensions) -> float:
    """Sum of item areas over document area.

    Overlaps are counted twice and out-of-bounds parts are not clipped, so the
    ratio can exceed 1. A non-positive document area yields 0.
    """
    doc_area = dimensions.area
    if doc_area <= 0:
        return 0.0
    return sum(item.area for item in items) / doc_area


def compute_metrics(
    items: Sequence[DesignItem], dimensions: Dimensions
) -> tuple[list[DesignIssue], float]:
    return detect_issues(items), coverage_ratio(items, dimensions)
