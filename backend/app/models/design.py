"""Design extraction and record models."""

from __future__ import annotations

import enum
from datetime import datetime, timezone

from pydantic import BaseModel, Field


class DesignIssue(str, enum.Enum):
    EMPTY = "EMPTY"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"


class ItemIssue(str, enum.Enum):
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"


class DesignStatus(str, enum.Enum):
    PENDING = "PENDING"
    PROCESSED = "PROCESSED"
    ERROR = "ERROR"


class Dimensions(BaseModel):
    width: float = 0.0
    height: float = 0.0

    @property
    def area(self) -> float:
        return self.width * self.height


class DesignItem(BaseModel):
    """One rectangular region found in the document (explicit <rect> or path box)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    fill: str = "#000000"
    issue: ItemIssue | None = None

    @property
    def area(self) -> float:
        return self.width * self.height


class ExtractionResult(BaseModel):
    dimensions: Dimensions
    items: list[DesignItem] = Field(default_factory=list)
    items_count: int = 0
    coverage_ratio: float = 0.0
    issues: list[DesignIssue] = Field(default_factory=list)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DesignRecord(BaseModel):
    """Persisted design: upload metadata, lifecycle status and extraction output."""

    id: str
    filename: str
    file_path: str = ""
    status: DesignStatus = DesignStatus.PENDING
    created_at: datetime = Field(default_factory=_utcnow)
    dimensions: Dimensions = Field(default_factory=Dimensions)
    items: list[DesignItem] = Field(default_factory=list)
    items_count: int = 0
    coverage_ratio: float = 0.0
    issues: list[DesignIssue] = Field(default_factory=list)
    error: str | None = None

    def apply_result(self, result: ExtractionResult) -> None:
        self.dimensions = result.dimensions
        self.items = result.items
        self.items_count = result.items_count
        self.coverage_ratio = result.coverage_ratio
        self.issues = result.issues
        self.status = DesignStatus.PROCESSED
        self.error = None

    def mark_error(self, message: str) -> None:
        self.status = DesignStatus.ERROR
        self.error = message
