"""API response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.design import DesignIssue, DesignRecord, DesignStatus


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    designs_stored: int = 0


class DesignSummary(BaseModel):
    id: str
    filename: str
    status: DesignStatus
    created_at: datetime
    items_count: int = 0
    coverage_ratio: float = 0.0
    issues: list[DesignIssue] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: DesignRecord) -> DesignSummary:
        return cls(
            id=record.id,
            filename=record.filename,
            status=record.status,
            created_at=record.created_at,
            items_count=record.items_count,
            coverage_ratio=record.coverage_ratio,
            issues=record.issues,
        )


class UploadResponse(BaseModel):
    success: bool = True
    design: DesignSummary


class ErrorResponse(BaseModel):
    error: str
    details: str = ""
    design_id: str | None = None


class DeleteResponse(BaseModel):
    message: str = "Design deleted successfully"
    id: str
