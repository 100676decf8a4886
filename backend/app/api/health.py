"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.dependencies import get_store
from app.models.responses import HealthResponse
from app.store.designs import DesignStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(store: DesignStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        designs_stored=store.count(),
    )
