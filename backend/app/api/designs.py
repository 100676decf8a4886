"""/api/designs: upload, list, fetch, preview and delete designs."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse, Response

from app.config import Settings
from app.dependencies import get_settings, get_store
from app.engine import extract
from app.models.design import DesignRecord
from app.models.responses import (
    DeleteResponse,
    DesignSummary,
    ErrorResponse,
    UploadResponse,
)
from app.store.designs import DesignNotFoundError, DesignStore
from app.svg.parser import SvgParseError
from app.svg.preview import render_preview

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/designs")


def _bad_request(error: str, details: str = "") -> JSONResponse:
    return JSONResponse(status_code=400, content=ErrorResponse(error=error, details=details).model_dump())


def _load(store: DesignStore, design_id: str) -> DesignRecord:
    try:
        return store.get(design_id)
    except DesignNotFoundError:
        raise HTTPException(status_code=404, detail="Design not found")


@router.post("", response_model=UploadResponse, responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}})
def upload_design(
    file: UploadFile = File(...),
    store: DesignStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    filename = file.filename or ""
    if not filename.lower().endswith(".svg"):
        return _bad_request("Only .svg files are accepted", filename)

    content = file.file.read(settings.max_upload_bytes + 1)
    if len(content) > settings.max_upload_bytes:
        return _bad_request("File too large", f"limit is {settings.max_upload_bytes} bytes")

    record = store.create(filename, content)

    try:
        result = extract(content.decode("utf-8"))
    except (SvgParseError, UnicodeDecodeError) as e:
        logger.warning("Design %s failed to parse: %s", record.id, e)
        record.mark_error(str(e))
        store.save(record)
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                error="Failed to parse SVG file",
                details=str(e),
                design_id=record.id,
            ).model_dump(),
        )

    record.apply_result(result)
    store.save(record)
    logger.info("Design %s processed: %d items", record.id, result.items_count)

    return UploadResponse(design=DesignSummary.from_record(record))


@router.get("", response_model=list[DesignSummary])
def list_designs(store: DesignStore = Depends(get_store)) -> list[DesignSummary]:
    return [DesignSummary.from_record(r) for r in store.all()]


@router.get("/{design_id}", response_model=DesignRecord)
def get_design(design_id: str, store: DesignStore = Depends(get_store)) -> DesignRecord:
    return _load(store, design_id)


@router.get("/{design_id}/preview")
def preview_design(design_id: str, store: DesignStore = Depends(get_store)) -> Response:
    record = _load(store, design_id)
    svg = render_preview(record.items, record.dimensions)
    return Response(content=svg, media_type="image/svg+xml")


@router.delete("/{design_id}", response_model=DeleteResponse)
def delete_design(design_id: str, store: DesignStore = Depends(get_store)) -> DeleteResponse:
    try:
        store.delete(design_id)
    except DesignNotFoundError:
        raise HTTPException(status_code=404, detail="Design not found")
    return DeleteResponse(id=design_id)
