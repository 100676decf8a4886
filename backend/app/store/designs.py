"""Design Store: JSON-file record store + uploaded SVG files.

Each design is one ``<id>.json`` file under ``data_dir`` holding the
DesignRecord; the uploaded SVG lives under ``upload_dir`` as ``<id>.svg``.
Ids are opaque uuid4 hex strings.
"""

from __future__ import annotations

import logging
import re
import threading
import uuid
from pathlib import Path

from pydantic import ValidationError

from app.models.design import DesignRecord

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"^[0-9a-f]{32}$")


class DesignNotFoundError(KeyError):
    """No record exists for the given id."""


class DesignStore:
    """File-backed store for design records."""

    def __init__(self, data_dir: Path, upload_dir: Path) -> None:
        self.data_dir = Path(data_dir)
        self.upload_dir = Path(upload_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _record_file(self, design_id: str) -> Path:
        if not _ID_RE.match(design_id):
            raise DesignNotFoundError(design_id)
        return self.data_dir / f"{design_id}.json"

    def create(self, filename: str, content: bytes) -> DesignRecord:
        """Store the uploaded file and a PENDING record for it."""
        design_id = uuid.uuid4().hex
        stored_name = f"{design_id}.svg"
        (self.upload_dir / stored_name).write_bytes(content)

        record = DesignRecord(id=design_id, filename=filename, file_path=stored_name)
        self.save(record)
        logger.info("Created design %s for %s (%d bytes)", design_id, filename, len(content))
        return record

    def save(self, record: DesignRecord) -> None:
        path = self._record_file(record.id)
        with self._lock:
            tmp = path.with_suffix(".tmp")
            tmp.write_text(record.model_dump_json(indent=2), encoding="utf-8")
            tmp.replace(path)

    def get(self, design_id: str) -> DesignRecord:
        path = self._record_file(design_id)
        if not path.exists():
            raise DesignNotFoundError(design_id)
        return DesignRecord.model_validate_json(path.read_text(encoding="utf-8"))

    def all(self) -> list[DesignRecord]:
        """All records, newest first."""
        records: list[DesignRecord] = []
        for path in self.data_dir.glob("*.json"):
            try:
                records.append(DesignRecord.model_validate_json(path.read_text(encoding="utf-8")))
            except (OSError, ValidationError) as exc:
                logger.warning("Skipping unreadable design record %s: %s", path.name, exc)
        records.sort(key=lambda r: r.created_at, reverse=True)
        return records

    def count(self) -> int:
        return sum(1 for _ in self.data_dir.glob("*.json"))

    def upload_path(self, record: DesignRecord) -> Path:
        return self.upload_dir / record.file_path

    def delete(self, design_id: str) -> DesignRecord:
        """Remove the record and its uploaded file. Returns the removed record."""
        record = self.get(design_id)
        with self._lock:
            self._record_file(design_id).unlink(missing_ok=True)
        if record.file_path:
            try:
                self.upload_path(record).unlink()
            except FileNotFoundError:
                logger.warning("Uploaded file for design %s already gone", design_id)
        logger.info("Deleted design %s", design_id)
        return record


# Singleton
_store: DesignStore | None = None


def get_design_store() -> DesignStore:
    """Get or create the global DesignStore singleton."""
    global _store
    if _store is None:
        from app.config import settings

        _store = DesignStore(Path(settings.data_dir), Path(settings.upload_dir))
    return _store
