"""FastAPI dependency injection."""

from __future__ import annotations

from app.config import settings
from app.store.designs import DesignStore, get_design_store


def get_settings():
    return settings


def get_store() -> DesignStore:
    return get_design_store()
