"""
Meta endpoints: health.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from sheetdash.data.store import DatasetStore
from sheetdash.api.dependencies import get_store
from sheetdash.api.response_models import HealthResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DatasetStore = Depends(get_store)):
    return HealthResponse(status="ok", datasets=len(store))
