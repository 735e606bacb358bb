"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    datasets: int


class UploadResponse(BaseModel):
    id: str
    name: str
    rowCount: int
    columnCount: int


class DatasetSummaryResponse(BaseModel):
    id: str
    name: str
    uploadedAt: str
    rowCount: int
    columnCount: int


class DatasetResponse(DatasetSummaryResponse):
    columns: list[str]
    rows: list[dict[str, Any]]


class DeleteResponse(BaseModel):
    success: bool


class RowsPageResponse(BaseModel):
    columns: list[str]
    total: int
    offset: int
    limit: int
    rows: list[dict[str, Any]]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
