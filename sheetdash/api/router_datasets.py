"""
Dataset endpoints: list, fetch, browse rows, delete.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from sheetdash.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from sheetdash.data.schemas import Dataset
from sheetdash.data.store import DatasetStore
from sheetdash.analytics.tables import page_rows
from sheetdash.api.dependencies import get_dataset, get_store
from sheetdash.api.response_models import (
    DatasetResponse,
    DatasetSummaryResponse,
    DeleteResponse,
    ErrorResponse,
    RowsPageResponse,
)
from sheetdash.errors import DatasetNotFound

router = APIRouter(prefix="/api", tags=["datasets"])


@router.get("/datasets", response_model=list[DatasetSummaryResponse])
def list_datasets(store: DatasetStore = Depends(get_store)):
    """All stored datasets in upload order, without row data."""
    return [summary.to_dict() for summary in store.list()]


@router.get("/datasets/{dataset_id}", response_model=DatasetResponse, responses={404: {"model": ErrorResponse}})
def read_dataset(dataset: Dataset = Depends(get_dataset)):
    return dataset.to_dict()


@router.get("/datasets/{dataset_id}/rows", response_model=RowsPageResponse, responses={404: {"model": ErrorResponse}})
def read_rows(
    dataset: Dataset = Depends(get_dataset),
    search: Optional[str] = Query(None, description="Case-insensitive substring match on any cell"),
    offset: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
):
    """One page of a dataset's rows for the table view."""
    return page_rows(dataset, search=search, offset=offset, limit=limit)


@router.delete("/datasets/{dataset_id}", response_model=DeleteResponse, responses={404: {"model": ErrorResponse}})
def delete_dataset(dataset_id: str, store: DatasetStore = Depends(get_store)):
    if not store.delete(dataset_id):
        raise DatasetNotFound()
    print(f"  Deleted dataset {dataset_id}")
    return DeleteResponse(success=True)
