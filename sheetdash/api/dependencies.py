"""
FastAPI dependencies — DatasetStore lookup from app state, dataset fetch.
"""
from __future__ import annotations

from fastapi import Request

from sheetdash.data.schemas import Dataset
from sheetdash.data.store import DatasetStore
from sheetdash.errors import DatasetNotFound, ServiceUnavailable


def get_store(request: Request) -> DatasetStore:
    """The store built in the app lifespan."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise ServiceUnavailable()
    return store


def get_dataset(dataset_id: str, request: Request) -> Dataset:
    """Resolve a path id to a stored dataset or fail with 404."""
    dataset = get_store(request).get(dataset_id)
    if dataset is None:
        raise DatasetNotFound()
    return dataset
