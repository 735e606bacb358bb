"""
Dashboard endpoints — metric cards and chart data for one dataset.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from sheetdash.data.schemas import Dataset
from sheetdash.api.dependencies import get_dataset
from sheetdash.api.response_models import ErrorResponse
from sheetdash.analytics.dashboard import analytics_view, dashboard_view

router = APIRouter(prefix="/api/datasets", tags=["dashboard"], responses={404: {"model": ErrorResponse}})


@router.get("/{dataset_id}/dashboard")
def dashboard(dataset: Dataset = Depends(get_dataset)):
    """Total sales, order count, average order value, top territory, and overview charts."""
    return JSONResponse(content=dashboard_view(dataset))


@router.get("/{dataset_id}/analytics")
def analytics(dataset: Dataset = Depends(get_dataset)):
    """Trend over time, top performers, category distribution, territory ranking."""
    return JSONResponse(content=analytics_view(dataset))
