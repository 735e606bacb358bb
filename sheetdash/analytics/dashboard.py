"""
Dashboard analytics — compute functions for the dashboard and analytics pages.

Each view returns plain dicts of {name, value} chart points, ready to be
rendered by the front end.
"""
from __future__ import annotations

from sheetdash import config
from sheetdash.data.schemas import Dataset
from sheetdash.analytics.aggregations import (
    count_by_group,
    first_groups,
    row_series,
    sum_by_group,
    sum_by_time_bucket,
    top_group_by_count,
    top_groups,
    total_and_average,
)
from sheetdash.analytics.common import sanitize_for_json


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _points(pairs) -> list[dict]:
    return [{"name": name, "value": value} for name, value in pairs]


def _territory_sums(rows: list) -> dict[str, float]:
    return sum_by_group(rows, config.AMOUNT_FIELDS, config.TERRITORY_FIELDS, default_group=config.UNKNOWN_GROUP)


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

def dashboard_metrics(rows: list) -> dict:
    """Headline KPIs: total sales, order count, average order value, top territory."""
    total, count, average = total_and_average(rows, config.TOTAL_FIELDS)
    return {
        "totalSales": total,
        "orderCount": count,
        "avgOrderValue": average,
        "topTerritory": top_group_by_count(rows, config.TERRITORY_FIELDS),
    }


def dashboard_view(dataset: Dataset) -> dict:
    """Metric cards plus the sales trend, territory bar and status pie charts."""
    rows = dataset.rows
    territory = _territory_sums(rows)
    status = count_by_group(
        rows,
        config.STATUS_FIELDS,
        default_group=config.DASHBOARD_STATUS_DEFAULT,
        limit=config.DASHBOARD_STATUS_LIMIT,
    )
    return sanitize_for_json({
        "datasetId": dataset.id,
        "name": dataset.name,
        "metrics": dashboard_metrics(rows),
        "charts": {
            "lineData": _points(row_series(
                rows, config.TREND_LABEL_FIELDS, config.AMOUNT_FIELDS, limit=config.DASHBOARD_TREND_ROWS,
            )),
            "barData": _points(first_groups(territory, config.DASHBOARD_TERRITORY_LIMIT, config.SHORT_LABEL)),
            "pieData": _points(status.items()),
        },
    })


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------

def analytics_view(dataset: Dataset) -> dict:
    """Trend over time, top performers, category distribution and territory ranking."""
    rows = dataset.rows
    territory = _territory_sums(rows)
    categories = count_by_group(
        rows,
        config.CATEGORY_FIELDS,
        default_group=config.ANALYTICS_CATEGORY_DEFAULT,
        limit=config.ANALYTICS_CATEGORY_LIMIT,
    )
    return sanitize_for_json({
        "datasetId": dataset.id,
        "name": dataset.name,
        "charts": {
            "lineData": _points(sum_by_time_bucket(
                rows, config.AMOUNT_FIELDS, config.DATE_FIELDS, limit=config.ANALYTICS_BUCKET_LIMIT,
            )),
            "barData": _points(first_groups(
                territory, config.ANALYTICS_PERFORMER_LIMIT, config.ANALYTICS_PERFORMER_LABEL,
            )),
            "territoryData": _points(top_groups(territory, config.TOP_GROUP_LIMIT, config.SHORT_LABEL)),
            "pieData": _points(categories.items()),
        },
    })
