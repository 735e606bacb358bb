"""
Table browsing: case-insensitive search and offset/limit paging over rows.
"""
from __future__ import annotations

from typing import Optional

from sheetdash.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from sheetdash.data.schemas import Dataset, Record


def _matches(row: Record, needle: str) -> bool:
    return any(v is not None and needle in str(v).lower() for v in row.values())


def page_rows(
    dataset: Dataset,
    search: Optional[str] = None,
    offset: int = 0,
    limit: int = DEFAULT_PAGE_SIZE,
) -> dict:
    """One page of rows, optionally filtered to those with a cell containing `search`."""
    rows = dataset.rows
    needle = (search or "").strip().lower()
    if needle:
        rows = [r for r in rows if _matches(r, needle)]

    offset = max(offset, 0)
    limit = min(max(limit, 1), MAX_PAGE_SIZE)
    return {
        "columns": list(dataset.columns),
        "total": len(rows),
        "offset": offset,
        "limit": limit,
        "rows": rows[offset:offset + limit],
    }
