"""
Aggregation engine — chart-ready sums, counts and rankings over dataset rows.

Every function is pure and total: rows missing a field fall through to the
stated default rather than failing. Caps take the first N groups in the order
rows first produce them, not by time or value (except top_groups).
"""
from __future__ import annotations

import numbers
from typing import Iterable, Optional, Sequence

import numpy as np

from sheetdash.config import ANALYTICS_BUCKET_LIMIT, NO_GROUP, SHORT_LABEL, TOP_GROUP_LIMIT, UNKNOWN_GROUP
from sheetdash.data.schemas import Record
from sheetdash.analytics.common import (
    bucket_label,
    parse_date_texts,
    resolve_amount,
    resolve_date,
    resolve_label,
    safe_divide,
    truncate_label,
)


# ---------------------------------------------------------------------------
# Time buckets
# ---------------------------------------------------------------------------

def sum_by_time_bucket(
    rows: Iterable[Record],
    amount_fields: Sequence[str],
    date_fields: Sequence[str],
    limit: int = ANALYTICS_BUCKET_LIMIT,
) -> list[tuple[str, float]]:
    """Sum amounts per calendar day.

    Rows without a usable date are skipped. Only the first `limit` buckets
    encountered in row order are returned.
    """
    rows = list(rows)
    # One vectorized conversion covers every date string in the rows
    parsed_texts = parse_date_texts(
        value for row in rows for value in (row.get(name) for name in date_fields)
        if isinstance(value, str) and value.strip()
    )
    buckets: dict[str, float] = {}
    for row in rows:
        day = resolve_date(row, date_fields, parsed_texts)
        if day is None:
            continue
        key = bucket_label(day)
        buckets[key] = buckets.get(key, 0) + resolve_amount(row, amount_fields, default=1)
    return list(buckets.items())[:limit]


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------

def sum_by_group(
    rows: Iterable[Record],
    amount_fields: Sequence[str],
    group_fields: Sequence[str],
    default_group: str = UNKNOWN_GROUP,
    amount_default: float = 1,
) -> dict[str, float]:
    """Group → summed amount, in first-encountered order."""
    sums: dict[str, float] = {}
    for row in rows:
        group = resolve_label(row, group_fields, default=default_group)
        sums[group] = sums.get(group, 0) + resolve_amount(row, amount_fields, default=amount_default)
    return sums


def first_groups(sums: dict[str, float], limit: int, label_limit: int) -> list[tuple[str, float]]:
    """First `limit` groups as encountered, labels truncated."""
    return [(truncate_label(name, label_limit), value) for name, value in list(sums.items())[:limit]]


def top_groups(
    sums: dict[str, float],
    limit: int = TOP_GROUP_LIMIT,
    label_limit: int = SHORT_LABEL,
) -> list[tuple[str, float]]:
    """Largest `limit` groups by value, labels truncated. Ties keep encounter order."""
    ranked = sorted(sums.items(), key=lambda kv: kv[1], reverse=True)[:limit]
    return [(truncate_label(name, label_limit), value) for name, value in ranked]


def count_by_group(
    rows: Iterable[Record],
    group_fields: Sequence[str],
    default_group: Optional[str],
    limit: Optional[int] = None,
) -> dict[str, int]:
    """Group → row count for the first `limit` groups encountered."""
    counts: dict[str, int] = {}
    for row in rows:
        group = resolve_label(row, group_fields, default=default_group)
        counts[group] = counts.get(group, 0) + 1
    if limit is None:
        return counts
    return dict(list(counts.items())[:limit])


def top_group_by_count(rows: Iterable[Record], group_fields: Sequence[str]) -> str:
    """Most frequent group label, or "N/A" when no row names a group.

    Rows with none of the fields are ignored rather than defaulted.
    """
    counts = count_by_group(rows, group_fields, default_group=None)
    counts.pop(None, None)
    if not counts:
        return NO_GROUP
    # sorted() is stable, so ties go to the group seen first
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[0][0]


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------

def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def total_and_average(rows: Sequence[Record], amount_fields: Sequence[str]) -> tuple[float, int, float]:
    """(total, count, average) where total adds every numeric candidate field per row.

    Unlike the single-value resolution used elsewhere, a row with both
    TotalDue and SubTotal contributes both.
    """
    total = 0
    for row in rows:
        for name in amount_fields:
            value = row.get(name)
            if _is_number(value):
                total += value
    count = len(rows)
    return total, count, safe_divide(total, count)


# ---------------------------------------------------------------------------
# Row series
# ---------------------------------------------------------------------------

def row_series(
    rows: Sequence[Record],
    label_fields: Sequence[str],
    amount_fields: Sequence[str],
    limit: int = 10,
) -> list[tuple[str, float]]:
    """First `limit` rows as (label, amount); unnamed rows read "Item N"."""
    series = []
    for index, row in enumerate(rows[:limit]):
        label = resolve_label(row, label_fields, default=f"Item {index + 1}")
        series.append((label, resolve_amount(row, amount_fields, default=0)))
    return series
