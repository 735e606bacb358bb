"""
Field resolution and safe math helpers used across all analytics modules.

Uploaded rows are loosely typed and inconsistently named, so every logical
quantity (amount, date, group) is read through an ordered list of candidate
field names: the first present, non-null value the accessor accepts wins.
"""
from __future__ import annotations

import datetime as dt
import math
import numbers
import re
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd

from sheetdash.data.schemas import Record

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")


# ---------------------------------------------------------------------------
# Typed accessors
# ---------------------------------------------------------------------------

def to_number(value: Any) -> Optional[float]:
    """Numbers and numeric strings → number; anything else → None."""
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, numbers.Real):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.match(text):
            return None
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def _text_to_date(text: str) -> Optional[dt.date]:
    try:
        ts = pd.to_datetime(text.strip(), errors="coerce")
    except (ValueError, OverflowError, TypeError):
        return None
    return None if pd.isna(ts) else ts.date()


def parse_date_texts(texts: Iterable[str]) -> dict[str, Optional[dt.date]]:
    """Parse many date strings in one vectorized pandas call, keyed by the original text.

    Falls back to one conversion per distinct string when pandas rejects the
    batch as a whole (e.g. mixed timezone offsets).
    """
    distinct = list(dict.fromkeys(texts))
    if not distinct:
        return {}
    try:
        parsed = pd.to_datetime(
            pd.Series([t.strip() for t in distinct], dtype=object),
            errors="coerce",
            format="mixed",
        )
    except (ValueError, OverflowError, TypeError):
        return {t: _text_to_date(t) for t in distinct}
    return {t: (None if pd.isna(ts) else ts.date()) for t, ts in zip(distinct, parsed)}


def to_date(value: Any, parsed_texts: Optional[dict[str, Optional[dt.date]]] = None) -> Optional[dt.date]:
    """Parse a date from a string, datetime/date, or epoch milliseconds.

    `parsed_texts` is a lookup built by parse_date_texts for strings.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        if not value.strip():
            return None
        if parsed_texts is not None and value in parsed_texts:
            return parsed_texts[value]
        return _text_to_date(value)
    if isinstance(value, numbers.Real):
        try:
            ts = pd.to_datetime(value, unit="ms", errors="coerce")
        except (ValueError, OverflowError, TypeError):
            return None
        return None if pd.isna(ts) else ts.date()
    return None


def format_label(value: Any) -> str:
    """Render a scalar as a group label; 3.0 reads as "3"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _candidates(row: Record, fields: Iterable[str]):
    for name in fields:
        value = row.get(name)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        yield value


# ---------------------------------------------------------------------------
# Field resolution policy
# ---------------------------------------------------------------------------

def resolve_amount(row: Record, fields: Iterable[str], default: float = 1) -> float:
    for value in _candidates(row, fields):
        number = to_number(value)
        if number is not None:
            return number
    return default


def resolve_label(row: Record, fields: Iterable[str], default: Optional[str] = None) -> Optional[str]:
    for value in _candidates(row, fields):
        return format_label(value)
    return default


def resolve_date(
    row: Record,
    fields: Iterable[str],
    parsed_texts: Optional[dict[str, Optional[dt.date]]] = None,
) -> Optional[dt.date]:
    for value in _candidates(row, fields):
        parsed = to_date(value, parsed_texts)
        if parsed is not None:
            return parsed
    return None


def bucket_label(day: dt.date) -> str:
    """Day label in M/D/YYYY form, e.g. 1/1/2024."""
    return f"{day.month}/{day.day}/{day.year}"


def truncate_label(label: str, limit: int) -> str:
    """Cut labels longer than limit and mark them with an ellipsis."""
    if len(label) > limit:
        return label[:limit] + "..."
    return label


# ---------------------------------------------------------------------------
# Safe math
# ---------------------------------------------------------------------------

def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide safely, returning default if denominator is zero or NaN."""
    if denominator == 0 or pd.isna(denominator):
        return default
    result = numerator / denominator
    return default if pd.isna(result) else result


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas types to native Python for JSON serialization."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, (float, np.floating)):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    if isinstance(obj, (dt.datetime, dt.date)):
        return obj.isoformat()
    return obj
