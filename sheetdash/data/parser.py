"""
Tabular parsing: spreadsheet or CSV bytes → ordered columns + row records.
"""
from __future__ import annotations

import datetime as dt
import io
import math
import re

import numpy as np
import pandas as pd

from sheetdash.data.schemas import FileKind, ParsedTable, Record
from sheetdash.errors import ParseFailure, UnsupportedFormat


# ---------------------------------------------------------------------------
# Cell coercion
# ---------------------------------------------------------------------------

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?$")
_BOOLS = {"true": True, "false": False}


def coerce_text(value: str):
    """Coerce one delimited-text cell: blank → None, numbers, booleans, else str."""
    if not isinstance(value, str):
        # short rows are padded with NaN
        return coerce_cell(value)
    text = value.strip()
    if not text:
        return None
    lowered = text.lower()
    if lowered in _BOOLS:
        return _BOOLS[lowered]
    if _INT_RE.match(text):
        return int(text)
    # Plain decimal and exponent forms only; "1_000", "nan", "inf" stay text
    if not _FLOAT_RE.match(text):
        return value
    number = float(text)
    if not math.isfinite(number):
        return value
    return number


def _format_datetime(value: dt.datetime) -> str:
    if value.hour == value.minute == value.second == value.microsecond == 0:
        return value.date().isoformat()
    return value.isoformat()


def coerce_cell(value):
    """Coerce one spreadsheet cell, keeping the type the workbook stored."""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        value = float(value)
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, dt.datetime):
        return _format_datetime(value)
    if isinstance(value, (dt.date, dt.time)):
        return value.isoformat()
    return str(value)


# ---------------------------------------------------------------------------
# Readers
# ---------------------------------------------------------------------------

def _read_csv(buffer: bytes, **kwargs) -> pd.DataFrame:
    return pd.read_csv(
        io.BytesIO(buffer),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        **kwargs,
    )


def _read_delimited(buffer: bytes) -> pd.DataFrame:
    try:
        try:
            return _read_csv(buffer)
        except UnicodeDecodeError:
            # Not UTF-8: Excel on Windows exports cp1252
            return _read_csv(buffer, encoding="cp1252", encoding_errors="replace")
    except pd.errors.EmptyDataError:
        return pd.DataFrame()


def _read_spreadsheet(buffer: bytes) -> pd.DataFrame:
    # First sheet only; header row supplies field names
    return pd.read_excel(io.BytesIO(buffer), sheet_name=0, header=0, dtype=object)


def _to_records(frame: pd.DataFrame, coerce) -> list[Record]:
    columns = [str(c) for c in frame.columns]
    records: list[Record] = []
    for values in frame.itertuples(index=False, name=None):
        record = {col: coerce(v) for col, v in zip(columns, values)}
        # Fully blank rows carry no data
        if any(v is not None for v in record.values()):
            records.append(record)
    return records


def parse(buffer: bytes, kind: FileKind) -> ParsedTable:
    """Parse raw file bytes into columns + rows.

    Returns an empty table when the file has a header but no data rows.
    Raises UnsupportedFormat for an unknown kind and ParseFailure when the
    bytes cannot be read as a table.
    """
    if kind == FileKind.DELIMITED:
        reader, coerce = _read_delimited, coerce_text
    elif kind == FileKind.SPREADSHEET:
        reader, coerce = _read_spreadsheet, coerce_cell
    else:
        raise UnsupportedFormat(details=f"Unknown file kind: {kind!r}")

    try:
        frame = reader(buffer)
        records = _to_records(frame, coerce)
    except Exception as exc:
        raise ParseFailure(details=str(exc) or exc.__class__.__name__) from exc

    if not records:
        return ParsedTable()

    # Columns come from the first row's keys
    return ParsedTable(columns=list(records[0].keys()), rows=records)
