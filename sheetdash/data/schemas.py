"""
Dataset schemas: file kinds, parsed tables, stored datasets and their summaries.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

# A single cell after parsing: str, int, float, bool or None
Record = dict[str, Any]


class FileKind(str, Enum):
    SPREADSHEET = "spreadsheet"
    DELIMITED = "delimited"


# Exact, case-sensitive suffix match on the uploaded file name
FILE_SUFFIXES = {
    ".xlsx": FileKind.SPREADSHEET,
    ".xls": FileKind.SPREADSHEET,
    ".csv": FileKind.DELIMITED,
}


def classify_filename(filename: str) -> Optional[FileKind]:
    """Return the FileKind for a file name, or None if the suffix is not accepted."""
    for suffix, kind in FILE_SUFFIXES.items():
        if filename.endswith(suffix):
            return kind
    return None


@dataclass
class ParsedTable:
    """Output of the tabular parser."""
    columns: list[str] = field(default_factory=list)
    rows: list[Record] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True)
class DatasetSummary:
    """Listing projection of a Dataset (no columns, no rows)."""
    id: str
    name: str
    uploaded_at: dt.datetime
    row_count: int
    column_count: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "uploadedAt": self.uploaded_at.isoformat(),
            "rowCount": self.row_count,
            "columnCount": self.column_count,
        }


@dataclass(frozen=True)
class Dataset:
    """One uploaded file, parsed and held in memory."""
    id: str
    name: str
    uploaded_at: dt.datetime
    row_count: int
    column_count: int
    columns: list[str]
    rows: list[Record]

    def summary(self) -> DatasetSummary:
        return DatasetSummary(
            id=self.id,
            name=self.name,
            uploaded_at=self.uploaded_at,
            row_count=self.row_count,
            column_count=self.column_count,
        )

    def to_dict(self) -> dict:
        payload = self.summary().to_dict()
        payload["columns"] = list(self.columns)
        payload["rows"] = self.rows
        return payload
