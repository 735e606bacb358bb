"""
DatasetStore — In-memory keyed collection of parsed datasets.

Created once at startup, cleared at shutdown, shared by every request.
Each call holds the lock for its own map operation; nothing spans calls.
"""
from __future__ import annotations

import datetime as dt
import threading
import uuid
from typing import Optional

from sheetdash.data.schemas import Dataset, DatasetSummary, Record


class DatasetStore:
    """Parsed datasets keyed by a random 128-bit id, in insertion order."""

    def __init__(self) -> None:
        self._datasets: dict[str, Dataset] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(
        self,
        name: str,
        uploaded_at: dt.datetime,
        row_count: int,
        column_count: int,
        columns: list[str],
        rows: list[Record],
    ) -> Dataset:
        """Store a new dataset under a fresh id and return it."""
        with self._lock:
            dataset_id = uuid.uuid4().hex
            while dataset_id in self._datasets:
                dataset_id = uuid.uuid4().hex
            dataset = Dataset(
                id=dataset_id,
                name=name,
                uploaded_at=uploaded_at,
                row_count=row_count,
                column_count=column_count,
                columns=list(columns),
                rows=rows,
            )
            self._datasets[dataset_id] = dataset
        return dataset

    def delete(self, dataset_id: str) -> bool:
        """Remove a dataset. Returns False if it was not there."""
        with self._lock:
            return self._datasets.pop(dataset_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._datasets.clear()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, dataset_id: str) -> Optional[Dataset]:
        with self._lock:
            return self._datasets.get(dataset_id)

    def list(self) -> list[DatasetSummary]:
        """Summaries in insertion order (not sorted by upload time)."""
        with self._lock:
            datasets = list(self._datasets.values())
        return [d.summary() for d in datasets]

    def __len__(self) -> int:
        with self._lock:
            return len(self._datasets)
