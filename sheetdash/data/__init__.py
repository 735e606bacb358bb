"""Tabular parsing, dataset schemas, and the in-memory dataset store."""
from .schemas import Dataset, DatasetSummary, FileKind, ParsedTable, classify_filename
from .parser import parse
from .store import DatasetStore
