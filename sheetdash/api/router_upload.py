"""
Upload endpoint: parse one spreadsheet/CSV file and register it as a dataset.
"""
from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, File, UploadFile

from sheetdash.config import MAX_UPLOAD_BYTES, MAX_UPLOAD_MB
from sheetdash.data.parser import parse
from sheetdash.data.schemas import classify_filename
from sheetdash.data.store import DatasetStore
from sheetdash.api.dependencies import get_store
from sheetdash.api.response_models import ErrorResponse, UploadResponse
from sheetdash.errors import (
    EmptyOrUnparsableFile,
    FileTooLarge,
    NoFileProvided,
    SheetdashError,
    UnsupportedFileType,
)

router = APIRouter(prefix="/api", tags=["upload"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def upload_dataset(
    file: UploadFile | None = File(None),
    store: DatasetStore = Depends(get_store),
):
    """Upload a single .xlsx, .xls or .csv file (form field `file`).

    Plain `def` so parsing runs in the threadpool, off the event loop.
    """
    if file is None or not file.filename:
        raise NoFileProvided()

    filename = file.filename
    kind = classify_filename(filename)
    if kind is None:
        raise UnsupportedFileType()

    # The body is already spooled; the Content-Length check in main.py rejects
    # declared oversize uploads before that. Read one byte past the cap here.
    content = file.file.read(MAX_UPLOAD_BYTES + 1)
    if len(content) > MAX_UPLOAD_BYTES:
        raise FileTooLarge(details=f"Maximum upload size is {MAX_UPLOAD_MB} MB")

    try:
        table = parse(content, kind)
    except SheetdashError as exc:
        print(f"  Upload error: {filename}: {exc}")
        raise

    if table.is_empty:
        raise EmptyOrUnparsableFile()

    dataset = store.create(
        name=filename,
        uploaded_at=datetime.now(timezone.utc),
        row_count=len(table.rows),
        column_count=len(table.columns),
        columns=table.columns,
        rows=table.rows,
    )
    print(f"  Uploaded {filename}: {dataset.row_count:,} rows, {dataset.column_count} columns → {dataset.id}")

    return UploadResponse(
        id=dataset.id,
        name=dataset.name,
        rowCount=dataset.row_count,
        columnCount=dataset.column_count,
    )
