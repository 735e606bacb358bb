"""
Error kinds surfaced at the request boundary as {"error": ..., "details": ...}.
"""
from __future__ import annotations

from typing import Optional


class SheetdashError(Exception):
    """Base error carrying an HTTP status and a human-readable message."""
    status_code = 500
    error = "Internal error"

    def __init__(self, error: Optional[str] = None, details: Optional[str] = None) -> None:
        self.error = error or self.error
        self.details = details
        super().__init__(self.error if details is None else f"{self.error}: {details}")

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class NoFileProvided(SheetdashError):
    status_code = 400
    error = "No file uploaded"


class UnsupportedFileType(SheetdashError):
    status_code = 400
    error = "Unsupported file type"


class UnsupportedFormat(SheetdashError):
    """Parser was handed a file kind it does not know."""
    status_code = 400
    error = "Unsupported file format"


class EmptyOrUnparsableFile(SheetdashError):
    status_code = 400
    error = "File is empty or could not be parsed"


class FileTooLarge(SheetdashError):
    status_code = 413
    error = "File too large"


class ParseFailure(SheetdashError):
    """Bytes could not be decoded as a table (corrupt or non-tabular)."""
    status_code = 500
    error = "Failed to process file"


class DatasetNotFound(SheetdashError):
    status_code = 404
    error = "Dataset not found"


class ServiceUnavailable(SheetdashError):
    status_code = 503
    error = "Server not initialized yet"
