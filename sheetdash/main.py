"""
Sheetdash — FastAPI app factory with an in-memory dataset store.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sheetdash import config
from sheetdash.data.store import DatasetStore
from sheetdash.errors import FileTooLarge, SheetdashError
from sheetdash.api.router_meta import router as meta_router
from sheetdash.api.router_upload import router as upload_router
from sheetdash.api.router_datasets import router as datasets_router
from sheetdash.api.router_dashboard import router as dashboard_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the dataset store at startup, drop it at shutdown."""
    store = DatasetStore()
    app.state.store = store
    print(f"\nSheetdash ready — in-memory store, uploads up to {config.MAX_UPLOAD_MB} MB\n")
    yield
    print(f"Sheetdash shutting down — discarding {len(store)} datasets")
    store.clear()
    app.state.store = None


async def sheetdash_error_handler(request: Request, exc: SheetdashError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def limit_upload_size(request: Request, call_next):
    """Reject uploads whose declared Content-Length is over the cap before the body is read.

    Chunked requests carry no length; the handler re-checks the file size.
    """
    if request.method == "POST" and request.url.path == "/api/upload":
        length = request.headers.get("content-length", "")
        if length.isdigit() and int(length) > config.MAX_UPLOAD_BYTES + config.UPLOAD_OVERHEAD_BYTES:
            exc = FileTooLarge(details=f"Maximum upload size is {config.MAX_UPLOAD_MB} MB")
            return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
    return await call_next(request)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Sheetdash API",
        description="Spreadsheet/CSV uploads, in-memory datasets, chart-ready aggregations",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.middleware("http")(limit_upload_size)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(SheetdashError, sheetdash_error_handler)

    app.include_router(meta_router)
    app.include_router(upload_router)
    app.include_router(datasets_router)
    app.include_router(dashboard_router)

    return app


app = create_app()
