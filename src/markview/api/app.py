"""FastAPI app: index page, scan/upload API and document previews."""

from __future__ import annotations

import uuid
from pathlib import Path
from typing import Any

from fastapi import FastAPI, File, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

from markview import __version__
from markview.backends.filesystem import MarkdownScanner
from markview.backends.uploads import UploadStore
from markview.config import Settings, load_settings
from markview.errors import PreviewError
from markview.logging import configure_logging, get_logger, log_exception, request_context
from markview.preview import DocumentPreviewer
from markview.render.page import compose_error_page, compose_index_page

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


class ScanRequest(BaseModel):
    """Scan request."""

    path: str | None = None


def _failure(error: str) -> dict[str, Any]:
    return {"success": False, "error": error}


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg", "invalid")))
    return "Invalid request: " + ("; ".join(parts) or "malformed input")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI app."""

    settings = settings or load_settings()
    configure_logging(settings.log_level)
    logger = get_logger(__name__)

    scanner = MarkdownScanner(settings.markdown_extensions, settings.skip_dirs)
    uploads = UploadStore(settings.upload_dir)
    previewer = DocumentPreviewer(settings)

    app = FastAPI(title="markview", version=__version__)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next: Any) -> Any:
        with request_context(request_id=uuid.uuid4().hex[:8]):
            response = await call_next(request)
            logger.debug("%s %s -> %d", request.method, request.url.path, response.status_code)
            return response

    @app.exception_handler(PreviewError)
    async def preview_error_handler(request: Request, exc: PreviewError) -> Any:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        if request.url.path.startswith("/api/"):
            return JSONResponse(_failure(str(exc)), status_code=exc.status_code)
        return HTMLResponse(compose_error_page(str(exc), exc.status_code), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> Any:
        message = _validation_message(exc)
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        if request.url.path.startswith("/api/"):
            return JSONResponse(_failure(message), status_code=422)
        return HTMLResponse(compose_error_page(message, 422), status_code=422)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> Any:
        log_exception(logger, "Unhandled error", path=request.url.path)
        if request.url.path.startswith("/api/"):
            return JSONResponse(_failure(str(exc)), status_code=500)
        return HTMLResponse(compose_error_page(str(exc), 500), status_code=500)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return compose_index_page(settings)

    @app.post("/api/scan")
    def scan(req: ScanRequest) -> dict[str, Any]:
        if not req.path:
            return _failure("Please provide a path to scan")
        if not Path(req.path).exists():
            return _failure("The specified path does not exist")
        try:
            files = scanner.scan(req.path)
        except OSError as e:
            log_exception(logger, "Scan failed", path=req.path)
            return _failure(str(e))
        return {
            "success": True,
            "files": [f.model_dump(mode="json", by_alias=True) for f in files],
        }

    @app.post("/api/upload")
    def upload(files: list[UploadFile] = File(...)) -> dict[str, Any]:
        try:
            stored = [uploads.save(f.filename or "upload", f.file.read()) for f in files]
        except OSError as e:
            log_exception(logger, "Upload failed", files=len(files))
            return _failure(str(e))
        return {
            "success": True,
            "files": [f.model_dump(mode="json", by_alias=True) for f in stored],
        }

    @app.get("/preview", response_class=HTMLResponse)
    def preview(file: str = "") -> str:
        document = previewer.render_file(file)
        return previewer.page(document)

    @app.get("/preview-upload", response_class=HTMLResponse)
    def preview_upload(file: str = "") -> str:
        path = uploads.resolve(file)
        document = previewer.render_file(path, source_name=file)
        return previewer.page(document)

    @app.get("/api/document")
    def document(file: str = "") -> dict[str, Any]:
        rendered = previewer.render_file(file)
        return {"success": True, "document": rendered.model_dump(mode="json")}

    @app.get("/api/document-upload")
    def document_upload(file: str = "") -> dict[str, Any]:
        path = uploads.resolve(file)
        rendered = previewer.render_file(path, source_name=file)
        return {"success": True, "document": rendered.model_dump(mode="json")}

    return app
