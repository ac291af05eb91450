"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "markview_request_id", default="-"
)
_document_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "markview_document", default="-"
)


class _ContextFilter(logging.Filter):
    """Inject request context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.request_id = _request_id_var.get()  # type: ignore[attr-defined]
        record.document = _document_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def request_context(*, request_id: str, document: str | None = None) -> Any:
    """Temporarily bind request context for structured logging.

    Args:
        request_id: Request identifier.
        document: Optional name of the document being rendered.
    """

    token_request = _request_id_var.set(request_id)
    token_document = _document_var.set(document or _document_var.get())
    try:
        yield
    finally:
        _request_id_var.reset(token_request)
        _document_var.reset(token_document)


def set_document(document: str) -> None:
    """Update current document in context."""

    _document_var.set(document)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, show_time=True, show_level=True
    )
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s req=%(request_id)s doc=%(document)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log the active exception followed by ``key=value`` context, keys sorted."""

    details = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
    logger.exception("%s | %s", msg, details)
