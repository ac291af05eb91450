"""Pydantic models used across the project."""

from __future__ import annotations

from markview.models.document import FileEntry, RenderedDocument, UploadedFile
from markview.models.outline import Heading, Outline

__all__ = [
    "FileEntry",
    "Heading",
    "Outline",
    "RenderedDocument",
    "UploadedFile",
]
