"""Filesystem collaborators: directory scanning and upload storage."""

from __future__ import annotations

from markview.backends.filesystem import MarkdownScanner
from markview.backends.uploads import UploadStore

__all__ = ["MarkdownScanner", "UploadStore"]
