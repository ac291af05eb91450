"""Errors raised by the preview pipeline.

Every error here is caught at the request boundary and turned into a response; none of them
should ever escape to the server process.
"""

from __future__ import annotations


class PreviewError(RuntimeError):
    """Base class for preview failures."""

    status_code = 500


class DocumentNotFound(PreviewError):
    """The requested file or upload reference does not exist."""

    status_code = 404

    def __init__(self, reference: str) -> None:
        super().__init__(f"File does not exist: {reference}")
        self.reference = reference


class DocumentReadError(PreviewError):
    """Reading the file bytes failed (permissions, disk errors, bad encoding)."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read file: {reason}")
        self.path = path
        self.reason = reason
