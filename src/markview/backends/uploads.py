"""Upload storage.

Uploaded files are written under generated names; the generated name is the only key that
can be used to find them again.
"""

from __future__ import annotations

import re
import uuid
from pathlib import Path

from markview.errors import DocumentNotFound
from markview.logging import get_logger
from markview.models.document import UploadedFile

logger = get_logger(__name__)

_GENERATED_NAME_RE = re.compile(r"^[0-9a-f]{32}$")


class UploadStore:
    """Directory-backed store for uploaded documents."""

    def __init__(self, upload_dir: str | Path) -> None:
        self.upload_dir = Path(upload_dir).resolve()

    def save(self, original_name: str, data: bytes) -> UploadedFile:
        """Persist ``data`` under a fresh generated name."""

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        filename = uuid.uuid4().hex
        path = self.upload_dir / filename
        path.write_bytes(data)
        logger.info("Stored upload %s as %s (%d bytes)", original_name, filename, len(data))
        return UploadedFile(filename=filename, original_name=original_name, path=str(path))

    def resolve(self, filename: str | None) -> Path:
        """Map a generated name back to its file.

        Raises:
            DocumentNotFound: If the name is empty, not a generated name, or has no file.
        """

        if not filename or not _GENERATED_NAME_RE.match(filename):
            raise DocumentNotFound(filename or "")
        path = self.upload_dir / filename
        if not path.is_file():
            raise DocumentNotFound(filename)
        return path
