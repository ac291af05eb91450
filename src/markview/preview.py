"""Preview pipeline: file bytes -> rendered document -> composed page."""

from __future__ import annotations

from pathlib import Path

from markview.config import Settings
from markview.errors import DocumentNotFound, DocumentReadError
from markview.logging import get_logger, set_document
from markview.models.document import RenderedDocument
from markview.render.headings import inject_heading_ids
from markview.render.markdown import MarkdownRenderer
from markview.render.page import compose_preview_page

logger = get_logger(__name__)


def read_document(path: str | Path) -> bytes:
    """Read a whole file in one go.

    Raises:
        DocumentNotFound: If the path does not point to a file.
        DocumentReadError: On any I/O error while reading.
    """

    file_path = Path(path)
    if not str(path) or not file_path.is_file():
        raise DocumentNotFound(str(path))
    try:
        return file_path.read_bytes()
    except OSError as e:
        raise DocumentReadError(str(file_path), str(e)) from e


class DocumentPreviewer:
    """Render Markdown documents into navigable preview pages.

    Every call renders from scratch; nothing is cached between requests. The heading pass
    gets a fresh id counter per document.
    """

    def __init__(self, settings: Settings, renderer: MarkdownRenderer | None = None) -> None:
        self.settings = settings
        self.renderer = renderer or MarkdownRenderer()

    def render_text(self, text: str, *, source_name: str, source_path: str) -> RenderedDocument:
        """Render Markdown text and run the heading pass."""

        fragment = self.renderer.render(text)
        body, outline = inject_heading_ids(fragment)
        return RenderedDocument(
            source_name=source_name,
            source_path=source_path,
            body=body,
            outline=outline,
        )

    def render_bytes(self, data: bytes, *, source_name: str, source_path: str) -> RenderedDocument:
        """Decode UTF-8 bytes (invalid sequences replaced) and render them."""

        text = data.decode("utf-8", errors="replace")
        return self.render_text(text, source_name=source_name, source_path=source_path)

    def render_file(self, path: str | Path, *, source_name: str | None = None) -> RenderedDocument:
        """Read and render a file; ``source_name`` defaults to the file's basename."""

        name = source_name or Path(path).name
        set_document(name)
        data = read_document(path)
        document = self.render_bytes(data, source_name=name, source_path=str(path))
        logger.info("Rendered %s with %d headings", path, len(document.outline))
        return document

    def page(self, document: RenderedDocument) -> str:
        """Compose the full HTML page for a rendered document."""

        return compose_preview_page(document, self.settings)
