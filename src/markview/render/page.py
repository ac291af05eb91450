"""Page composition."""

from __future__ import annotations

from markupsafe import Markup

from markview import __version__
from markview.config import Settings
from markview.models.document import RenderedDocument
from markview.render.navigation import render_sidebar, scroll_sync_script
from markview.render.templating import get_environment


def compose_preview_page(document: RenderedDocument, settings: Settings) -> str:
    """Build the self-contained preview page for a rendered document.

    The page embeds the title and source path, the outline sidebar, the body with heading ids,
    the scroll-sync script inline, and a Mermaid initialization that runs after load.
    """

    template = get_environment().get_template("preview.html")
    return template.render(
        title=document.source_name,
        source_path=document.source_path,
        sidebar=render_sidebar(document.outline),
        body=Markup(document.body),
        scroll_sync=scroll_sync_script(settings.scroll_lookahead),
        mermaid_script_url=settings.mermaid_script_url,
        mermaid_theme=settings.mermaid_theme,
    )


def compose_index_page(settings: Settings) -> str:
    """Build the landing page with the scan and upload forms."""

    template = get_environment().get_template("index.html")
    return template.render(version=__version__, accept=",".join(settings.markdown_extensions))


def compose_error_page(message: str, status_code: int) -> str:
    """Build the plain failure page returned by preview endpoints."""

    template = get_environment().get_template("error.html")
    return template.render(message=message, status_code=status_code)
