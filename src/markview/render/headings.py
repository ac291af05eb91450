"""Heading extraction and anchor-id injection.

The scan runs over the rendered HTML fragment with a regular expression, the same way the
fragment is produced: one left-to-right pass, every ``<h1>``..``<h6>`` element gets an ``id``
and an outline entry. Mermaid containers are matched first and passed through untouched so
diagram sources are never rewritten.

Limitations:
    * A heading without its closing tag is skipped (and left out of the outline).
    * Heading text is the tag-stripped inner markup; the body keeps the original markup.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from markview.logging import get_logger
from markview.models.outline import Heading, Outline
from markview.utils.ids import HEADING_ID_PREFIX, format_heading_id, heading_id_generator

logger = get_logger(__name__)


_BLOCK_RE = re.compile(
    r"(?P<diagram><div\s+class=\"mermaid\"[^>]*>.*?</div>(?=\n|\Z))"
    r"|<h(?P<level>[1-6])(?P<attrs>(?:\s(?:\"[^\"]*\"|'[^']*'|[^>\"'])*)?)>"
    r"(?P<inner>(?:(?!<h[1-6][\s>]).)*?)"
    r"</h(?P=level)\s*>",
    re.DOTALL | re.IGNORECASE,
)

_ATTR_RE = re.compile(
    r"""\s+(?P<name>[^\s=>"'/]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>"']+))?"""
)


def heading_text(inner_html: str) -> str:
    """Return display text for a heading: nested tags stripped, entities decoded, trimmed."""

    if not inner_html:
        return ""
    soup = BeautifulSoup(f"<span>{inner_html}</span>", "lxml")
    return " ".join(soup.get_text().split())


def _with_id(attrs: str, heading_id: str) -> str:
    # Any id already present is dropped so the injected one is the only id.
    kept = "".join(
        m.group(0) for m in _ATTR_RE.finditer(attrs) if m.group("name").lower() != "id"
    )
    return f'{kept} id="{heading_id}"'


class HeadingScanner:
    """Per-document heading pass.

    The id counter lives on the instance, so each document render gets its own
    ``heading-0``, ``heading-1``, ... sequence and concurrent renders never share state.
    Use one scanner per document.
    """

    def __init__(self, prefix: str = HEADING_ID_PREFIX) -> None:
        self.prefix = prefix
        self._counter = heading_id_generator()
        self.headings: list[Heading] = []

    def _replace(self, match: re.Match[str]) -> str:
        if match.group("diagram") is not None:
            return match.group(0)

        level = int(match.group("level"))
        inner = match.group("inner")
        heading_id = format_heading_id(next(self._counter), self.prefix)
        self.headings.append(Heading(level=level, text=heading_text(inner), id=heading_id))

        attrs = _with_id(match.group("attrs") or "", heading_id)
        return f"<h{level}{attrs}>{inner}</h{level}>"

    def scan(self, html: str) -> tuple[str, Outline]:
        """Inject ids into every heading of ``html`` and return the new fragment and outline."""

        body = _BLOCK_RE.sub(self._replace, html)
        logger.debug("Heading pass found %d headings", len(self.headings))
        return body, Outline(list(self.headings))


def inject_heading_ids(html: str, *, prefix: str = HEADING_ID_PREFIX) -> tuple[str, Outline]:
    """Run a fresh heading pass over ``html``.

    Args:
        html: Rendered HTML fragment.
        prefix: Anchor id prefix.

    Returns:
        The fragment with ``id`` attributes on all headings, and the outline in document order.
    """

    return HeadingScanner(prefix=prefix).scan(html)
