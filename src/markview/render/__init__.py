"""Markdown-to-navigable-document pipeline."""

from __future__ import annotations

from markview.render.headings import HeadingScanner, inject_heading_ids
from markview.render.markdown import MarkdownRenderer
from markview.render.navigation import active_heading_id, render_sidebar

__all__ = [
    "HeadingScanner",
    "MarkdownRenderer",
    "active_heading_id",
    "inject_heading_ids",
    "render_sidebar",
]
