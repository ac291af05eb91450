"""Markdown rendering with Mermaid passthrough."""

from __future__ import annotations

from typing import Any

from markdown_it import MarkdownIt

DIAGRAM_LANGUAGE = "mermaid"


class MarkdownRenderer:
    """Render Markdown text to an HTML fragment.

    Fenced blocks whose info string starts with ``mermaid`` are emitted as
    ``<div class="mermaid">...</div>`` with the block source left as-is, so the
    Mermaid engine can pick them up in the browser. Everything else goes through
    the default markdown-it renderer (GFM tables, strikethrough, hard breaks).
    """

    def __init__(self) -> None:
        self._md = MarkdownIt(
            "commonmark",
            {"html": True, "breaks": True, "linkify": False},
        ).enable("table").enable("strikethrough")

        default_fence = self._md.renderer.rules["fence"]

        def custom_fence(tokens: Any, idx: int, options: Any, env: Any) -> str:
            token = tokens[idx]
            parts = token.info.split(maxsplit=1)
            info = parts[0].lower() if parts else ""
            if info == DIAGRAM_LANGUAGE:
                source = token.content.rstrip("\n")
                return f'<div class="mermaid">{source}</div>\n'
            return default_fence(tokens, idx, options, env)

        self._md.renderer.rules["fence"] = custom_fence

    def render(self, text: str) -> str:
        """Convert Markdown to HTML."""

        return self._md.render(text)
