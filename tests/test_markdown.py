"""Tests for the Markdown renderer."""

from __future__ import annotations

from bs4 import BeautifulSoup

from markview.render.markdown import MarkdownRenderer


def test_mermaid_fence_becomes_container() -> None:
    """Mermaid source is emitted verbatim in a div, not escaped and not in <code>."""

    html = MarkdownRenderer().render("```mermaid\ngraph TD; A-->B\n```\n")

    assert '<div class="mermaid">graph TD; A-->B</div>' in html
    assert "<code" not in html
    assert "&gt;" not in html


def test_mermaid_info_string_is_case_insensitive() -> None:
    html = MarkdownRenderer().render("```Mermaid\nsequenceDiagram\n```\n")
    assert html.startswith('<div class="mermaid">sequenceDiagram</div>')


def test_other_fences_stay_code_blocks() -> None:
    html = MarkdownRenderer().render("```python\nprint('<hi>')\n```\n")

    assert '<pre><code class="language-python">' in html
    assert "&lt;hi&gt;" in html


def test_tables_and_strikethrough() -> None:
    """GFM tables and strikethrough are enabled."""

    html = MarkdownRenderer().render("| a | b |\n|---|---|\n| 1 | 2 |\n\n~~gone~~\n")
    soup = BeautifulSoup(html, "html.parser")

    assert soup.find("table") is not None
    assert [td.get_text() for td in soup.find_all("td")] == ["1", "2"]
    assert soup.find("s").get_text() == "gone"


def test_single_newlines_become_breaks() -> None:
    html = MarkdownRenderer().render("line one\nline two\n")
    assert "<br" in html


def test_blockquote_lists_and_emphasis() -> None:
    html = MarkdownRenderer().render("> quoted\n\n- one\n- **two**\n")
    soup = BeautifulSoup(html, "html.parser")

    assert soup.find("blockquote").get_text(strip=True) == "quoted"
    assert [li.get_text() for li in soup.find_all("li")] == ["one", "two"]
    assert soup.find("strong").get_text() == "two"


def test_fence_with_blank_info_string() -> None:
    """Whitespace after the opening backticks is a plain code block, not an error."""

    html = MarkdownRenderer().render("``` \ncode\n```\n")

    assert "<pre><code>code\n</code></pre>" in html
    assert "mermaid" not in html
