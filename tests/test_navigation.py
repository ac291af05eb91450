"""Tests for the sidebar markup and scroll-sync selection."""

from __future__ import annotations

from bs4 import BeautifulSoup

from markview.models.outline import Heading, Outline
from markview.render.navigation import active_heading_id, render_sidebar, scroll_sync_script

POSITIONS = [("heading-0", 0), ("heading-1", 500), ("heading-2", 1200)]


def test_active_heading_uses_lookahead() -> None:
    """A heading counts as reached once it is within 100 units below the scroll top."""

    assert active_heading_id(350, POSITIONS) == "heading-0"
    assert active_heading_id(400, POSITIONS) == "heading-1"
    assert active_heading_id(450, POSITIONS) == "heading-1"


def test_active_heading_exact_offset() -> None:
    assert active_heading_id(500, POSITIONS) == "heading-1"


def test_active_heading_within_lookahead() -> None:
    assert active_heading_id(1100, POSITIONS) == "heading-2"


def test_no_active_heading_above_first() -> None:
    assert active_heading_id(-150, POSITIONS) is None
    assert active_heading_id(-50, POSITIONS) == "heading-0"
    assert active_heading_id(0, []) is None


def test_without_lookahead() -> None:
    """With no lookahead only headings at or above the scroll top are reached."""

    assert active_heading_id(450, POSITIONS, lookahead=0) == "heading-0"
    assert active_heading_id(500, POSITIONS, lookahead=0) == "heading-1"
    assert active_heading_id(-50, POSITIONS, lookahead=0) is None


def test_scrolled_above_first_heading_with_offset() -> None:
    """With the first heading further down than the lookahead, nothing is active."""

    positions = [("heading-0", 300), ("heading-1", 900)]
    assert active_heading_id(-50, positions) is None


def test_ties_go_to_later_heading() -> None:
    positions = [("heading-0", 0), ("heading-1", 200), ("heading-2", 200)]
    assert active_heading_id(150, positions) == "heading-2"


def test_selection_is_idempotent() -> None:
    assert {active_heading_id(700, POSITIONS) for _ in range(5)} == {"heading-1"}


def test_custom_lookahead() -> None:
    assert active_heading_id(450, POSITIONS, lookahead=0) == "heading-0"
    assert active_heading_id(450, POSITIONS, lookahead=50) == "heading-1"


def test_sidebar_links_and_levels() -> None:
    outline = Outline(
        [
            Heading(level=1, text="Intro", id="heading-0"),
            Heading(level=3, text="A & B", id="heading-1"),
        ]
    )
    soup = BeautifulSoup(render_sidebar(outline), "html.parser")
    items = soup.find_all("li")

    assert len(items) == 2
    assert "toc-level-1" in items[0]["class"]
    assert "toc-level-3" in items[1]["class"]
    links = soup.find_all("a", class_="toc-link")
    assert [a["href"] for a in links] == ["#heading-0", "#heading-1"]
    assert [a["data-target"] for a in links] == ["heading-0", "heading-1"]
    assert links[1].get_text() == "A & B"


def test_sidebar_escapes_heading_text() -> None:
    outline = Outline([Heading(level=2, text="<script>x</script>", id="heading-0")])
    markup = str(render_sidebar(outline))

    assert "<script>" not in markup
    assert "&lt;script&gt;" in markup


def test_empty_outline_has_single_placeholder() -> None:
    """The sidebar is never an empty list."""

    soup = BeautifulSoup(render_sidebar(Outline()), "html.parser")
    items = soup.find_all("li")

    assert len(items) == 1
    assert "toc-empty" in items[0]["class"]
    assert items[0].get_text(strip=True) == "No headings found"


def test_scroll_sync_script_contract() -> None:
    script = str(scroll_sync_script(100))

    assert "var LOOKAHEAD = 100;" in script
    assert "addEventListener('scroll', syncActive)" in script
    assert "scrollIntoView({ behavior: 'smooth', block: 'start' })" in script
    assert "positions.length - 1" in script
