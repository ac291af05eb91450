"""Outline sidebar and scroll-synchronized highlighting.

The browser side is a thin adapter: on every scroll event (and once on load) it collects
``(id, offsetTop)`` for the headings and applies the same rule as :func:`active_heading_id`.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from markupsafe import Markup

from markview.models.outline import Outline
from markview.render.templating import get_environment

SCROLL_LOOKAHEAD = 100
EMPTY_OUTLINE_TEXT = "No headings found"


def render_sidebar(outline: Outline | Sequence, *, empty_text: str = EMPTY_OUTLINE_TEXT) -> Markup:
    """Render the outline as a nested list of anchor links.

    Each entry carries a ``toc-level-N`` class; an empty outline yields a single placeholder
    entry so the sidebar is never blank.
    """

    template = get_environment().get_template("sidebar.html")
    return Markup(template.render(headings=list(outline), empty_text=empty_text))


def active_heading_id(
    scroll_top: float,
    positions: Iterable[tuple[str, float]],
    lookahead: float = SCROLL_LOOKAHEAD,
) -> str | None:
    """Pick the heading to highlight for a scroll position.

    Args:
        scroll_top: Current vertical scroll offset.
        positions: ``(heading_id, offset_top)`` pairs in document order.
        lookahead: Distance below the viewport top at which a heading counts as reached.

    Returns:
        The id of the last heading with ``offset <= scroll_top + lookahead``, or None when the
        viewport is above the first heading. On equal offsets the later heading wins.
    """

    threshold = scroll_top + lookahead
    for heading_id, offset in reversed(list(positions)):
        if offset <= threshold:
            return heading_id
    return None


def scroll_sync_script(lookahead: float = SCROLL_LOOKAHEAD) -> Markup:
    """Return the inline client script for click-to-scroll and scroll-sync highlighting."""

    template = get_environment().get_template("toc_sync.js")
    return Markup(template.render(lookahead=lookahead))
