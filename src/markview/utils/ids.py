"""ID utilities."""

from __future__ import annotations

import itertools

HEADING_ID_PREFIX = "heading-"


def heading_id_generator() -> itertools.count:
    """Return a counter for heading ids.

    Returns:
        A counter that yields consecutive numbers starting from 0.
    """

    return itertools.count(0)


def format_heading_id(n: int, prefix: str = HEADING_ID_PREFIX) -> str:
    """Format a numeric counter to a heading anchor id (e.g., heading-0)."""

    return f"{prefix}{n}"
