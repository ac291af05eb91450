"""Jinja2 environment for the HTML pages shipped with the package."""

from __future__ import annotations

from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared template environment (autoescaping on for .html templates)."""

    return Environment(
        loader=PackageLoader("markview", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
