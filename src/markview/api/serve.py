"""Uvicorn server launcher.

Console scripts must point to a callable, not an ASGI app object.
"""

from __future__ import annotations

from typing import Annotated

import typer
import uvicorn

from markview.config import load_settings
from markview.logging import configure_logging, get_logger

logger = get_logger(__name__)

FEATURES = (
    "Local directory scan",
    "File upload",
    "Mermaid diagram rendering",
    "Outline sidebar with scroll sync",
)


def serve(host: str, port: int, reload: bool = False) -> None:
    """Run the API server until SIGINT/SIGTERM.

    Shutdown does not wait for in-flight requests.
    """

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("markview preview server starting at http://%s:%d", host, port)
    for feature in FEATURES:
        logger.info("  feature: %s", feature)
    logger.info("Press Ctrl+C to stop the server")

    uvicorn.run(
        "markview.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=0,
    )
    logger.info("Server stopped")


def main(
    host: Annotated[str | None, typer.Option(help="Bind host")] = None,
    port: Annotated[int | None, typer.Option(help="Bind port")] = None,
    reload: Annotated[bool, typer.Option(help="Enable auto-reload (dev)")] = False,
) -> None:
    """Start the markview preview server."""

    settings = load_settings()
    serve(host or settings.host, port or settings.port, reload=reload)


def run() -> None:
    """Console script entrypoint."""

    typer.run(main)


if __name__ == "__main__":
    run()
