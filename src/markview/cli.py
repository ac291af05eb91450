"""CLI entrypoints for markview."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from markview.api.serve import serve as run_server
from markview.backends.filesystem import MarkdownScanner
from markview.config import load_settings
from markview.errors import PreviewError
from markview.logging import configure_logging, get_logger
from markview.preview import DocumentPreviewer

app = typer.Typer(add_completion=False, help="markview: Markdown + Mermaid preview with outline sidebar")
logger = get_logger(__name__)
console = Console()


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind host (overrides MARKVIEW_HOST)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (overrides MARKVIEW_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload (dev)"),
) -> None:
    """Start the preview server."""

    settings = load_settings()
    run_server(host or settings.host, port or settings.port, reload=reload)


@app.command()
def scan(root: Path = typer.Argument(..., help="Directory to scan for Markdown files")) -> None:
    """List Markdown files below ROOT."""

    settings = load_settings()
    configure_logging(settings.log_level)

    if not root.exists():
        raise typer.BadParameter(f"The specified path does not exist: {root}")

    files = MarkdownScanner(settings.markdown_extensions, settings.skip_dirs).scan(root)
    table = Table(title=f"{len(files)} Markdown files in {root}")
    table.add_column("Path")
    table.add_column("Size (KB)", justify="right")
    table.add_column("Modified")
    for entry in files:
        table.add_row(entry.relative_path, f"{entry.size / 1024:.1f}", entry.modified.isoformat(sep=" ", timespec="seconds"))
    console.print(table)


@app.command()
def render(
    file: Path = typer.Argument(..., help="Markdown file to render"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output HTML file (default: stdout)"),
) -> None:
    """Render FILE to a self-contained preview page."""

    settings = load_settings()
    configure_logging(settings.log_level)
    previewer = DocumentPreviewer(settings)

    try:
        page = previewer.page(previewer.render_file(file))
    except PreviewError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    if output is None:
        typer.echo(page)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(page, encoding="utf-8")
    typer.echo(str(output))


@app.command()
def outline(file: Path = typer.Argument(..., help="Markdown file")) -> None:
    """Print the heading outline of FILE as JSON."""

    settings = load_settings()
    configure_logging(settings.log_level)

    try:
        document = DocumentPreviewer(settings).render_file(file)
    except PreviewError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps(document.outline.model_dump(mode="json"), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
