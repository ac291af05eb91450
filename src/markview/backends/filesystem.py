"""Recursive Markdown file discovery."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from markview.logging import get_logger
from markview.models.document import FileEntry

logger = get_logger(__name__)


class MarkdownScanner:
    """Find Markdown files below a root directory.

    Hidden entries (names starting with ``.``) and dependency-cache directories such as
    ``node_modules`` are skipped. Unreadable directories are logged and skipped; the scan
    returns everything it could reach.
    """

    def __init__(
        self,
        extensions: Iterable[str] = (".md",),
        skip_dirs: Iterable[str] = ("node_modules",),
    ) -> None:
        self.extensions = {ext.lower() for ext in extensions}
        self.skip_dirs = set(skip_dirs)

    def scan(self, root: str | Path) -> list[FileEntry]:
        """Return matching files sorted by relative path. A missing root yields no files."""

        root_path = Path(root)
        if not root_path.is_dir():
            return []

        results: list[FileEntry] = []
        self._walk(root_path, root_path, results)
        results.sort(key=lambda entry: entry.relative_path)
        logger.info("Scanned %s: %d markdown files", root_path, len(results))
        return results

    def _walk(self, root: Path, current: Path, results: list[FileEntry]) -> None:
        try:
            children = list(current.iterdir())
        except OSError as e:
            logger.warning("Skipping unreadable directory %s: %s", current, e)
            return

        for child in children:
            name = child.name
            if name.startswith("."):
                continue

            try:
                is_dir = child.is_dir() and not child.is_symlink()
                is_file = child.is_file()
            except OSError as e:
                logger.warning("Skipping %s: %s", child, e)
                continue

            if is_dir:
                if name not in self.skip_dirs:
                    self._walk(root, child, results)
            elif is_file and child.suffix.lower() in self.extensions:
                try:
                    st = child.stat()
                except OSError as e:
                    logger.warning("Skipping %s: %s", child, e)
                    continue
                results.append(
                    FileEntry(
                        name=name,
                        path=str(child.resolve()),
                        relative_path=child.relative_to(root).as_posix(),
                        size=int(st.st_size),
                        modified=datetime.fromtimestamp(st.st_mtime),
                    )
                )
