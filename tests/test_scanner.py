"""Tests for the Markdown directory scanner."""

from __future__ import annotations

from pathlib import Path

import pytest

from markview.backends.filesystem import MarkdownScanner


def _touch(root: Path, rel: str, content: str = "# x\n") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_skips_hidden_and_dependency_dirs(tmp_path: Path) -> None:
    """Only docs/readme.md survives .git and node_modules exclusion."""

    _touch(tmp_path, ".git/file.md")
    _touch(tmp_path, "node_modules/sub/file.md")
    _touch(tmp_path, "docs/readme.md")

    files = MarkdownScanner().scan(tmp_path)

    assert [f.relative_path for f in files] == ["docs/readme.md"]
    assert files[0].name == "readme.md"
    assert files[0].path == str((tmp_path / "docs" / "readme.md").resolve())


def test_sorted_by_relative_path_with_metadata(tmp_path: Path) -> None:
    _touch(tmp_path, "z.md", "zzz")
    _touch(tmp_path, "a/b.MD", "b")
    _touch(tmp_path, "a/notes.txt")
    _touch(tmp_path, ".hidden.md")

    files = MarkdownScanner().scan(tmp_path)

    assert [f.relative_path for f in files] == ["a/b.MD", "z.md"]
    assert files[1].size == 3
    assert files[1].modified is not None


def test_serializes_with_camel_case_relative_path(tmp_path: Path) -> None:
    _touch(tmp_path, "doc.md")
    payload = MarkdownScanner().scan(tmp_path)[0].model_dump(mode="json", by_alias=True)

    assert set(payload) == {"name", "path", "relativePath", "size", "modified"}


def test_missing_root_returns_nothing(tmp_path: Path) -> None:
    assert MarkdownScanner().scan(tmp_path / "missing") == []


def test_custom_extensions_and_skip_dirs(tmp_path: Path) -> None:
    _touch(tmp_path, "a.markdown")
    _touch(tmp_path, "build/b.md")
    _touch(tmp_path, "node_modules/c.md")

    files = MarkdownScanner(extensions=[".md", ".markdown"], skip_dirs=["build"]).scan(tmp_path)

    assert [f.relative_path for f in files] == ["a.markdown", "node_modules/c.md"]


def test_unreadable_directory_is_skipped(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A failing branch is logged and skipped; siblings are still scanned."""

    _touch(tmp_path, "locked/secret.md")
    _touch(tmp_path, "open/visible.md")

    original_iterdir = Path.iterdir

    def flaky_iterdir(self: Path):
        if self.name == "locked":
            raise PermissionError("denied")
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", flaky_iterdir)

    files = MarkdownScanner().scan(tmp_path)
    assert [f.relative_path for f in files] == ["open/visible.md"]
