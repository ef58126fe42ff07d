"""Root test configuration: environment isolation and shared filesystem fixtures"""

import os
from pathlib import Path

import pytest

from mdblog.errors import AccessError, ContentReadError, DirectoryNotFoundError


class MemoryFileSystem:
    """In-memory FileSystem: {directory: {filename: bytes}}; listing keeps insertion order."""

    def __init__(self, tree: dict[str, dict[str, str | bytes]] = None):
        self.tree = {
            Path(d): {n: c.encode("utf-8") if isinstance(c, str) else c for n, c in files.items()}
            for d, files in (tree or {}).items()
        }
        self.denied: set[Path] = set()
        self.reads: list[Path] = []

    def read_file(self, path: Path) -> bytes:
        path = Path(path)
        if path in self.denied:
            raise AccessError(path)
        self.reads.append(path)
        try:
            return self.tree[path.parent][path.name]
        except KeyError:
            raise ContentReadError(path, "No such file") from None

    def list_directory(self, path: Path) -> list[str]:
        path = Path(path)
        if path in self.denied:
            raise AccessError(path)
        if path not in self.tree:
            raise DirectoryNotFoundError(path)
        return list(self.tree[path])

    def exists(self, path: Path) -> bool:
        path = Path(path)
        if path.parent in self.denied:
            raise AccessError(path)
        return path.name in self.tree.get(path.parent, {})

    def is_directory(self, path: Path) -> bool:
        path = Path(path)
        if path in self.denied:
            raise AccessError(path)
        return path in self.tree


@pytest.fixture(autouse=True)
def isolate_env(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no MDBLOG_* variables set."""
    for name in list(os.environ):
        if name.startswith("MDBLOG_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(name="memory_fs")
def memory_fs_fixture():
    """Factory for MemoryFileSystem instances."""
    return MemoryFileSystem


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path):
    d = tmp_path / "posts"
    d.mkdir()
    return d


@pytest.fixture(name="write_post")
def write_post_fixture(posts_dir):
    """Write a post file into posts_dir, with an optional YAML header."""
    def _write(filename: str, body: str = "Body.\n", **metadata) -> Path:
        header = "".join(f"{k}: {v}\n" for k, v in metadata.items())
        text = f"---\n{header}---\n{body}" if metadata else body
        path = posts_dir / filename
        path.write_text(text, encoding="utf-8")
        return path
    return _write
