"""Filesystem collaborator: the only place mdblog touches the disk"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from mdblog.errors import AccessError, ContentReadError, DirectoryNotFoundError


def file_extension(filename: str) -> str:
    """Return the lowercase extension of filename without its leading dot."""
    return os.path.splitext(filename)[1].lower().lstrip(".")


class FileSystem(Protocol):
    """Read-only filesystem capability injected into the parser and repository.

    Failures must raise an mdblog error rather than return an empty value.
    """

    def read_file(self, path: Path) -> bytes: ...

    def list_directory(self, path: Path) -> list[str]: ...

    def exists(self, path: Path) -> bool: ...

    def is_directory(self, path: Path) -> bool: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def read_file(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except PermissionError as e:
            raise AccessError(path) from e
        except OSError as e:
            raise ContentReadError(path, e.strerror or str(e)) from e

    def list_directory(self, path: Path) -> list[str]:
        """Return the names of regular files in path, sorted by name."""
        root = Path(path)
        try:
            entries = list(root.iterdir())
        except (FileNotFoundError, NotADirectoryError) as e:
            raise DirectoryNotFoundError(root) from e
        except PermissionError as e:
            raise AccessError(root) from e
        return sorted(p.name for p in entries if p.is_file())

    def exists(self, path: Path) -> bool:
        try:
            return Path(path).is_file()
        except PermissionError as e:
            raise AccessError(path) from e

    def is_directory(self, path: Path) -> bool:
        try:
            return Path(path).is_dir()
        except PermissionError as e:
            raise AccessError(path) from e
