"""Content discovery and identifier resolution over a posts directory"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from mdblog.core.models import ContentFormat, ContentRecord, PostMeta
from mdblog.core.parse import ContentParser
from mdblog.errors import DirectoryNotFoundError
from mdblog.util.fs import FileSystem, LocalFileSystem, file_extension


logger = logging.getLogger(__name__)


class ContentRepository:
    """Enumerate and resolve content files; every call re-reads the filesystem."""

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        parser: Optional[ContentParser] = None,
        formats: Optional[Iterable[ContentFormat]] = None,
        ):
        self.fs = fs or LocalFileSystem()
        self.parser = parser or ContentParser(self.fs)
        # Order is resolution priority; duplicates keep their first position.
        self.formats: tuple[ContentFormat, ...] = tuple(dict.fromkeys(formats or ContentFormat))

    def format_of(self, filename: str) -> Optional[ContentFormat]:
        """Return the recognized format for filename, or None if it is not content."""
        fmt = ContentFormat.from_extension(file_extension(filename))
        return fmt if fmt in self.formats else None

    def discover(self, directory: Path) -> list[tuple[Path, ContentFormat]]:
        """Return (path, format) for every recognized file in directory, in listing order."""
        directory = Path(directory)
        found = []
        for name in self.fs.list_directory(directory):
            fmt = self.format_of(name)
            if fmt is None:
                logger.debug("skipping %s: unrecognized extension", name)
                continue
            found.append((directory / name, fmt))
        return found

    def list_all(self, directory: Path) -> list[ContentRecord]:
        """Parse every recognized file in directory; any parse failure propagates."""
        return [self.parser.parse(path, fmt) for path, fmt in self.discover(directory)]

    def resolve(self, directory: Path, identifier: str) -> Optional[PostMeta]:
        """Return the file for identifier in format priority order, or None if absent.

        A missing directory raises DirectoryNotFoundError rather than resolving to None.
        """
        directory = Path(directory)
        if not self.fs.is_directory(directory):
            raise DirectoryNotFoundError(directory)
        if not _is_plain_name(identifier):
            logger.debug("rejecting identifier %r", identifier)
            return None
        for fmt in self.formats:
            path = directory / f"{identifier}.{fmt.value}"
            if self.fs.exists(path):
                return PostMeta(identifier=identifier, directory=directory, format=fmt, path=path)
        logger.debug("no file for identifier %r in %s", identifier, directory)
        return None


def _is_plain_name(identifier: str) -> bool:
    """True if identifier can only name an entry directly inside the directory."""
    return bool(identifier) and identifier not in (".", "..") and not any(
        sep in identifier for sep in ("/", "\\", "\0")
    )
