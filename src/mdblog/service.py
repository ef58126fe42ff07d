"""BlogService: the two read operations exposed to presentation layers"""

import logging
from pathlib import Path
from typing import Iterable, Mapping, Optional

from mdblog.config import Settings
from mdblog.core.models import ContentFormat, ContentRecord, Page
from mdblog.core.paginate import DEFAULT_DATE_POLICIES, paginate
from mdblog.core.parse import ContentParser
from mdblog.core.render import Renderer, build_renderers
from mdblog.core.repository import ContentRepository
from mdblog.errors import ConfigurationError
from mdblog.util.fs import FileSystem, LocalFileSystem


logger = logging.getLogger(__name__)


class BlogService:
    """Wire the repository and paginator together.

    Holds only configuration; every call re-reads the posts directory, so one
    instance can serve concurrent requests.
    """

    def __init__(
        self,
        posts_directory: str | Path,
        page_size: int = 10,
        *,
        formats: Optional[Iterable[ContentFormat]] = None,
        default_date: str = "now",
        fs: Optional[FileSystem] = None,
        renderers: Optional[Mapping[ContentFormat, Renderer]] = None,
        ):
        if not posts_directory:
            raise ConfigurationError("posts_directory is required")
        if page_size < 1:
            raise ConfigurationError(f"page_size must be >= 1, got {page_size}")
        if default_date not in DEFAULT_DATE_POLICIES:
            raise ConfigurationError(
                f"default_date must be one of {DEFAULT_DATE_POLICIES}, got '{default_date}'"
            )
        self.posts_directory = Path(posts_directory)
        self.page_size = page_size
        self.default_date = default_date
        fs = fs or LocalFileSystem()
        self.parser = ContentParser(fs, renderers)
        self.repository = ContentRepository(fs, self.parser, formats)
        missing = self.parser.missing_renderers(self.repository.formats)
        if missing:
            raise ConfigurationError(
                f"No renderer registered for format(s): {', '.join(f.value for f in missing)}"
            )
        logger.info(
            "blog service: directory=%s page_size=%d formats=%s",
            self.posts_directory, page_size, ",".join(f.value for f in self.repository.formats),
        )

    @classmethod
    def from_settings(cls, settings: Settings, fs: Optional[FileSystem] = None) -> "BlogService":
        return cls(
            settings.posts_directory,
            settings.page_size,
            formats=settings.formats,
            default_date=settings.default_date,
            fs=fs,
            renderers=build_renderers(settings.markdown_preset),
        )

    def get_page(self, page_number: int = 1) -> Page:
        """Return the 1-based page_number of the listing; values below 1 mean page 1."""
        records = self.repository.list_all(self.posts_directory)
        return paginate(records, max(1, page_number) - 1, self.page_size, self.default_date)

    def get_item(self, identifier: str) -> Optional[ContentRecord]:
        """Return the record for identifier, or None if no recognized file matches."""
        meta = self.repository.resolve(self.posts_directory, identifier)
        if meta is None:
            return None
        return self.parser.parse(meta.path, meta.format)
