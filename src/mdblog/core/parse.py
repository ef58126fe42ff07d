"""Single-file parsing: read, extract frontmatter, render the body"""

import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from mdblog.core.extract import extract_metadata
from mdblog.core.models import ContentFormat, ContentRecord
from mdblog.core.render import RENDERERS, Renderer
from mdblog.errors import ContentReadError, MetadataSyntaxError, RenderError
from mdblog.util.fs import FileSystem, LocalFileSystem


logger = logging.getLogger(__name__)


class ContentParser:
    """Turn one content file into a ContentRecord using the renderer for its format."""

    def __init__(
        self,
        fs: Optional[FileSystem] = None,
        renderers: Optional[Mapping[ContentFormat, Renderer]] = None,
        ):
        self.fs = fs or LocalFileSystem()
        self.renderers = renderers if renderers is not None else RENDERERS

    def renderer_for(self, fmt: ContentFormat) -> Optional[Renderer]:
        """Return the renderer registered for fmt, or None if the table lacks it."""
        return self.renderers.get(fmt)

    def missing_renderers(self, formats: Iterable[ContentFormat]) -> list[ContentFormat]:
        """Return the formats in formats that have no registered renderer."""
        return [fmt for fmt in formats if fmt not in self.renderers]

    def read_text(self, path: Path) -> str:
        """Read path through the filesystem collaborator and decode it as UTF-8."""
        raw = self.fs.read_file(path)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ContentReadError(path, f"not valid UTF-8 ({e.reason})") from e

    def parse(self, path: Path, fmt: ContentFormat, **render_args: Any) -> ContentRecord:
        """Parse the file at path as fmt; extra keyword args are passed to the renderer."""
        path = Path(path)
        try:
            raw = extract_metadata(self.read_text(path))
        except MetadataSyntaxError as e:
            raise MetadataSyntaxError(f"{path}: {e}") from e
        render = self.renderer_for(fmt)
        if render is None:
            raise RenderError(fmt.value, path, "no renderer registered")
        try:
            html = render(raw.body, **render_args)
        except Exception as e:
            raise RenderError(fmt.value, path, str(e)) from e
        logger.debug("parsed %s as %s", path, fmt.value)
        return ContentRecord(
            identifier=path.stem,
            format=fmt,
            metadata=raw.metadata,
            raw_body=raw.body,
            html=html,
            source_path=path,
        )
