"""Error taxonomy: every failure raised by mdblog is exactly one of these kinds"""

from pathlib import Path


class BlogError(Exception):
    """Base class for all mdblog errors."""


class ConfigurationError(BlogError, ValueError):
    """Missing or invalid configuration; raised before any request is served."""


class DirectoryNotFoundError(BlogError):
    """The posts directory does not exist or is not a directory."""

    def __init__(self, directory: str | Path):
        self.directory = str(directory)
        super().__init__(f"Posts directory not found: {self.directory}")


class AccessError(BlogError):
    """Permission denied while listing or reading content."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        super().__init__(f"Permission denied: {self.path}")


class ContentReadError(BlogError):
    """A single content file could not be read or decoded."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.path = str(path)
        msg = f"Failed to read {self.path}"
        super().__init__(f"{msg}: {reason}" if reason else msg)


class MetadataSyntaxError(BlogError):
    """The YAML metadata block at the top of a file is malformed."""


class RenderError(BlogError):
    """A renderer raised while converting a body to HTML."""

    def __init__(self, fmt: str, path: str | Path, reason: str = ""):
        self.format = str(fmt)
        self.path = str(path)
        msg = f"Failed to render {self.path} as {self.format}"
        super().__init__(f"{msg}: {reason}" if reason else msg)
