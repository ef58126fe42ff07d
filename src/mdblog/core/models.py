"""Data models shared by the extract, parse, repository and pagination steps"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer, field_validator


class ContentFormat(str, Enum):
    """Recognized content formats; value is the file extension without the dot.

    Declaration order is the default resolution priority.
    """
    md = "md"
    markdown = "markdown"
    pug = "pug"
    jade = "jade"

    @classmethod
    def from_extension(cls, ext: str) -> Optional["ContentFormat"]:
        """Return the format for a dot-stripped, lowercase extension, else None."""
        try:
            return cls(ext)
        except ValueError:
            return None


@dataclass(frozen=True)
class RawContent:
    """Unparsed file split into its metadata block and body."""
    metadata: dict[str, Any] = field(default_factory=dict)
    body:     str = ""
    frontmatter: str = ""      # raw YAML text of the metadata block, "" when absent


@dataclass(frozen=True)
class PostMeta:
    """Single file resolved for an identifier; internal to the item lookup path."""
    identifier: str
    directory:  Path
    format:     ContentFormat
    path:       Path


class ContentRecord(BaseModel):
    """A fully parsed content file, rebuilt on every read.

    metadata is a read-only view of the top-level mapping; nested values are
    shared with the parsed YAML.
    """
    model_config = ConfigDict(frozen=True)

    identifier:  str
    format:      ContentFormat
    metadata:    Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    raw_body:    str = ""
    html:        str = ""
    source_path: Path = Field(exclude=True, repr=False)

    @field_validator("metadata")
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("metadata")
    def _dump_metadata(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    @property
    def title(self) -> Optional[str]:
        title = self.metadata.get("title")
        return str(title) if title is not None else None

    @property
    def date(self) -> Any:
        return self.metadata.get("date")


class Page(BaseModel):
    """One page-sized slice of the date-ordered collection."""
    model_config = ConfigDict(frozen=True)

    items:       list[ContentRecord] = []
    page_index:  int = 0           # 0-based
    page_size:   int = 10
    total_items: int = 0
    total_pages: int = 0

    @computed_field
    @property
    def page_number(self) -> int:
        """1-based page number, as shown to callers."""
        return self.page_index + 1

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages
