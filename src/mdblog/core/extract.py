"""Metadata block extraction: split a file into YAML frontmatter and body"""

import re

import yaml

from mdblog.core.models import RawContent
from mdblog.errors import MetadataSyntaxError


FRONTMATTER_RE = re.compile(
    r'^\ufeff?---[ \t]*\r?\n(?:(.*?)\r?\n)?(?:---|\.\.\.)[ \t]*(?:\r?\n|$)',
    re.DOTALL,
)


def extract_metadata(text: str) -> RawContent:
    """Return RawContent with the YAML header parsed and removed from the body.

    The block opens with '---' and closes with '---' or '...'. Text without
    such a block yields empty metadata and the full text as body. Malformed
    YAML, or a header that is not a mapping, raises MetadataSyntaxError.
    """
    m = FRONTMATTER_RE.match(text)
    if not m:
        return RawContent(metadata={}, body=text, frontmatter="")

    raw = m.group(1) or ""
    try:
        metadata = yaml.safe_load(raw) if raw.strip() else {}
    except yaml.YAMLError as e:
        raise MetadataSyntaxError(f"Invalid YAML frontmatter: {e}") from e
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise MetadataSyntaxError(
            f"Invalid YAML frontmatter: expected a mapping, got {type(metadata).__name__}"
        )
    return RawContent(metadata=metadata, body=text[m.end():], frontmatter=raw)
