"""Shared fixtures for core unit tests"""

from pathlib import Path

import pytest

from mdblog.core.models import ContentFormat, ContentRecord


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

- item one
- item two
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
date: 2021-03-04
tags: [a, b]
---
# Title

Body content.
"""


@pytest.fixture(name="make_record")
def make_record_fixture():
    """Build a ContentRecord with the given identifier and metadata."""
    def _make(identifier: str, **metadata) -> ContentRecord:
        return ContentRecord(
            identifier=identifier,
            format=ContentFormat.md,
            metadata=metadata,
            raw_body="",
            html="",
            source_path=Path(f"/posts/{identifier}.md"),
        )
    return _make


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD
