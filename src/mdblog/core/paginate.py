"""Date ordering and page slicing for content collections"""

import math
from datetime import date, datetime, timezone
from typing import Any, Optional, Sequence

from mdblog.core.models import ContentRecord, Page


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# "now": records without a usable date sort as newest (default).
# "epoch": they sort as oldest.
DEFAULT_DATE_POLICIES = ("now", "epoch")


def parse_date(value: Any) -> Optional[datetime]:
    """Coerce a metadata date value to an aware datetime; None if unusable.

    Naive values are taken as UTC; plain dates as midnight UTC.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def _fallback(default_date: str) -> datetime:
    if default_date == "now":
        return datetime.now(timezone.utc)
    if default_date == "epoch":
        return EPOCH
    raise ValueError(f"Unknown default_date policy '{default_date}'; expected one of {DEFAULT_DATE_POLICIES}")


def effective_date(record: ContentRecord, fallback: datetime) -> datetime:
    """Return the record's metadata date, or fallback when missing or unparseable."""
    return parse_date(record.metadata.get("date")) or fallback


def sort_records(records: Sequence[ContentRecord], default_date: str = "now") -> list[ContentRecord]:
    """Stable sort by effective date, newest first.

    The fallback date is sampled once, so dateless records tie with each other
    and keep their input order.
    """
    fallback = _fallback(default_date)
    return sorted(records, key=lambda r: effective_date(r, fallback), reverse=True)


def paginate(
    records: Sequence[ContentRecord],
    page_index: int,
    page_size: int,
    default_date: str = "now",
    ) -> Page:
    """Order records and return the 0-based page_index slice of page_size items.

    Out-of-range pages return no items; total_pages is independent of page_index.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    ordered = sort_records(records, default_date)
    page_index = max(0, page_index)
    start = min(len(ordered), page_index * page_size)
    end = min(len(ordered), start + page_size)
    return Page(
        items=ordered[start:end],
        page_index=page_index,
        page_size=page_size,
        total_items=len(ordered),
        total_pages=math.ceil(len(ordered) / page_size),
    )
