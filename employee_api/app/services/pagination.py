"""
Page/pageSize pagination over an ordered snapshot.

Pages are 1-based.  A page that starts past the end of the sequence is
empty rather than an error, and query parameters that are missing,
malformed or smaller than one silently fall back to their defaults.
"""

import re
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

# Optional sign followed by ASCII digits only.  ``int()`` alone would
# also take whitespace, ``1_000`` and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str) -> Optional[int]:
    """Parse a plain base-10 integer, returning ``None`` if ``raw`` is not one."""
    if not _INTEGER_RE.fullmatch(raw):
        return None
    return int(raw)


def parse_page_param(raw: Optional[str], default: int) -> int:
    """Convert a raw query-string value into a positive integer.

    Returns ``default`` when ``raw`` is ``None``, is not an integer or
    is less than one.
    """
    if raw is None:
        return default
    value = parse_int(raw)
    if value is None or value < 1:
        return default
    return value


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    """Return the ``page``-th slice of ``page_size`` items.

    ``items`` must be a snapshot that does not change during the call.
    Both ``page`` and ``page_size`` must be at least one.
    """
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size must be >= 1")
    total = len(items)
    start = (page - 1) * page_size
    if start >= total:
        return []
    end = min(start + page_size, total)
    return list(items[start:end])
