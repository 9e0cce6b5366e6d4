"""
Paginator.

Slices an ordered sequence into fixed-size, 1-indexed pages.
"""

import math
from typing import Sequence

from ..models import Organization, PageResult


class PageOutOfRangeError(IndexError):
    """Raised when a page number lies outside [1, total_pages]."""

    def __init__(self, page_number: int, total_pages: int):
        self.page_number = page_number
        self.total_pages = total_pages
        super().__init__(f"Page {page_number} out of range (1-{total_pages})")


def total_pages_for(total_count: int, page_size: int) -> int:
    """Number of pages needed for total_count items; 0 when there are none."""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(total_count / page_size)


def clamp_page(page_number: int, total_pages: int) -> int:
    """Clamp a page number into [1, max(total_pages, 1)]."""
    return max(1, min(page_number, max(total_pages, 1)))


def paginate(sequence: Sequence[Organization], page_size: int, page_number: int) -> PageResult:
    """
    Return one page of the sequence.

    Args:
        sequence: Filtered and sorted records
        page_size: Items per page (positive)
        page_number: 1-indexed page to return

    Returns:
        PageResult with the page slice, total page count and total item count

    Raises:
        ValueError: If page_size is not positive
        PageOutOfRangeError: If the sequence is non-empty and page_number
            lies outside [1, total_pages]
    """
    total_count = len(sequence)
    total_pages = total_pages_for(total_count, page_size)

    if total_pages == 0:
        return PageResult(items=(), total_pages=0, total_count=0)

    if page_number < 1 or page_number > total_pages:
        raise PageOutOfRangeError(page_number, total_pages)

    start = (page_number - 1) * page_size
    return PageResult(
        items=tuple(sequence[start:start + page_size]),
        total_pages=total_pages,
        total_count=total_count,
    )
