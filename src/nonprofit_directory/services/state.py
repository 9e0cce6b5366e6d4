"""
Directory view state and its transitions.

DirectoryState is immutable; every user interaction maps the current state
to a new one through one of the pure functions below.
"""

from dataclasses import dataclass, field, replace
from typing import Union

from ..core import constants
from ..models import DEFAULT_SORT, FilterCriteria, NumericInput, SortCriterion


TEXT_FILTER_KEYS = ("search_term", "location", "focus_area")


@dataclass(frozen=True)
class DirectoryState:
    """Filter criteria plus pagination position."""

    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    page_size: int = constants.DEFAULT_PAGE_SIZE
    page_number: int = 1


def validate_page_size(page_size: int) -> int:
    """Return page_size if it is one of the allowed options, else raise ValueError."""
    if isinstance(page_size, bool) or page_size not in constants.PAGE_SIZE_OPTIONS:
        raise ValueError(
            f"Page size must be one of {constants.PAGE_SIZE_OPTIONS}, got {page_size!r}"
        )
    return page_size


def with_filter(state: DirectoryState, key: str, value: Union[str, NumericInput]) -> DirectoryState:
    """
    Set one filter field and return to page 1.

    Text fields always hold strings; other input types are converted.

    Raises:
        KeyError: If key is not a filter field
    """
    if key not in FilterCriteria.filter_keys():
        raise KeyError(f"Unknown filter: {key}")
    if value is None:
        value = ""
    elif key in TEXT_FILTER_KEYS and not isinstance(value, str):
        value = str(value)
    criteria = replace(state.criteria, **{key: value})
    return replace(state, criteria=criteria, page_number=1)


def with_sort(state: DirectoryState, sort: Union[SortCriterion, str]) -> DirectoryState:
    """Change the sort criterion and return to page 1."""
    criteria = replace(state.criteria, sort=SortCriterion.parse(sort))
    return replace(state, criteria=criteria, page_number=1)


def with_page_size(state: DirectoryState, page_size: int) -> DirectoryState:
    """Change the page size and return to page 1."""
    return replace(state, page_size=validate_page_size(page_size), page_number=1)


def with_page(state: DirectoryState, page_number: int) -> DirectoryState:
    """Move to another page; criteria are untouched. Clamping is the caller's job."""
    return replace(state, page_number=page_number)


def cleared(state: DirectoryState) -> DirectoryState:
    """Reset every filter and the sort, keep the page size, return to page 1."""
    return DirectoryState(
        criteria=FilterCriteria(sort=DEFAULT_SORT),
        page_size=state.page_size,
        page_number=1,
    )
