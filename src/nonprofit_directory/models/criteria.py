"""
Filter, sort and pagination data models.

Contains the user-facing criteria and the derived page results.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional, Tuple, Union

from .organization import Organization


# Raw numeric filter input as typed by the user
NumericInput = Union[str, int, float, None]


class SortCriterion(str, Enum):
    """Closed set of supported orderings."""

    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    BUDGET_ASC = "budget_asc"
    BUDGET_DESC = "budget_desc"
    STAFF_ASC = "staff_asc"
    STAFF_DESC = "staff_desc"
    YEAR_FOUNDED_ASC = "year_founded_asc"
    YEAR_FOUNDED_DESC = "year_founded_desc"

    @classmethod
    def parse(cls, value: Union["SortCriterion", str]) -> "SortCriterion":
        """
        Resolve a criterion from its enum member or string value.

        Raises:
            ValueError: If the value names no supported ordering
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            options = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown sort criterion: {value!r}. Expected one of: {options}")


DEFAULT_SORT = SortCriterion.NAME_ASC


@dataclass(frozen=True)
class FilterCriteria:
    """Active filter and sort inputs.

    Every field is optional; an empty value imposes no constraint.
    """

    search_term: str = ""
    location: str = ""
    focus_area: str = ""
    min_budget: NumericInput = ""
    max_budget: NumericInput = ""
    min_staff: NumericInput = ""
    max_staff: NumericInput = ""
    sort: SortCriterion = DEFAULT_SORT

    @classmethod
    def filter_keys(cls) -> Tuple[str, ...]:
        """Names of the filter fields (everything except sort)."""
        return tuple(f.name for f in fields(cls) if f.name != "sort")


@dataclass(frozen=True)
class PageResult:
    """One page of the filtered, sorted sequence."""

    items: Tuple[Organization, ...]
    total_pages: int
    total_count: int


@dataclass(frozen=True)
class ActiveFilter:
    """A set filter field with its display label."""

    key: str
    label: str


def is_blank(value: Optional[object]) -> bool:
    """Return True for None and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False
