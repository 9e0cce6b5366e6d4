"""
Filter engine.

Selects the organizations that satisfy every set filter constraint.
"""

import math
from typing import Callable, List, Optional, Sequence

from ..models import FilterCriteria, NumericInput, Organization
from ..models.criteria import is_blank


def parse_numeric_input(value: NumericInput) -> Optional[float]:
    """
    Parse a numeric filter field.

    Blank, non-numeric, NaN and infinite input all mean "no constraint".
    Thousands separators and a leading '$' are accepted.

    Args:
        value: Raw input (string or number)

    Returns:
        Parsed bound, or None when the field imposes no constraint
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip().replace(",", "").lstrip("$")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
    return number if math.isfinite(number) else None


def _in_range(value: Optional[float], low: Optional[float], high: Optional[float]) -> bool:
    # A set bound can never be satisfied by an unknown value
    if low is None and high is None:
        return True
    if value is None:
        return False
    if low is not None and value < low:
        return False
    if high is not None and value > high:
        return False
    return True


def _matches_search(record: Organization, term: str) -> bool:
    if record.name and term in record.name.casefold():
        return True
    if record.description and term in record.description.casefold():
        return True
    return any(term in tag.casefold() for tag in record.focus_areas)


def _fold_text(value: object) -> str:
    """Trimmed, casefolded text filter value; '' when blank."""
    if is_blank(value):
        return ""
    return str(value).strip().casefold()


def build_predicate(criteria: FilterCriteria) -> Callable[[Organization], bool]:
    """
    Compile criteria into a single record predicate.

    Args:
        criteria: Active filter criteria

    Returns:
        Function returning True when a record satisfies every set constraint
    """
    term = _fold_text(criteria.search_term)
    location = _fold_text(criteria.location)
    focus = _fold_text(criteria.focus_area)
    min_budget = parse_numeric_input(criteria.min_budget)
    max_budget = parse_numeric_input(criteria.max_budget)
    min_staff = parse_numeric_input(criteria.min_staff)
    max_staff = parse_numeric_input(criteria.max_staff)

    def predicate(record: Organization) -> bool:
        if term and not _matches_search(record, term):
            return False
        if location and record.location.strip().casefold() != location:
            return False
        if focus and focus not in (tag.casefold() for tag in record.focus_areas):
            return False
        if not _in_range(record.budget, min_budget, max_budget):
            return False
        if not _in_range(record.staff_count, min_staff, max_staff):
            return False
        return True

    return predicate


def filter_records(records: Sequence[Organization], criteria: FilterCriteria) -> List[Organization]:
    """
    Return the records matching all set constraints, in input order.

    Args:
        records: Full collection
        criteria: Active filter criteria (the sort field is ignored here)

    Returns:
        New list with the matching subset
    """
    predicate = build_predicate(criteria)
    return [record for record in records if predicate(record)]
