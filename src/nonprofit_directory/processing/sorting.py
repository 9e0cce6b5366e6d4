"""
Sort engine.

Orders organizations by one of the supported criteria. Ties fall back to
identifier ascending and records with an unknown value for the chosen key
always come last, whatever the direction.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..models import Organization, SortCriterion


_KEYS: Dict[str, Callable[[Organization], Optional[Any]]] = {
    "name": lambda r: r.name.casefold() if r.name is not None else None,
    "budget": lambda r: r.budget,
    "staff": lambda r: r.staff_count,
    "year_founded": lambda r: r.year_founded,
}


def _id_key(record: Organization) -> Tuple[int, Any]:
    # numeric ids (including digit strings) before other strings, so mixed ids still compare
    if isinstance(record.id, int) and not isinstance(record.id, bool):
        return (0, record.id)
    text = str(record.id).strip()
    if text.isdecimal():
        return (0, int(text))
    return (1, text)


def split_criterion(criterion: SortCriterion) -> Tuple[str, bool]:
    """Return (field, descending) for a criterion."""
    field, _, direction = criterion.value.rpartition("_")
    return field, direction == "desc"


def sort_records(
    records: Sequence[Organization],
    criterion: Union[SortCriterion, str],
) -> List[Organization]:
    """
    Return a new list ordered by the given criterion.

    Args:
        records: Records to order (left unmodified)
        criterion: SortCriterion or its string value

    Returns:
        Ordered list

    Raises:
        ValueError: If the criterion is not supported
    """
    field, descending = split_criterion(SortCriterion.parse(criterion))
    value_of = _KEYS[field]

    by_id = sorted(records, key=_id_key)
    known = [r for r in by_id if value_of(r) is not None]
    unknown = [r for r in by_id if value_of(r) is None]

    # sorted() is stable with reverse=True, so equal values keep id order
    known.sort(key=value_of, reverse=descending)
    return known + unknown
