"""
Filter-state controller.

Single source of truth for the directory view: holds the loaded collection
and the DirectoryState, and re-runs Filter -> Sort -> Paginate after every
change so the presentation layer only ever reads derived results.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from ..core import LoggerContext, DateUtils, constants
from ..models import ActiveFilter, FilterCriteria, NumericInput, Organization, SortCriterion
from ..models.criteria import is_blank
from ..processing import DirectoryProcessor, parse_numeric_input
from . import state as transitions
from .record_store import RecordStore
from .state import DirectoryState


class LoadState(str, Enum):
    """Lifecycle of the one-shot collection read."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class DirectoryView:
    """Snapshot of everything the presentation layer renders."""

    load_state: LoadState
    page_items: Tuple[Organization, ...]
    current_page: int
    total_pages: int
    total_filtered_count: int
    page_size: int
    criteria: FilterCriteria
    active_filters: Tuple[ActiveFilter, ...]


Listener = Callable[[DirectoryView], None]

_LABELS = {
    "location": "Location",
    "focus_area": "Focus Area",
    "min_budget": "Min Budget",
    "max_budget": "Max Budget",
    "min_staff": "Min Staff",
    "max_staff": "Max Staff",
}


def _format_money(value: NumericInput) -> str:
    number = parse_numeric_input(value)
    if number is None:
        return f"${str(value).strip()}"
    return f"${int(number):,}"


def _format_count(value: NumericInput) -> str:
    number = parse_numeric_input(value)
    if number is None:
        return str(value).strip()
    return f"{int(number)}"


def describe_filters(criteria: FilterCriteria) -> List[ActiveFilter]:
    """
    Build the removable filter chips for the set fields of criteria.

    Args:
        criteria: Current criteria

    Returns:
        One ActiveFilter per non-empty filter field, in display order
    """
    chips: List[ActiveFilter] = []
    for key in FilterCriteria.filter_keys():
        value = getattr(criteria, key)
        if is_blank(value):
            continue
        if key == "search_term":
            label = f'Search: "{value}"'
        elif key in ("min_budget", "max_budget"):
            label = f"{_LABELS[key]}: {_format_money(value)}"
        elif key in ("min_staff", "max_staff"):
            label = f"{_LABELS[key]}: {_format_count(value)}"
        else:
            label = f"{_LABELS[key]}: {value}"
        chips.append(ActiveFilter(key=key, label=label))
    return chips


class FilterStateController:
    """Own filter, sort and pagination state for one browsing session."""

    def __init__(
        self,
        page_size: int = constants.DEFAULT_PAGE_SIZE,
        processor: Optional[DirectoryProcessor] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize controller.

        Args:
            page_size: Initial page size (one of PAGE_SIZE_OPTIONS)
            processor: Pipeline implementation
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.processor = processor or DirectoryProcessor(logger)

        self.records: Tuple[Organization, ...] = ()
        self.load_state = LoadState.IDLE
        self.load_error: Optional[BaseException] = None
        self.loaded_at: Optional[datetime] = None

        self.location_options: Tuple[str, ...] = constants.COMMON_LOCATIONS
        self.focus_area_options: Tuple[str, ...] = constants.CATEGORIES

        self._state = DirectoryState(page_size=transitions.validate_page_size(page_size))
        self._listeners: List[Listener] = []
        self._page_items: Tuple[Organization, ...] = ()
        self._total_pages = 0
        self._total_filtered = 0
        self._recompute()

    # ---------------- Loading ----------------

    def load(self, store: RecordStore) -> LoadState:
        """
        Read the collection once from the record store.

        A failed read is logged and leaves the collection empty. A listener
        that raises on the LOADING notification aborts the load and leaves
        the controller IDLE.

        Args:
            store: Record store to read from

        Returns:
            Resulting load state (READY or FAILED)

        Raises:
            RuntimeError: If the controller has already loaded
        """
        if self.load_state != LoadState.IDLE:
            raise RuntimeError(f"Collection already loaded (state={self.load_state.value})")

        self.load_state = LoadState.LOADING
        try:
            self._notify()
        except Exception:
            # nothing was read yet, so the load can be retried
            self.load_state = LoadState.IDLE
            raise

        try:
            with LoggerContext(self.logger, "nonprofit fetch") as ctx:
                records = store.fetch_all()
                ctx.detail = f"{len(records)} records"
        except Exception as e:
            self.load_error = e
            self.load_state = LoadState.FAILED
            self.logger.warning("Nonprofit collection unavailable; showing an empty directory")
        else:
            self.records = tuple(records)
            self.load_state = LoadState.READY
            self.loaded_at = DateUtils.now_utc()

        self._recompute()
        return self.load_state

    # ---------------- Derived output ----------------

    @property
    def state(self) -> DirectoryState:
        return self._state

    @property
    def criteria(self) -> FilterCriteria:
        return self._state.criteria

    @property
    def page_items(self) -> Tuple[Organization, ...]:
        return self._page_items

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def total_filtered_count(self) -> int:
        return self._total_filtered

    @property
    def current_page(self) -> int:
        return self._state.page_number

    @property
    def page_size(self) -> int:
        return self._state.page_size

    def active_filters(self) -> List[ActiveFilter]:
        """Removable chips for the filters currently set."""
        return describe_filters(self._state.criteria)

    def view(self) -> DirectoryView:
        """Return a snapshot of the current derived state."""
        return DirectoryView(
            load_state=self.load_state,
            page_items=self._page_items,
            current_page=self._state.page_number,
            total_pages=self._total_pages,
            total_filtered_count=self._total_filtered,
            page_size=self._state.page_size,
            criteria=self._state.criteria,
            active_filters=tuple(self.active_filters()),
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with a fresh view after every change.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---------------- Mutators ----------------

    def set_filter(self, key: str, value: Union[str, NumericInput]) -> None:
        """Set one filter field by name; page returns to 1."""
        self._apply(transitions.with_filter(self._state, key, value))

    def set_search_term(self, value: str) -> None:
        self.set_filter("search_term", value)

    def set_location(self, value: str) -> None:
        self.set_filter("location", value)

    def set_focus_area(self, value: str) -> None:
        self.set_filter("focus_area", value)

    def set_min_budget(self, value: NumericInput) -> None:
        self.set_filter("min_budget", value)

    def set_max_budget(self, value: NumericInput) -> None:
        self.set_filter("max_budget", value)

    def set_min_staff(self, value: NumericInput) -> None:
        self.set_filter("min_staff", value)

    def set_max_staff(self, value: NumericInput) -> None:
        self.set_filter("max_staff", value)

    def remove_filter(self, key: str) -> None:
        """Clear a single filter field (e.g. when its chip is dismissed)."""
        self.set_filter(key, "")

    def set_sort(self, sort: Union[SortCriterion, str]) -> None:
        self._apply(transitions.with_sort(self._state, sort))

    def set_page_size(self, page_size: int) -> None:
        self._apply(transitions.with_page_size(self._state, page_size))

    def go_to_page(self, page_number: int) -> int:
        """
        Move to a page, clamped to [1, max(total_pages, 1)].

        Returns:
            The page actually shown
        """
        self._apply(transitions.with_page(self._state, page_number))
        return self._state.page_number

    def clear_filters(self) -> None:
        """Reset all filters and the sort criterion, back to page 1."""
        self._apply(transitions.cleared(self._state))

    # ---------------- Internals ----------------

    def _apply(self, new_state: DirectoryState) -> None:
        self._state = new_state
        self._recompute()

    def _recompute(self) -> None:
        result, page_number = self.processor.run(
            self.records,
            self._state.criteria,
            self._state.page_size,
            self._state.page_number,
        )
        if page_number != self._state.page_number:
            self._state = transitions.with_page(self._state, page_number)

        self._page_items = result.items
        self._total_pages = result.total_pages
        self._total_filtered = result.total_count
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.view()
        for listener in list(self._listeners):
            listener(snapshot)
