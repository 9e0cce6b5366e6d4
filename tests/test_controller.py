"""
Tests for the filter-state controller and its state transitions.
"""

from unittest.mock import Mock

import pytest

from src.nonprofit_directory.models import FilterCriteria, SortCriterion
from src.nonprofit_directory.services import (
    DirectoryState,
    FilterStateController,
    LoadState,
    RecordStoreError,
)
from src.nonprofit_directory.services import state as transitions


def ids(records):
    return [r.id for r in records]


@pytest.fixture
def store(organizations):
    """Record store double returning the sample collection."""
    fake = Mock()
    fake.fetch_all = Mock(return_value=organizations)
    return fake


@pytest.fixture
def controller(store):
    """Controller loaded with the sample collection."""
    ctrl = FilterStateController(page_size=6, logger=Mock())
    ctrl.load(store)
    return ctrl


@pytest.fixture
def large_controller(make_org):
    """Controller loaded with 50 generated records."""
    records = [
        make_org(i, location="Oakland" if i % 2 else "Berkeley", budget=i * 1000.0)
        for i in range(1, 51)
    ]
    fake = Mock()
    fake.fetch_all = Mock(return_value=records)
    ctrl = FilterStateController(page_size=6, logger=Mock())
    ctrl.load(fake)
    return ctrl


class TestStateTransitions:
    """Test the pure transition functions."""

    def test_with_filter_resets_page(self):
        state = DirectoryState(page_number=4)
        new = transitions.with_filter(state, "location", "Oakland")
        assert new.criteria.location == "Oakland"
        assert new.page_number == 1
        assert state.page_number == 4

    def test_with_filter_none_becomes_empty(self):
        new = transitions.with_filter(DirectoryState(), "min_budget", None)
        assert new.criteria.min_budget == ""

    def test_with_filter_converts_text_input(self):
        new = transitions.with_filter(DirectoryState(), "search_term", 1995)
        assert new.criteria.search_term == "1995"

    def test_with_filter_keeps_numeric_input(self):
        new = transitions.with_filter(DirectoryState(), "min_staff", 5)
        assert new.criteria.min_staff == 5

    def test_with_filter_unknown_key(self):
        with pytest.raises(KeyError):
            transitions.with_filter(DirectoryState(), "sort", "name_desc")

    def test_with_page_keeps_criteria(self):
        state = transitions.with_filter(DirectoryState(), "search_term", "arts")
        new = transitions.with_page(state, 3)
        assert new.criteria == state.criteria
        assert new.page_number == 3

    def test_with_page_size_validates(self):
        with pytest.raises(ValueError):
            transitions.with_page_size(DirectoryState(), 10)

    def test_cleared_keeps_page_size(self):
        state = DirectoryState(
            criteria=FilterCriteria(search_term="x", sort=SortCriterion.BUDGET_DESC),
            page_size=24,
            page_number=5,
        )
        new = transitions.cleared(state)
        assert new.criteria == FilterCriteria()
        assert new.page_size == 24
        assert new.page_number == 1


class TestLoading:
    """Test the one-shot load lifecycle."""

    def test_starts_idle_and_empty(self):
        ctrl = FilterStateController(logger=Mock())
        assert ctrl.load_state == LoadState.IDLE
        assert ctrl.page_items == ()
        assert ctrl.total_pages == 0
        assert ctrl.total_filtered_count == 0

    def test_successful_load(self, controller, store):
        assert controller.load_state == LoadState.READY
        assert controller.total_filtered_count == 8
        assert controller.total_pages == 2
        assert ids(controller.page_items) == [6, 1, 2, 8, 3, 4]
        assert controller.loaded_at is not None
        store.fetch_all.assert_called_once()
        completed = controller.logger.info.call_args_list[-1].args[0]
        assert completed.endswith("(8 records)")

    def test_failed_load_leaves_collection_empty(self):
        fake = Mock()
        fake.fetch_all = Mock(side_effect=RecordStoreError("boom"))
        ctrl = FilterStateController(logger=Mock())

        assert ctrl.load(fake) == LoadState.FAILED
        assert ctrl.records == ()
        assert ctrl.page_items == ()
        assert ctrl.total_pages == 0
        assert isinstance(ctrl.load_error, RecordStoreError)

    def test_second_load_rejected(self, controller, store):
        with pytest.raises(RuntimeError):
            controller.load(store)
        store.fetch_all.assert_called_once()

    def test_listeners_see_loading_then_ready(self, store):
        ctrl = FilterStateController(logger=Mock())
        states = []
        ctrl.subscribe(lambda view: states.append(view.load_state))
        ctrl.load(store)
        assert states == [LoadState.LOADING, LoadState.READY]

    def test_raising_listener_leaves_controller_idle(self, store):
        ctrl = FilterStateController(logger=Mock())
        unsubscribe = ctrl.subscribe(Mock(side_effect=RuntimeError("listener broke")))

        with pytest.raises(RuntimeError, match="listener broke"):
            ctrl.load(store)
        assert ctrl.load_state == LoadState.IDLE
        store.fetch_all.assert_not_called()

        unsubscribe()
        assert ctrl.load(store) == LoadState.READY


class TestMutations:
    """Test controller mutators and page resets."""

    def test_filter_change_resets_page(self, large_controller):
        large_controller.go_to_page(3)
        assert large_controller.current_page == 3

        large_controller.set_location("Oakland")

        assert large_controller.current_page == 1
        assert large_controller.total_filtered_count == 25

    def test_sort_change_resets_page(self, large_controller):
        large_controller.go_to_page(2)
        large_controller.set_sort("budget_desc")
        assert large_controller.current_page == 1
        assert large_controller.page_items[0].id == 50

    def test_page_size_change_resets_page(self, large_controller):
        large_controller.go_to_page(4)
        large_controller.set_page_size(24)
        assert large_controller.current_page == 1
        assert large_controller.total_pages == 3
        assert len(large_controller.page_items) == 24

    def test_invalid_page_size_rejected(self, large_controller):
        with pytest.raises(ValueError):
            large_controller.set_page_size(7)
        assert large_controller.page_size == 6

    def test_page_change_keeps_criteria(self, large_controller):
        large_controller.set_search_term("Org")
        criteria = large_controller.criteria
        large_controller.go_to_page(2)
        assert large_controller.criteria == criteria

    def test_go_to_page_is_clamped(self, large_controller):
        assert large_controller.go_to_page(99) == 9
        assert len(large_controller.page_items) == 2
        assert large_controller.go_to_page(0) == 1

    def test_go_to_page_on_empty_result(self, large_controller):
        large_controller.set_search_term("no such org")
        assert large_controller.go_to_page(3) == 1
        assert large_controller.total_pages == 0
        assert large_controller.page_items == ()

    def test_numeric_setters(self, controller):
        controller.set_min_budget("100000")
        controller.set_max_budget("500000")
        assert ids(controller.page_items) == [1, 8, 4, 7]
        controller.set_min_staff("12")
        controller.set_max_staff(12)
        assert ids(controller.page_items) == [1, 8]

    def test_non_string_search_term(self, controller):
        controller.set_search_term(1995)
        assert controller.criteria.search_term == "1995"
        assert controller.page_items == ()
        assert controller.active_filters()[0].label == 'Search: "1995"'

    def test_focus_area_setter(self, controller):
        controller.set_focus_area("Education")
        assert ids(controller.page_items) == [6, 8, 3]

    def test_unknown_filter_key(self, controller):
        with pytest.raises(KeyError):
            controller.set_filter("color", "blue")

    def test_remove_filter(self, controller):
        controller.set_location("Oakland")
        controller.set_search_term("food")
        controller.remove_filter("location")
        assert controller.criteria.location == ""
        assert controller.criteria.search_term == "food"
        assert ids(controller.page_items) == [1, 7]

    def test_clear_filters_scenario(self, large_controller):
        large_controller.set_search_term("Org")
        large_controller.set_location("Berkeley")
        large_controller.set_min_budget("2000")
        large_controller.set_sort(SortCriterion.BUDGET_DESC)
        large_controller.go_to_page(4)
        assert large_controller.current_page == 4

        large_controller.clear_filters()

        assert large_controller.criteria == FilterCriteria()
        assert large_controller.criteria.sort == SortCriterion.NAME_ASC
        assert large_controller.current_page == 1
        assert large_controller.total_filtered_count == 50


class TestPresentationOutput:
    """Test the view exposed to the presentation layer."""

    def test_active_filters_labels(self, controller):
        controller.set_search_term("food")
        controller.set_location("Oakland")
        controller.set_min_budget("100000")
        controller.set_max_staff("50")

        labels = [chip.label for chip in controller.active_filters()]

        assert labels == [
            'Search: "food"',
            "Location: Oakland",
            "Min Budget: $100,000",
            "Max Staff: 50",
        ]

    def test_active_filters_empty_by_default(self, controller):
        assert controller.active_filters() == []

    def test_view_snapshot(self, controller):
        controller.go_to_page(2)
        view = controller.view()
        assert view.load_state == LoadState.READY
        assert view.current_page == 2
        assert view.total_pages == 2
        assert view.total_filtered_count == 8
        assert ids(view.page_items) == [5, 7]

    def test_subscribe_and_unsubscribe(self, controller):
        listener = Mock()
        unsubscribe = controller.subscribe(listener)

        controller.set_location("Oakland")
        view = listener.call_args[0][0]
        assert view.total_filtered_count == 2

        unsubscribe()
        controller.set_location("")
        assert listener.call_count == 1

    def test_filter_vocabularies(self, controller):
        assert "Oakland" in controller.location_options
        assert "Education" in controller.focus_area_options
