import itertools

import pytest

from domain.models import SortColumn, SortDirection, SortState, UnknownSortColumnError
from gui.services.event_bus import EventBus, GUIEvent
from gui.services.sort_state_controller import SortStateController, next_sort_state

ASC = SortDirection.ASCENDING
DESC = SortDirection.DESCENDING


def test_starts_at_location_ascending():
    assert SortStateController().state == SortState(SortColumn.LOCATION, ASC)


def test_same_column_flips_direction():
    ctl = SortStateController()
    assert ctl.request_sort("location") == SortState(SortColumn.LOCATION, DESC)
    assert ctl.request_sort(SortColumn.LOCATION) == SortState(SortColumn.LOCATION, ASC)


def test_new_column_starts_ascending():
    ctl = SortStateController()
    ctl.request_sort("location")  # now descending
    assert ctl.request_sort("total") == SortState(SortColumn.TOTAL, ASC)


@pytest.mark.parametrize("first,second", list(itertools.permutations(SortColumn, 2)))
def test_second_column_always_lands_ascending(first, second):
    for direction in SortDirection:
        state = SortState(first, direction)
        assert next_sort_state(state, second) == SortState(second, ASC)


def test_double_toggle_restores_direction():
    for column in SortColumn:
        for direction in SortDirection:
            state = SortState(column, direction)
            assert next_sort_state(next_sort_state(state, column), column) == state


def test_all_eight_states_reachable():
    ctl = SortStateController()
    seen = {ctl.state}
    for column in SortColumn:
        seen.add(ctl.request_sort(column))
        seen.add(ctl.request_sort(column))
    assert len(seen) == 8


def test_unknown_column_rejected_and_state_untouched():
    ctl = SortStateController()
    ctl.request_sort("year")
    before = ctl.state
    with pytest.raises(UnknownSortColumnError):
        ctl.request_sort("id")
    assert ctl.state == before


def test_listeners_and_bus_notified():
    bus = EventBus()
    published = []
    bus.subscribe(GUIEvent.SORT_CHANGED, lambda e: published.append(e.payload))
    ctl = SortStateController(event_bus=bus)
    seen = []
    ctl.add_listener(seen.append)
    ctl.request_sort("total")
    ctl.request_sort("total")
    assert seen == [SortState(SortColumn.TOTAL, ASC), SortState(SortColumn.TOTAL, DESC)]
    assert published == [
        {"column": "total", "direction": "ascending"},
        {"column": "total", "direction": "descending"},
    ]
    ctl.remove_listener(seen.append)
    ctl.request_sort("month")
    assert len(seen) == 2


def test_reset_returns_to_initial():
    ctl = SortStateController(SortState(SortColumn.YEAR, DESC))
    assert ctl.reset() == SortState.initial()


def test_controllers_do_not_share_state():
    a, b = SortStateController(), SortStateController()
    a.request_sort("month")
    assert b.state == SortState.initial()


def test_state_built_from_strings_flips_on_same_column():
    state = SortState("total", "ascending")  # type: ignore[arg-type]
    assert next_sort_state(state, "total") == SortState(SortColumn.TOTAL, DESC)
    ctl = SortStateController(state)
    assert ctl.request_sort("total").direction is DESC
