"""Tests for the section navigator state machine."""
import pytest

from sentience.model.navigation import NavigationState, SectionNavigator


@pytest.mark.parametrize("index", [-1, 6, 7, 100])
def test_out_of_range_is_rejected(navigator, index):
    changes = []
    navigator.add_listener(changes.append)

    assert navigator.request_section(index) is False
    assert navigator.current_index == 0
    assert navigator.is_transitioning is False
    assert changes == []


def test_out_of_range_is_rejected_even_when_forced(navigator):
    assert navigator.request_section(6, force=True) is False
    assert navigator.current_index == 0


def test_transition_lock_blocks_requests_for_exact_duration(navigator, scheduler):
    assert navigator.request_section(1) is True
    assert navigator.is_transitioning is True

    assert navigator.request_section(2) is False
    assert navigator.advance() is False
    assert navigator.current_index == 1

    scheduler.advance(899)
    assert navigator.is_transitioning is True
    assert navigator.request_section(3) is False

    scheduler.advance(1)
    assert navigator.is_transitioning is False
    assert navigator.request_section(3) is True
    assert navigator.current_index == 3


def test_same_index_is_a_silent_no_op(navigator):
    changes = []
    entered = []
    navigator.add_listener(changes.append)
    navigator.on_enter(0, entered.append)

    assert navigator.request_section(0) is False
    assert changes == []
    assert entered == []
    assert navigator.is_transitioning is False


def test_progress_is_linear_in_index(navigator, scheduler):
    changes = []
    navigator.add_listener(changes.append)

    navigator.request_section(5)
    scheduler.advance(900)
    navigator.request_section(2)
    scheduler.advance(900)
    navigator.request_section(0)

    assert [c.progress for c in changes] == [100.0, 40.0, 0.0]
    assert [c.scrolled for c in changes] == [True, True, False]


def test_change_is_published_before_entry_hooks(navigator):
    events = []
    navigator.add_listener(lambda change: events.append(("change", change.index)))
    navigator.on_enter(2, lambda index: events.append(("enter", index)))
    navigator.on_enter(3, lambda index: events.append(("other", index)))

    navigator.request_section(2)

    assert events == [("change", 2), ("enter", 2)]


def test_section_change_marks_exactly_one_active(navigator):
    changes = []
    navigator.add_listener(changes.append)
    navigator.request_section(4)

    change = changes[0]
    assert [change.is_active(i) for i in range(6)] == [False, False, False, False, True, False]
    assert change.total_sections == 6
    assert change.forced is False


def test_forced_request_bypasses_lock_and_releases_immediately(navigator, scheduler):
    navigator.request_section(1)
    assert navigator.request_section(3, force=True) is True

    assert navigator.current_index == 3
    assert navigator.is_transitioning is False


def test_forced_request_to_current_index_refires_hooks(navigator):
    entered = []
    navigator.on_enter(0, entered.append)

    assert navigator.request_section(0, force=True) is True
    assert entered == [0]


def test_stale_release_does_not_unlock_newer_transition(navigator, scheduler):
    navigator.request_section(1)          # release due at t=900
    scheduler.advance(500)
    navigator.request_section(3, force=True)
    assert navigator.request_section(4) is True   # release due at t=1400

    scheduler.advance(400)                # t=900, first release fires
    assert navigator.is_transitioning is True
    assert navigator.retreat() is False

    scheduler.advance(500)                # t=1400
    assert navigator.is_transitioning is False


def test_relative_and_absolute_helpers(navigator, scheduler):
    assert navigator.retreat() is False   # already at the first section
    assert navigator.advance() is True
    scheduler.advance(900)
    assert navigator.last() is True
    assert navigator.current_index == 5
    scheduler.advance(900)
    assert navigator.advance() is False   # already at the last section
    assert navigator.first() is True
    assert navigator.current_index == 0


def test_single_section_progress_is_complete():
    state = NavigationState(total_sections=1)
    assert state.progress_for(0) == 100.0


@pytest.mark.parametrize("kwargs", [{"total_sections": 0}, {"transition_duration_ms": -1}])
def test_invalid_state_raises(kwargs):
    with pytest.raises(ValueError):
        NavigationState(**kwargs)


def test_custom_duration(scheduler):
    navigator = SectionNavigator(scheduler, NavigationState(total_sections=3, transition_duration_ms=100))
    navigator.request_section(2)
    scheduler.advance(100)
    assert navigator.is_transitioning is False
