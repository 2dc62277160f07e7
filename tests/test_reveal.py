"""Tests for the counter and terminal reveal animators."""
import pytest

from sentience.model.reveal import CSS_EASE, CounterReveal, LineState, TerminalReveal, ease_out_cubic


def test_ease_out_cubic_endpoints():
    assert ease_out_cubic(0.0) == 0.0
    assert ease_out_cubic(1.0) == 1.0
    assert ease_out_cubic(0.5) == pytest.approx(0.875)


def test_css_ease_curve():
    assert CSS_EASE(0.0) == 0.0
    assert CSS_EASE(1.0) == 1.0
    assert CSS_EASE(0.5) == pytest.approx(0.8024, abs=1e-3)

    samples = [CSS_EASE(i / 50) for i in range(51)]
    assert samples == sorted(samples)


# ---- counters ----

def test_counter_reaches_target_exactly_and_never_overshoots(scheduler):
    updates = []
    counter = CounterReveal(scheduler, [1234], updates.append)

    assert counter.trigger() is True
    scheduler.advance(1999)
    assert updates == []
    assert counter.running is False

    scheduler.advance(1)
    assert counter.running is True
    scheduler.run_frames(200)

    values = [u[0] for u in updates]
    assert values[-1] == 1234
    assert values == sorted(values)
    assert max(values) == 1234
    assert counter.running is False
    assert len(scheduler.frames) == 0


def test_counter_fires_once_per_session(scheduler):
    updates = []
    counter = CounterReveal(scheduler, [10, 20], updates.append)

    assert counter.trigger() is True
    assert counter.trigger() is False
    assert len(scheduler.pending) == 1

    scheduler.advance(2000)
    scheduler.run_frames(200)
    assert counter.values == [10, 20]

    updates.clear()
    assert counter.trigger() is False
    scheduler.advance(5000)
    scheduler.run_frames(10)
    assert updates == []


def test_counter_values_follow_cubic_ease(scheduler):
    counter = CounterReveal(scheduler, [1000], lambda _: None, duration_ms=2000)

    assert counter.values_at(0) == [0]
    assert counter.values_at(1000) == [875]
    assert counter.values_at(5000) == [1000]
    assert counter.values_at(-50) == [0]


def test_counter_invalid_duration(scheduler):
    with pytest.raises(ValueError):
        CounterReveal(scheduler, [1], lambda _: None, duration_ms=0)


# ---- terminal ----

def test_terminal_lines_start_hidden_and_end_visible(scheduler):
    updates = []
    terminal = TerminalReveal(scheduler, 4, updates.append)

    assert terminal.trigger() is True
    assert updates[0] == [LineState(opacity=0.0, offset=-10.0)] * 4

    scheduler.run_frames(100)

    assert updates[-1] == [LineState(opacity=1.0, offset=0.0)] * 4
    assert len(scheduler.frames) == 0


def test_terminal_lines_are_staggered(scheduler):
    terminal = TerminalReveal(scheduler, 3, lambda _: None)

    states = terminal.states_at(180)
    assert states[0].opacity > 0.0
    assert states[1].opacity == 0.0
    assert states[2].opacity == 0.0

    states = terminal.states_at(400 + 180)
    assert states[0] == LineState(opacity=1.0, offset=0.0)
    assert states[1] == LineState(opacity=1.0, offset=0.0)
    assert 0.0 < states[2].opacity < 1.0
    assert -10.0 < states[2].offset < 0.0

    assert terminal.total_duration_ms == 2 * 180 + 400


def test_terminal_reveal_runs_only_once(scheduler):
    updates = []
    terminal = TerminalReveal(scheduler, 2, updates.append)

    terminal.trigger()
    scheduler.run_frames(60)
    count = len(updates)

    for _ in range(3):
        assert terminal.trigger() is False
        scheduler.run_frames(10)

    assert terminal.animated is True
    assert terminal.runs == 1
    assert len(updates) == count


def test_terminal_without_lines(scheduler):
    terminal = TerminalReveal(scheduler, 0, lambda _: None)
    assert terminal.total_duration_ms == 0.0
    terminal.trigger()
    scheduler.run_frames(1)
    assert len(scheduler.frames) == 0
