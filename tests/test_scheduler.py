import pytest

from scheduler import AnimationScheduler, CancellationToken


class FakeFrameClock:
    def __init__(self):
        self.waits = []

    def tick(self, fps):
        self.waits.append(fps)
        return 16

    def get_fps(self):
        return 60.0


def test_token_starts_uncancelled():
    token = CancellationToken()
    assert not token.cancelled
    token.cancel()
    assert token.cancelled


def test_run_stops_at_max_ticks():
    calls = []
    clock = FakeFrameClock()
    scheduler = AnimationScheduler(lambda: calls.append(1), fps=30, clock=clock)
    assert scheduler.run(max_ticks=5) == 5
    assert len(calls) == 5
    assert clock.waits == [30] * 5
    assert not scheduler.running


def test_cancel_inside_tick_stops_before_next_tick():
    calls = []
    clock = FakeFrameClock()

    def tick():
        calls.append(1)
        if len(calls) == 3:
            scheduler.cancel()

    scheduler = AnimationScheduler(tick, clock=clock)
    assert scheduler.run() == 3
    assert len(calls) == 3
    # No frame wait after the cancelling tick.
    assert len(clock.waits) == 2


def test_cancelled_scheduler_runs_no_ticks():
    calls = []
    scheduler = AnimationScheduler(lambda: calls.append(1), clock=FakeFrameClock())
    scheduler.cancel()
    assert scheduler.run() == 0
    assert calls == []


def test_run_is_not_reentrant():
    errors = []

    def tick():
        try:
            scheduler.run(max_ticks=1)
        except RuntimeError as e:
            errors.append(e)
        scheduler.cancel()

    scheduler = AnimationScheduler(tick, clock=FakeFrameClock())
    scheduler.run()
    assert len(errors) == 1
    assert scheduler.ticks_run == 1


def test_running_flag_clears_after_tick_error():
    def tick():
        raise ValueError("boom")

    scheduler = AnimationScheduler(tick, clock=FakeFrameClock())
    with pytest.raises(ValueError):
        scheduler.run()
    assert not scheduler.running


def test_ticks_accumulate_across_runs():
    scheduler = AnimationScheduler(lambda: None, clock=FakeFrameClock())
    scheduler.run(max_ticks=2)
    scheduler.run(max_ticks=3)
    assert scheduler.ticks_run == 5
