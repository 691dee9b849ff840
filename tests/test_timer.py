import pytest

from typetris_timer import Timer, TimerSignal


def test_fall_spawn_and_drift_signals():
    timer = Timer(1.0, 2.0, 2)
    assert timer.tick(0.7) == TimerSignal()
    assert timer.last_delta == 0.7
    assert timer.tick(0.7) == TimerSignal(should_fall=True)
    assert timer.last_delta == 0.7
    assert timer.tick(0.8) == TimerSignal(should_fall=True, should_spawn=True, should_drift=True)
    assert timer.last_delta == 0.8
    assert timer.tick(0.2) == TimerSignal()
    assert timer.last_delta == 0.2


def test_drift_counts_falls_not_seconds():
    timer = Timer(0.5, 100.0, 3)
    signals = [timer.tick(0.5) for _ in range(7)]
    assert [s.should_fall for s in signals] == [True] * 7
    assert [s.should_drift for s in signals] == [False, False, True, False, False, True, False]
    # ticks that do not fall never advance the drift counter
    assert timer.tick(0.1) == TimerSignal()


def test_large_delta_signals_one_fall():
    timer = Timer(1.0, 10.0, 8)
    assert timer.tick(3.5).should_fall
    assert timer.fall_timer == pytest.approx(-1.5)
    # the carried-over deficit drains one fall per tick
    assert timer.tick(0.0).should_fall
    assert timer.tick(0.0).should_fall
    assert timer.tick(0.0).should_fall is False


def test_zero_delta_is_quiet():
    timer = Timer(0.1, 4.0, 8)
    assert timer.tick(0.0) == TimerSignal()
