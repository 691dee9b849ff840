"""Countdown timer turning elapsed seconds into fall / spawn / drift signals"""
from dataclasses import dataclass


@dataclass(frozen=True)
class TimerSignal:
    should_fall: bool = False
    should_spawn: bool = False
    should_drift: bool = False


class Timer:
    """
    Pure counter driven by externally supplied deltas.

      • fall: every fall_interval seconds, unsettled blocks drop one row
      • spawn: every spawn_interval seconds, a new word appears
      • drift: every drift_interval falls, the focused block drops too

    At most one fall and one spawn are signalled per tick, however large
    the delta is; the surplus carries over into the next countdown.
    """

    def __init__(self, fall_interval: float, spawn_interval: float, drift_interval: int):
        self.fall_interval = fall_interval
        self.spawn_interval = spawn_interval
        self.drift_interval = drift_interval
        self.fall_timer = fall_interval
        self.spawn_timer = spawn_interval
        self.fall_count = drift_interval
        self.last_delta = 0.0

    def tick(self, delta: float) -> TimerSignal:
        self.last_delta = delta
        self.fall_timer -= delta
        self.spawn_timer -= delta
        should_fall = self.fall_timer <= 0.0
        should_spawn = self.spawn_timer <= 0.0
        should_drift = False
        if should_spawn:
            self.spawn_timer += self.spawn_interval
        if should_fall:
            self.fall_timer += self.fall_interval
            self.fall_count -= 1
        if self.fall_count <= 0:
            should_drift = True
            self.fall_count = self.drift_interval
        return TimerSignal(should_fall, should_spawn, should_drift)
