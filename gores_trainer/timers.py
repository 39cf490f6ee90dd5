from __future__ import annotations

import math
from enum import StrEnum
from typing import Protocol

from .clock import Clock


class Timer(Protocol):
    """Per-scene countdown. ``advance`` is called once per update of the owner."""

    def advance(self) -> None: ...
    def expired(self) -> bool: ...


class TimerKind(StrEnum):
    TICKS = "ticks"
    CLOCK = "clock"


class TickCountdown:
    """Counts logical ticks; independent of wall time."""

    def __init__(self, ticks: int) -> None:
        if ticks < 0:
            raise ValueError("ticks must be >= 0")
        self._remaining = int(ticks)

    @property
    def remaining(self) -> int:
        return self._remaining

    def advance(self) -> None:
        if self._remaining > 0:
            self._remaining -= 1

    def expired(self) -> bool:
        return self._remaining <= 0


class DeadlineTimer:
    """Captures ``clock.now()`` at construction and expires after ``duration_s``."""

    def __init__(self, *, clock: Clock, duration_s: float) -> None:
        if duration_s < 0:
            raise ValueError("duration_s must be >= 0")
        self._clock = clock
        self._deadline_s = clock.now() + float(duration_s)

    def advance(self) -> None:
        return

    def expired(self) -> bool:
        return self._clock.now() >= self._deadline_s

    def remaining_s(self) -> float:
        return max(0.0, self._deadline_s - self._clock.now())


class TimerFactory:
    """Builds fresh timers for a duration using the configured strategy."""

    def __init__(self, *, kind: TimerKind, tick_rate: float, clock: Clock) -> None:
        if tick_rate <= 0:
            raise ValueError("tick_rate must be > 0")
        self._kind = TimerKind(kind)
        self._tick_rate = float(tick_rate)
        self._clock = clock

    def start(self, duration_s: float) -> Timer:
        if self._kind is TimerKind.CLOCK:
            return DeadlineTimer(clock=self._clock, duration_s=duration_s)
        if not math.isfinite(duration_s) or duration_s < 0:
            raise ValueError(f"duration_s must be finite and >= 0, got {duration_s!r}")
        return TickCountdown(int(round(duration_s * self._tick_rate)))
