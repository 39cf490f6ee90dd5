from __future__ import annotations

import logging
import math
import time
from typing import Protocol

logger = logging.getLogger(__name__)

NANOS_PER_SECOND = 1_000_000_000


class Clock(Protocol):
    """Monotonic clock abstraction.

    Core logic depends on this interface rather than calling real time directly.
    """

    def now(self) -> float:
        """Return monotonic seconds."""


class RealClock:
    """Production clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic()


def duration_from_secs(seconds: float) -> int:
    """Convert a finite, non-negative number of seconds to integer nanoseconds."""

    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"duration must be finite and >= 0, got {seconds!r}")
    return int(round(float(seconds) * NANOS_PER_SECOND))


class FixedTimestep:
    """Turns irregular frame callbacks into a steady stream of logical ticks.

    Elapsed wall time is added to a residual accumulator; every ``consume_tick``
    that finds a full tick's worth of time in it takes that amount out again.
    Instants are converted to nanoseconds before subtraction, so rounding
    never compounds over long runs.

    ``max_backlog_s`` bounds the residual after a stall. It never drops below
    one tick, so a cap smaller than the step still lets ticks through.

    Usage, once per rendered frame::

        timestep.tick(clock.now())
        while timestep.consume_tick(60):
            update()
        draw()
    """

    def __init__(self, *, max_backlog_s: float | None = None) -> None:
        self._last_ns: int | None = None
        self._residual_ns = 0
        self._ticks = 0
        self._max_backlog_ns = None if max_backlog_s is None else duration_from_secs(max_backlog_s)

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def residual_s(self) -> float:
        return self._residual_ns / NANOS_PER_SECOND

    def tick(self, now: float) -> None:
        now_ns = duration_from_secs(now)
        if self._last_ns is None:
            self._last_ns = now_ns
            return
        elapsed_ns = now_ns - self._last_ns
        if elapsed_ns < 0:
            raise ValueError("clock went backwards")
        self._last_ns = now_ns
        self._residual_ns += elapsed_ns

    def consume_tick(self, target_rate: float) -> bool:
        if not math.isfinite(target_rate) or target_rate <= 0:
            raise ValueError(f"target_rate must be finite and > 0, got {target_rate!r}")
        step_ns = duration_from_secs(1.0 / float(target_rate))
        if step_ns <= 0:
            raise ValueError(f"target_rate {target_rate!r} is finer than 1ns")

        if self._max_backlog_ns is not None:
            cap = max(self._max_backlog_ns, step_ns)
            if self._residual_ns > cap:
                logger.debug(
                    "dropping %.3fs of tick backlog",
                    (self._residual_ns - cap) / NANOS_PER_SECOND,
                )
                self._residual_ns = cap

        if self._residual_ns < step_ns:
            return False
        self._residual_ns -= step_ns
        self._ticks += 1
        return True
