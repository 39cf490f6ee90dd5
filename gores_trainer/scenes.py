from __future__ import annotations

import logging
import random
from enum import StrEnum

from .config import GameConfig
from .geometry import Wedge, pointer_angle
from .render import BLUE, HIT_GREEN, MISS_RED, WHITE, Color, RenderSink, draw_prompt, draw_score
from .scene_stack import Scene, Transition
from .timers import Timer, TimerFactory
from .world import InputSnapshot, World

logger = logging.getLogger(__name__)

# Attempts allowed before the session ends.
MAX_ATTEMPTS = 50
WEDGE_RADIUS = 2000.0


class Cue(StrEnum):
    """Outcome of the previous round, shown as the Waiting background."""

    NEUTRAL = "neutral"
    HIT = "hit"
    MISS = "miss"


CUE_COLORS: dict[Cue, Color] = {
    Cue.NEUTRAL: WHITE,
    Cue.HIT: HIT_GREEN,
    Cue.MISS: MISS_RED,
}


class WedgeGenerator:
    """Deterministic source of target wedges."""

    def __init__(self, *, seed: int, width_deg: float) -> None:
        self._rng = random.Random(int(seed))
        self._width_deg = float(width_deg)

    def next_wedge(self) -> Wedge:
        center = self._rng.randint(0, 359)
        return Wedge.around(float(center), self._width_deg)


class SceneFactory:
    """Builds scenes with the collaborators they need.

    Scenes create their successors through the factory, so the random source
    and timer strategy stay owned here rather than in the world.
    """

    def __init__(self, *, config: GameConfig, wedges: WedgeGenerator, timers: TimerFactory) -> None:
        self._config = config
        self._wedges = wedges
        self._timers = timers

    def start(self) -> "StartScene":
        return StartScene(self)

    def waiting(self, cue: Cue = Cue.NEUTRAL) -> "WaitingScene":
        return WaitingScene(self, cue=cue, timer=self._timers.start(self._config.wait_time_s))

    def target(self) -> "TargetScene":
        return TargetScene(
            self,
            wedge=self._wedges.next_wedge(),
            timer=self._timers.start(self._config.target_time_s),
        )

    def fin(self) -> "FinScene":
        return FinScene(self)


class StartScene(Scene):
    def __init__(self, factory: SceneFactory) -> None:
        self._factory = factory

    def update(self, world: World, snapshot: InputSnapshot) -> Transition:
        if world.clicked:
            return Transition.replace(self._factory.waiting(Cue.NEUTRAL))
        return Transition.hold()

    def draw(self, world: World, sink: RenderSink) -> None:
        sink.clear(WHITE)
        draw_prompt(sink, world.center, "Click to start")
        draw_score(sink, world.score, world.count)


class WaitingScene(Scene):
    def __init__(self, factory: SceneFactory, *, cue: Cue, timer: Timer) -> None:
        self._factory = factory
        self._cue = cue
        self._timer = timer

    @property
    def cue(self) -> Cue:
        return self._cue

    def update(self, world: World, snapshot: InputSnapshot) -> Transition:
        if world.count > MAX_ATTEMPTS:
            logger.info("session finished: %d / %d", world.score, world.count)
            return Transition.replace(self._factory.fin())
        self._timer.advance()
        if self._timer.expired():
            return Transition.replace(self._factory.target())
        return Transition.hold()

    def draw(self, world: World, sink: RenderSink) -> None:
        sink.clear(CUE_COLORS[self._cue])
        draw_score(sink, world.score, world.count)


class TargetScene(Scene):
    def __init__(self, factory: SceneFactory, *, wedge: Wedge, timer: Timer) -> None:
        self._factory = factory
        self._wedge = wedge
        self._timer = timer

    @property
    def wedge(self) -> Wedge:
        return self._wedge

    def update(self, world: World, snapshot: InputSnapshot) -> Transition:
        if world.clicked:
            angle = pointer_angle(snapshot.pointer, world.center)
            hit = self._wedge.contains(angle)
            if hit:
                world.score += 1
            world.count += 1
            logger.info(
                "%s at %.1f deg (wedge %.1f..%.1f): %d / %d",
                "hit" if hit else "miss",
                angle,
                self._wedge.min_deg,
                self._wedge.max_deg,
                world.score,
                world.count,
            )
            return Transition.replace(self._factory.waiting(Cue.HIT if hit else Cue.MISS))

        self._timer.advance()
        if self._timer.expired():
            world.count += 1
            logger.info("timed out: %d / %d", world.score, world.count)
            return Transition.replace(self._factory.waiting(Cue.MISS))
        return Transition.hold()

    def draw(self, world: World, sink: RenderSink) -> None:
        sink.clear(WHITE)
        center = world.center
        p1, p2 = self._wedge.rim_points(center, WEDGE_RADIUS)
        sink.polygon([center, p1, p2], BLUE)
        draw_score(sink, world.score, world.count)


class FinScene(Scene):
    def __init__(self, factory: SceneFactory) -> None:
        self._factory = factory

    def update(self, world: World, snapshot: InputSnapshot) -> Transition:
        if world.clicked:
            world.reset_round()
            return Transition.replace(self._factory.waiting(Cue.NEUTRAL))
        return Transition.hold()

    def draw(self, world: World, sink: RenderSink) -> None:
        sink.clear(WHITE)
        draw_prompt(sink, world.center, f"Finished: {world.score} / {world.count}. Click to restart")
        draw_score(sink, world.score, world.count)
