from __future__ import annotations

from collections.abc import Callable

from .clock import Clock, FixedTimestep
from .config import GameConfig
from .render import RenderSink
from .scene_stack import SceneStack
from .scenes import SceneFactory, WedgeGenerator
from .timers import TimerFactory
from .world import InputSnapshot, World


class AimGame:
    """Owns the world, the scene stack and the fixed-timestep scheduler.

    - The host calls ``frame`` exactly once per rendered frame.
    - Logical updates run at ``config.tick_rate`` regardless of frame rate.
    """

    def __init__(
        self,
        *,
        config: GameConfig,
        clock: Clock,
        seed: int,
        size: tuple[int, int] = (960, 540),
    ) -> None:
        self._config = config
        self._world = World(config=config)
        self._world.resize(*size)

        self._factory = SceneFactory(
            config=config,
            wedges=WedgeGenerator(seed=seed, width_deg=config.target_width_deg),
            timers=TimerFactory(kind=config.timer, tick_rate=config.tick_rate, clock=clock),
        )
        self._stack = SceneStack(self._world)
        self._stack.push(self._factory.start())
        self._timestep = FixedTimestep(max_backlog_s=config.max_backlog_s)

    @property
    def world(self) -> World:
        return self._world

    @property
    def stack(self) -> SceneStack:
        return self._stack

    @property
    def timestep(self) -> FixedTimestep:
        return self._timestep

    def resize(self, width: int, height: int) -> None:
        self._world.resize(width, height)

    def update(self, snapshot: InputSnapshot) -> None:
        self._world.observe(snapshot)
        self._stack.update(snapshot)
        self._world.tick += 1

    def draw(self, sink: RenderSink) -> None:
        self._stack.draw(sink)

    def frame(self, now: float, poll_input: Callable[[], InputSnapshot], sink: RenderSink) -> int:
        """Advance the scheduler, run pending logical ticks, draw once."""

        self._timestep.tick(now)
        ran = 0
        while self._timestep.consume_tick(self._config.tick_rate):
            self.update(poll_input())
            ran += 1
        self.draw(sink)
        return ran
