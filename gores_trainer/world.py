from __future__ import annotations

from dataclasses import dataclass, field

from .config import GameConfig
from .geometry import Point


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """Pointer state sampled once per logical tick."""

    primary_pressed: bool = False
    pointer: Point = (0.0, 0.0)


@dataclass(slots=True)
class World:
    """Cross-scene state. Scenes mutate it during update and only read it in draw."""

    config: GameConfig = field(default_factory=GameConfig)
    width: int = 960
    height: int = 540
    score: int = 0
    count: int = 0
    tick: int = 0
    was_pressed: bool = False
    clicked: bool = False

    @property
    def center(self) -> Point:
        return (self.width / 2.0, self.height / 2.0)

    def resize(self, width: int, height: int) -> None:
        self.width = max(1, int(width))
        self.height = max(1, int(height))

    def observe(self, snapshot: InputSnapshot) -> None:
        # Rising edge only: a held button clicks once.
        pressed = bool(snapshot.primary_pressed)
        self.clicked = pressed and not self.was_pressed
        self.was_pressed = pressed

    def reset_round(self) -> None:
        self.score = 0
        self.count = 0
