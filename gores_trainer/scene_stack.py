"""Stack of scenes sharing one World.

The top scene receives one ``update`` per logical tick and answers with a
``Transition``; the stack applies it once the update has returned. ``draw``
runs once per rendered frame and never mutates anything.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .render import RenderSink
from .world import InputSnapshot, World

logger = logging.getLogger(__name__)


class SceneStackError(RuntimeError):
    pass


class SceneStackUnderflow(SceneStackError):
    pass


class Scene:
    """Base class for stack entries."""

    # Let the scene below show through when drawing.
    transparent: bool = False
    # Keep receiving updates while another scene sits on top.
    updates_when_covered: bool = False

    @property
    def name(self) -> str:
        return type(self).__name__

    def update(self, world: World, snapshot: InputSnapshot) -> "Transition":
        return Transition.hold()

    def draw(self, world: World, sink: RenderSink) -> None:
        return


class TransitionKind(StrEnum):
    HOLD = "hold"
    REPLACE = "replace"
    PUSH = "push"
    POP = "pop"
    POP_PUSH = "pop_push"


@dataclass(frozen=True, slots=True)
class Transition:
    kind: TransitionKind
    scene: Scene | None = None
    pop_count: int = 0

    def __post_init__(self) -> None:
        needs_scene = self.kind in (TransitionKind.REPLACE, TransitionKind.PUSH, TransitionKind.POP_PUSH)
        if needs_scene and self.scene is None:
            raise ValueError(f"{self.kind.value} transition requires a scene")
        if not needs_scene and self.scene is not None:
            raise ValueError(f"{self.kind.value} transition takes no scene")
        if self.kind in (TransitionKind.POP, TransitionKind.POP_PUSH):
            if self.pop_count < 1:
                raise ValueError("pop_count must be >= 1")
        elif self.pop_count != 0:
            raise ValueError(f"{self.kind.value} transition takes no pop_count")

    @classmethod
    def hold(cls) -> "Transition":
        return cls(TransitionKind.HOLD)

    @classmethod
    def replace(cls, scene: Scene) -> "Transition":
        return cls(TransitionKind.REPLACE, scene=scene)

    @classmethod
    def push(cls, scene: Scene) -> "Transition":
        return cls(TransitionKind.PUSH, scene=scene)

    @classmethod
    def pop(cls, count: int = 1) -> "Transition":
        return cls(TransitionKind.POP, pop_count=count)

    @classmethod
    def pop_push(cls, count: int, scene: Scene) -> "Transition":
        return cls(TransitionKind.POP_PUSH, scene=scene, pop_count=count)

    @property
    def is_hold(self) -> bool:
        return self.kind is TransitionKind.HOLD


class SceneStack:
    def __init__(self, world: World) -> None:
        self._world = world
        self._scenes: list[Scene] = []

    @property
    def world(self) -> World:
        return self._world

    @property
    def top(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def __len__(self) -> int:
        return len(self._scenes)

    def scenes(self) -> tuple[Scene, ...]:
        """Bottom-first snapshot of the stack."""
        return tuple(self._scenes)

    def push(self, scene: Scene) -> None:
        self.apply(Transition.push(scene))

    def pop(self) -> Scene:
        if not self._scenes:
            raise SceneStackUnderflow("pop from empty scene stack")
        popped = self._scenes[-1]
        self.apply(Transition.pop())
        return popped

    def replace(self, scene: Scene) -> None:
        self.apply(Transition.replace(scene))

    def apply(self, transition: Transition) -> None:
        kind = transition.kind
        if kind is TransitionKind.HOLD:
            return

        scenes = list(self._scenes)
        if kind is TransitionKind.REPLACE:
            if scenes:
                scenes.pop()
        elif kind in (TransitionKind.POP, TransitionKind.POP_PUSH):
            if transition.pop_count > len(scenes):
                raise SceneStackUnderflow(
                    f"cannot pop {transition.pop_count} scene(s) from a stack of {len(scenes)}"
                )
            del scenes[len(scenes) - transition.pop_count :]

        if transition.scene is not None:
            scenes.append(transition.scene)

        logger.debug(
            "%s: %s -> %s",
            kind.value,
            [s.name for s in self._scenes],
            [s.name for s in scenes],
        )
        self._scenes = scenes

    def update(self, snapshot: InputSnapshot) -> Transition:
        if not self._scenes:
            raise SceneStackError("update on empty scene stack")

        *covered, top = self._scenes
        for scene in covered:
            if not scene.updates_when_covered:
                continue
            directive = scene.update(self._world, snapshot)
            if not directive.is_hold:
                raise SceneStackError(f"covered scene {scene.name} requested {directive.kind.value}")

        directive = top.update(self._world, snapshot)
        self.apply(directive)
        return directive

    def draw(self, sink: RenderSink) -> None:
        if not self._scenes:
            raise SceneStackError("draw on empty scene stack")

        first = len(self._scenes) - 1
        while first > 0 and self._scenes[first].transparent:
            first -= 1
        for scene in self._scenes[first:]:
            scene.draw(self._world, sink)
