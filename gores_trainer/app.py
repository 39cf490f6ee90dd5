"""Pygame host for the Gores Aim Trainer.

Window, mouse and drawing glue only. Scheduling, scenes and scoring live in
gores_trainer/* (core modules) and never import pygame.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Sequence
from pathlib import Path

import pygame

from .clock import RealClock
from .config import load_config
from .game import AimGame
from .geometry import Point
from .render import Color
from .world import InputSnapshot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Gores Aim Trainer"
WINDOW_SIZE = (960, 540)
TARGET_FPS = 60
PRIMARY_BUTTON = 1


class PygameRenderSink:
    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self._surface = surface
        self._font = font

    def clear(self, color: Color) -> None:
        self._surface.fill(color)

    def polygon(self, points: Sequence[Point], color: Color) -> None:
        pygame.draw.polygon(self._surface, color, [(round(x), round(y)) for x, y in points])

    def text(self, text: str, pos: Point, color: Color, *, centered: bool = False) -> None:
        rendered = self._font.render(text, True, color)
        rect = rendered.get_rect()
        if centered:
            rect.center = (round(pos[0]), round(pos[1]))
        else:
            rect.topleft = (round(pos[0]), round(pos[1]))
        self._surface.blit(rendered, rect)


class PointerState:
    """Primary button and pointer position, tracked from the event queue.

    A press stays latched until the next snapshot reads it, so a press and
    release drained in the same frame still reach the game as one click.
    """

    def __init__(self) -> None:
        self._pressed = False
        self._latched = False
        self._pos: Point = (0.0, 0.0)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEMOTION:
            self._pos = (float(event.pos[0]), float(event.pos[1]))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == PRIMARY_BUTTON:
            self._pressed = True
            self._latched = True
            self._pos = (float(event.pos[0]), float(event.pos[1]))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == PRIMARY_BUTTON:
            self._pressed = False
            self._pos = (float(event.pos[0]), float(event.pos[1]))

    def snapshot(self) -> InputSnapshot:
        pressed = self._pressed or self._latched
        self._latched = False
        return InputSnapshot(primary_pressed=pressed, pointer=self._pos)


def _new_seed() -> int:
    return random.SystemRandom().randint(1, 2**31 - 1)


def run(
    *,
    max_frames: int | None = None,
    event_injector: Callable[[int], None] | None = None,
    config_path: Path | None = None,
) -> int:
    # Config errors abort before a window is opened.
    config = load_config(config_path)

    pygame.init()
    pygame.display.set_caption(WINDOW_TITLE)
    surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)

    font = pygame.font.Font(None, 36)
    fps_clock = pygame.time.Clock()

    seed = _new_seed()
    logger.debug("starting with seed %d", seed)
    real_clock = RealClock()
    game = AimGame(config=config, clock=real_clock, seed=seed, size=surface.get_size())
    sink = PygameRenderSink(surface, font)
    pointer = PointerState()

    frame = 0
    running = True
    try:
        while running:
            if event_injector is not None:
                event_injector(frame)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(event.w, event.h)
                else:
                    pointer.handle_event(event)

            if not running:
                break

            game.frame(real_clock.now(), pointer.snapshot, sink)
            pygame.display.flip()

            frame += 1
            if max_frames is not None and frame >= max_frames:
                break

            fps_clock.tick(TARGET_FPS)
    finally:
        pygame.quit()

    return 0
