"""Smoke tests for the pygame host.

These run the main loop for a handful of frames with the SDL dummy drivers.
They check that pygame integration does not raise in a headless environment,
not that anything is drawn correctly.
"""

from __future__ import annotations

import os
from pathlib import Path

# Use the dummy drivers before importing pygame or the application
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest


def test_app_runs_headless(tmp_path: Path) -> None:
    from gores_trainer.app import run

    exit_code = run(max_frames=3, config_path=tmp_path / "missing.toml")
    assert exit_code == 0


def test_app_handles_clicks_resize_and_quit(tmp_path: Path) -> None:
    import pygame

    from gores_trainer.app import run

    def inject(frame: int) -> None:
        if frame == 1:
            pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 1, "pos": (10, 10)}))
        elif frame == 2:
            pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONUP, {"button": 1, "pos": (10, 10)}))
        elif frame == 3:
            pygame.event.post(pygame.event.Event(pygame.MOUSEMOTION, {"pos": (500, 300), "rel": (0, 0), "buttons": (0, 0, 0)}))
        elif frame == 4:
            pygame.event.post(pygame.event.Event(pygame.VIDEORESIZE, {"w": 640, "h": 480, "size": (640, 480)}))
        elif frame == 6:
            pygame.event.post(pygame.event.Event(pygame.QUIT))

    assert run(max_frames=50, event_injector=inject, config_path=tmp_path / "missing.toml") == 0


def test_bad_config_aborts_before_window_opens(tmp_path: Path) -> None:
    from gores_trainer.app import run
    from gores_trainer.config import ConfigError

    path = tmp_path / "config.toml"
    path.write_text("wait_time = [", encoding="utf-8")
    with pytest.raises(ConfigError):
        run(max_frames=1, config_path=path)


def test_press_and_release_in_one_frame_still_reaches_the_game() -> None:
    import pygame

    from gores_trainer.app import PointerState

    pointer = PointerState()
    pointer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 1, "pos": (40, 60)}))
    pointer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, {"button": 1, "pos": (40, 60)}))

    first = pointer.snapshot()
    assert first.primary_pressed is True
    assert first.pointer == (40.0, 60.0)
    assert pointer.snapshot().primary_pressed is False

    # A held button keeps reading as pressed.
    pointer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 1, "pos": (1, 2)}))
    assert pointer.snapshot().primary_pressed is True
    assert pointer.snapshot().primary_pressed is True

    # Other buttons are ignored.
    pointer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, {"button": 1, "pos": (1, 2)}))
    pointer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 3, "pos": (1, 2)}))
    assert pointer.snapshot().primary_pressed is False
