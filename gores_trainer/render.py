from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .geometry import Point

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
BLUE: Color = (0, 0, 255)
HIT_GREEN: Color = (170, 235, 170)
MISS_RED: Color = (240, 170, 170)

SCORE_POS: Point = (10.0, 10.0)


class RenderSink(Protocol):
    """Draw intents issued by scenes. How they are rasterized is up to the host."""

    def clear(self, color: Color) -> None: ...
    def polygon(self, points: Sequence[Point], color: Color) -> None: ...
    def text(self, text: str, pos: Point, color: Color, *, centered: bool = False) -> None: ...


def score_label(score: int, count: int) -> str:
    return f"{score} / {count}"


def draw_score(sink: RenderSink, score: int, count: int) -> None:
    sink.text(score_label(score, count), SCORE_POS, BLACK)


def draw_prompt(sink: RenderSink, center: Point, text: str) -> None:
    sink.text(text, center, BLACK, centered=True)
