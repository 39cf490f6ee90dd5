from __future__ import annotations

import math
from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True, slots=True)
class Polar:
    length: float
    angle_rad: float


def cartesian_to_polar(x: float, y: float) -> Polar:
    return Polar(length=math.hypot(x, y), angle_rad=math.atan2(y, x))


def polar_to_cartesian(center: Point, length: float, angle_rad: float) -> Point:
    cx, cy = center
    return (cx + length * math.cos(angle_rad), cy + length * math.sin(angle_rad))


def normalize_degrees(angle_deg: float) -> float:
    """Non-negative remainder into [0, 360)."""

    wrapped = float(angle_deg) % 360.0
    # -1e-15 % 360 rounds to exactly 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def pointer_angle(pointer: Point, center: Point) -> float:
    """Angle in degrees of ``pointer`` as seen from ``center`` (screen axes)."""

    dx = pointer[0] - center[0]
    dy = pointer[1] - center[1]
    return normalize_degrees(math.degrees(cartesian_to_polar(dx, dy).angle_rad))


@dataclass(frozen=True, slots=True)
class Wedge:
    """Angular target interval in degrees.

    ``min_deg > max_deg`` means the wedge straddles the 0/360 seam.
    """

    min_deg: float
    max_deg: float

    @classmethod
    def around(cls, center_deg: float, width_deg: float) -> "Wedge":
        if width_deg < 0:
            raise ValueError("width_deg must be >= 0")
        half = float(width_deg) / 2.0
        return cls(
            min_deg=normalize_degrees(center_deg - half),
            max_deg=normalize_degrees(center_deg + half),
        )

    @property
    def wraps(self) -> bool:
        return not self.min_deg < self.max_deg

    def contains(self, angle_deg: float) -> bool:
        angle = float(angle_deg)
        if self.min_deg < self.max_deg:
            return self.min_deg <= angle <= self.max_deg
        # Split at 180: only valid while wedges stay narrow.
        if angle > 180.0:
            return self.min_deg <= angle <= 360.0
        return 0.0 <= angle <= self.max_deg

    def rim_points(self, center: Point, radius: float) -> tuple[Point, Point]:
        return (
            polar_to_cartesian(center, radius, math.radians(self.min_deg)),
            polar_to_cartesian(center, radius, math.radians(self.max_deg)),
        )
