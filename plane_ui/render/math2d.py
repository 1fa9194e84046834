from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """Small immutable 2D vector: a plane point or a per-frame pan increment."""

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> "Vec2":
        return cls(math.cos(angle), math.sin(angle)) * length


ZERO = Vec2(0.0, 0.0)
