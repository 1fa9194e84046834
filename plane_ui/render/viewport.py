from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import NamedTuple

from .math2d import Vec2

GRID_SPACING_MIN = 0.1
GRID_SPACING_MAX = 0.2


class SurfaceSize(NamedTuple):
    width: int
    height: int


class PixelPoint(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class View:
    """Camera over the plane.

    ``(x, y)`` lands on the surface center and ``zoom`` is the half-width of
    the visible square in plane units, so smaller values magnify.
    """

    x: float = 0.0
    y: float = 0.0
    zoom: float = 1.0

    def __post_init__(self) -> None:
        if not self.zoom > 0:
            raise ValueError(f"zoom must be positive, got {self.zoom!r}")

    @property
    def center(self) -> Vec2:
        return Vec2(self.x, self.y)

    def panned(self, delta: Vec2) -> "View":
        return replace(self, x=self.x + delta.x, y=self.y + delta.y)

    def zoomed(self, factor: float, zoom_min: float, zoom_max: float) -> "View":
        return replace(self, zoom=clamp_zoom(self.zoom * factor, zoom_min, zoom_max))


def clamp_zoom(value: float, zoom_min: float, zoom_max: float) -> float:
    return max(zoom_min, min(zoom_max, value))


def to_pixel(point: Vec2, view: View, surface: SurfaceSize) -> PixelPoint:
    """Map a plane point to a pixel; truncation happens last, no rounding."""
    half_w = surface.width // 2
    half_h = surface.height // 2
    px = ((point.x - view.x) / view.zoom + 1.0) * half_w
    py = ((point.y - view.y) / view.zoom + 1.0) * half_h
    return PixelPoint(int(px), int(py))


def to_pixel_offset(
    point: Vec2,
    surface: SurfaceSize,
    *,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
) -> PixelPoint:
    """Map a screen-normalized point (unit zoom) shifted by a single-axis offset.

    Grid lines and axes live in normalized ``[-1, 1]`` space; only their
    phase along one axis depends on the current pan.
    """
    half_w = surface.width // 2
    half_h = surface.height // 2
    px = (point.x - offset_x + 1.0) * half_w
    py = (point.y - offset_y + 1.0) * half_h
    return PixelPoint(int(px), int(py))


def grid_spacing(zoom: float) -> float:
    """Normalize ``1/zoom`` into [0.1, 0.2] by doubling or halving."""
    if not (zoom > 0 and math.isfinite(zoom)):
        raise ValueError(f"zoom must be positive and finite, got {zoom!r}")
    spacing = 1.0 / zoom
    while spacing < GRID_SPACING_MIN:
        spacing *= 2.0
    while spacing > GRID_SPACING_MAX:
        spacing /= 2.0
    return spacing


def grid_offset(position: float, spacing: float) -> float:
    """Phase of a normalized pan position within one grid cell, in [0, spacing)."""
    return ((position % spacing) + spacing) % spacing


def grid_line_span(spacing: float) -> int:
    """Lines run from ``-n`` to ``+n`` inclusive around the view center."""
    return math.ceil(1.0 / spacing)
