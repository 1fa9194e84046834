from __future__ import annotations

from .math2d import Vec2
from .rasterizer import Rasterizer
from .viewport import PixelPoint, SurfaceSize, View, to_pixel

MIN_SQUARE_PX = 3


def draw_segment(raster: Rasterizer, start: PixelPoint, end: PixelPoint) -> bool:
    """Draw a pixel-space segment; returns False when it was skipped as degenerate."""
    # Zero-length lines are a backend edge case.
    if abs(end.x - start.x) < 1 and abs(end.y - start.y) < 1:
        return False
    raster.draw_line(start.x, start.y, end.x, end.y)
    return True


def draw_segment_math(
    raster: Rasterizer,
    start: Vec2,
    end: Vec2,
    view: View,
    surface: SurfaceSize,
) -> bool:
    return draw_segment(raster, to_pixel(start, view, surface), to_pixel(end, view, surface))


def draw_square(
    raster: Rasterizer,
    center: Vec2,
    half_side: float,
    view: View,
    surface: SurfaceSize,
) -> None:
    """Fill a plane-space square, never smaller than 3x3 pixels."""
    top_left = to_pixel(Vec2(center.x - half_side, center.y - half_side), view, surface)
    bottom_right = to_pixel(Vec2(center.x + half_side, center.y + half_side), view, surface)
    raster.fill_rect(
        top_left.x,
        top_left.y,
        max(bottom_right.x - top_left.x, MIN_SQUARE_PX),
        max(bottom_right.y - top_left.y, MIN_SQUARE_PX),
    )
