from .math2d import Vec2
from .primitives import draw_segment, draw_segment_math, draw_square
from .rasterizer import Color, Rasterizer, RasterizerError
from .viewport import (
    PixelPoint,
    SurfaceSize,
    View,
    clamp_zoom,
    grid_line_span,
    grid_offset,
    grid_spacing,
    to_pixel,
    to_pixel_offset,
)

__all__ = [
    "Vec2",
    "View",
    "SurfaceSize",
    "PixelPoint",
    "Color",
    "Rasterizer",
    "RasterizerError",
    "clamp_zoom",
    "to_pixel",
    "to_pixel_offset",
    "grid_spacing",
    "grid_offset",
    "grid_line_span",
    "draw_segment",
    "draw_segment_math",
    "draw_square",
]
