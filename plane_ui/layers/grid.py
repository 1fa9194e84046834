from __future__ import annotations

from dataclasses import dataclass

from ..render.math2d import Vec2
from ..render.primitives import draw_segment
from ..render.rasterizer import Rasterizer
from ..render.viewport import View, grid_line_span, grid_offset, grid_spacing, to_pixel_offset
from .base import RenderContext, Subcomponent


@dataclass(frozen=True)
class GridLayer(Subcomponent):
    """Background grid whose density stays bounded at every zoom level.

    Spacing lives in screen-normalized units; the per-axis offset keeps the
    lines phase-locked to plane coordinates while the view pans.
    """

    component_id: str = "render.grid"
    display_name: str = "Grid"

    def draw(self, raster: Rasterizer, view: View, ctx: RenderContext) -> None:
        spacing = grid_spacing(view.zoom)
        offset_x = grid_offset(view.x / view.zoom, spacing)
        offset_y = grid_offset(view.y / view.zoom, spacing)
        span = grid_line_span(spacing)

        raster.set_color(ctx.config.grid_color)
        for i in range(-span, span + 1):
            pos = i * spacing
            draw_segment(
                raster,
                to_pixel_offset(Vec2(-1.0, pos), ctx.surface, offset_y=offset_y),
                to_pixel_offset(Vec2(1.0, pos), ctx.surface, offset_y=offset_y),
            )
        for i in range(-span, span + 1):
            pos = i * spacing
            draw_segment(
                raster,
                to_pixel_offset(Vec2(pos, -1.0), ctx.surface, offset_x=offset_x),
                to_pixel_offset(Vec2(pos, 1.0), ctx.surface, offset_x=offset_x),
            )
