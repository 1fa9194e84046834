from __future__ import annotations

from dataclasses import dataclass

from ..render.math2d import Vec2
from ..render.primitives import draw_segment
from ..render.rasterizer import Rasterizer
from ..render.viewport import View, to_pixel_offset
from .base import RenderContext, Subcomponent


@dataclass(frozen=True)
class AxesLayer(Subcomponent):
    """Both coordinate axes, through the plane origin, spanning the whole surface."""

    component_id: str = "render.axes"
    display_name: str = "Axes"

    def draw(self, raster: Rasterizer, view: View, ctx: RenderContext) -> None:
        raster.set_color(ctx.config.axis_color)
        # y axis
        offset_x = view.x / view.zoom
        draw_segment(
            raster,
            to_pixel_offset(Vec2(0.0, -1.0), ctx.surface, offset_x=offset_x),
            to_pixel_offset(Vec2(0.0, 1.0), ctx.surface, offset_x=offset_x),
        )
        # x axis
        offset_y = view.y / view.zoom
        draw_segment(
            raster,
            to_pixel_offset(Vec2(-1.0, 0.0), ctx.surface, offset_y=offset_y),
            to_pixel_offset(Vec2(1.0, 0.0), ctx.surface, offset_y=offset_y),
        )
