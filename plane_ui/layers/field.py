from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from ..functions import COSINE_SLOPE_FIELD, ScalarField
from ..render.math2d import Vec2
from ..render.primitives import draw_segment_math, draw_square
from ..render.rasterizer import Rasterizer
from ..render.viewport import View
from .base import RenderContext, Subcomponent


@dataclass(frozen=True)
class FieldLayer(Subcomponent):
    """Slope arrows anchored on the integer lattice of the plane."""

    component_id: str = "render.field"
    display_name: str = "Slope Field"
    field: ScalarField = COSINE_SLOPE_FIELD

    def arrows(self, ctx: RenderContext) -> Iterator[Tuple[Vec2, Vec2]]:
        lo, hi = ctx.config.lattice_range
        for ix in range(lo, hi):
            for iy in range(lo, hi):
                anchor = Vec2(float(ix), float(iy))
                angle = self.field.evaluate(anchor.x, anchor.y)
                yield anchor, anchor + Vec2.from_angle(angle, ctx.config.arrow_length)

    def draw(self, raster: Rasterizer, view: View, ctx: RenderContext) -> None:
        raster.set_color(ctx.config.field_color)
        head = ctx.config.arrow_head_half_side
        for anchor, tip in self.arrows(ctx):
            draw_segment_math(raster, anchor, tip, view, ctx.surface)
            draw_square(raster, tip, head, view, ctx.surface)
