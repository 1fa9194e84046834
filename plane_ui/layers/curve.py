from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..functions import SCALED_SINE, PlotFunction
from ..render.math2d import Vec2
from ..render.primitives import draw_segment_math
from ..render.rasterizer import Rasterizer
from ..render.viewport import View
from .base import RenderContext, Subcomponent


def sample_curve(fn: PlotFunction, start: float, end: float, steps: int) -> List[Vec2]:
    """``steps + 1`` evenly spaced samples, both interval ends included."""
    if steps <= 0:
        raise ValueError(f"steps must be positive, got {steps!r}")
    span = end - start
    samples = []
    for i in range(steps + 1):
        x = start + span * i / steps
        samples.append(Vec2(x, fn.evaluate(x)))
    return samples


@dataclass(frozen=True)
class CurveLayer(Subcomponent):
    """Piecewise-linear plot of a function over a fixed interval."""

    component_id: str = "render.curve"
    display_name: str = "Curve"
    function: PlotFunction = SCALED_SINE
    interval: Optional[Tuple[float, float]] = None
    steps: Optional[int] = None

    def draw(self, raster: Rasterizer, view: View, ctx: RenderContext) -> None:
        start, end = self.interval or ctx.config.curve_interval
        steps = self.steps or ctx.config.curve_steps
        samples = sample_curve(self.function, start, end, steps)

        raster.set_color(ctx.config.curve_color)
        for prev, cur in zip(samples, samples[1:]):
            draw_segment_math(raster, prev, cur, view, ctx.surface)
