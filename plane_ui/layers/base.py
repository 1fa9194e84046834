from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from ..config import PlotConfig
from ..render.rasterizer import Rasterizer
from ..render.viewport import SurfaceSize, View


@dataclass(frozen=True)
class Subcomponent:
    """Small reusable unit with a stable id/name."""

    component_id: str
    display_name: str


@dataclass(frozen=True)
class RenderContext:
    """Per-frame constants shared by every layer."""

    surface: SurfaceSize
    config: PlotConfig


class Renderable(Protocol):
    """Render-only unit: reads the view, emits primitives, never mutates state."""

    def draw(self, raster: Rasterizer, view: View, ctx: RenderContext) -> None:
        ...


def render_frame(
    raster: Rasterizer,
    view: View,
    ctx: RenderContext,
    layers: Iterable[Renderable],
) -> None:
    """Clear, draw every layer in order, present."""
    raster.clear(ctx.config.background)
    for layer in layers:
        layer.draw(raster, view, ctx)
    raster.present()
