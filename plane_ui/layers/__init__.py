from __future__ import annotations

from typing import List

from .axes import AxesLayer
from .base import RenderContext, Renderable, Subcomponent, render_frame
from .curve import CurveLayer, sample_curve
from .field import FieldLayer
from .grid import GridLayer


def default_layers() -> List[Renderable]:
    """Fixed draw order: grid, axes, field, curve."""
    return [GridLayer(), AxesLayer(), FieldLayer(), CurveLayer()]


__all__ = [
    "Subcomponent",
    "Renderable",
    "RenderContext",
    "render_frame",
    "default_layers",
    "GridLayer",
    "AxesLayer",
    "FieldLayer",
    "CurveLayer",
    "sample_curve",
]
