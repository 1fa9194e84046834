# =============================================================================
# NAV INDEX (search these tags)
# [NAV-00] Imports / constants
# [NAV-10] PlotConfig
# [NAV-20] Config loading (defaults/overrides)
# [NAV-90] Helpers
# [NAV-99] End
# =============================================================================

# === [NAV-00] Imports / constants ============================================
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

from .render.rasterizer import Color
from .render.viewport import SurfaceSize, View

logger = logging.getLogger(__name__)


# === [NAV-10] PlotConfig ======================================================
@dataclass(frozen=True)
class PlotConfig:
    """Build-time constants for the viewer window and its layers."""

    title: str = "Plane Viewer"
    width: int = 800
    height: int = 800
    background: Color = Color(0x00, 0x00, 0x00)
    grid_color: Color = Color(0x20, 0x20, 0x20)
    axis_color: Color = Color(0x40, 0x40, 0x40)
    field_color: Color = Color(0xFF, 0xFF, 0x00)
    curve_color: Color = Color(0x00, 0xFF, 0x00)
    movement_step: float = 0.0001
    zoom_factor: float = 1.2
    zoom_range: Tuple[float, float] = (0.1, 10.0)
    initial_view: Tuple[float, float, float] = (0.0, 0.0, 1.0)
    lattice_range: Tuple[int, int] = (-10, 10)
    arrow_length: float = 0.3
    arrow_head_half_side: float = 0.01
    curve_interval: Tuple[float, float] = (-5.0, 5.0)
    curve_steps: int = 40
    frame_interval_ms: int = 1

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"surface size must be positive, got {self.width}x{self.height}")
        zoom_min, zoom_max = self.zoom_range
        if zoom_min <= 0 or zoom_min > zoom_max:
            raise ValueError(f"invalid zoom range {self.zoom_range!r}")
        if self.zoom_factor <= 1.0:
            raise ValueError(f"zoom factor must be > 1, got {self.zoom_factor!r}")
        if self.curve_steps <= 0:
            raise ValueError(f"curve steps must be positive, got {self.curve_steps!r}")
        if self.frame_interval_ms < 0:
            raise ValueError(f"frame interval must be >= 0, got {self.frame_interval_ms!r}")
        if self.initial_view[2] <= 0:
            raise ValueError(f"initial zoom must be positive, got {self.initial_view!r}")

    @property
    def surface(self) -> SurfaceSize:
        return SurfaceSize(self.width, self.height)

    @property
    def zoom_min(self) -> float:
        return self.zoom_range[0]

    @property
    def zoom_max(self) -> float:
        return self.zoom_range[1]

    def make_initial_view(self) -> View:
        x, y, zoom = self.initial_view
        return View(x, y, zoom)


DEFAULT_CONFIG = PlotConfig()


# === [NAV-20] Config loading (defaults/overrides) =============================
def load_plot_config(path: Optional[Path] = None) -> PlotConfig:
    """Return the defaults, overridden by known keys from a JSON file if given.

    ``main()`` calls this with no path; embedders pass a file to restyle the
    viewer. The file is only read, never created. Anything unreadable or
    out of shape falls back to the defaults as a whole.
    """
    if path is None:
        return DEFAULT_CONFIG
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("plot config %s unreadable, using defaults: %s", path, exc)
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        logger.warning("plot config %s is not an object, using defaults", path)
        return DEFAULT_CONFIG
    try:
        return replace(DEFAULT_CONFIG, **_coerce_overrides(data))
    except (TypeError, ValueError) as exc:
        logger.warning("plot config %s invalid, using defaults: %s", path, exc)
        return DEFAULT_CONFIG


# === [NAV-90] Helpers =========================================================
def _color(value: Any) -> Color:
    color = Color(*(int(c) for c in value))
    if any(not 0 <= c <= 255 for c in color):
        raise ValueError(f"color channels must be 0-255, got {value!r}")
    return color


def _floats(count: int) -> Callable[[Any], Tuple[float, ...]]:
    def convert(value: Any) -> Tuple[float, ...]:
        if isinstance(value, (str, bytes)) or len(value) != count:
            raise ValueError(f"expected {count} numbers, got {value!r}")
        return tuple(float(v) for v in value)

    return convert


def _int_pair(value: Any) -> Tuple[int, int]:
    first, second = _floats(2)(value)
    return (int(first), int(second))


def _text(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {value!r}")
    return value


_CONVERTERS: Dict[str, Callable[[Any], Any]] = {
    "title": _text,
    "width": int,
    "height": int,
    "background": _color,
    "grid_color": _color,
    "axis_color": _color,
    "field_color": _color,
    "curve_color": _color,
    "movement_step": float,
    "zoom_factor": float,
    "zoom_range": _floats(2),
    "initial_view": _floats(3),
    "lattice_range": _int_pair,
    "arrow_length": float,
    "arrow_head_half_side": float,
    "curve_interval": _floats(2),
    "curve_steps": int,
    "frame_interval_ms": int,
}


def _coerce_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert known keys to their field types; raises TypeError/ValueError."""
    return {key: _CONVERTERS[key](value) for key, value in data.items() if key in _CONVERTERS}


# === [NAV-99] End =============================================================
__all__ = [
    "PlotConfig",
    "DEFAULT_CONFIG",
    "load_plot_config",
]
