from __future__ import annotations

from typing import NamedTuple, Protocol


class Color(NamedTuple):
    r: int
    g: int
    b: int


class RasterizerError(RuntimeError):
    """Raised when the drawing backend cannot take primitives."""


class Rasterizer(Protocol):
    """Pixel-space drawing capability the renderers emit into."""

    def set_color(self, color: Color) -> None:
        ...

    def clear(self, color: Color) -> None:
        ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        ...

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        ...

    def present(self) -> None:
        ...
