from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Iterator, List, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from plane_ui.render.rasterizer import Color  # noqa: E402


class RecordingRasterizer:
    """Collects every primitive instead of drawing it."""

    def __init__(self) -> None:
        self.ops: List[Tuple] = []
        self.color: Color | None = None

    def set_color(self, color: Color) -> None:
        self.color = color
        self.ops.append(("color", color))

    def clear(self, color: Color) -> None:
        self.ops.append(("clear", color))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self.ops.append(("line", x1, y1, x2, y2, self.color))

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        self.ops.append(("rect", x, y, width, height, self.color))

    def present(self) -> None:
        self.ops.append(("present",))

    def of_kind(self, kind: str) -> List[Tuple]:
        return [op for op in self.ops if op[0] == kind]

    @property
    def lines(self) -> List[Tuple]:
        return self.of_kind("line")

    @property
    def rects(self) -> List[Tuple]:
        return self.of_kind("rect")


@pytest.fixture()
def raster() -> RecordingRasterizer:
    return RecordingRasterizer()


@pytest.fixture()
def raster_factory() -> Callable[[], RecordingRasterizer]:
    return RecordingRasterizer


@pytest.fixture()
def qt_app() -> Iterator[object]:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt6 import QtWidgets

    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app
