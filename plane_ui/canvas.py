from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from PyQt6 import QtCore, QtGui, QtWidgets

from .config import DEFAULT_CONFIG, PlotConfig
from .controller import Key, KeyDown, KeyUp, QuitEvent, ViewController, WheelEvent
from .layers import RenderContext, Renderable, default_layers, render_frame
from .render.rasterizer import Color, RasterizerError
from .render.viewport import SurfaceSize

logger = logging.getLogger(__name__)

_KEY_MAP: Dict[int, Key] = {
    int(QtCore.Qt.Key.Key_W.value): Key.W,
    int(QtCore.Qt.Key.Key_A.value): Key.A,
    int(QtCore.Qt.Key.Key_S.value): Key.S,
    int(QtCore.Qt.Key.Key_D.value): Key.D,
    int(QtCore.Qt.Key.Key_Escape.value): Key.ESCAPE,
}


def translate_key(qt_key: object) -> Optional[Key]:
    """Map a Qt key code (int or Qt.Key) to a viewer key; None if unbound."""
    code = getattr(qt_key, "value", qt_key)
    try:
        return _KEY_MAP.get(int(code))
    except (TypeError, ValueError):
        return None


class QPainterRasterizer:
    """Integer line/rect backend on top of an active QPainter."""

    def __init__(self, painter: QtGui.QPainter, surface: SurfaceSize):
        self.painter = painter
        self.surface = surface
        self._color = QtGui.QColor(255, 255, 255)
        if painter.isActive():
            painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, False)

    def _require_active(self) -> QtGui.QPainter:
        if not self.painter.isActive():
            raise RasterizerError("painter is not active")
        return self.painter

    def set_color(self, color: Color) -> None:
        painter = self._require_active()
        self._color = QtGui.QColor(color.r, color.g, color.b)
        pen = QtGui.QPen(self._color)
        pen.setWidth(1)
        pen.setCosmetic(True)
        painter.setPen(pen)
        painter.setBrush(self._color)

    def clear(self, color: Color) -> None:
        painter = self._require_active()
        painter.fillRect(0, 0, self.surface.width, self.surface.height, QtGui.QColor(color.r, color.g, color.b))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self._require_active().drawLine(x1, y1, x2, y2)

    def fill_rect(self, x: int, y: int, width: int, height: int) -> None:
        self._require_active().fillRect(x, y, width, height, self._color)

    def present(self) -> None:
        self._require_active().end()


class PlotCanvas(QtWidgets.QWidget):
    """Fixed-size window: feeds Qt input to the controller and paints one frame per tick."""

    def __init__(
        self,
        config: PlotConfig = DEFAULT_CONFIG,
        controller: Optional[ViewController] = None,
        layers: Optional[Iterable[Renderable]] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ):
        super().__init__(parent)
        self.config = config
        self.controller = controller or ViewController(config)
        self.layers = list(layers) if layers is not None else default_layers()
        self.render_ctx = RenderContext(surface=config.surface, config=config)
        self.setWindowTitle(config.title)
        self.setFixedSize(config.width, config.height)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_OpaquePaintEvent)

        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(config.frame_interval_ms)
        self.timer.timeout.connect(self._on_frame)

    def start(self) -> None:
        self.timer.start()

    # -- frame loop -------------------------------------------------------
    def _on_frame(self) -> None:
        if not self.controller.tick():
            self.timer.stop()
            self.close()
            return
        self.update()

    # -- event source -----------------------------------------------------
    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:  # type: ignore[override]
        key = translate_key(event.key())
        if key is None:
            super().keyPressEvent(event)
            return
        if not event.isAutoRepeat():
            self.controller.post(KeyDown(key))
        event.accept()

    def keyReleaseEvent(self, event: QtGui.QKeyEvent) -> None:  # type: ignore[override]
        key = translate_key(event.key())
        if key is None:
            super().keyReleaseEvent(event)
            return
        if not event.isAutoRepeat():
            self.controller.post(KeyUp(key))
        event.accept()

    def wheelEvent(self, event: QtGui.QWheelEvent) -> None:  # type: ignore[override]
        self.controller.post(WheelEvent(event.angleDelta().y()))
        event.accept()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # type: ignore[override]
        if self.controller.running:
            self.controller.post(QuitEvent())
            self.controller.drain()
        self.timer.stop()
        super().closeEvent(event)

    # -- paint ------------------------------------------------------------
    def paintEvent(self, _: QtGui.QPaintEvent) -> None:  # type: ignore[override]
        painter = QtGui.QPainter(self)
        raster = QPainterRasterizer(painter, self.config.surface)
        render_frame(raster, self.controller.view, self.render_ctx, self.layers)
