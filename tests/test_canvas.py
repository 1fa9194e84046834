import pytest
from PyQt6 import QtCore, QtGui

from plane_ui.canvas import PlotCanvas, QPainterRasterizer, translate_key
from plane_ui.config import DEFAULT_CONFIG
from plane_ui.controller import Key, ViewController
from plane_ui.layers import RenderContext, default_layers, render_frame
from plane_ui.render.rasterizer import Color, RasterizerError
from plane_ui.render.viewport import SurfaceSize, View


def _key_event(kind: QtCore.QEvent.Type, key: QtCore.Qt.Key, auto_repeat: bool = False) -> QtGui.QKeyEvent:
    return QtGui.QKeyEvent(kind, int(key.value), QtCore.Qt.KeyboardModifier.NoModifier, "", auto_repeat)


def test_translate_key_maps_bound_keys() -> None:
    assert translate_key(QtCore.Qt.Key.Key_W) is Key.W
    assert translate_key(int(QtCore.Qt.Key.Key_D.value)) is Key.D
    assert translate_key(QtCore.Qt.Key.Key_Escape) is Key.ESCAPE
    assert translate_key(QtCore.Qt.Key.Key_Q) is None
    assert translate_key(None) is None


def test_canvas_window_setup(qt_app) -> None:
    canvas = PlotCanvas()
    assert canvas.windowTitle() == DEFAULT_CONFIG.title
    assert (canvas.width(), canvas.height()) == (800, 800)
    assert len(canvas.layers) == 4


def test_canvas_key_events_drive_frame(qt_app) -> None:
    canvas = PlotCanvas()
    canvas.keyPressEvent(_key_event(QtCore.QEvent.Type.KeyPress, QtCore.Qt.Key.Key_W))
    canvas._on_frame()
    assert canvas.controller.view.y == DEFAULT_CONFIG.movement_step

    canvas.keyReleaseEvent(_key_event(QtCore.QEvent.Type.KeyRelease, QtCore.Qt.Key.Key_W))
    canvas._on_frame()
    assert canvas.controller.view.y == DEFAULT_CONFIG.movement_step


def test_canvas_ignores_auto_repeat_release(qt_app) -> None:
    canvas = PlotCanvas()
    canvas.keyPressEvent(_key_event(QtCore.QEvent.Type.KeyPress, QtCore.Qt.Key.Key_A))
    canvas.keyReleaseEvent(_key_event(QtCore.QEvent.Type.KeyRelease, QtCore.Qt.Key.Key_A, auto_repeat=True))
    canvas._on_frame()
    assert canvas.controller.state.movement.x == DEFAULT_CONFIG.movement_step


def test_canvas_escape_stops_loop(qt_app) -> None:
    canvas = PlotCanvas()
    canvas.show()
    canvas.start()
    canvas.keyPressEvent(_key_event(QtCore.QEvent.Type.KeyPress, QtCore.Qt.Key.Key_Escape))
    canvas._on_frame()
    assert canvas.controller.running is False
    assert canvas.timer.isActive() is False


def test_canvas_close_posts_quit(qt_app) -> None:
    controller = ViewController()
    canvas = PlotCanvas(controller=controller)
    canvas.show()
    canvas.close()
    assert controller.running is False


def test_rasterizer_requires_active_painter(qt_app) -> None:
    raster = QPainterRasterizer(QtGui.QPainter(), SurfaceSize(10, 10))
    with pytest.raises(RasterizerError):
        raster.draw_line(0, 0, 5, 5)
    with pytest.raises(RasterizerError):
        raster.set_color(Color(1, 2, 3))


def test_rasterizer_renders_frame_to_image(qt_app) -> None:
    image = QtGui.QImage(800, 800, QtGui.QImage.Format.Format_RGB32)
    painter = QtGui.QPainter(image)
    raster = QPainterRasterizer(painter, DEFAULT_CONFIG.surface)
    ctx = RenderContext(surface=DEFAULT_CONFIG.surface, config=DEFAULT_CONFIG)
    render_frame(raster, View(0.0, 0.0, 1.0), ctx, default_layers())
    assert painter.isActive() is False

    background = image.pixelColor(25, 130)
    assert (background.red(), background.green(), background.blue()) == (0, 0, 0)

    axis = {
        (image.pixelColor(x, 200).red(), image.pixelColor(x, 200).blue())
        for x in (399, 400, 401)
    }
    assert (0x40, 0x40) in axis


def test_rasterizer_fill_rect_uses_current_color(qt_app) -> None:
    image = QtGui.QImage(20, 20, QtGui.QImage.Format.Format_RGB32)
    painter = QtGui.QPainter(image)
    raster = QPainterRasterizer(painter, SurfaceSize(20, 20))
    raster.clear(Color(0, 0, 0))
    raster.set_color(Color(0xFF, 0xFF, 0x00))
    raster.fill_rect(5, 5, 3, 3)
    raster.present()
    inside = image.pixelColor(6, 6)
    outside = image.pixelColor(9, 9)
    assert (inside.red(), inside.green(), inside.blue()) == (0xFF, 0xFF, 0x00)
    assert (outside.red(), outside.green(), outside.blue()) == (0, 0, 0)


def test_create_window_starts_frame_timer(qt_app) -> None:
    from plane_ui import main as app_main

    window = app_main.create_window()
    assert window.isVisible()
    assert window.timer.isActive()
    window.close()
    assert window.timer.isActive() is False
    assert window.controller.running is False
