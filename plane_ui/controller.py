from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Deque, Optional, Union

from .config import DEFAULT_CONFIG, PlotConfig
from .render.math2d import ZERO, Vec2
from .render.viewport import View

logger = logging.getLogger(__name__)


class Key(Enum):
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    ESCAPE = "escape"


@dataclass(frozen=True)
class QuitEvent:
    pass


@dataclass(frozen=True)
class KeyDown:
    key: Key


@dataclass(frozen=True)
class KeyUp:
    key: Key


@dataclass(frozen=True)
class WheelEvent:
    delta_y: int


InputEvent = Union[QuitEvent, KeyDown, KeyUp, WheelEvent]


@dataclass
class ViewState:
    """Everything the frame loop owns; renderers only ever see ``view``."""

    view: View
    movement: Vec2 = ZERO
    running: bool = True


@dataclass
class ViewController:
    """Turns discrete input events into pan velocity and zoom, one frame at a time.

    Opposite direction keys do not combine: the last key event on an axis
    decides its velocity, and any key-up on that axis stops it.
    """

    config: PlotConfig = DEFAULT_CONFIG
    state: Optional[ViewState] = None
    _pending: Deque[InputEvent] = field(default_factory=deque, repr=False)

    def __post_init__(self) -> None:
        if self.state is None:
            self.state = ViewState(view=self.config.make_initial_view())

    @property
    def view(self) -> View:
        return self.state.view

    @property
    def running(self) -> bool:
        return self.state.running

    def post(self, event: InputEvent) -> None:
        self._pending.append(event)

    def drain(self) -> int:
        """Apply every queued event; returns how many were handled."""
        handled = 0
        while self._pending:
            event = self._pending.popleft()
            self.handle(event)
            handled += 1
            if not self.state.running:
                self._pending.clear()
                break
        return handled

    def tick(self) -> bool:
        """Drain input, then pan by the current velocity. False once terminated."""
        self.drain()
        if not self.state.running:
            return False
        self.state.view = self.state.view.panned(self.state.movement)
        return True

    def handle(self, event: InputEvent) -> None:
        if not self.state.running:
            return
        if isinstance(event, QuitEvent):
            self._quit("quit event")
        elif isinstance(event, KeyDown):
            self._on_key_down(event.key)
        elif isinstance(event, KeyUp):
            self._on_key_up(event.key)
        elif isinstance(event, WheelEvent):
            self._on_wheel(event.delta_y)

    def _on_key_down(self, key: Key) -> None:
        step = self.config.movement_step
        movement = self.state.movement
        if key is Key.ESCAPE:
            self._quit("escape")
        elif key is Key.W:
            self.state.movement = replace(movement, y=step)
        elif key is Key.S:
            self.state.movement = replace(movement, y=-step)
        elif key is Key.A:
            self.state.movement = replace(movement, x=step)
        elif key is Key.D:
            self.state.movement = replace(movement, x=-step)

    def _on_key_up(self, key: Key) -> None:
        movement = self.state.movement
        if key in (Key.W, Key.S):
            self.state.movement = replace(movement, y=0.0)
        elif key in (Key.A, Key.D):
            self.state.movement = replace(movement, x=0.0)

    def _on_wheel(self, delta_y: int) -> None:
        if delta_y == 0:
            return
        factor = self.config.zoom_factor if delta_y > 0 else 1.0 / self.config.zoom_factor
        view = self.state.view.zoomed(factor, self.config.zoom_min, self.config.zoom_max)
        self.state.view = view
        logger.debug("zoom=%.4f", view.zoom)

    def _quit(self, reason: str) -> None:
        self.state.running = False
        logger.info("render loop stopping: %s", reason)
