from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol


class ScalarField(Protocol):
    """Plane point -> angle in radians, drawn as a slope arrow."""

    def evaluate(self, x: float, y: float) -> float:
        ...


class PlotFunction(Protocol):
    """Real function y = f(x), drawn as a curve."""

    def evaluate(self, x: float) -> float:
        ...


@dataclass(frozen=True)
class FieldClosure:
    fn: Callable[[float, float], float]
    name: str = "field"

    def evaluate(self, x: float, y: float) -> float:
        return self.fn(x, y)


@dataclass(frozen=True)
class FunctionClosure:
    fn: Callable[[float], float]
    name: str = "f"

    def evaluate(self, x: float) -> float:
        return self.fn(x)


def _cosine_slope(x: float, _y: float) -> float:
    return math.atan(math.cos(x / math.pi))


def _scaled_sine(x: float) -> float:
    return math.pi * math.sin(x / math.pi)


COSINE_SLOPE_FIELD = FieldClosure(_cosine_slope, name="atan(cos(x/pi))")
SCALED_SINE = FunctionClosure(_scaled_sine, name="pi*sin(x/pi)")
