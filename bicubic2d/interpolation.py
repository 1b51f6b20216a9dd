"""Piecewise bicubic interpolation of a test function over a rectangle."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from . import method1, method2
from .functions import FunctionKind, evaluate
from .grid import Grid, Matrix


class Method(IntEnum):
    """How node derivatives are obtained."""

    METHOD1 = 1
    METHOD2 = 2


_BUILDERS: dict[Method, Callable[[Grid, FunctionKind], list[list[Matrix]]]] = {
    Method.METHOD1: method1.build_patches,
    Method.METHOD2: method2.build_patches,
}


class Interpolator:
    """Bicubic interpolant of one test function on a uniform grid."""

    def __init__(
        self,
        method: Method | int,
        n_x: int,
        n_y: int,
        kind: FunctionKind | int,
        x_a: float,
        x_b: float,
        y_a: float,
        y_b: float,
    ) -> None:
        self.method = Method(method)
        self.kind = FunctionKind(kind)
        self.grid = Grid(n_x, n_y, x_a, x_b, y_a, y_b)
        self.patches = _BUILDERS[self.method](self.grid, self.kind)

    def __call__(self, x: float, y: float) -> float:
        """Value of the interpolant at (x, y); outside the grid the edge patch extends."""
        i, j = self.grid.cell_index(x, y)
        delta_x = x - self.grid.node_x(i)
        delta_y = y - self.grid.node_y(j)
        result = 0.0
        for row in reversed(self.patches[i][j]):
            inner = 0.0
            for coefficient in reversed(row):
                inner = inner * delta_y + coefficient
            result = result * delta_x + inner
        return result

    def function(self, x: float, y: float) -> float:
        """Value of the interpolated function itself."""
        return evaluate(self.kind, x, y)