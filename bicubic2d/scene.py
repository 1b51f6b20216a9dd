"""Interactive view state for comparing a function with its interpolants."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable

from .functions import FunctionKind
from .functions import function_name as _formula
from .interpolation import Interpolator, Method

DEFAULT_STEPS = 1000
_EPS = 1e-15

KEY_HELP = (
    "Next graph: 1",
    "Increase scale: 2",
    "Decrease scale: 3",
    "Double points: 4",
    "Half points: 5",
    "Rotate -15: 8",
    "Rotate +15: 9",
    "Next function: 0",
    "Exit: Esc",
)


class Graph(IntEnum):
    """Which surface the scene shows."""

    FUNCTION = 0
    METHOD1 = 1
    METHOD2 = 2
    ERROR1 = 3
    ERROR2 = 4


def _chop(value: float) -> float:
    return 0.0 if abs(value) < _EPS else value


class Scene:
    """Function, interpolants and view parameters of the 3D plot."""

    def __init__(
        self,
        method: int,
        n_x: int,
        n_y: int,
        function_number: FunctionKind | int,
        x_a: float,
        x_b: float,
        y_a: float,
        y_b: float,
    ) -> None:
        self.x_rot = -90.0
        self.y_rot = 0.0
        self.z_rot = 90.0
        self.z_translation = 0.0
        self.zoom = 0.8
        self.x_a, self.x_b, self.y_a, self.y_b = x_a, x_b, y_a, y_b
        self.n_x, self.n_y = n_x, n_y
        self.graph = Graph(method)
        self.function_number = FunctionKind(function_number)
        self.sup = 0.0
        self.inf = 0.0
        self.last_sup = 0.0
        self.last_inf = 0.0
        self.error_drop = 0.0
        self.abs_max = 1.0
        self.closed = False
        self._key_actions: dict[str, Callable[[], None]] = {
            "up": self.rotate_up,
            "down": self.rotate_down,
            "left": self.rotate_left,
            "right": self.rotate_right,
            "escape": self._close,
            "0": self.change_function,
            "1": self.change_graph,
            "2": self.zoom_in,
            "3": self.zoom_out,
            "4": self.double_n,
            "5": self.half_n,
            "8": lambda: self.rotate_z(1),
            "9": lambda: self.rotate_z(-1),
        }
        self._draw_f()

    @property
    def function_name(self) -> str:
        """Formula of the function being interpolated."""
        return _formula(self.function_number)

    def _rebuild(self) -> None:
        args = (self.n_x, self.n_y, self.function_number, self.x_a, self.x_b, self.y_a, self.y_b)
        self.interpolator1 = Interpolator(Method.METHOD1, *args)
        self.interpolator2 = Interpolator(Method.METHOD2, *args)

    def _reset_view(self) -> None:
        self.view_x_a, self.view_x_b = self.x_a, self.x_b
        self.view_y_a, self.view_y_b = self.y_a, self.y_b

    def _draw_f(self) -> None:
        self.scale = 1.0
        self._rebuild()
        self._reset_view()
        self.last_inf = 0.0
        self.last_sup = 0.0

    def _close(self) -> None:
        self.closed = True

    def evaluate(self, x: float, y: float) -> float:
        """Height of the currently selected graph at (x, y)."""
        if self.graph is Graph.FUNCTION:
            return self.interpolator1.function(x, y)
        if self.graph is Graph.METHOD1:
            return _chop(self.interpolator1(x, y))
        if self.graph is Graph.METHOD2:
            return _chop(self.interpolator2(x, y))
        exact = self.interpolator1.function(x, y)
        if self.graph is Graph.ERROR1:
            return _chop(exact - self.interpolator1(x, y))
        return _chop(exact - self.interpolator2(x, y))

    def change_function(self) -> None:
        """Switch to the next test function and reset the view."""
        self.function_number = FunctionKind((self.function_number + 1) % len(FunctionKind))
        self._draw_f()

    def change_graph(self) -> None:
        """Switch to the next graph."""
        self.graph = Graph((self.graph + 1) % len(Graph))
        self.last_inf = 0.0
        self.last_sup = 0.0

    def zoom_in(self) -> None:
        """Halve the visible rectangle around its centre."""
        self.scale *= 2
        cx = (self.view_x_a + self.view_x_b) / 2
        qx = (self.view_x_b - self.view_x_a) / 4
        cy = (self.view_y_a + self.view_y_b) / 2
        qy = (self.view_y_b - self.view_y_a) / 4
        self.view_x_a, self.view_x_b = cx - qx, cx + qx
        self.view_y_a, self.view_y_b = cy - qy, cy + qy
        self.last_inf = 0.0
        self.last_sup = 0.0

    def zoom_out(self) -> None:
        """Double the visible rectangle around its centre."""
        self.scale /= 2
        cx = (self.view_x_a + self.view_x_b) / 2
        wx = self.view_x_b - self.view_x_a
        cy = (self.view_y_a + self.view_y_b) / 2
        wy = self.view_y_b - self.view_y_a
        self.view_x_a, self.view_x_b = cx - wx, cx + wx
        self.view_y_a, self.view_y_b = cy - wy, cy + wy
        self.last_inf = 0.0
        self.last_sup = 0.0

    def double_n(self) -> None:
        """Double the number of interpolation nodes in each direction."""
        self.n_x *= 2
        self.n_y *= 2
        self._rebuild()
        self.last_inf = self.inf
        self.last_sup = self.sup

    def half_n(self) -> None:
        """Halve the number of nodes, keeping at least 5 in each direction."""
        self.n_x = max(self.n_x // 2, 5)
        self.n_y = max(self.n_y // 2, 5)
        self._rebuild()
        self.last_inf = self.inf
        self.last_sup = self.sup

    def rotate_z(self, factor: int) -> None:
        """Rotate around the vertical axis by factor * 15 degrees."""
        self.z_rot += factor * 15

    def rotate_up(self) -> None:
        self.x_rot += 15.0

    def rotate_down(self) -> None:
        self.x_rot -= 15.0

    def rotate_left(self) -> None:
        self.z_rot += 1.0

    def rotate_right(self) -> None:
        self.z_rot -= 1.0

    def sample(
        self, steps: int = DEFAULT_STEPS
    ) -> tuple[list[float], list[float], list[list[float]]]:
        """Sample the graph on a (steps + 1) square lattice over the view.

        Updates ``sup``, ``inf``, ``abs_max`` and ``error_drop`` and returns
        (xs, ys, values) with ``values[i][j]`` taken at (xs[i], ys[j]).
        """
        if steps < 1:
            raise ValueError("steps must be positive")
        s_x = (self.view_x_b - self.view_x_a) / steps
        s_y = (self.view_y_b - self.view_y_a) / steps
        xs = [self.view_x_a + i * s_x for i in range(steps + 1)]
        ys = [self.view_y_a + j * s_y for j in range(steps + 1)]
        values = [[self.evaluate(x, y) for y in ys] for x in xs]

        self.sup = max(0.0, *(max(row) for row in values))
        self.inf = min(0.0, *(min(row) for row in values))
        abs_max = max(abs(self.sup), abs(self.inf))
        self.abs_max = 10.0 if abs_max < _EPS else abs_max

        last = max(abs(self.last_sup), abs(self.last_inf))
        if last < _EPS:
            self.error_drop = 0.0
        else:
            drop = self.abs_max / last
            self.error_drop = 1 / drop if _EPS < drop < 1 else drop
        return xs, ys, values

    def status_lines(self) -> list[str]:
        """Text describing the current state of the scene."""
        angle = self.z_rot - 360 * math.floor(self.z_rot / 360)
        lines = [
            self.function_name,
            f"graph = {int(self.graph)}",
            f"n_x = {self.n_x}",
            f"n_y = {self.n_y}",
            f"scale = {self.scale:g}",
            f"angle = {angle:g} degree",
            f"max = {self.sup:g}",
            f"min = {self.inf:g}",
            f"x: ({self.view_x_a:g}, {self.view_x_b:g})",
            f"y: ({self.view_y_a:g}, {self.view_y_b:g})",
        ]
        if self.graph in (Graph.ERROR1, Graph.ERROR2):
            lines.append(f"Error drop: {self.error_drop:g}")
        return lines

    def handle_key(self, key: str | None) -> bool:
        """Apply the action bound to a key; return whether the key was known."""
        action = self._key_actions.get(key or "")
        if action is None:
            return False
        action()
        return True