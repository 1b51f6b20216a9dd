"""Uniform rectangular grids and bicubic Hermite patch algebra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

Matrix = tuple[tuple[float, ...], ...]
Node = Sequence[float]


@dataclass(frozen=True)
class Grid:
    """A uniform grid of n_x by n_y nodes over [x_a, x_b] x [y_a, y_b]."""

    n_x: int
    n_y: int
    x_a: float
    x_b: float
    y_a: float
    y_b: float

    def __post_init__(self) -> None:
        if self.n_x < 3 or self.n_y < 3:
            raise ValueError("a grid needs at least 3 nodes in each direction")
        if self.x_a >= self.x_b:
            raise ValueError("x interval is empty")
        if self.y_a >= self.y_b:
            raise ValueError("y interval is empty")

    @property
    def h_x(self) -> float:
        return (self.x_b - self.x_a) / (self.n_x - 1)

    @property
    def h_y(self) -> float:
        return (self.y_b - self.y_a) / (self.n_y - 1)

    def node_x(self, i: int) -> float:
        """x coordinate of node column i."""
        return self.x_a + self.h_x * i

    def node_y(self, j: int) -> float:
        """y coordinate of node row j."""
        return self.y_a + self.h_y * j

    def cell_index(self, x: float, y: float) -> tuple[int, int]:
        """Indices of the cell holding (x, y), clamped to the grid."""
        i = math.trunc((x - self.x_a) / self.h_x)
        j = math.trunc((y - self.y_a) / self.h_y)
        i = min(max(i, 0), self.n_x - 2)
        j = min(max(j, 0), self.n_y - 2)
        return i, j


def hermite_matrix(h: float) -> Matrix:
    """Matrix turning (f0, f0', f1, f1') on [0, h] into cubic coefficients."""
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (-3 / (h * h), -2 / h, 3 / (h * h), -1 / h),
        (2 / (h * h * h), 1 / (h * h), -2 / (h * h * h), 1 / (h * h)),
    )


def _matmul(left: Sequence[Sequence[float]], right: Sequence[Sequence[float]]) -> Matrix:
    columns = list(zip(*right))
    return tuple(
        tuple(sum(a * b for a, b in zip(row, column)) for column in columns) for row in left
    )


def patch_coefficients(
    ax: Sequence[Sequence[float]],
    ay: Sequence[Sequence[float]],
    corner_values: Sequence[Sequence[Node]],
) -> Matrix:
    """Coefficients c[p][q] of sum c[p][q] dx**p dy**q for one cell.

    ``ax`` and ``ay`` are the Hermite matrices for the x and y steps.
    ``corner_values`` is ((lower-left, upper-left), (lower-right, upper-right)),
    where "left/right" is along x and "lower/upper" along y; each node is
    (value, d/dx, d/dy, d2/dxdy).
    """
    data = []
    for near, far in corner_values:
        data.append((near[0], near[2], far[0], far[2]))
        data.append((near[1], near[3], far[1], far[3]))
    ay_transposed = tuple(zip(*ay))
    return _matmul(_matmul(ax, data), ay_transposed)