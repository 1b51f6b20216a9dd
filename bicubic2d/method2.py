"""Bicubic patches whose node derivatives come from cubic spline systems."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from .functions import FunctionKind, derivative_xx, derivative_yy, evaluate
from .grid import Grid, Matrix, hermite_matrix, patch_coefficients

NodeData = tuple[float, float, float, float]


def solve_tridiagonal(
    lower: Sequence[float],
    diagonal: Sequence[float],
    upper: Sequence[float],
    rhs: Sequence[float],
) -> list[float]:
    """Solve a tridiagonal system by forward elimination and back substitution.

    ``lower[0]`` and ``upper[-1]`` lie outside the matrix and are ignored.
    """
    lower, diagonal, upper, rhs = list(lower), list(diagonal), list(upper), list(rhs)
    size = len(diagonal)
    if size == 0:
        raise ValueError("empty system")
    if not len(lower) == len(upper) == len(rhs) == size:
        raise ValueError("all bands and the right-hand side must have the same length")

    diag_out = [diagonal[0]]
    rhs_out = [rhs[0]]
    for low, up, diag, value in zip(lower[1:], upper, diagonal[1:], rhs[1:]):
        pivot = diag_out[-1]
        diag_out.append(diag - up * low / pivot)
        rhs_out.append(value - low / pivot * rhs_out[-1])

    solution = [rhs_out[-1] / diag_out[-1]]
    for up, diag, value in zip(
        reversed(upper[:-1]), reversed(diag_out[:-1]), reversed(rhs_out[:-1])
    ):
        solution.append((value - up * solution[-1]) / diag)
    solution.reverse()
    return solution


def _spline_slopes(
    samples: Sequence[float], h: float, start_curvature: float, end_curvature: float
) -> list[float]:
    """Slopes of the cubic spline through equally spaced samples.

    The end rows use the given second derivatives at the two ends.
    """
    inner = len(samples) - 2
    lower = [0.0] + [h] * inner + [1.0]
    diagonal = [2.0] + [4 * h] * inner + [2.0]
    upper = [1.0] + [h] * inner + [0.0]
    rhs = [3 * (samples[1] - samples[0]) / h - h * start_curvature / 2]
    rhs.extend(3 * (after - before) for before, after in zip(samples, samples[2:]))
    rhs.append(3 * (samples[-1] - samples[-2]) / h + h * end_curvature / 2)
    return solve_tridiagonal(lower, diagonal, upper, rhs)


def node_derivatives(grid: Grid, kind: FunctionKind | int) -> list[list[NodeData]]:
    """Return (value, d/dx, d/dy, d2/dxdy) for every node, indexed [i][j].

    First derivatives come from spline systems along each grid line; the
    mixed derivative is the spline slope in y of the x-slopes.
    """
    kind = FunctionKind(kind)
    xs = [grid.node_x(i) for i in range(grid.n_x)]
    ys = [grid.node_y(j) for j in range(grid.n_y)]
    values = [[evaluate(kind, x, y) for y in ys] for x in xs]

    dx_by_row = [
        _spline_slopes(
            [column[j] for column in values],
            grid.h_x,
            derivative_xx(kind, grid.x_a, y),
            derivative_xx(kind, grid.x_b, y),
        )
        for j, y in enumerate(ys)
    ]
    dx = [list(column) for column in zip(*dx_by_row)]

    nodes: list[list[NodeData]] = []
    for x, column, dx_column in zip(xs, values, dx):
        start = derivative_yy(kind, x, grid.y_a)
        end = derivative_yy(kind, x, grid.y_b)
        dy_column = _spline_slopes(column, grid.h_y, start, end)
        # The mixed slopes reuse the y curvature of the function at the ends.
        dxy_column = _spline_slopes(dx_column, grid.h_y, start, end)
        nodes.append(list(zip(column, dx_column, dy_column, dxy_column)))
    return nodes


def build_patches(grid: Grid, kind: FunctionKind | int) -> list[list[Matrix]]:
    """Coefficient matrices for every cell, indexed [i][j]."""
    nodes = node_derivatives(grid, kind)
    ax = hermite_matrix(grid.h_x)
    ay = hermite_matrix(grid.h_y)
    return [
        [
            patch_coefficients(ax, ay, ((a, b), (c, d)))
            for (a, b), (c, d) in zip(pairwise(lower), pairwise(upper))
        ]
        for lower, upper in pairwise(nodes)
    ]