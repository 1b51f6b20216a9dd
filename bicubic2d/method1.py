"""Bicubic Hermite patches from analytic and finite-difference derivatives."""

from __future__ import annotations

from functools import partial
from itertools import pairwise

from .functions import FunctionKind, derivative_x, derivative_xy, derivative_y, evaluate
from .grid import Grid, Matrix, hermite_matrix, patch_coefficients

NodeData = tuple[float, float, float, float]


def node_derivatives(grid: Grid, kind: FunctionKind | int) -> list[list[NodeData]]:
    """Return (value, d/dx, d/dy, d2/dxdy) for every node, indexed [i][j].

    Interior nodes use analytic derivatives; boundary nodes use central
    differences with the function sampled one step outside the grid.
    """
    kind = FunctionKind(kind)
    f = partial(evaluate, kind)
    xs = [grid.node_x(i) for i in range(grid.n_x)]
    ys = [grid.node_y(j) for j in range(grid.n_y)]
    values = [[f(x, y) for y in ys] for x in xs]
    last_x = grid.n_x - 1
    last_y = grid.n_y - 1
    two_hx = 2 * grid.h_x
    two_hy = 2 * grid.h_y

    dx: list[list[float]] = []
    for i, x in enumerate(xs):
        if i == 0:
            column = [
                (values[1][j] - f(grid.x_a - grid.h_x, y)) / two_hx for j, y in enumerate(ys)
            ]
        elif i == last_x:
            column = [
                (f(grid.x_b + grid.h_x, y) - values[last_x - 1][j]) / two_hx
                for j, y in enumerate(ys)
            ]
        else:
            column = [derivative_x(kind, x, y) for y in ys]
        dx.append(column)

    nodes: list[list[NodeData]] = []
    for i, x in enumerate(xs):
        below = f(x, grid.y_a - grid.h_y)
        above = f(x, grid.y_b + grid.h_y)
        row: list[NodeData] = []
        for j, y in enumerate(ys):
            if j == 0:
                d_y = (values[i][1] - below) / two_hy
                # The mixed derivative on the boundary differences d/dx
                # against a plain function value, as the reference does.
                d_xy = (dx[i][1] - below) / two_hy
            elif j == last_y:
                d_y = (above - values[i][last_y - 1]) / two_hy
                d_xy = (above - dx[i][last_y - 1]) / two_hy
            else:
                d_y = derivative_y(kind, x, y)
                d_xy = derivative_xy(kind, x, y)
            row.append((values[i][j], dx[i][j], d_y, d_xy))
        nodes.append(row)
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