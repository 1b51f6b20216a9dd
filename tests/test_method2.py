import pytest

from bicubic2d.functions import FunctionKind, evaluate
from bicubic2d.grid import Grid
from bicubic2d.method2 import build_patches, node_derivatives, solve_tridiagonal


def _residual(lower, diagonal, upper, rhs, solution):
    n = len(diagonal)
    out = []
    for i in range(n):
        total = diagonal[i] * solution[i]
        if i > 0:
            total += lower[i] * solution[i - 1]
        if i < n - 1:
            total += upper[i] * solution[i + 1]
        out.append(total - rhs[i])
    return out


def test_solve_tridiagonal_satisfies_system():
    lower = [0.0, 1.0, 2.0, 0.5, 1.0]
    diagonal = [4.0, 5.0, 6.0, 4.0, 3.0]
    upper = [1.0, 2.0, 1.0, 1.5, 0.0]
    rhs = [1.0, -2.0, 3.0, 0.5, 7.0]
    solution = solve_tridiagonal(lower, diagonal, upper, rhs)
    assert len(solution) == 5
    for value in _residual(lower, diagonal, upper, rhs, solution):
        assert value == pytest.approx(0.0, abs=1e-12)


def test_solve_tridiagonal_single_equation():
    assert solve_tridiagonal([0.0], [4.0], [0.0], [2.0]) == [0.5]


def test_solve_tridiagonal_ignores_outside_entries():
    first = solve_tridiagonal([0.0, 1.0, 1.0], [3.0, 3.0, 3.0], [1.0, 1.0, 0.0], [1.0, 2.0, 3.0])
    second = solve_tridiagonal([9.0, 1.0, 1.0], [3.0, 3.0, 3.0], [1.0, 1.0, 9.0], [1.0, 2.0, 3.0])
    assert first == pytest.approx(second)


def test_solve_tridiagonal_length_mismatch():
    with pytest.raises(ValueError):
        solve_tridiagonal([0.0, 1.0], [2.0, 2.0, 2.0], [1.0, 1.0, 0.0], [1.0, 1.0, 1.0])


def test_solve_tridiagonal_empty():
    with pytest.raises(ValueError):
        solve_tridiagonal([], [], [], [])


def test_linear_function_derivatives_exact():
    grid = Grid(5, 6, -1.0, 1.0, 0.0, 2.0)
    nodes = node_derivatives(grid, FunctionKind.X)
    assert len(nodes) == 5
    assert all(len(column) == 6 for column in nodes)
    for i, column in enumerate(nodes):
        for value, d_x, d_y, d_xy in column:
            assert value == pytest.approx(grid.node_x(i))
            assert d_x == pytest.approx(1.0)
            assert d_y == pytest.approx(0.0, abs=1e-12)
            assert d_xy == pytest.approx(0.0, abs=1e-12)


def test_quadratic_first_derivatives_exact():
    grid = Grid(6, 7, -1.0, 2.0, -3.0, 1.0)
    nodes = node_derivatives(grid, FunctionKind.SQUARED_RADIUS)
    for i, column in enumerate(nodes):
        for j, (value, d_x, d_y, _) in enumerate(column):
            x, y = grid.node_x(i), grid.node_y(j)
            assert value == pytest.approx(evaluate(FunctionKind.SQUARED_RADIUS, x, y))
            assert d_x == pytest.approx(2 * x, abs=1e-9)
            assert d_y == pytest.approx(2 * y, abs=1e-9)


def test_patches_shape_and_corner_values():
    grid = Grid(5, 4, 0.0, 1.0, 0.0, 3.0)
    patches = build_patches(grid, FunctionKind.RUNGE)
    assert len(patches) == 4
    assert all(len(row) == 3 for row in patches)
    for i, row in enumerate(patches):
        for j, patch in enumerate(row):
            expected = evaluate(FunctionKind.RUNGE, grid.node_x(i), grid.node_y(j))
            assert patch[0][0] == pytest.approx(expected)


def test_patches_for_sum_are_planar():
    grid = Grid(4, 4, 0.0, 3.0, 0.0, 3.0)
    patches = build_patches(grid, FunctionKind.X_PLUS_Y)
    for row in patches:
        for patch in row:
            assert patch[1][0] == pytest.approx(1.0)
            assert patch[0][1] == pytest.approx(1.0)
            assert patch[1][1] == pytest.approx(0.0, abs=1e-12)
            assert patch[3][3] == pytest.approx(0.0, abs=1e-12)


def test_invalid_kind_rejected():
    grid = Grid(4, 4, 0.0, 1.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        node_derivatives(grid, 8)