import math

import pytest

from bicubic2d.functions import (
    FunctionKind,
    derivative_x,
    derivative_xx,
    derivative_xy,
    derivative_y,
    derivative_yy,
    evaluate,
    function_name,
)

POINT = (0.3, -0.4)
STEP = 1e-5
STEP2 = 1e-4


def _f(kind, x, y):
    return evaluate(kind, x, y)


@pytest.mark.parametrize("kind", list(FunctionKind))
def test_derivative_x_matches_difference(kind):
    x, y = POINT
    approx = (_f(kind, x + STEP, y) - _f(kind, x - STEP, y)) / (2 * STEP)
    assert derivative_x(kind, x, y) == pytest.approx(approx, rel=1e-5, abs=1e-6)


@pytest.mark.parametrize("kind", list(FunctionKind))
def test_derivative_y_matches_difference(kind):
    x, y = POINT
    approx = (_f(kind, x, y + STEP) - _f(kind, x, y - STEP)) / (2 * STEP)
    assert derivative_y(kind, x, y) == pytest.approx(approx, rel=1e-5, abs=1e-6)


@pytest.mark.parametrize("kind", list(FunctionKind))
def test_derivative_xy_matches_difference(kind):
    x, y = POINT
    h = STEP2
    approx = (
        _f(kind, x + h, y + h)
        - _f(kind, x + h, y - h)
        - _f(kind, x - h, y + h)
        + _f(kind, x - h, y - h)
    ) / (4 * h * h)
    assert derivative_xy(kind, x, y) == pytest.approx(approx, rel=1e-3, abs=1e-3)


@pytest.mark.parametrize("kind", list(FunctionKind))
def test_derivative_xx_matches_difference(kind):
    x, y = POINT
    h = STEP2
    approx = (_f(kind, x + h, y) - 2 * _f(kind, x, y) + _f(kind, x - h, y)) / (h * h)
    assert derivative_xx(kind, x, y) == pytest.approx(approx, rel=1e-3, abs=1e-3)


@pytest.mark.parametrize("kind", list(FunctionKind))
def test_derivative_yy_matches_difference(kind):
    x, y = POINT
    h = STEP2
    approx = (_f(kind, x, y + h) - 2 * _f(kind, x, y) + _f(kind, x, y - h)) / (h * h)
    assert derivative_yy(kind, x, y) == pytest.approx(approx, rel=1e-3, abs=1e-3)


def test_simple_values():
    assert evaluate(FunctionKind.ONE, 7.0, -3.0) == 1
    assert evaluate(FunctionKind.X, 7.0, -3.0) == 7.0
    assert evaluate(FunctionKind.Y, 7.0, -3.0) == -3.0
    assert evaluate(FunctionKind.RADIUS, 3.0, 4.0) == 5.0


def test_integer_kind_is_accepted():
    assert evaluate(5, 2.0, 1.0) == evaluate(FunctionKind.SQUARED_RADIUS, 2.0, 1.0)


def test_radius_derivatives_on_axes():
    assert derivative_x(FunctionKind.RADIUS, 2.0, 0.0) == 1
    assert derivative_x(FunctionKind.RADIUS, -2.0, 0.0) == -1
    assert derivative_y(FunctionKind.RADIUS, 0.0, -2.0) == -1
    assert derivative_x(FunctionKind.RADIUS, 0.0, 0.0) == 0
    assert derivative_xy(FunctionKind.RADIUS, 0.0, 0.0) == 0
    assert derivative_xx(FunctionKind.RADIUS, 0.0, 0.0) == 0


def test_exponential_overflow_gives_infinity():
    assert evaluate(FunctionKind.EXP_X2_MINUS_Y2, 100.0, 0.0) == math.inf


def test_function_names():
    assert function_name(FunctionKind.X) == "f(x,y) = x"
    assert function_name(7) == "f(x,y) = 1/(25*x*x+25*y*y+1)"


@pytest.mark.parametrize("bad", [-1, 8])
def test_unknown_kind_raises(bad):
    with pytest.raises(ValueError):
        evaluate(bad, 0.0, 0.0)
    with pytest.raises(ValueError):
        function_name(bad)