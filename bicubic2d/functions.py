"""Test functions of two variables with their analytic partial derivatives."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable

_EPS = 1e-15

_Surface = Callable[[float, float], float]


class FunctionKind(IntEnum):
    """The functions that can be interpolated, numbered as on the command line."""

    ONE = 0
    X = 1
    Y = 2
    X_PLUS_Y = 3
    RADIUS = 4
    SQUARED_RADIUS = 5
    EXP_X2_MINUS_Y2 = 6
    RUNGE = 7


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _runge_denominator(x: float, y: float) -> float:
    return 25 * x * x + 25 * y * y + 1


def _radius_dx(x: float, y: float) -> float:
    if abs(y) < _EPS:
        if abs(x) < _EPS:
            return 0.0
        return 1.0 if x > 0 else -1.0
    return x / math.sqrt(x * x + y * y)


def _radius_dy(x: float, y: float) -> float:
    if abs(x) < _EPS:
        if abs(y) < _EPS:
            return 0.0
        return 1.0 if y > 0 else -1.0
    return y / math.sqrt(x * x + y * y)


def _radius_dxy(x: float, y: float) -> float:
    if abs(x) < _EPS and abs(y) < _EPS:
        return 0.0
    return -y * x / math.sqrt(x * x + y * y) ** 3


def _radius_quartic(x: float, y: float) -> float:
    return y**4 + 2 * y**2 * x**2 + x**4


def _radius_dxx(x: float, y: float) -> float:
    if abs(x) < _EPS and abs(y) < _EPS:
        return 0.0
    return y * y * math.sqrt(y * y + x * x) / _radius_quartic(x, y)


def _radius_dyy(x: float, y: float) -> float:
    if abs(x) < _EPS and abs(y) < _EPS:
        return 0.0
    return x * x * math.sqrt(y * y + x * x) / _radius_quartic(x, y)


def _constant(value: float) -> _Surface:
    """A surface that takes the same value everywhere."""
    return lambda x, y: value


_ZERO = _constant(0.0)
_ONE = _constant(1.0)


_VALUES: dict[FunctionKind, _Surface] = {
    FunctionKind.ONE: _ONE,
    FunctionKind.X: lambda x, y: x,
    FunctionKind.Y: lambda x, y: y,
    FunctionKind.X_PLUS_Y: lambda x, y: x + y,
    FunctionKind.RADIUS: lambda x, y: math.sqrt(x * x + y * y),
    FunctionKind.SQUARED_RADIUS: lambda x, y: x * x + y * y,
    FunctionKind.EXP_X2_MINUS_Y2: lambda x, y: _exp(x * x - y * y),
    FunctionKind.RUNGE: lambda x, y: 1 / _runge_denominator(x, y),
}

_DX: dict[FunctionKind, _Surface] = {
    FunctionKind.ONE: _ZERO,
    FunctionKind.X: _ONE,
    FunctionKind.Y: _ZERO,
    FunctionKind.X_PLUS_Y: _ONE,
    FunctionKind.RADIUS: _radius_dx,
    FunctionKind.SQUARED_RADIUS: lambda x, y: 2 * x,
    FunctionKind.EXP_X2_MINUS_Y2: lambda x, y: 2 * x * _exp(x * x - y * y),
    FunctionKind.RUNGE: lambda x, y: -50 * x / _runge_denominator(x, y) ** 2,
}

_DY: dict[FunctionKind, _Surface] = {
    FunctionKind.ONE: _ZERO,
    FunctionKind.X: _ZERO,
    FunctionKind.Y: _ONE,
    FunctionKind.X_PLUS_Y: _ONE,
    FunctionKind.RADIUS: _radius_dy,
    FunctionKind.SQUARED_RADIUS: lambda x, y: 2 * y,
    FunctionKind.EXP_X2_MINUS_Y2: lambda x, y: -2 * y * _exp(x * x - y * y),
    FunctionKind.RUNGE: lambda x, y: -50 * y / _runge_denominator(x, y) ** 2,
}

_DXY: dict[FunctionKind, _Surface] = {
    FunctionKind.ONE: _ZERO,
    FunctionKind.X: _ZERO,
    FunctionKind.Y: _ZERO,
    FunctionKind.X_PLUS_Y: _ZERO,
    FunctionKind.RADIUS: _radius_dxy,
    FunctionKind.SQUARED_RADIUS: _ZERO,
    FunctionKind.EXP_X2_MINUS_Y2: lambda x, y: -4 * x * y * _exp(x * x - y * y),
    FunctionKind.RUNGE: lambda x, y: 5000 * x * y / _runge_denominator(x, y) ** 3,
}

_DXX: dict[FunctionKind, _Surface] = {
    FunctionKind.ONE: _ZERO,
    FunctionKind.X: _ZERO,
    FunctionKind.Y: _ZERO,
    FunctionKind.X_PLUS_Y: _ZERO,
    FunctionKind.RADIUS: _radius_dxx,
    FunctionKind.SQUARED_RADIUS: _constant(2.0),
    FunctionKind.EXP_X2_MINUS_Y2: lambda x, y: (4 * x * x + 2) * _exp(x * x - y * y),
    FunctionKind.RUNGE: lambda x, y: (
        -50 * (_runge_denominator(x, y) - 100 * x * x) / _runge_denominator(x, y) ** 3
    ),
}

_DYY: dict[FunctionKind, _Surface] = {
    FunctionKind.ONE: _ZERO,
    FunctionKind.X: _ZERO,
    FunctionKind.Y: _ZERO,
    FunctionKind.X_PLUS_Y: _ZERO,
    FunctionKind.RADIUS: _radius_dyy,
    FunctionKind.SQUARED_RADIUS: _constant(2.0),
    FunctionKind.EXP_X2_MINUS_Y2: lambda x, y: (4 * y * y - 2) * _exp(x * x - y * y),
    FunctionKind.RUNGE: lambda x, y: (
        -50 * (_runge_denominator(x, y) - 100 * y * y) / _runge_denominator(x, y) ** 3
    ),
}

_NAMES: dict[FunctionKind, str] = {
    FunctionKind.ONE: "f(x,y) = 1",
    FunctionKind.X: "f(x,y) = x",
    FunctionKind.Y: "f(x,y) = y",
    FunctionKind.X_PLUS_Y: "f(x,y) = x + y",
    FunctionKind.RADIUS: "f(x,y) = sqrt(x * x + y * y)",
    FunctionKind.SQUARED_RADIUS: "f(x,y) = x * x + y * y",
    FunctionKind.EXP_X2_MINUS_Y2: "f(x,y) = exp(x * x - y * y)",
    FunctionKind.RUNGE: "f(x,y) = 1/(25*x*x+25*y*y+1)",
}


def evaluate(kind: FunctionKind | int, x: float, y: float) -> float:
    """Value of the function at (x, y)."""
    return _VALUES[FunctionKind(kind)](x, y)


def derivative_x(kind: FunctionKind | int, x: float, y: float) -> float:
    """Partial derivative with respect to x."""
    return _DX[FunctionKind(kind)](x, y)


def derivative_y(kind: FunctionKind | int, x: float, y: float) -> float:
    """Partial derivative with respect to y."""
    return _DY[FunctionKind(kind)](x, y)


def derivative_xy(kind: FunctionKind | int, x: float, y: float) -> float:
    """Mixed second partial derivative."""
    return _DXY[FunctionKind(kind)](x, y)


def derivative_xx(kind: FunctionKind | int, x: float, y: float) -> float:
    """Second partial derivative with respect to x."""
    return _DXX[FunctionKind(kind)](x, y)


def derivative_yy(kind: FunctionKind | int, x: float, y: float) -> float:
    """Second partial derivative with respect to y."""
    return _DYY[FunctionKind(kind)](x, y)


def function_name(kind: FunctionKind | int) -> str:
    """Human-readable formula of the function."""
    return _NAMES[FunctionKind(kind)]