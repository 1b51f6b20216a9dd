# bicubic2d

Piecewise bicubic interpolation of a function of two variables on a uniform
rectangular grid, and an interactive 3D viewer that compares the function with
its interpolants.

There are two ways to get the node derivatives that the patches are built from:

1. **Method 1** (`bicubic2d.method1`): Hermite patches. Interior nodes use the
   analytic partial derivatives of the function. Boundary nodes use central
   differences that sample the function one step outside the grid.
2. **Method 2** (`bicubic2d.method2`): spline patches. Along each grid line
   the first derivatives come from a tridiagonal system
   (`method2.solve_tridiagonal`). Its end rows use the analytic second
   derivatives at the ends of the interval.

Eight test functions are built in (`bicubic2d.functions.FunctionKind`):

| number | name              | function                     |
|-------:|-------------------|------------------------------|
| 0      | `ONE`             | `1`                          |
| 1      | `X`               | `x`                          |
| 2      | `Y`               | `y`                          |
| 3      | `X_PLUS_Y`        | `x + y`                      |
| 4      | `RADIUS`          | `sqrt(x*x + y*y)`            |
| 5      | `SQUARED_RADIUS`  | `x*x + y*y`                  |
| 6      | `EXP_X2_MINUS_Y2` | `exp(x*x - y*y)`             |
| 7      | `RUNGE`           | `1 / (25*x*x + 25*y*y + 1)`  |

`bicubic2d.functions` also provides `evaluate`, `derivative_x`,
`derivative_y`, `derivative_xy`, `derivative_xx`, `derivative_yy` and
`function_name` for each kind.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from bicubic2d.functions import FunctionKind
from bicubic2d.interpolation import Interpolator, Method

interp = Interpolator(Method.METHOD2, 20, 20, FunctionKind.SQUARED_RADIUS,
                      -1.0, 1.0, -1.0, 1.0)
value = interp(0.3, -0.4)           # interpolated value
exact = interp.function(0.3, -0.4)  # the function itself
```

`Interpolator(method, n_x, n_y, kind, x_a, x_b, y_a, y_b)` raises `ValueError`
in these cases: an axis has fewer than three nodes, an interval is empty, or
the method or function number is unknown. Outside the grid, the value comes from
extending the nearest edge patch.

Lower-level pieces:

- `bicubic2d.grid.Grid` is the node grid, with `h_x`, `h_y`, `node_x`,
  `node_y` and `cell_index`.
- `hermite_matrix(h)` and `patch_coefficients(ax, ay, corner_values)` hold the
  patch algebra.
- `method1.node_derivatives` / `method2.node_derivatives` return
  `(value, d/dx, d/dy, d2/dxdy)` for each node. `build_patches` returns the
  coefficient matrix of each cell.

`bicubic2d.scene.Scene` holds the viewer state and needs no display. It has
these members:

- `evaluate` gives the height of the selected graph.
- `sample(steps)` samples the visible rectangle. It updates `sup`, `inf`,
  `abs_max` and `error_drop`.
- `status_lines()` returns the status text.
- `handle_key(key)` applies a key action.
- There are also the individual actions (`zoom_in`, `double_n`, ...).

## Viewer

```
bicubic2d METHOD N_X N_Y K X_A X_B Y_A Y_B
```

For example:

```
bicubic2d 1 100 100 4 -1 1 -10 10
```

- `METHOD`: `1` or `2`, which selects the graph shown first (method 1 or
  method 2).
- `N_X`, `N_Y`: the number of interpolation nodes along each axis, at least 5.
- `K`: the function number, 0 to 7.
- `X_A X_B`, `Y_A Y_B`: the intervals. Each must be longer than `1e-6` and no
  longer than `1e9`.

If an argument is missing or invalid, the command prints the problem and exits
with status 1. Otherwise it opens a matplotlib window with the surface, the
axes, the key help and the status lines. The surface is sampled on an 81 × 81
lattice over the visible rectangle.

| key     | action                                                              |
|---------|---------------------------------------------------------------------|
| `1`     | next graph: function, method 1, method 2, error 1, error 2          |
| `2`     | zoom in (halve the visible rectangle around its centre)             |
| `3`     | zoom out (double the visible rectangle)                             |
| `4`     | double the number of nodes                                          |
| `5`     | halve the number of nodes (not below 5)                             |
| `8`     | turn the view by +15 degrees                                        |
| `9`     | turn the view by -15 degrees                                        |
| `0`     | next function; the view is reset                                    |
| up/down | tilt the view by ±15 degrees                                        |
| left/right | turn the view by ±1 degree                                       |
| `Esc`   | close the window                                                    |

The error graphs show `f - interpolant`. When the error graphs are shown, the
status lines include the error drop. After the node count changes, the error
drop is the ratio between the new and previous largest absolute values, taken
as at least 1.