"""Command line entry point: check the arguments and show the surface."""

from __future__ import annotations

import re
import sys
from itertools import product
from typing import NamedTuple, Sequence

from .scene import KEY_HELP, Scene

DRAW_STEPS = 80

_INT = re.compile(r"\s*[+-]?\d+")
_FLOAT = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class ArgumentError(ValueError):
    """The command line arguments are missing or invalid."""


class _Arguments(NamedTuple):
    method: int
    n_x: int
    n_y: int
    function_number: int
    x_a: float
    x_b: float
    y_a: float
    y_b: float


def _scan_int(text: str, message: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ArgumentError(message)
    return int(match.group())


def _scan_float(text: str, message: str) -> float:
    match = _FLOAT.match(text)
    if match is None:
        raise ArgumentError(message)
    return float(match.group())


def _segment(start_text: str, end_text: str) -> tuple[float, float]:
    type_error = "Error in the data type in the segment"
    start = _scan_float(start_text, type_error)
    end = _scan_float(end_text, type_error)
    if start > end or end - start > 1e9 or end - start < 1e-6:
        raise ArgumentError("Incorrect segment")
    return start, end


def parse_args(argv: Sequence[str]) -> _Arguments:
    """Validate the eight positional arguments: method n_x n_y k x_a x_b y_a y_b."""
    argv = list(argv)
    if len(argv) < 8:
        raise ArgumentError("Not enough arguments")
    if len(argv) > 8:
        raise ArgumentError("Exceeding the number of arguments")

    method = _scan_int(argv[0], "Error in the data type in the method ")
    if method not in (1, 2):
        raise ArgumentError("Unknown method")

    counts = []
    for text in argv[1:3]:
        count = _scan_int(text, "Error in the data type in the amount of points")
        if count < 5:
            raise ArgumentError("Not enough amount of points")
        counts.append(count)

    function_number = _scan_int(argv[3], "Error in the data type in the function")
    if not 0 <= function_number <= 7:
        raise ArgumentError("Invalid function")

    x_a, x_b = _segment(argv[4], argv[5])
    y_a, y_b = _segment(argv[6], argv[7])
    return _Arguments(method, counts[0], counts[1], function_number, x_a, x_b, y_a, y_b)


def _draw(scene: Scene, fig, ax) -> None:
    xs, ys, values = scene.sample(DRAW_STEPS)
    width = len(ys)
    px = [x for x in xs for _ in ys]
    py = [y for _ in xs for y in ys]
    pz = [z for row in values for z in row]
    triangles = []
    for i, j in product(range(1, len(xs)), range(1, width)):
        here, left = i * width + j, (i - 1) * width + j
        triangles.append((left, left - 1, here))
        triangles.append((here - 1, here, left - 1))

    ax.clear()
    ax.plot_trisurf(px, py, pz, triangles=triangles, cmap="viridis", alpha=0.7, linewidth=0)
    ax.plot([scene.view_x_a, scene.view_x_b], [0, 0], [0, 0], color="red", linewidth=2)
    ax.plot([0, 0], [scene.view_y_a, scene.view_y_b], [0, 0], color="red", linewidth=2)
    ax.plot([0, 0], [0, 0], [-scene.abs_max, scene.abs_max], color="red", linewidth=2)
    ax.set_xlim(scene.view_x_a, scene.view_x_b)
    ax.set_ylim(scene.view_y_a, scene.view_y_b)
    ax.set_zlim(-scene.abs_max, scene.abs_max)
    ax.view_init(elev=scene.x_rot + 90, azim=-scene.z_rot)

    for text in list(fig.texts):
        text.remove()
    fig.text(0.01, 0.99, "   ".join(KEY_HELP), fontsize=9, va="top")
    for n, line in enumerate(scene.status_lines()):
        fig.text(
            0.01, 0.96 - 0.025 * n, line, fontsize=9, va="top",
            color="blue" if n < 6 else "red",
        )


def _show(scene: Scene) -> None:
    import matplotlib.pyplot as plt

    with plt.rc_context({"keymap.back": [], "keymap.forward": []}):
        fig = plt.figure(figsize=(10, 8))
        ax = fig.add_subplot(projection="3d")
        _draw(scene, fig, ax)

        def on_key(event) -> None:
            if not scene.handle_key(event.key):
                return
            if scene.closed:
                plt.close(fig)
                return
            _draw(scene, fig, ax)
            fig.canvas.draw_idle()

        fig.canvas.mpl_connect("key_press_event", on_key)
        plt.show()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; print the problem and return 1 on bad arguments."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        arguments = parse_args(argv)
    except ArgumentError as error:
        print(error)
        return 1
    _show(Scene(*arguments))
    return 0


if __name__ == "__main__":
    sys.exit(main())