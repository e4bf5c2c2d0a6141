"""Preset design paths."""

from __future__ import annotations

import math
from collections.abc import Callable

from .config import REST_HEIGHT
from .model import Feature, Path, Point

SIN_AMP = 5.0
SIN_PERIOD = 50.0
PATH_MAX_Y = 100.0


def _depth(i: int, n: int, depth: float) -> float:
    """Rest height at either end of a stroke, the cutting depth in between."""
    return REST_HEIGHT if i in (0, n - 1) else depth


def _diamond_side(
    sign: int, reverse: bool, angle_deg: float, length: float, thickness: float
) -> list[Point]:
    n = 1000
    y_increment = length / (n - 1)
    x_increment = y_increment / math.tan(math.radians(angle_deg))
    points = []
    for i in range(n):
        x_index = n - 1 - i if i >= n // 2 else i
        y_index = n - 1 - i if reverse else i
        points.append(
            Point(
                x=sign * x_index * x_increment,
                y=y_index * y_increment,
                z=_depth(i, n, -thickness),
            )
        )
    return points


def line_path(thickness: float) -> Path:
    """A straight cut along +y."""
    n = 1000
    points = [
        Point(x=0.0, y=PATH_MAX_Y * i / (n - 1), z=-thickness) for i in range(n)
    ]
    points[-1].z = REST_HEIGHT
    return Path(points=points)


def sine_path(thickness: float) -> Path:
    """A sine wave cut along +y."""
    n = 1000
    points = []
    for i in range(n):
        y = PATH_MAX_Y * i / (n - 1)
        x = SIN_AMP * math.sin((2 * math.pi / SIN_PERIOD) * y)
        points.append(Point(x=x, y=y, z=-thickness))
    points[-1].z = REST_HEIGHT
    return Path(points=points)


def zigzag_path(thickness: float) -> Path:
    """A triangle wave cut along +y."""
    n = 1000
    zig = 40.0
    points = []
    for i in range(n):
        y = PATH_MAX_Y * i / (n - 1)
        x = math.fmod(y, zig)
        if x > zig / 2:
            x = zig - x
        points.append(Point(x=x, y=y, z=-thickness))
    points[-1].z = REST_HEIGHT
    return Path(points=points)


def double_line_path(thickness: float) -> Path:
    """Up along x = -20, then down along x = 20."""
    n = 1000
    length = 100.0
    up = []
    down = []
    for i in range(n):
        scale = i / (n - 1)
        z = _depth(i, n, -thickness)
        up.append(Point(x=-20.0, y=length * scale, z=z))
        down.append(Point(x=20.0, y=length * (1 - scale), z=z))
    return Path(points=up + down)


def circle_path(thickness: float) -> Path:
    """A circle of radius 30 through the origin, centred at (0, 30)."""
    n = 4000
    r = 30.0
    cx, cy = 0.0, r
    points = [Point(x=0.0, y=0.0, z=REST_HEIGHT)]
    for i in range(1, n):
        theta = i / (n - 1) * (2 * math.pi)
        z = REST_HEIGHT if i in (1, n - 1) else -thickness
        points.append(
            Point(
                x=cx + r * math.cos(theta - math.pi / 2),
                y=cy + r * math.sin(theta - math.pi / 2),
                z=z,
            )
        )
    return Path(points=points)


def diamond_path(thickness: float) -> Path:
    """A diamond with 60-degree sides: right half up, left half down."""
    right = _diamond_side(1, False, 60.0, 100.0, thickness)
    left = _diamond_side(-1, True, 60.0, 100.0, thickness)
    return Path(points=right + left)


def square_sine_path(thickness: float) -> Path:
    """A sine engraving inside a square cut outline."""
    n = 1000
    length = 100.0
    engrave = thickness / 4
    points = []
    for i in range(n):
        y = length * i / (n - 1)
        x = SIN_AMP * math.sin((2 * math.pi / SIN_PERIOD) * y)
        points.append(Point(x=x, y=y, z=_depth(i, n, -engrave)))
    points += _diamond_side(-1, True, 45.0, length, thickness)
    points += _diamond_side(1, False, 45.0, length, thickness)
    return Path(points=points)


def square_wave_path(thickness: float) -> Path:
    """Currently the same design as square_sine_path."""
    return square_sine_path(thickness)


def square_make_path(thickness: float) -> Path:
    """An "M:" engraving inside a square cut outline."""
    n = 1000
    length = 100.0
    engrave = thickness / 4
    make = 0.3 * length
    colon = 0.6 * make
    mid = length / 2
    points: list[Point] = []

    def stroke(start_y: float, dy: float, x0: float, dx: float, depth: float) -> None:
        for i in range(n):
            t = i / (n - 1)
            points.append(
                Point(x=x0 + dx * t, y=start_y + dy * t, z=_depth(i, n, depth))
            )

    stroke(mid - make / 2, make, -make / 2, 0.0, -thickness)
    stroke(mid + make / 2, -make, -make / 2, make * 3 / 8, -engrave)
    stroke(mid - make / 2, make, -make / 2 + make * 3 / 8, make * 3 / 8, -engrave)
    stroke(mid + make / 2, -make, make / 4, 0.0, -engrave)

    start_y = mid - colon / 2
    dot = 0.2 * colon
    for i in range(n):
        y = start_y + colon * i / (n - 1)
        offset = y - start_y
        in_dot = offset <= dot or offset > colon - dot
        z = _depth(i, n, -engrave) if in_dot else REST_HEIGHT
        points.append(Point(x=make / 2, y=y, z=z))

    points += _diamond_side(-1, True, 45.0, length, thickness)
    points += _diamond_side(1, False, 45.0, length, thickness)
    return Path(points=points)


def drill_square_path(thickness: float) -> Path:
    """Five drill holes: the centre and the corners of a 100 mm square."""
    side = 50.0
    corners = [
        (0.0, 0.0),
        (side, side),
        (-side, side),
        (-side, -side),
        (side, -side),
        (0.0, 0.0),
    ]
    return Path(
        points=[
            Point(x=x, y=y, z=-thickness, feature=Feature.DRILL) for x, y in corners
        ]
    )


_PRESETS: dict[int, Callable[[float], Path]] = {
    0: line_path,
    1: sine_path,
    2: zigzag_path,
    3: double_line_path,
    4: diamond_path,
    5: square_sine_path,
    6: square_make_path,
    7: circle_path,
    8: drill_square_path,
}


def preset_path(index: int, thickness: float) -> Path:
    """Build the preset design with the given menu index."""
    try:
        generator = _PRESETS[index]
    except KeyError:
        raise ValueError(f"no preset design with index {index}") from None
    return generator(thickness)