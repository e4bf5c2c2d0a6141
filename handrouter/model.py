"""Core data types: machine states, poses, points, paths and tool positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

from .config import (
    CPI,
    FEEDRATE_DEFAULT,
    MAX_POINTS,
    X_RANGE,
    Y_RANGE,
    Z_LIMIT_OFFSET,
    Z_RANGE,
)


class State(IntEnum):
    POWER_ON = 0
    MACHINE_XY_ZERO = 1
    WORKSPACE_Z_ZERO = 2
    ZEROED = 3
    THICKNESS_SET = 4
    DOC_SELECTED = 5
    CALIBRATION = 6
    CALIBRATION_ADVANCE = 7
    TYPE_SELECTED = 8
    SELECTING_DESIGN = 9
    DESIGN_SELECTED = 10
    WORKSPACE_XY_ZERO = 11
    READY = 12
    STANDBY = 13


class CutState(IntEnum):
    NOT_CUT_READY = 0
    NOT_USER_READY = 1
    CUT_READY = 2
    CUTTING = 3
    PLUNGING = 4
    RETRACTING = 5


class DesignType(IntEnum):
    PRESET = 0
    FROM_FILE = 1
    SPEED_RUN = 2


class Feature(IntEnum):
    NORMAL = 0
    DRILL = 1


@dataclass
class RouterPose:
    """Position (mm) and orientation (rad) of the router body."""

    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0


@dataclass
class CalParams:
    """Per-sensor calibration: scale factors (mm/count) and rotation (rad)."""

    x: float = 25.4 / CPI
    y: float = 25.4 / CPI
    r: float = 0.0


@dataclass
class Point:
    """A path target in mm, with feedrate and feature type."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    f: float = FEEDRATE_DEFAULT
    feature: Feature = Feature.NORMAL


@dataclass
class Path:
    """An ordered, bounded list of points."""

    points: list[Point] = field(default_factory=list)
    min_z: float = 0.0
    capacity: int = MAX_POINTS

    def append(self, point: Point) -> None:
        """Add a point; raise OverflowError when the path is full."""
        if len(self.points) >= self.capacity:
            raise OverflowError("path is full")
        self.points.append(point)

    def clear(self) -> None:
        """Remove all points and reset the minimum depth."""
        self.points.clear()
        self.min_z = 0.0

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]


def _constrain(value: float, low: float, high: float) -> tuple[float, bool]:
    if value < low:
        return low, False
    if value > high:
        return high, False
    return value, True


class Position:
    """A tool target in the router frame, clamped to the workspace limits.

    The z limits depend on ``max_height``, the height found when zeroing z.
    ``valid`` tells whether the last assignment needed no clamping.
    """

    __slots__ = ("_x", "_y", "_z", "max_height", "valid")

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, max_height: float = 0.0
    ) -> None:
        self.max_height = max_height
        self._x = self._y = self._z = 0.0
        self.valid = self.set(x, y, z)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def z_limits(self) -> tuple[float, float]:
        return self.max_height - Z_RANGE + Z_LIMIT_OFFSET, self.max_height

    def set(self, x: float, y: float, z: float) -> bool:
        """Assign all three coordinates; return True if none was clamped."""
        self._x, ok_x = _constrain(x, -X_RANGE / 2, X_RANGE / 2)
        self._y, ok_y = _constrain(y, -Y_RANGE / 2, Y_RANGE / 2)
        self._z, ok_z = _constrain(z, *self.z_limits)
        self.valid = ok_x and ok_y and ok_z
        return self.valid

    def __repr__(self) -> str:
        return f"Position(x={self._x!r}, y={self._y!r}, z={self._z!r})"