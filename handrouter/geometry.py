"""Plane geometry helpers for the router and its path."""

from __future__ import annotations

import math

from .model import Point, RouterPose


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x1 - x2, y1 - y2)


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to the interval [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def principal_angle(angle: float) -> float:
    """Map an undirected line angle into [0, pi].

    Positive multiples of pi map to pi; zero and negative multiples to 0.
    """
    if math.isinf(angle):
        raise ValueError("angle must be finite")
    if angle > math.pi:
        rest = angle % math.pi
        return rest if rest > 0 else math.pi
    if angle < 0:
        return angle % math.pi
    return angle


def map_range(
    x: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Linearly map x from one range to another."""
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def signed_distance(pose: RouterPose, point: Point) -> float:
    """Signed distance from point to the gantry line.

    Negative means the point lies ahead of the gantry, positive behind it.
    """
    m = math.tan(pose.yaw)
    b = pose.y - m * pose.x
    return (m * point.x - point.y + b) / math.sqrt(m * m + 1.0)


def angle_from(a: Point, b: Point, yaw: float) -> float:
    """Angle (rad) between the gantry and the line through a and b."""
    line = principal_angle(math.atan2(b.y - a.y, b.x - a.x))
    return abs(line - principal_angle(yaw))


def direction(start: Point, end: Point, yaw: float) -> int:
    """1 if the segment runs forward relative to yaw, -1 if backward, else 0."""
    s = math.sin(math.atan2(end.y - start.y, end.x - start.x) - yaw)
    if s > 0:
        return 1
    if s < 0:
        return -1
    return 0