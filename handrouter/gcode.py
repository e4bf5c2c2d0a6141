"""Reading cutting paths from G-code."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import replace
from os import PathLike

from .config import FEEDRATE_DEFAULT, REST_HEIGHT
from .model import Feature, Path, Point

log = logging.getLogger(__name__)

LINE_BUFFER_SIZE = 100
MAX_Z = 4.0  # tool heights above this are clamped

_COMMANDS = ("G0", "G1", "G98")
_COORDINATES = ("X", "Y", "Z")
_G_FEATURES = {98: Feature.DRILL, 0: Feature.NORMAL, 1: Feature.NORMAL, 80: Feature.NORMAL}
_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _number_at(line: str, pos: int) -> float:
    """Leading number of line[pos:], or 0.0 if there is none."""
    match = _NUMBER.match(line, pos)
    return float(match.group(1)) if match else 0.0


def is_valid_command(line: str) -> bool:
    """True if the line starts with a supported move command (G0, G1, G98)."""
    return line.startswith(_COMMANDS)


def is_valid_coordinate(line: str) -> bool:
    """True if the line starts with a coordinate word (X, Y or Z)."""
    return line.startswith(_COORDINATES)


def parent_path(path: str) -> str:
    """The directory part of a slash-separated path; "/" at the top."""
    last_slash = path.rfind("/")
    if last_slash <= 0:
        return "/"
    return path[:last_slash]


def _buffered(lines: Iterable[str]) -> Iterator[str]:
    """Split lines into the pieces a fixed-size line buffer would deliver."""
    limit = LINE_BUFFER_SIZE - 1
    for line in lines:
        if len(line) <= limit:
            yield line
            continue
        for start in range(0, len(line), limit):
            yield line[start : start + limit]


def parse_gcode(lines: Iterable[str], feedrate: float = FEEDRATE_DEFAULT) -> Path:
    """Build a path from G-code lines.

    A move command (G0, G1, G98) or M800 opens a feature; following lines that
    start with a coordinate continue it and any other line closes it. Each
    coordinate-bearing line of an open feature adds a point, inheriting unset
    coordinates from the previous one. A G98 point becomes a drill cycle of
    three points: rest height, hole depth, rest height. Parsing stops when
    the path is full.
    """
    path = Path()
    active = False
    last = Point()

    for line in _buffered(lines):
        if line.startswith("M800"):
            active = True
            continue

        if is_valid_command(line):
            active = True
        elif not is_valid_coordinate(line):
            active = False

        if not active:
            continue

        point = replace(last)
        has_coordinate = False
        for pos, char in enumerate(line):
            if char == "G":
                feature = _G_FEATURES.get(_number_at(line, pos + 1))
                if feature is not None:
                    point.feature = feature
            elif char == "X":
                point.x = _number_at(line, pos + 1)
                has_coordinate = True
            elif char == "Y":
                point.y = _number_at(line, pos + 1)
                has_coordinate = True
            elif char == "Z":
                z = _number_at(line, pos + 1)
                has_coordinate = True
                if z < path.min_z:
                    path.min_z = z
                point.z = MAX_Z if z > MAX_Z else z
            point.f = feedrate

        if has_coordinate and len(path) < path.capacity:
            if point.feature != Feature.DRILL:
                path.append(point)
            elif len(path) + 2 < path.capacity:
                for z in (REST_HEIGHT, point.z, REST_HEIGHT):
                    path.append(replace(point, z=z))
            else:
                log.warning("path is full")
                break
        elif len(path) >= path.capacity:
            log.warning("path is full")
            break

        last = point

    return path


def parse_gcode_file(
    path: str | PathLike[str], feedrate: float = FEEDRATE_DEFAULT
) -> Path:
    """Parse a G-code file into a path; raises OSError if it cannot be read."""
    with open(path, encoding="latin-1", newline="") as handle:
        return parse_gcode(handle, feedrate)