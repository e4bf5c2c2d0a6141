"""Screen layout helpers: file lists, scrolling names, target and progress marks."""

from __future__ import annotations

import math
import os
from os import PathLike
from pathlib import Path as FilePath

from .config import MAX_FILES, X_RANGE, Y_RANGE
from .geometry import map_range
from .model import Position

DISPLAY_LINES = 7  # file names shown at once
CENTER_LINE = 3  # line the selection is kept on
CHARS_TO_DISPLAY = 12  # characters that fit on a line at text size 2
SCROLL_DELAY_MS = 500  # pause before a long name starts scrolling
SCROLL_SPEED_MS = 150  # time between scroll steps
SCROLL_GAP = "    "  # spacing before a scrolling name repeats
PARENT_ENTRY = "../"


def exponential_skew(x: float) -> float:
    """Skew a value away from zero: x + e^-x for x > 0, -(x + e^-x) for x < 0."""
    if x > 0:
        return x + math.exp(-x)
    if x < 0:
        return -(x + math.exp(-x))
    return 0.0


def file_window(
    selected: int,
    total: int,
    lines: int = DISPLAY_LINES,
    center: int = CENTER_LINE,
) -> range:
    """Indices of the entries to show, keeping the selection on the centre line.

    Near the end of the list the window stops scrolling so it stays full.
    """
    if lines <= 0:
        raise ValueError("lines must be positive")
    start = max(0, selected - center)
    if start + lines > total:
        start = max(0, total - lines)
    return range(start, min(start + lines, max(total, 0)))


def scroll_text(text: str, position: int, width: int = CHARS_TO_DISPLAY) -> str:
    """The visible part of a name that scrolls round when it is too long."""
    if len(text) <= width:
        return text
    looped = text + SCROLL_GAP + text
    start = position % len(looped)
    return looped[start : start + width]


def truncate_text(text: str, width: int = CHARS_TO_DISPLAY) -> str:
    """Shorten a name that does not fit, ending it with an ellipsis."""
    if width < 3:
        raise ValueError("width must leave room for the ellipsis")
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def list_directory(
    directory: str | PathLike[str],
    root: str | PathLike[str] | None = None,
) -> list[str]:
    """Entries for the file menu: directories (with a trailing slash), then files.

    Hidden entries are left out. Below ``root`` the list starts with a
    parent entry. At most MAX_FILES entries are returned.
    """
    directory = FilePath(directory)
    entries: list[str] = []
    if root is not None and directory.resolve() != FilePath(root).resolve():
        entries.append(PARENT_ENTRY)

    with os.scandir(directory) as scan:
        visible = sorted(
            (entry for entry in scan if not entry.name.startswith(".")),
            key=lambda entry: entry.name,
        )
    dirs = [entry.name + "/" for entry in visible if entry.is_dir()]
    files = [entry.name for entry in visible if not entry.is_dir()]

    entries.extend(dirs)
    entries.extend(files)
    return entries[:MAX_FILES]


def target_offset(position: Position, window_size: float) -> tuple[float, float]:
    """Screen offset (pixels, y down) of the tool target within the bounds window."""
    half = window_size / 2
    dx = map_range(position.x, -X_RANGE / 2, X_RANGE / 2, -half, half)
    dy = -map_range(position.y, -Y_RANGE / 2, Y_RANGE / 2, -half, half)
    return dx, dy


def progress_pixels(
    progress: float, center: tuple[int, int], radius: int
) -> list[tuple[int, int]]:
    """The three pixels that mark progress (0..1) on a ring round the centre.

    The mark starts at the top and runs clockwise; it is three pixels thick,
    from radius - 1 outwards.
    """
    cx, cy = center
    angle = progress * 2 * math.pi
    s, c = math.sin(angle), math.cos(angle)
    return [
        (int(cx + (radius - 1 + i) * s), int(cy - (radius - 1 + i) * c))
        for i in range(3)
    ]