import pytest

from handrouter.config import MAX_POINTS, REST_HEIGHT
from handrouter.gcode import (
    is_valid_command,
    is_valid_coordinate,
    parent_path,
    parse_gcode,
    parse_gcode_file,
)
from handrouter.model import Feature


@pytest.mark.parametrize(
    "line, expected",
    [
        ("G0 X1", True),
        ("G1 Y2", True),
        ("G98 X1 Y1 Z-2", True),
        ("G01 X1", True),
        ("G2 X1", False),
        ("M3 S1000", False),
        ("X1", False),
        (" G1 X1", False),
    ],
)
def test_is_valid_command(line, expected):
    assert is_valid_command(line) is expected


@pytest.mark.parametrize(
    "line, expected",
    [("X1", True), ("Y-2", True), ("Z0.5", True), ("G0 X1", False), (" X1", False), ("", False)],
)
def test_is_valid_coordinate(line, expected):
    assert is_valid_coordinate(line) is expected


@pytest.mark.parametrize(
    "path, expected",
    [("/a/b", "/a"), ("/a", "/"), ("a", "/"), ("/", "/"), ("a/b/c", "a/b")],
)
def test_parent_path(path, expected):
    assert parent_path(path) == expected


def test_coordinates_carry_over_between_lines():
    path = parse_gcode(["G0 X1 Y2 Z-1\n", "G1 X3\n", "Y4\n"], feedrate=7.0)
    assert [(p.x, p.y, p.z) for p in path] == [(1.0, 2.0, -1.0), (3.0, 2.0, -1.0), (3.0, 4.0, -1.0)]
    assert all(p.f == 7.0 for p in path)
    assert all(p.feature == Feature.NORMAL for p in path)


def test_other_line_closes_feature():
    path = parse_gcode(["G1 X1", "M5", "X2"])
    assert [p.x for p in path] == [1.0]


def test_m800_opens_feature():
    path = parse_gcode(["M800", "X5 Y6"])
    assert [(p.x, p.y) for p in path] == [(5.0, 6.0)]


def test_lines_without_coordinates_add_nothing():
    path = parse_gcode(["G0", "G1 F100"])
    assert len(path) == 0


def test_high_z_clamped_and_min_z_tracked():
    path = parse_gcode(["G1 Z7", "G1 Z-3"])
    assert [p.z for p in path] == [4.0, -3.0]
    assert path.min_z == -3.0


def test_drill_cycle_expands_to_three_points():
    path = parse_gcode(["G98 X1 Y2 Z-3"])
    assert [p.z for p in path] == [REST_HEIGHT, -3.0, REST_HEIGHT]
    assert all((p.x, p.y) == (1.0, 2.0) for p in path)
    assert all(p.feature == Feature.DRILL for p in path)


def test_drill_feature_carries_to_coordinate_lines():
    path = parse_gcode(["G98 X1 Y2 Z-3", "X4 Y5"])
    assert len(path) == 6
    assert [(p.x, p.y) for p in path[3:]] == [(4.0, 5.0)] * 3


def test_g80_line_closes_feature():
    path = parse_gcode(["G98 X1 Y2 Z-3", "G80", "X4"])
    assert len(path) == 3


def test_parsing_stops_when_full():
    lines = [f"G1 X{i}" for i in range(MAX_POINTS + 5)]
    path = parse_gcode(lines)
    assert len(path) == MAX_POINTS
    assert path[-1].x == float(MAX_POINTS - 1)


def test_drill_cycle_rejected_without_room():
    lines = [f"G1 X{i}" for i in range(MAX_POINTS - 2)] + ["G98 X1 Z-1"]
    path = parse_gcode(lines)
    assert len(path) == MAX_POINTS - 2
    assert all(p.feature == Feature.NORMAL for p in path)


def test_parse_file(tmp_path):
    target = tmp_path / "part.nc"
    target.write_text("%\nG0 X1 Y1\r\nG1 Z-2\r\n")
    path = parse_gcode_file(target, feedrate=3.0)
    assert [(p.x, p.y, p.z) for p in path] == [(1.0, 1.0, 0.0), (1.0, 1.0, -2.0)]
    assert path[0].f == 3.0


def test_parse_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_gcode_file(tmp_path / "missing.nc")