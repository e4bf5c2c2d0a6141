import pytest

from handrouter.config import (
    CPI,
    FEEDRATE_DEFAULT,
    X_RANGE,
    Y_RANGE,
    Z_LIMIT_OFFSET,
    Z_RANGE,
)
from handrouter.model import CalParams, Feature, Path, Point, Position, State


def test_position_within_limits_is_valid():
    pos = Position()
    assert pos.set(1.0, -2.0, -3.0) is True
    assert (pos.x, pos.y, pos.z) == (1.0, -2.0, -3.0)
    assert pos.valid


def test_position_clamps_x_and_y():
    pos = Position(100.0, -100.0, 0.0)
    assert pos.x == X_RANGE / 2
    assert pos.y == -Y_RANGE / 2
    assert pos.valid is False


def test_position_clamps_z_to_max_height():
    pos = Position(0.0, 0.0, 50.0, max_height=5.0)
    assert pos.z == 5.0
    assert pos.valid is False


def test_position_clamps_z_lower_limit():
    pos = Position(max_height=0.0)
    assert pos.set(0.0, 0.0, -1000.0) is False
    assert pos.z == -Z_RANGE + Z_LIMIT_OFFSET


def test_position_set_recovers_validity():
    pos = Position(100.0, 0.0, 0.0)
    assert pos.set(0.0, 0.0, 0.0) is True
    assert pos.valid


def test_cal_params_default_from_cpi():
    cal = CalParams()
    assert cal.x == pytest.approx(25.4 / CPI)
    assert cal.y == cal.x
    assert cal.r == 0.0


def test_point_defaults():
    point = Point(1.0, 2.0, 3.0)
    assert point.f == FEEDRATE_DEFAULT
    assert point.feature is Feature.NORMAL


def test_path_append_and_iterate():
    path = Path()
    path.append(Point(1.0, 2.0, 3.0))
    path.append(Point(4.0, 5.0, 6.0))
    assert len(path) == 2
    assert [p.x for p in path] == [1.0, 4.0]
    assert path[1].z == 6.0


def test_path_full_raises():
    path = Path(capacity=2)
    path.append(Point())
    path.append(Point())
    with pytest.raises(OverflowError):
        path.append(Point())
    assert len(path) == 2


def test_path_clear():
    path = Path(min_z=-3.0)
    path.append(Point())
    path.clear()
    assert len(path) == 0
    assert path.min_z == 0.0


def test_state_order_follows_workflow():
    assert State.POWER_ON < State.ZEROED < State.READY
    assert State(12) is State.READY