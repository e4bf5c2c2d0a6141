"""Tool actuation: turning router-frame targets into coreXY motor targets."""

from __future__ import annotations

import math

from .config import CONV_BELT, CONV_LEAD, REST_HEIGHT, X_RANGE, Y_RANGE, Z_RANGE
from .model import Point, Position, RouterPose
from .pid import PIDController


class ActuationController:
    """Computes where the tool must sit, in the router frame, to reach a goal.

    The goal is given in the workspace frame; the error between goal and the
    router's pose is rotated into the router's local frame and written into
    ``desired``, which clamps it to the gantry's reach. ``valid_motion`` is
    False whenever that clamping was needed.
    """

    range_x = X_RANGE
    range_y = Y_RANGE
    range_z = Z_RANGE

    def __init__(self, desired: Position | None = None) -> None:
        self.desired = desired if desired is not None else Position()
        self.valid_motion = False
        self.pid_x = PIDController(1.0, 0.1, 0.01)
        self.pid_y = PIDController(1.0, 0.1, 0.01)
        self.pid_z = PIDController(1.0, 0.1, 0.01)

    def update(self, delta_time: float, goal: Point, pose: RouterPose) -> bool:
        """Update the desired tool position; return whether it is reachable.

        ``delta_time`` is accepted for the control loop's benefit; the
        position is set directly from the error, without PID shaping.
        """
        err_x = goal.x - pose.x
        err_y = goal.y - pose.y
        cos_yaw = math.cos(pose.yaw)
        sin_yaw = math.sin(pose.yaw)
        local_x = err_x * cos_yaw + err_y * sin_yaw
        local_y = -err_x * sin_yaw + err_y * cos_yaw
        self.valid_motion = self.desired.set(local_x, local_y, goal.z)
        return self.valid_motion


def cartesian_to_motor(position: Position) -> tuple[int, int, int]:
    """Step targets (right belt, left belt, z screw) for a router-frame position."""
    a = position.x + position.y
    b = position.x - position.y
    return int(a * CONV_BELT), int(b * CONV_BELT), int(position.z * CONV_LEAD)


def motor_to_cartesian(
    steps_r: float, steps_l: float, steps_z: float
) -> tuple[float, float, float]:
    """Router-frame tool position (mm) for the given motor step counts."""
    a = steps_r / CONV_BELT
    b = steps_l / CONV_BELT
    return (a + b) / 2, (a - b) / 2, steps_z / CONV_LEAD


def rest_height_steps() -> int:
    """Z step target at which the tool rests above the work."""
    return int(CONV_LEAD * REST_HEIGHT)