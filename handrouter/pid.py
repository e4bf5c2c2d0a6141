"""A textbook PID controller."""

from __future__ import annotations


class PIDController:
    """Proportional-integral-derivative controller with fixed gains."""

    def __init__(self, kp: float, ki: float, kd: float) -> None:
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.integral = 0.0
        self.prev_error = 0.0

    def compute(self, error: float, delta_time: float) -> float:
        """Return the control output; delta_time must be non-zero."""
        if delta_time == 0:
            raise ZeroDivisionError("delta_time must be non-zero")
        self.integral += error * delta_time
        derivative = (error - self.prev_error) / delta_time
        self.prev_error = error
        return self.kp * error + self.ki * self.integral + self.kd * derivative

    def reset(self) -> None:
        """Clear the integral and derivative history."""
        self.integral = 0.0
        self.prev_error = 0.0