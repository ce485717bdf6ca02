"""Discrete PID controller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Regulator:
    """PID controller.

    With ``integrate_in_sum`` the integral constant divides each error before it
    is accumulated; otherwise it divides the accumulated sum.
    """

    gain: float = 0.1
    integral_time: float = 5.0
    derivative_time: float = 0.1
    integrate_in_sum: bool = True
    setpoint: float = 0.0
    error: float = 0.0
    previous_error: float = 0.0
    error_sum: float = 0.0
    control: float = 0.0
    p_term: float = 0.0
    i_term: float = 0.0
    d_term: float = 0.0

    def update_error(self, measured: float) -> None:
        """Compute the new error from the set point and the measured value."""
        self.previous_error = self.error
        self.error = self.setpoint - measured
        if self.integral_time != 0:
            if self.integrate_in_sum:
                self.error_sum += self.error / self.integral_time
            else:
                self.error_sum += self.error

    def compute_control(self) -> float:
        """Compute and return the control value from the current error state."""
        self.p_term = self.gain * self.error
        if abs(self.integral_time) > 1e-6:
            if self.integrate_in_sum:
                self.i_term = self.error_sum
            else:
                self.i_term = self.error_sum / self.integral_time
        else:
            self.i_term = 0.0
        self.d_term = self.derivative_time * (self.error - self.previous_error)
        self.control = self.p_term + self.i_term + self.d_term
        return self.control

    def clear_proportional(self) -> None:
        """Zero the proportional term and the current error."""
        self.p_term = 0.0
        self.error = 0.0

    def clear_integral(self) -> None:
        """Zero the accumulated error and the integral term."""
        self.error_sum = 0.0
        self.i_term = 0.0

    def clear_derivative(self) -> None:
        """Zero the derivative and integral terms."""
        self.i_term = 0.0
        self.d_term = 0.0

    def set_history(
        self, error: float, previous_error: float, error_sum: float, control: float
    ) -> None:
        """Restore the error history and last control value."""
        self.error = error
        self.previous_error = previous_error
        self.error_sum = error_sum
        self.control = control

    def reset(self) -> None:
        """Zero the set point, the settings and the error history."""
        self.setpoint = 0.0
        self.gain = 0.0
        self.integral_time = 0.0
        self.derivative_time = 0.0
        self.error = 0.0
        self.previous_error = 0.0
        self.error_sum = 0.0
        self.control = 0.0