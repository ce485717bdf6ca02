"""Rolling data series for the loop charts and their axis ranges."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from pidarx.generator import SignalKind
from pidarx.simulator import Simulator

SETPOINT_POINTS = 1000
DEFAULT_POINTS = 400
_INITIAL_Y_RANGE = (0.0, 10.0)


@dataclass
class ChartSeries:
    """A named series of (x, y) points holding at most ``limit`` points."""

    name: str
    limit: int = DEFAULT_POINTS
    points: deque = field(default_factory=deque)

    def append(self, x: float, y: float) -> None:
        """Add a point, dropping the oldest one when over the limit."""
        self.points.append((x, y))
        if len(self.points) > self.limit:
            self.points.popleft()

    @property
    def ys(self) -> list[float]:
        return [y for _, y in self.points]

    def clear(self) -> None:
        self.points.clear()

    def __len__(self) -> int:
        return len(self.points)


def _initial_x_ranges() -> dict[str, tuple[float, float]]:
    return {
        "setpoint": (0.0, float(SETPOINT_POINTS)),
        "error": (0.0, float(DEFAULT_POINTS)),
        "pid": (0.0, float(DEFAULT_POINTS)),
        "control": (0.0, float(DEFAULT_POINTS)),
    }


def _initial_y_ranges() -> dict[str, tuple[float, float]]:
    return {key: _INITIAL_Y_RANGE for key in ("setpoint", "error", "pid", "control")}


class Charts:
    """Samples the simulator into four charts and keeps their axes fitted.

    Every chart update advances the simulator by one step and the shared time by one.
    """

    def __init__(self, simulator: Simulator | None = None) -> None:
        self.simulator = simulator if simulator is not None else Simulator()
        self.time = 0.0
        self.regulated = ChartSeries("Wartość Regulowana", SETPOINT_POINTS)
        self.setpoint = ChartSeries("Wartość Zadana", SETPOINT_POINTS)
        self.error = ChartSeries("Wartość Uchybu")
        self.proportional = ChartSeries("Proporcjonalna")
        self.integral = ChartSeries("Całkująca")
        self.derivative = ChartSeries("Różniczkująca")
        self.control = ChartSeries("Wartość Sterująca")
        self.x_range = _initial_x_ranges()
        self.y_range = _initial_y_ranges()

    @property
    def series(self) -> list[ChartSeries]:
        return [
            self.regulated,
            self.setpoint,
            self.error,
            self.proportional,
            self.integral,
            self.derivative,
            self.control,
        ]

    def _scroll(self, key: str, limit: int) -> None:
        if self.time > limit:
            self.x_range[key] = (self.time - limit, self.time)

    def _fit_single(self, key: str, series: ChartSeries, latest: float) -> None:
        values = series.ys + [latest]
        low, high = min(values), max(values)
        margin = max(0.1 * (high - low), 0.01)
        self.y_range[key] = (low - margin, high + margin)

    def setpoint_chart(self) -> float:
        """Step the loop, record output and set point; return the output."""
        output = self.simulator.step(self.time)
        self.regulated.append(self.time, output)
        self.setpoint.append(self.time, self.simulator.setpoint)
        self._scroll("setpoint", SETPOINT_POINTS)

        values = self.regulated.ys + self.setpoint.ys
        low, high = min(values), max(values)
        generator = self.simulator.generator
        if generator.kind in (SignalKind.SINE, SignalKind.SQUARE):
            low, high = -generator.amplitude, generator.amplitude
        margin = (high - low) * 0.1
        self.y_range["setpoint"] = (low - margin, high + margin)
        self.time += 1
        return output

    def error_chart(self) -> float:
        """Step the loop and record the control error; return it."""
        self.simulator.step(self.time)
        error = self.simulator.regulator.error
        self.error.append(self.time, error)
        self._scroll("error", DEFAULT_POINTS)
        self._fit_single("error", self.error, error)
        self.time += 1
        return error

    def pid_chart(self) -> tuple[float, float, float]:
        """Step the loop and record the P, I and D terms; return them."""
        self.simulator.step(self.time)
        reg = self.simulator.regulator
        terms = (reg.p_term, reg.i_term, reg.d_term)
        for series, value in zip((self.proportional, self.integral, self.derivative), terms):
            series.append(self.time, value)
        self._scroll("pid", DEFAULT_POINTS)

        values = self.proportional.ys + self.integral.ys + self.derivative.ys
        low, high = min(values), max(values)
        margin = high * 0.1
        self.y_range["pid"] = (low - margin, high + margin)
        self.time += 1
        return terms

    def control_chart(self) -> float:
        """Step the loop and record the control value; return it."""
        self.simulator.step(self.time)
        control = self.simulator.regulator.control
        self.control.append(self.time, control)
        self._scroll("control", DEFAULT_POINTS)
        self._fit_single("control", self.control, control)
        self.time += 1
        return control

    def reset(self) -> None:
        """Clear every series and restore the initial axis ranges."""
        for series in self.series:
            series.clear()
        self.x_range = _initial_x_ranges()
        self.y_range = _initial_y_ranges()

    def reset_time(self) -> None:
        """Restart the chart time from zero."""
        self.time = 0.0