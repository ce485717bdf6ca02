"""Set-point signal generator: step, sine and square waves."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

_PI = 3.14159265359


class SignalKind(IntEnum):
    """Shape of the generated set-point signal."""

    STEP = 0
    SINE = 1
    SQUARE = 2


_KIND_NAMES = {
    SignalKind.STEP: "Skok",
    SignalKind.SINE: "Sinusoida",
    SignalKind.SQUARE: "Prostokatny",
}


def signal_kind_name(kind) -> str:
    """Return the display name of a signal kind, or "Nieznany" for an unknown one."""
    return _KIND_NAMES.get(kind, "Nieznany")


@dataclass
class Generator:
    """Produces the set-point value for a given moment of time."""

    kind: SignalKind = SignalKind.SQUARE
    amplitude: float = 66.0
    period: float = 100.0
    duty: float = 0.6
    activation_time: float = 0.0

    def _phase(self, time: float) -> float:
        if self.period == 0:
            return math.nan
        return math.fmod(time, self.period)

    def generate(self, time: float) -> float:
        """Return the signal value at ``time``."""
        if self.kind == SignalKind.STEP:
            return self.amplitude if time >= self.activation_time else 0.0
        if self.kind == SignalKind.SINE:
            if self.period == 0:
                return math.nan
            return self.amplitude * math.sin((2 * _PI / self.period) * self._phase(time))
        if self.kind == SignalKind.SQUARE:
            # A NaN phase (zero period) compares false and yields zero.
            return self.amplitude if self._phase(time) < self.duty * self.period else 0.0
        return 0.0

    def reset(self) -> None:
        """Return to a zero-amplitude step with neutral parameters."""
        self.kind = SignalKind.STEP
        self.amplitude = 0.0
        self.period = 1.0
        self.duty = 0.5
        self.activation_time = 0.0