"""ARX model of a controlled object with optional Gaussian disturbance."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field


@dataclass
class ArxModel:
    """Discrete ARX object: y = B(q) u(t - delay) - A(q) y + noise.

    ``a`` holds the output coefficients, ``b`` the input coefficients, and
    ``delay`` the input delay in samples (truncated to an integer).
    """

    delay: float = 0.0
    a: list[float] = field(default_factory=list)
    b: list[float] = field(default_factory=list)
    mean: float = 0.3
    stdev: float = 0.1
    noise_enabled: bool = False
    disturbance: float = 0.0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    inputs: deque = field(default_factory=deque)
    outputs: deque = field(default_factory=deque)

    def set_noise(self, mean: float, stdev: float) -> None:
        """Set the mean and standard deviation of the disturbance."""
        self.mean = mean
        self.stdev = stdev

    def output(self, u: float) -> float:
        """Feed one input sample and return the model output."""
        k = int(self.delay)
        self.inputs.appendleft(u)
        if len(self.inputs) > len(self.b) + k:
            self.inputs.pop()

        result = 0.0
        for j, coeff in enumerate(self.b):
            if len(self.inputs) > j + k:
                result += coeff * self.inputs[j + k]
        for coeff, past in zip(self.a, self.outputs):
            result -= coeff * past

        # A sample is drawn every step so the noise stream stays aligned.
        self.disturbance = self.rng.gauss(self.mean, self.stdev)
        if self.noise_enabled:
            result += self.disturbance

        self.outputs.appendleft(result)
        if len(self.outputs) > len(self.a):
            self.outputs.pop()
        return result

    def set_history(self, inputs, outputs) -> None:
        """Replace the input and output history, newest sample first."""
        self.inputs = deque(inputs)
        self.outputs = deque(outputs)

    def clear_buffers(self) -> None:
        """Forget all past inputs and outputs."""
        self.inputs.clear()
        self.outputs.clear()