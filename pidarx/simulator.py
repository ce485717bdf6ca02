"""Closed control loop: generator, PID regulator and ARX object."""

from __future__ import annotations

from dataclasses import dataclass, field

from pidarx.arx import ArxModel
from pidarx.generator import Generator
from pidarx.regulator import Regulator


@dataclass
class Simulator:
    """Runs one sample of the loop at a time."""

    generator: Generator = field(default_factory=Generator)
    regulator: Regulator = field(default_factory=Regulator)
    model: ArxModel = field(default_factory=ArxModel)
    output: float = 0.0
    last_control: float = 0.0
    last_output: float = 0.0

    def step(self, time: float) -> float:
        """Advance the loop by one sample and return the object output."""
        self.regulator.setpoint = self.generator.generate(time)
        self.regulator.update_error(self.output)
        control = self.regulator.compute_control()
        self.output = self.model.output(control)
        self.last_control = control
        self.last_output = self.output
        return self.output

    @property
    def setpoint(self) -> float:
        return self.regulator.setpoint

    @property
    def disturbance(self) -> float:
        return self.model.disturbance

    @property
    def control(self) -> float:
        return self.regulator.control

    def replace_regulator_keep_history(self, regulator: Regulator) -> None:
        """Install ``regulator``, carrying over the current error history."""
        current = self.regulator
        regulator.set_history(
            current.error, current.previous_error, current.error_sum, current.control
        )
        self.regulator = regulator

    def replace_model_keep_history(self, model: ArxModel) -> None:
        """Install ``model``, carrying over the current input and output history."""
        model.set_history(self.model.inputs, self.model.outputs)
        self.model = model