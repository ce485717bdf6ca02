"""Service layer: validates settings, stores and restores the loop configuration."""

from __future__ import annotations

from pathlib import Path

from pidarx.arx import ArxModel
from pidarx.generator import Generator, SignalKind
from pidarx.regulator import Regulator
from pidarx.simulator import Simulator

DEFAULT_CONFIG_PATH = "konfiguracja.txt"


class InvalidDataError(ValueError):
    """Raised when the loop settings are incomplete or inconsistent."""


def _count_zeros(values) -> int:
    return sum(1 for value in values if value == 0)


def _format_number(value: float) -> str:
    return f"{value:g}"


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _value_part(line: str) -> str:
    parts = line.split(": ")
    return parts[1] if len(parts) > 1 else ""


def _generator_is_valid(generator: Generator) -> bool:
    if generator.kind == SignalKind.STEP:
        return generator.amplitude > 0
    if generator.kind == SignalKind.SINE:
        return generator.amplitude > 0 and generator.period > 0
    if generator.kind == SignalKind.SQUARE:
        return (
            generator.amplitude > 0
            and generator.period > 0
            and 0 < generator.duty <= 1
        )
    return True


def _regulator_is_valid(regulator: Regulator) -> bool:
    settings = (regulator.derivative_time, regulator.integral_time, regulator.gain)
    if any(value < 0 for value in settings):
        return False
    return any(value != 0 for value in settings)


def _model_is_valid(model: ArxModel) -> bool:
    return (
        _count_zeros(model.a) != 3
        and _count_zeros(model.b) != 3
        and model.delay > 0
    )


class ServiceLayer:
    """Mediates between the user-facing controls and the simulator."""

    def __init__(self, simulator: Simulator | None = None) -> None:
        self.simulator = simulator if simulator is not None else Simulator()

    def check_model(self, model: ArxModel) -> None:
        """Install ``model`` keeping the loop history, or raise if it is unusable."""
        if (
            _count_zeros(model.b) != 3
            and _count_zeros(model.a) != 3
            and model.delay >= 0
        ):
            self.simulator.replace_model_keep_history(model)
        else:
            raise InvalidDataError("check that all object settings are filled in correctly")

    def check_all(self, interval: float) -> bool:
        """Validate the whole loop and the timer interval; return True when usable."""
        sim = self.simulator
        if not (
            _generator_is_valid(sim.generator)
            and _regulator_is_valid(sim.regulator)
            and _model_is_valid(sim.model)
            and interval > 0
        ):
            raise InvalidDataError("not all data has been filled in")
        return True

    def save_config(self, path=DEFAULT_CONFIG_PATH) -> None:
        """Write the generator, regulator and object settings to ``path``."""
        gen = self.simulator.generator
        reg = self.simulator.regulator
        model = self.simulator.model
        lines = [
            f"Amplituda: {_format_number(gen.amplitude)}",
            f"Okres: {_format_number(gen.period)}",
            f"Wypelnienie: {_format_number(gen.duty)}",
            f"Rodzaj Sygnalu: {int(gen.kind)}",
            f"Wzmocnienie: {_format_number(reg.gain)}",
            f"Stala I: {_format_number(reg.integral_time)}",
            f"Stala D: {_format_number(reg.derivative_time)}",
            f"Opoznienie: {_format_number(model.delay)}",
            "Współczynniki A: " + "".join(f"{_format_number(c)} " for c in model.a),
            "Współczynniki B: " + "".join(f"{_format_number(c)} " for c in model.b),
        ]
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")

    def load_config(self, path=DEFAULT_CONFIG_PATH) -> None:
        """Read settings from ``path`` and install fresh components built from them."""
        gen = Generator()
        reg = Regulator()
        model = ArxModel()
        a_coeffs: list[float] = []
        b_coeffs: list[float] = []

        text = Path(path).read_text(encoding="utf-8")
        for line in text.splitlines():
            value = _value_part(line)
            if line.startswith("Amplituda:"):
                gen.amplitude = _to_float(value)
            if line.startswith("Okres:"):
                gen.period = _to_float(value)
            if line.startswith("Wypelnienie:"):
                gen.duty = _to_float(value)
            if line.startswith("Rodzaj Sygnalu:"):
                try:
                    gen.kind = SignalKind(_to_int(value))
                except ValueError as exc:
                    raise InvalidDataError(f"unknown signal kind: {value!r}") from exc
            if line.startswith("Wzmocnienie:"):
                reg.gain = _to_float(value)
            if line.startswith("Stala I:"):
                reg.integral_time = _to_float(value)
            if line.startswith("Stala D:"):
                reg.derivative_time = _to_float(value)
            if line.startswith("Opoznienie:"):
                model.delay = _to_float(value)
            if line.startswith("Współczynniki A:"):
                a_coeffs.extend(_to_float(tok) for tok in value.split(" ") if tok)
            if line.startswith("Współczynniki B:"):
                b_coeffs.extend(_to_float(tok) for tok in value.split(" ") if tok)

        model.a = a_coeffs
        model.b = b_coeffs
        self.simulator.generator = gen
        self.simulator.regulator = reg
        self.simulator.model = model

    def reset_simulation(self) -> float:
        """Clear the loop state and components; return the restarted time."""
        sim = self.simulator
        sim.regulator.clear_proportional()
        sim.regulator.clear_derivative()
        sim.regulator.clear_integral()
        sim.output = 0.0
        sim.last_control = 0.0
        sim.last_output = 0.0

        sim.generator.amplitude = 0.0
        sim.generator.period = 0.0
        sim.generator.duty = 0.0

        sim.regulator = Regulator()
        sim.model = ArxModel()
        return 0.0