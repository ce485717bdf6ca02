"""Command-line front end: configure the control loop, run it and print the charts' data."""

from __future__ import annotations

import argparse
import random
import sys
import time as _time

from pidarx.arx import ArxModel
from pidarx.charts import Charts
from pidarx.generator import SignalKind
from pidarx.service import DEFAULT_CONFIG_PATH, InvalidDataError, ServiceLayer

_SIGNALS = {
    "step": SignalKind.STEP,
    "sine": SignalKind.SINE,
    "square": SignalKind.SQUARE,
}

_INTEGRATION = {
    "sum": True,
    "before-sum": False,
}

_HEADER = ("tick", "setpoint", "output", "error", "P", "I", "D", "control")


def default_arx_model() -> ArxModel:
    """Return the object model with the default settings of the object dialog."""
    return ArxModel(delay=1.0, a=[0.5, 0.4, 0.3], b=[0.3, 0.2, 0.1])


def _ranged(low: float, high: float):
    def convert(text: str) -> float:
        try:
            value = float(text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"{value:g} is outside [{low:g}, {high:g}]")
        return value

    return convert


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pidarx",
        description="Simulate a PID regulator driving an ARX object.",
    )
    gen = parser.add_argument_group("generator")
    gen.add_argument("--signal", choices=sorted(_SIGNALS), default="square")
    gen.add_argument("--amplitude", type=_ranged(-100, 1000), default=66.0)
    gen.add_argument("--period", type=_ranged(0, 1000), default=100.0)
    gen.add_argument("--duty", type=_ranged(0, 1), default=0.6)
    gen.add_argument("--activation-time", type=_ranged(0, 500), default=0.0)

    reg = parser.add_argument_group("regulator")
    reg.add_argument("--gain", type=_ranged(0, 1000), default=0.1)
    reg.add_argument("--integral", type=_ranged(0, 1000), default=5.0)
    reg.add_argument("--derivative", type=_ranged(0, 1000), default=0.1)
    reg.add_argument("--integration", choices=sorted(_INTEGRATION), default="sum")

    obj = parser.add_argument_group("ARX object")
    defaults = default_arx_model()
    obj.add_argument("--a", nargs=3, type=_ranged(-1000, 1000), default=list(defaults.a),
                     metavar=("A1", "A2", "A3"))
    obj.add_argument("--b", nargs=3, type=_ranged(-1000, 1000), default=list(defaults.b),
                     metavar=("B1", "B2", "B3"))
    obj.add_argument("--delay", type=_ranged(1, 1000), default=defaults.delay)
    obj.add_argument("--noise", action="store_true", help="add Gaussian disturbance")
    obj.add_argument("--mean", type=_ranged(0, 0.5), default=defaults.mean)
    obj.add_argument("--stdev", type=_ranged(0, 0.5), default=defaults.stdev)
    obj.add_argument("--seed", type=int, default=None)

    run = parser.add_argument_group("run")
    run.add_argument("--interval", type=int, default=100, help="timer interval in ms")
    run.add_argument("--steps", type=_positive_int, default=100, help="number of timer ticks")
    run.add_argument("--realtime", action="store_true", help="wait one interval per tick")
    run.add_argument("--load", metavar="PATH", nargs="?", const=DEFAULT_CONFIG_PATH)
    run.add_argument("--save", metavar="PATH", nargs="?", const=DEFAULT_CONFIG_PATH)
    return parser


def _configure(service: ServiceLayer, args: argparse.Namespace) -> None:
    sim = service.simulator
    gen = sim.generator
    gen.kind = _SIGNALS[args.signal]
    gen.amplitude = args.amplitude
    gen.period = args.period
    gen.duty = args.duty
    gen.activation_time = args.activation_time

    reg = sim.regulator
    reg.gain = args.gain
    reg.integral_time = args.integral
    reg.derivative_time = args.derivative
    reg.integrate_in_sum = _INTEGRATION[args.integration]

    model = ArxModel(delay=args.delay, a=list(args.a), b=list(args.b))
    model.noise_enabled = args.noise
    if args.noise:
        model.set_noise(args.mean, args.stdev)
    service.check_model(model)


def _format_row(values) -> str:
    return "\t".join(v if isinstance(v, str) else f"{v:.6g}" for v in values)


def main(argv=None) -> int:
    """Run the simulation described by ``argv`` and print one row per tick."""
    args = _build_parser().parse_args(argv)
    service = ServiceLayer()

    try:
        if args.load is not None:
            service.load_config(args.load)
        else:
            _configure(service, args)
        if args.seed is not None:
            service.simulator.model.rng = random.Random(args.seed)
        if args.save is not None:
            service.save_config(args.save)
        service.check_all(args.interval)
    except InvalidDataError as exc:
        print(f"Ostrzeżenie: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Błąd pliku konfiguracji: {exc}", file=sys.stderr)
        return 1

    charts = Charts(service.simulator)
    print(_format_row(_HEADER))
    for tick in range(args.steps):
        output = charts.setpoint_chart()
        setpoint = charts.setpoint.points[-1][1]
        error = charts.error_chart()
        p_term, i_term, d_term = charts.pid_chart()
        control = charts.control_chart()
        print(_format_row((str(tick), setpoint, output, error, p_term, i_term, d_term, control)))
        if args.realtime:
            _time.sleep(args.interval / 1000)
    return 0


if __name__ == "__main__":
    sys.exit(main())