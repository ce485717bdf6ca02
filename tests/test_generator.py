import math

import pytest

from pidarx.generator import Generator, SignalKind, signal_kind_name


def test_defaults_are_square_wave():
    gen = Generator()
    assert gen.kind == SignalKind.SQUARE
    assert gen.amplitude == 66
    assert gen.period == 100
    assert gen.duty == 0.6
    assert gen.activation_time == 0


@pytest.mark.parametrize(
    "kind, name",
    [
        (SignalKind.STEP, "Skok"),
        (SignalKind.SINE, "Sinusoida"),
        (SignalKind.SQUARE, "Prostokatny"),
        (42, "Nieznany"),
    ],
)
def test_signal_kind_name(kind, name):
    assert signal_kind_name(kind) == name


def test_kind_values_are_stable():
    names = [signal_kind_name(SignalKind(value)) for value in (0, 1, 2)]
    assert names == ["Skok", "Sinusoida", "Prostokatny"]


def test_step_switches_on_at_activation_time():
    gen = Generator(kind=SignalKind.STEP, amplitude=5.0, activation_time=10.0)
    assert gen.generate(9.9) == 0.0
    assert gen.generate(10.0) == 5.0
    assert gen.generate(500.0) == 5.0


def test_square_wave_high_then_low():
    gen = Generator()
    assert gen.generate(0.0) == gen.amplitude
    assert gen.generate(59.0) == gen.amplitude
    assert gen.generate(61.0) == 0.0
    assert gen.generate(99.0) == 0.0


def test_square_wave_is_periodic():
    gen = Generator()
    for t in (0.0, 13.0, 59.5, 70.0):
        assert gen.generate(t) == gen.generate(t + gen.period)


def test_sine_starts_at_zero_and_peaks_at_quarter_period():
    gen = Generator(kind=SignalKind.SINE, amplitude=3.0, period=40.0)
    assert gen.generate(0.0) == pytest.approx(0.0, abs=1e-9)
    assert gen.generate(10.0) == pytest.approx(3.0, rel=1e-9)
    assert gen.generate(30.0) == pytest.approx(-3.0, rel=1e-9)


def test_sine_is_periodic():
    gen = Generator(kind=SignalKind.SINE, amplitude=2.0, period=40.0)
    for t in (1.0, 7.5, 33.0):
        assert gen.generate(t) == pytest.approx(gen.generate(t + 40.0), abs=1e-9)


def test_zero_period():
    square = Generator(period=0.0)
    assert square.generate(5.0) == 0.0
    sine = Generator(kind=SignalKind.SINE, period=0.0)
    assert math.isnan(sine.generate(5.0))


def test_reset():
    gen = Generator()
    gen.activation_time = 7.0
    gen.reset()
    assert gen == Generator(
        kind=SignalKind.STEP, amplitude=0.0, period=1.0, duty=0.5, activation_time=0.0
    )
    assert gen.generate(3.0) == 0.0