# pidarx

A discrete-time simulator of a closed control loop. It has three parts:

- a **signal generator** that produces the set point: a step, a sine wave or a
  square wave (`pidarx.generator.Generator`, with `SignalKind`);
- a **PID regulator** (`pidarx.regulator.Regulator`). With
  `integrate_in_sum=True` the integral constant divides each error before it
  is added to the sum. With `False` it divides the sum that has built up;
- an **ARX object model** (`pidarx.arx.ArxModel`). It has output coefficients
  `a`, input coefficients `b` and an input `delay` in samples. Gaussian noise
  (`mean`, `stdev`) is added when `noise_enabled` is set.

`pidarx.simulator.Simulator` connects them. Each call to `step(time)` does
four things:

1. takes the set point from the generator;
2. updates the regulator error against the last object output;
3. computes the control value;
4. feeds that value to the model and returns the new output.

`replace_regulator_keep_history` and `replace_model_keep_history` swap a
component in and carry the current loop history over to it.

## Service layer

`pidarx.service.ServiceLayer` wraps a `Simulator`.

- `check_model(model)` installs an object model, keeping the history. It
  raises `InvalidDataError` if all three `a` or all three `b` coefficients are
  zero, or if the delay is negative.
- `check_all(interval)` validates the generator, the regulator, the model and
  the timer interval. It returns `True` or raises `InvalidDataError`.
- `save_config(path)` writes a plain text file. The default path is
  `konfiguracja.txt`. The file holds:
  - the generator amplitude, period, duty cycle and signal kind;
  - the regulator gain, integral and derivative constants;
  - the model delay and its `a` and `b` coefficients.
- `load_config(path)` reads such a file and installs a fresh generator,
  regulator and model. Any setting the file does not hold takes its default.
- `reset_simulation()` clears the loop state and installs a default regulator
  and model.

## Chart data

`pidarx.charts.Charts` samples a simulator into rolling `ChartSeries`. Four
calls each advance the simulator by one step and the chart time by one:

| Call | Series it records | Points kept |
|------|-------------------|-------------|
| `setpoint_chart()` | output and set point | 1000 |
| `error_chart()` | control error | 400 |
| `pid_chart()` | P, I and D terms | 400 |
| `control_chart()` | control value | 400 |

`x_range` and `y_range` hold the fitted axis ranges for each chart. Drawing
the charts is left to the caller.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
pidarx --help
```

The `pidarx` command sets up the loop from its options and validates it. It
then runs `--steps` timer ticks (default 100) and prints one tab-separated row
per tick with these columns:

- tick
- setpoint
- output
- error
- P
- I
- D
- control

Each tick steps the simulator four times, once for each chart.

Option groups:

- **generator:** `--signal {sine,square,step}`, `--amplitude`, `--period`,
  `--duty`, `--activation-time`
- **regulator:** `--gain`, `--integral`, `--derivative`,
  `--integration {before-sum,sum}`
- **object:** `--a A1 A2 A3`, `--b B1 B2 B3`, `--delay`, `--noise`, `--mean`,
  `--stdev`, `--seed`
- **run:** `--interval` (ms), `--steps`, `--realtime` (sleep one interval per
  tick), `--load [PATH]`, `--save [PATH]`

With `--load`, the settings come from the file instead of the options. The
command exits with status 1 if the settings are invalid or the file cannot be
read.

The default object model is `pidarx.cli.default_arx_model()`: delay 1,
`a = [0.5, 0.4, 0.3]`, `b = [0.3, 0.2, 0.1]`.

## Library use

```python
from pidarx.cli import default_arx_model
from pidarx.generator import SignalKind
from pidarx.simulator import Simulator

sim = Simulator(model=default_arx_model())
sim.generator.kind = SignalKind.STEP
sim.generator.amplitude = 1.0
outputs = [sim.step(t) for t in range(100)]
```

## What it does not do

There is no graphical window and no plotting. `Charts` only keeps the series
data and axis ranges, and the command prints numbers to standard output.