"""Discrete PID control loop simulator with a signal generator, an ARX object model, chart data and a command line."""

__version__ = "0.1.0"