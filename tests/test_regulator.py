import pytest

from pidarx.regulator import Regulator


def test_defaults():
    reg = Regulator()
    assert reg.gain == 0.1
    assert reg.integral_time == 5
    assert reg.derivative_time == 0.1
    assert reg.integrate_in_sum is True


def test_update_error_tracks_previous():
    reg = Regulator(setpoint=10.0)
    reg.update_error(4.0)
    first = reg.error
    reg.update_error(7.0)
    assert reg.previous_error == first
    assert reg.error == 10.0 - 7.0


def test_proportional_only():
    reg = Regulator(gain=2.0, integral_time=0.0, derivative_time=0.0, setpoint=3.0)
    reg.update_error(1.0)
    assert reg.compute_control() == 4.0
    assert reg.i_term == 0.0
    assert reg.d_term == 0.0
    assert reg.error_sum == 0.0


def test_control_is_sum_of_terms():
    reg = Regulator(gain=0.7, integral_time=3.0, derivative_time=0.4, setpoint=5.0)
    for measured in (0.0, 1.0, 2.5, 4.0):
        reg.update_error(measured)
        control = reg.compute_control()
        assert control == pytest.approx(reg.p_term + reg.i_term + reg.d_term)
        assert reg.control == control
        assert reg.p_term == pytest.approx(reg.gain * reg.error)


def test_both_integration_modes_agree_for_constant_time():
    in_sum = Regulator(gain=0.0, integral_time=4.0, derivative_time=0.0, setpoint=2.0)
    before_sum = Regulator(
        gain=0.0, integral_time=4.0, derivative_time=0.0, setpoint=2.0, integrate_in_sum=False
    )
    for measured in (0.0, 0.5, 1.5, -1.0):
        in_sum.update_error(measured)
        before_sum.update_error(measured)
        assert in_sum.compute_control() == pytest.approx(before_sum.compute_control())


def test_tiny_integral_time_disables_integral_term():
    reg = Regulator(gain=0.0, integral_time=1e-7, derivative_time=0.0, setpoint=1.0)
    reg.update_error(0.0)
    assert reg.compute_control() == 0.0
    assert reg.error_sum != 0.0


def test_derivative_uses_error_difference():
    reg = Regulator(gain=0.0, integral_time=0.0, derivative_time=2.0, setpoint=1.0)
    reg.update_error(0.0)
    reg.compute_control()
    reg.update_error(1.0)
    assert reg.compute_control() == pytest.approx(2.0 * (reg.error - reg.previous_error))


def test_set_history():
    reg = Regulator()
    reg.set_history(1.5, -2.0, 3.25, 9.0)
    assert (reg.error, reg.previous_error, reg.error_sum, reg.control) == (1.5, -2.0, 3.25, 9.0)


def test_clear_methods():
    reg = Regulator(setpoint=4.0)
    reg.update_error(1.0)
    reg.update_error(0.0)
    reg.compute_control()
    reg.clear_proportional()
    reg.clear_integral()
    reg.clear_derivative()
    assert reg.p_term == reg.i_term == reg.d_term == 0.0
    assert reg.error == 0.0
    assert reg.error_sum == 0.0


def test_reset_zeroes_settings_and_history():
    reg = Regulator(setpoint=4.0)
    reg.update_error(1.0)
    reg.compute_control()
    reg.reset()
    assert (reg.setpoint, reg.gain, reg.integral_time, reg.derivative_time) == (0, 0, 0, 0)
    assert (reg.error, reg.previous_error, reg.error_sum, reg.control) == (0, 0, 0, 0)