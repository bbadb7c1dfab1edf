"""Unit tests for the PID controller."""

import pytest

from simulation.control.pid_controller import PIDController


def _legacy_unscaled(kp, ki, kd, errors):
    """Controller outputs of the textbook form without dt scaling."""
    integral = 0.0
    prev = 0.0
    outputs = []
    for e in errors:
        integral += e
        outputs.append(kp * e + ki * integral + kd * (e - prev))
        prev = e
    return outputs


class TestPIDBasics:
    def test_initial_state(self):
        pid = PIDController(kp=1.0, ki=2.0, kd=3.0)
        assert pid.integral == 0.0
        assert pid.previous_error == 0.0
        assert (pid.kp, pid.ki, pid.kd) == (1.0, 2.0, 3.0)

    def test_proportional_only(self):
        pid = PIDController(kp=2.0, ki=0.0, kd=0.0)
        assert pid.compute(10.0, 4.0, 0.1) == pytest.approx(12.0)

    def test_integral_accumulates_error_times_dt(self):
        pid = PIDController(kp=0.0, ki=1.0, kd=0.0)
        assert pid.compute(1.0, 0.0, 0.5) == pytest.approx(0.5)
        assert pid.compute(1.0, 0.0, 0.5) == pytest.approx(1.0)
        assert pid.integral == pytest.approx(1.0)

    def test_derivative_uses_previous_error(self):
        pid = PIDController(kp=0.0, ki=0.0, kd=1.0)
        # First call: previous error is 0
        assert pid.compute(1.0, 0.0, 0.1) == pytest.approx(10.0)
        # Same error again: no derivative contribution
        assert pid.compute(1.0, 0.0, 0.1) == pytest.approx(0.0)

    def test_previous_error_updated_without_derivative_gain(self):
        pid = PIDController(kp=1.0, ki=0.0, kd=0.0)
        pid.compute(5.0, 2.0, 0.01)
        assert pid.previous_error == 3.0

    def test_zero_gains_output_zero(self):
        pid = PIDController(kp=0.0, ki=0.0, kd=0.0)
        for current in (0.0, 3.5, -100.0, 1e6):
            assert pid.compute(10.0, current, 0.01) == 0.0

    def test_gains_are_read_only(self):
        pid = PIDController(kp=1.0)
        with pytest.raises(AttributeError):
            pid.kp = 2.0

    def test_reset(self):
        pid = PIDController(kp=1.0, ki=1.0, kd=1.0)
        pid.compute(1.0, 0.0, 0.1)
        pid.reset()
        assert pid.integral == 0.0
        assert pid.previous_error == 0.0

    def test_get_state(self):
        pid = PIDController(kp=1.0, ki=0.5)
        pid.compute(2.0, 0.0, 1.0)
        state = pid.get_state()
        assert state["integral"] == 2.0
        assert state["previous_error"] == 2.0


class TestPIDTimeStep:
    def test_unit_dt_matches_unscaled_form(self):
        """dt = 1 reproduces the controller without dt scaling exactly."""
        errors = [1.0, 0.5, -0.25, 2.0, 0.0, -1.5]
        expected = _legacy_unscaled(2.0, 0.3, 0.7, errors)

        pid = PIDController(kp=2.0, ki=0.3, kd=0.7)
        outputs = [pid.compute(e, 0.0, 1.0) for e in errors]
        assert outputs == expected

    def test_small_dt_scales_integral_and_derivative(self):
        dt = 1e-3
        errors = [1.0, 0.9, 0.8]
        pid = PIDController(kp=1.0, ki=2.0, kd=0.5)
        outputs = [pid.compute(e, 0.0, dt) for e in errors]

        integral = 0.0
        prev = 0.0
        for e, out in zip(errors, outputs):
            integral += e * dt
            expected = 1.0 * e + 2.0 * integral + 0.5 * (e - prev) / dt
            prev = e
            assert out == pytest.approx(expected)
