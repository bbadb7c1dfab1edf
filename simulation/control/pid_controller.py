"""PID controller for closed-loop regulation.

Used for:
    - First-order lag step responses (setpoint tracking)
    - Reactive power regulation at the point of connection
"""


class PIDController:
    """Discrete PID controller with explicit time step.

    Integral and derivative terms are always scaled by ``dt``. Calling
    ``compute`` with ``dt=1`` reproduces the unscaled textbook form, so there
    is a single update path for both.
    """

    def __init__(self, kp: float = 1.0, ki: float = 0.0, kd: float = 0.0):
        self._kp = kp
        self._ki = ki
        self._kd = kd

        self._integral = 0.0
        self._previous_error = 0.0

    @property
    def kp(self) -> float:
        return self._kp

    @property
    def ki(self) -> float:
        return self._ki

    @property
    def kd(self) -> float:
        return self._kd

    @property
    def integral(self) -> float:
        """Accumulated error * dt since construction or last reset."""
        return self._integral

    @property
    def previous_error(self) -> float:
        return self._previous_error

    def compute(self, setpoint: float, current_value: float, dt: float) -> float:
        """Compute the control correction for one step.

        Args:
            setpoint: Target value.
            current_value: Latest plant output.
            dt: Time step in seconds (must be > 0, checked by the driver).

        Returns:
            Unclamped controller output.
        """
        error = setpoint - current_value

        # Proportional
        p_term = self._kp * error

        # Integral
        self._integral += error * dt
        i_term = self._ki * self._integral

        # Derivative
        d_term = self._kd * (error - self._previous_error) / dt
        self._previous_error = error

        return p_term + i_term + d_term

    def reset(self):
        """Reset controller state."""
        self._integral = 0.0
        self._previous_error = 0.0

    def get_state(self) -> dict:
        return {
            "kp": self._kp,
            "ki": self._ki,
            "kd": self._kd,
            "integral": self._integral,
            "previous_error": self._previous_error,
        }
