"""First-order lag plant.

Continuous model:
    Tau * dy/dt = K * u - y

Discretized with forward Euler:
    y[k] = y[k-1] + (dt / Tau) * (K * u[k] - y[k-1])

Forward Euler is only stable for dt / Tau < 2. Larger ratios are not
rejected; the trajectory diverges and the caller sees it.
"""

from simulation.core.exceptions import ConfigurationError
from simulation.physics.base import PlantModel


class FirstOrderLag(PlantModel):
    """Generic first-order (PT1) plant with time constant and static gain."""

    name = "first_order_lag"

    def __init__(self, tau: float = 1.0, gain: float = 1.0, initial_output: float = 0.0):
        if tau == 0:
            raise ConfigurationError("Time constant Tau must be non-zero")
        self.tau = tau
        self.gain = gain
        self.initial_output = initial_output

    def step(self, u: float, y_prev: float, dt: float) -> float:
        return y_prev + (dt / self.tau) * (self.gain * u - y_prev)

    def get_params(self) -> dict:
        return {
            **super().get_params(),
            "tau": self.tau,
            "gain": self.gain,
        }
