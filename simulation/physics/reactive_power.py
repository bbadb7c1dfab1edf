"""Reactive power balance at an electrical point of connection (POC).

A series R-L-C network sits between the controlled source and the POC.
The reactive power measured at the POC is the commanded reactive power plus
the reactive power absorbed by the network:

    X_L   = 2*pi*f*L
    X_C   = 1 / (2*pi*f*C)        (0 when there is no capacitive branch)
    S     = sqrt(P^2 + Q_cmd^2)
    I     = S / U_poc
    Q_sys = I^2 * X_L - I^2 * X_C
    Q_poc = Q_cmd + Q_sys
"""

import logging
import math

from simulation.core.exceptions import ConfigurationError
from simulation.physics.base import PlantModel

logger = logging.getLogger(__name__)


class ElectricalReactivePowerPlant(PlantModel):
    """Inductive/capacitive impedance network seen from the POC."""

    name = "reactive_power"

    DEFAULT_PARAMS = {
        "inductance": 2.8e-3,   # H
        "capacitance": 0.0,     # F, 0 = no capacitive branch
        "resistance": 0.0,      # ohm
        "frequency": 50.0,      # Hz
        "u_poc": 6700.0,        # V
    }

    def __init__(self, params: dict | None = None, active_power: float = 0.0):
        p = {**self.DEFAULT_PARAMS, **(params or {})}
        self.inductance = p["inductance"]
        self.capacitance = p["capacitance"]
        self.resistance = p["resistance"]
        self.frequency = p["frequency"]
        self.u_poc = p["u_poc"]

        # Active power demand used by the closed-loop step
        self.active_power = active_power
        self.initial_output = 0.0

        self._validate()

    def _validate(self):
        for key in ("inductance", "capacitance", "resistance", "frequency"):
            if getattr(self, key) < 0:
                raise ConfigurationError(f"{key} must be >= 0, got {getattr(self, key)}")
        if self.u_poc <= 0:
            raise ConfigurationError(f"Point of connection voltage U_poc must be > 0, got {self.u_poc}")
        # 2*pi*f*C can underflow to 0 even when f and C are both non-zero
        if self.capacitance != 0 and 2 * math.pi * self.frequency * self.capacitance == 0:
            raise ConfigurationError(
                "Capacitive reactance is undefined: 2*pi*f*C must be non-zero "
                f"(f={self.frequency}, C={self.capacitance})"
            )

    def inductive_reactance(self) -> float:
        return 2 * math.pi * self.frequency * self.inductance

    def capacitive_reactance(self) -> float:
        if self.capacitance == 0:
            return 0.0
        return 1 / (2 * math.pi * self.frequency * self.capacitance)

    def impedance(self) -> tuple[float, float]:
        """Return impedance magnitude (ohm) and phase angle (rad).

        atan2 keeps the sign of the net reactance when R = 0.
        """
        x_net = self.inductive_reactance() - self.capacitive_reactance()
        z = math.hypot(self.resistance, x_net)
        theta = math.atan2(x_net, self.resistance)
        return z, theta

    def reactive_power_of_system(self, current: float) -> float:
        """Net reactive power absorbed by the network for a line current."""
        i_sq = current * current
        q_l = i_sq * self.inductive_reactance()
        q_c = i_sq * self.capacitive_reactance()
        return q_l - q_c

    @staticmethod
    def apparent_power(active_power: float, reactive_power: float) -> float:
        return math.hypot(active_power, reactive_power)

    def line_current(self, active_power: float, reactive_power: float) -> float:
        return self.apparent_power(active_power, reactive_power) / self.u_poc

    def reactive_power_at_poc(self, active_power: float, q_commanded: float) -> float:
        """Reactive power seen at the POC for one (P, Q_cmd) operating point."""
        s = self.apparent_power(active_power, q_commanded)
        current = s / self.u_poc
        q_sys = self.reactive_power_of_system(current)
        q_poc = q_commanded + q_sys
        logger.debug("S=%.6g VA, I=%.6g A, Q_poc=%.6g var", s, current, q_poc)
        return q_poc

    def step(self, u: float, y_prev: float, dt: float) -> float:
        # The network has no dynamics: the output only depends on the command.
        return self.reactive_power_at_poc(self.active_power, u)

    def get_params(self) -> dict:
        z, theta = self.impedance()
        return {
            **super().get_params(),
            "inductance": self.inductance,
            "capacitance": self.capacitance,
            "resistance": self.resistance,
            "frequency": self.frequency,
            "u_poc": self.u_poc,
            "active_power": self.active_power,
            "impedance": z,
            "phase_angle": theta,
        }
