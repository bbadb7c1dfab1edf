"""Simulation request handling.

Turns validated API requests into engine configurations and runs them.
Every call builds a fresh controller/plant pair inside the engine, so the
service itself holds no per-run state and can serve concurrent requests.
"""

import logging

from backend.api.models.schemas import LagSimulationRequest, PlotFormat, ReactivePowerRequest
from backend.core.config import settings
from simulation.core.driver import (
    ReactivePowerConfig,
    SimulationConfig,
    simulate,
    simulate_reactive_power,
)
from simulation.core.exceptions import ConfigurationError
from simulation.core.plotting import render_trajectory
from simulation.core.recorder import Trajectory

logger = logging.getLogger(__name__)


class SimulationService:
    """Runs closed-loop simulations for the HTTP layer."""

    def __init__(self, max_steps: int | None = None):
        self.max_steps = max_steps if max_steps is not None else settings.MAX_SIMULATION_STEPS

    def _check_step_budget(self, n_steps: float):
        if n_steps > self.max_steps:
            raise ConfigurationError(
                f"Step count N={n_steps} exceeds the limit of {self.max_steps}"
            )

    def run_lag(self, request: LagSimulationRequest) -> Trajectory:
        """Simulate a PID + first-order lag step response."""
        self._check_step_budget(request.n_steps)
        config = SimulationConfig(
            setpoint=request.setpoint,
            tau=request.tau,
            gain=request.gain,
            kp=request.kp,
            ki=request.ki,
            kd=request.kd,
            dt=request.dt,
            n_steps=request.n_steps,
        )
        trajectory = simulate(config)
        logger.info(
            "Lag simulation: Sp=%g Tau=%g K=%g gains=(%g, %g, %g) dt=%g N=%d -> y_end=%g",
            config.setpoint, config.tau, config.gain, config.kp, config.ki, config.kd,
            config.dt, trajectory.n_steps, trajectory.final_value,
        )
        return trajectory

    def run_reactive_power(self, request: ReactivePowerRequest) -> Trajectory:
        """Simulate PID regulation of reactive power at the POC."""
        self._check_step_budget(request.n_steps)
        plant_params = {**settings.poc_params, **request.plant_overrides()}
        config = ReactivePowerConfig(
            q_ref=request.q_ref,
            active_power=request.active_power,
            kp=request.kp,
            ki=request.ki,
            kd=request.kd,
            dt=request.dt,
            n_steps=request.n_steps,
            plant_params=plant_params,
        )
        trajectory = simulate_reactive_power(config)
        logger.info(
            "Reactive power simulation: Qref=%g P=%g dt=%g N=%d -> Q_poc_end=%g",
            config.q_ref, config.active_power, config.dt, trajectory.n_steps,
            trajectory.final_value,
        )
        return trajectory

    def render_lag_plot(self, request: LagSimulationRequest, fmt: PlotFormat) -> bytes:
        """Simulate a lag step response and render it as an image."""
        trajectory = self.run_lag(request)
        return render_trajectory(trajectory, fmt.value)
