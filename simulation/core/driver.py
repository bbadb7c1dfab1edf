"""Closed-loop simulation driver.

Ties a PID controller and a plant model together and steps them over a
fixed number of samples. Both plant variants go through the same loop,
`run_closed_loop()`; `simulate()` and `simulate_reactive_power()` only build
the controller/plant pair for their variant.

Each call constructs its own controller and plant, so concurrent callers
never share mutable state.
"""

import logging
import math
from dataclasses import dataclass

from simulation.control.pid_controller import PIDController
from simulation.core.exceptions import ConfigurationError
from simulation.core.recorder import Trajectory, TrajectoryRecorder
from simulation.physics.base import PlantModel
from simulation.physics.first_order_lag import FirstOrderLag
from simulation.physics.reactive_power import ElectricalReactivePowerPlant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """PID + first-order lag run."""
    setpoint: float
    tau: float
    gain: float
    kp: float
    ki: float
    kd: float
    dt: float
    n_steps: int


@dataclass(frozen=True)
class ReactivePowerConfig:
    """PID + reactive power plant run.

    ``plant_params`` overrides ElectricalReactivePowerPlant.DEFAULT_PARAMS.
    """
    q_ref: float
    active_power: float
    kp: float
    ki: float
    kd: float
    dt: float
    n_steps: int
    plant_params: dict | None = None


def validate_timing(dt: float, n_steps: float) -> int:
    """Check step size and step count, returning the step count as int.

    Raises:
        ConfigurationError: dt is not a finite positive number, or n_steps
            is negative or not a whole number.
    """
    if not math.isfinite(dt) or dt <= 0:
        raise ConfigurationError(f"Time step dt must be a finite value > 0, got {dt}")
    if isinstance(n_steps, int):
        # Arbitrary-size ints overflow math.isfinite
        if n_steps < 0:
            raise ConfigurationError(f"Step count N must be >= 0, got {n_steps}")
        return n_steps
    if not math.isfinite(n_steps) or n_steps < 0:
        raise ConfigurationError(f"Step count N must be >= 0, got {n_steps}")
    if int(n_steps) != n_steps:
        raise ConfigurationError(f"Step count N must be a whole number, got {n_steps}")
    return int(n_steps)


def run_closed_loop(
    controller: PIDController,
    plant: PlantModel,
    setpoint: float,
    dt: float,
    n_steps: int,
) -> Trajectory:
    """Step controller and plant N times from the plant's initial output.

    For k = 1..N:
        u    = controller.compute(setpoint, y[k-1], dt)
        y[k] = plant.step(u, y[k-1], dt)
        t[k] = t[k-1] + dt

    Non-finite values are not checked and propagate to the trajectory.
    """
    n_steps = validate_timing(dt, n_steps)

    recorder = TrajectoryRecorder(t0=0.0, y0=plant.initial_output)
    for _ in range(n_steps):
        y_prev = recorder.last_output
        u = controller.compute(setpoint, y_prev, dt)
        y_next = plant.step(u, y_prev, dt)
        recorder.record(recorder.last_time + dt, y_next, u)

    trajectory = recorder.freeze()
    logger.debug(
        "Closed loop %s: %d steps, dt=%g, final output %g",
        plant.name, n_steps, dt, trajectory.final_value,
    )
    return trajectory


def simulate(config: SimulationConfig) -> Trajectory:
    """Simulate a PID-controlled first-order lag step response."""
    validate_timing(config.dt, config.n_steps)
    plant = FirstOrderLag(tau=config.tau, gain=config.gain)
    controller = PIDController(config.kp, config.ki, config.kd)
    return run_closed_loop(controller, plant, config.setpoint, config.dt, config.n_steps)


def simulate_reactive_power(config: ReactivePowerConfig) -> Trajectory:
    """Simulate PID regulation of reactive power at the point of connection.

    The controller output is the commanded reactive power; the trajectory
    output is the reactive power measured at the POC.
    """
    validate_timing(config.dt, config.n_steps)
    plant = ElectricalReactivePowerPlant(config.plant_params, active_power=config.active_power)
    controller = PIDController(config.kp, config.ki, config.kd)
    return run_closed_loop(controller, plant, config.q_ref, config.dt, config.n_steps)
