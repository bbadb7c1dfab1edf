"""Trajectory recorder for closed-loop simulation runs.

Collects (t, y) samples and controller outputs step by step, then freezes
them into an immutable Trajectory handed back to the caller.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Trajectory:
    """Time series produced by one simulation run.

    ``t`` and ``y`` hold N + 1 samples, the first one being the initial
    condition at t = 0. ``control`` holds the N controller outputs, one per
    step.
    """

    t: tuple[float, ...]
    y: tuple[float, ...]
    control: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.t)

    @property
    def n_steps(self) -> int:
        return len(self.t) - 1

    @property
    def final_value(self) -> float:
        return self.y[-1]

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (t, y) as float64 numpy arrays."""
        return np.asarray(self.t, dtype=np.float64), np.asarray(self.y, dtype=np.float64)


class TrajectoryRecorder:
    """Accumulates samples for a single simulation run."""

    def __init__(self, t0: float = 0.0, y0: float = 0.0):
        self._t: list[float] = [t0]
        self._y: list[float] = [y0]
        self._control: list[float] = []

    def record(self, t: float, y: float, control: float):
        """Record the sample produced by one step."""
        self._t.append(t)
        self._y.append(y)
        self._control.append(control)

    @property
    def last_time(self) -> float:
        return self._t[-1]

    @property
    def last_output(self) -> float:
        return self._y[-1]

    @property
    def total_records(self) -> int:
        return len(self._t)

    def freeze(self) -> Trajectory:
        """Return the recorded samples as an immutable Trajectory."""
        return Trajectory(t=tuple(self._t), y=tuple(self._y), control=tuple(self._control))
