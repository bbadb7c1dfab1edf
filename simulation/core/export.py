"""Trajectory export shapes for the web responder and plotting backend."""

import math

from simulation.core.recorder import Trajectory


def _json_safe(value: float) -> float | None:
    # JSON has no NaN/Infinity; chart renderers treat null as a gap.
    return value if math.isfinite(value) else None


def to_chart_payload(trajectory: Trajectory) -> dict[str, list[float | None]]:
    """Return ``{"X": t, "Y": y}`` ready for JSON serialization."""
    return {
        "X": [_json_safe(v) for v in trajectory.t],
        "Y": [_json_safe(v) for v in trajectory.y],
    }


def to_xy_pairs(trajectory: Trajectory) -> list[tuple[float, float]]:
    """Return the trajectory as (x, y) points, non-finite values included."""
    return list(zip(trajectory.t, trajectory.y))
