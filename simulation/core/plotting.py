"""Static PNG/SVG line plots of simulation trajectories.

Figures are built with the object-oriented matplotlib API; no pyplot
global state is touched.
"""

import io
import logging
from pathlib import Path
from typing import Sequence

from matplotlib.figure import Figure

from simulation.core.recorder import Trajectory

logger = logging.getLogger(__name__)

FIGURE_SIZE = (8, 4)  # inches
SUPPORTED_FORMATS = ("png", "svg")


def _check_lengths(x: Sequence[float], ys: Sequence[Sequence[float]]):
    for y in ys:
        if len(x) != len(y):
            raise ValueError(
                f"X and Y must have the same length, got {len(x)} and {len(y)}"
            )


def _build_figure(
    x: Sequence[float],
    ys: Sequence[Sequence[float]],
    labels: Sequence[str] | None = None,
) -> Figure:
    fig = Figure(figsize=FIGURE_SIZE)
    ax = fig.add_subplot(1, 1, 1)
    for i, y in enumerate(ys):
        label = labels[i] if labels and i < len(labels) else None
        ax.plot(x, y, linewidth=1.5, label=label)
    ax.set_title("Plot of X and Y data")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.grid(True, alpha=0.3)
    if labels:
        ax.legend()
    return fig


def _format_from_path(path: Path) -> str:
    fmt = path.suffix.lstrip(".").lower()
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported plot format '{fmt}', expected one of {SUPPORTED_FORMATS}")
    return fmt


def plot_lines(
    x: Sequence[float],
    ys: Sequence[Sequence[float]],
    path: str | Path,
    labels: Sequence[str] | None = None,
) -> Path:
    """Plot several Y series against a shared X axis and save to ``path``.

    The output format follows the file suffix (.png or .svg).

    Raises:
        ValueError: a Y series does not match X in length, or the suffix
            is not a supported format.
    """
    _check_lengths(x, ys)
    path = Path(path)
    fmt = _format_from_path(path)
    fig = _build_figure(x, ys, labels)
    fig.savefig(path, format=fmt, bbox_inches="tight")
    logger.info("Saved %d-series plot to %s", len(ys), path)
    return path


def plot_line(x: Sequence[float], y: Sequence[float], path: str | Path) -> Path:
    """Plot a single Y series against X and save to ``path``."""
    return plot_lines(x, [y], path)


def render_trajectory(trajectory: Trajectory, fmt: str = "png") -> bytes:
    """Render a trajectory to image bytes in memory."""
    fmt = fmt.lower()
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported plot format '{fmt}', expected one of {SUPPORTED_FORMATS}")
    fig = _build_figure(trajectory.t, [trajectory.y])
    buf = io.BytesIO()
    fig.savefig(buf, format=fmt, bbox_inches="tight")
    return buf.getvalue()
