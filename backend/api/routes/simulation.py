"""Closed-loop simulation endpoints.

Run PID + plant simulations and return the trajectory as X/Y arrays or as
a rendered image.
"""

from fastapi import APIRouter, Response

from backend.api.models.schemas import (
    LagSimulationRequest,
    PlotFormat,
    ReactivePowerRequest,
    TrajectoryResponse,
)
from backend.services.simulation_service import SimulationService
from simulation.core.export import to_chart_payload

router = APIRouter()
legacy_router = APIRouter()
service = SimulationService()

_MEDIA_TYPES = {
    PlotFormat.PNG: "image/png",
    PlotFormat.SVG: "image/svg+xml",
}


# Sync handlers: FastAPI runs them in its threadpool.

@router.post("/lag", response_model=TrajectoryResponse)
def simulate_lag(params: LagSimulationRequest):
    """Step response of a PID-controlled first-order lag plant."""
    trajectory = service.run_lag(params)
    return TrajectoryResponse(**to_chart_payload(trajectory))


@router.post("/reactive-power", response_model=TrajectoryResponse)
def simulate_reactive_power(params: ReactivePowerRequest):
    """Reactive power at the point of connection under PID regulation."""
    trajectory = service.run_reactive_power(params)
    return TrajectoryResponse(**to_chart_payload(trajectory))


@router.post("/plot")
def plot_lag(params: LagSimulationRequest, fmt: PlotFormat = PlotFormat.PNG):
    """Render the lag step response as a PNG or SVG image."""
    content = service.render_lag_plot(params, fmt)
    return Response(content=content, media_type=_MEDIA_TYPES[fmt])


@legacy_router.post("/sendData", response_model=TrajectoryResponse)
def send_data(params: LagSimulationRequest):
    """Chart page endpoint, same contract as POST /api/v1/simulation/lag."""
    trajectory = service.run_lag(params)
    return TrajectoryResponse(**to_chart_payload(trajectory))
