"""Pydantic schemas for API request/response models.

Field aliases keep the short parameter names the chart page sends
(``Sp``, ``Tau``, ``K``, ``P``, ``Ki``, ``Kd``, ``dt``, ``N``).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PlotFormat(str, Enum):
    PNG = "png"
    SVG = "svg"


class LagSimulationRequest(BaseModel):
    """PID + first-order lag step response parameters."""
    model_config = ConfigDict(populate_by_name=True)

    setpoint: float = Field(alias="Sp", description="Setpoint")
    tau: float = Field(alias="Tau", description="Plant time constant (s)")
    gain: float = Field(alias="K", description="Plant static gain")
    kp: float = Field(alias="P", description="Proportional gain")
    ki: float = Field(alias="Ki", description="Integral gain")
    kd: float = Field(alias="Kd", description="Derivative gain")
    dt: float = Field(alias="dt", description="Time step (s)")
    n_steps: float = Field(alias="N", description="Number of steps after t=0")


class ReactivePowerRequest(BaseModel):
    """PID regulation of reactive power at the point of connection.

    Electrical parameters left out fall back to the configured deployment.
    """
    model_config = ConfigDict(populate_by_name=True)

    q_ref: float = Field(alias="Qref", description="Reactive power setpoint at the POC (var)")
    active_power: float = Field(alias="Pdemand", description="Active power demand (W)")
    kp: float = Field(alias="P", description="Proportional gain")
    ki: float = Field(alias="Ki", description="Integral gain")
    kd: float = Field(alias="Kd", description="Derivative gain")
    dt: float = Field(alias="dt", description="Time step (s)")
    n_steps: float = Field(alias="N", description="Number of steps after t=0")

    inductance: float | None = Field(default=None, alias="L", description="Inductance (H)")
    capacitance: float | None = Field(default=None, alias="C", description="Capacitance (F), 0 = none")
    resistance: float | None = Field(default=None, alias="R", description="Resistance (ohm)")
    frequency: float | None = Field(default=None, alias="f", description="Grid frequency (Hz)")
    u_poc: float | None = Field(default=None, alias="Upoc", description="POC voltage (V)")

    def plant_overrides(self) -> dict:
        """Electrical parameters explicitly supplied in the request."""
        return self.model_dump(
            include={"inductance", "capacitance", "resistance", "frequency", "u_poc"},
            exclude_none=True,
        )


class TrajectoryResponse(BaseModel):
    """Time axis and output axis of a simulated trajectory.

    Non-finite samples are sent as null.
    """
    X: list[float | None] = Field(description="Time axis (s)")
    Y: list[float | None] = Field(description="Plant output")


class HealthResponse(BaseModel):
    status: str
    version: str
