"""Tests for the HTTP simulation endpoints."""

import pytest
from fastapi.testclient import TestClient

from backend.core.config import settings
from backend.main import app
from backend.services.simulation_service import SimulationService
from backend.api.models.schemas import LagSimulationRequest
from simulation.core.exceptions import ConfigurationError

STEP_BODY = {"Sp": 10, "Tau": 1, "K": 1, "P": 5, "Ki": 10, "Kd": 0, "dt": 0.001, "N": 1000}
REACTIVE_BODY = {"Qref": 1e6, "Pdemand": 5e6, "P": 0.2, "Ki": 5, "Kd": 0, "dt": 0.01, "N": 500}


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"

    def test_debug_flag_from_settings(self):
        assert app.debug == settings.DEBUG


class TestLagEndpoints:
    def test_send_data(self, client):
        resp = client.post("/sendData", json=STEP_BODY)
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["X"]) == len(data["Y"]) == 1001
        assert data["X"][0] == 0.0
        assert data["Y"][0] == 0.0
        assert abs(data["Y"][-1] - 10.0) < 1.0

    def test_v1_matches_legacy(self, client):
        legacy = client.post("/sendData", json=STEP_BODY).json()
        v1 = client.post("/api/v1/simulation/lag", json=STEP_BODY).json()
        assert legacy == v1

    def test_zero_steps(self, client):
        data = client.post("/sendData", json={**STEP_BODY, "N": 0}).json()
        assert data == {"X": [0.0], "Y": [0.0]}

    @pytest.mark.parametrize("override", [{"dt": 0}, {"Tau": 0}, {"N": -1}, {"N": 2.5}])
    def test_configuration_error_is_400(self, client, override):
        resp = client.post("/sendData", json={**STEP_BODY, **override})
        assert resp.status_code == 400
        assert resp.json()["detail"]

    def test_step_limit(self, client):
        resp = client.post("/sendData", json={**STEP_BODY, "N": 10_000_000})
        assert resp.status_code == 400
        assert "limit" in resp.json()["detail"]

    def test_missing_field_is_422(self, client):
        body = dict(STEP_BODY)
        del body["Tau"]
        assert client.post("/sendData", json=body).status_code == 422

    def test_malformed_body_is_422(self, client):
        resp = client.post("/sendData", content=b"not json", headers={"Content-Type": "application/json"})
        assert resp.status_code == 422

    def test_divergent_run_serializes_nulls(self, client):
        body = {"Sp": 1, "Tau": 1, "K": 1, "P": 1, "Ki": 0, "Kd": 0, "dt": 3, "N": 1000}
        resp = client.post("/sendData", json=body)
        assert resp.status_code == 200
        assert resp.json()["Y"][-1] is None


class TestReactivePowerEndpoint:
    def test_converges(self, client):
        resp = client.post("/api/v1/simulation/reactive-power", json=REACTIVE_BODY)
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["X"]) == 501
        assert data["Y"][-1] == pytest.approx(1e6, rel=1e-3)

    def test_electrical_override(self, client):
        default = client.post("/api/v1/simulation/reactive-power", json={**REACTIVE_BODY, "N": 3}).json()
        custom = client.post(
            "/api/v1/simulation/reactive-power", json={**REACTIVE_BODY, "N": 3, "L": 0.01},
        ).json()
        assert default["Y"][1] != custom["Y"][1]

    def test_zero_voltage_is_400(self, client):
        resp = client.post("/api/v1/simulation/reactive-power", json={**REACTIVE_BODY, "Upoc": 0})
        assert resp.status_code == 400

    def test_underflowing_capacitive_term_is_400(self, client):
        body = {**REACTIVE_BODY, "f": 1e-200, "C": 1e-200}
        resp = client.post("/api/v1/simulation/reactive-power", json=body)
        assert resp.status_code == 400
        assert "2*pi*f*C" in resp.json()["detail"]


class TestPlotEndpoint:
    def test_png(self, client):
        resp = client.post("/api/v1/simulation/plot", json={**STEP_BODY, "N": 100})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "image/png"
        assert resp.content.startswith(b"\x89PNG")

    def test_svg(self, client):
        resp = client.post("/api/v1/simulation/plot?fmt=svg", json={**STEP_BODY, "N": 100})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("image/svg+xml")
        assert b"<svg" in resp.content

    def test_unknown_format_is_422(self, client):
        resp = client.post("/api/v1/simulation/plot?fmt=bmp", json=STEP_BODY)
        assert resp.status_code == 422


class TestSimulationService:
    def test_custom_step_budget(self):
        service = SimulationService(max_steps=10)
        request = LagSimulationRequest(**{**STEP_BODY, "N": 11})
        with pytest.raises(ConfigurationError):
            service.run_lag(request)

    def test_fields_by_name(self):
        request = LagSimulationRequest(
            setpoint=1.0, tau=1.0, gain=1.0, kp=1.0, ki=0.0, kd=0.0, dt=0.1, n_steps=5,
        )
        traj = SimulationService().run_lag(request)
        assert len(traj.y) == 6
