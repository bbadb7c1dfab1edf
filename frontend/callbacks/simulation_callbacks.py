"""Dash callbacks for the regulation dashboard: API calls and chart updates."""

import logging
import os

import requests
from dash import Input, Output, State, no_update
import plotly.graph_objects as go

from frontend.layouts.regulation import LAG_FIELDS, REACTIVE_FIELDS

logger = logging.getLogger(__name__)

API_BASE = os.environ.get("REGULATION_API_URL", "http://localhost:2222")
REQUEST_TIMEOUT = 30


def make_trajectory_figure(x, y, title, yaxis_title, setpoint=None, color="#9ACD32"):
    """Create a line chart of one trajectory, with an optional setpoint line."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x, y=y,
        mode="lines",
        name="output",
        line=dict(color=color, width=2),
    ))
    if setpoint is not None and x:
        fig.add_trace(go.Scatter(
            x=[x[0], x[-1]], y=[setpoint, setpoint],
            mode="lines",
            name="setpoint",
            line=dict(color="#FF6B6B", width=1, dash="dash"),
        ))
    fig.update_layout(
        title=title,
        xaxis_title="Time (s)",
        yaxis_title=yaxis_title,
        template="plotly_dark",
        margin=dict(l=50, r=20, t=40, b=40),
        height=400,
    )
    return fig


def build_payload(fields, values) -> dict:
    """Map form values onto the API field names, in form order."""
    return {key: value for (key, _label, _default), value in zip(fields, values)}


def fetch_trajectory(path: str, payload: dict) -> dict:
    """POST parameters to the backend and return the decoded X/Y payload.

    Raises:
        requests.RequestException: network failure or non-2xx response.
    """
    resp = requests.post(f"{API_BASE}{path}", json=payload, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def _error_message(exc: requests.RequestException) -> str:
    response = getattr(exc, "response", None)
    if response is not None:
        try:
            return f"Error {response.status_code}: {response.json().get('detail')}"
        except ValueError:
            return f"Error {response.status_code}"
    return "Backend unreachable"


def _run(path, fields, values, title, yaxis_title, setpoint):
    if any(v is None for v in values):
        return no_update, "Fill in every parameter"
    payload = build_payload(fields, values)
    try:
        data = fetch_trajectory(path, payload)
    except requests.RequestException as e:
        logger.warning("Simulation request to %s failed: %s", path, e)
        return no_update, _error_message(e)
    fig = make_trajectory_figure(data["X"], data["Y"], title, yaxis_title, setpoint=setpoint)
    return fig, f"{len(data['X'])} samples"


def register_callbacks(app):
    """Register all regulation callbacks with the Dash app."""

    @app.callback(
        [Output("lag-trend", "figure"), Output("lag-status", "children")],
        Input("lag-btn-run", "n_clicks"),
        [State(f"lag-{key}", "value") for key, _label, _default in LAG_FIELDS],
        prevent_initial_call=True,
    )
    def run_lag(n_clicks, *values):
        if not n_clicks:
            return no_update, no_update
        return _run("/sendData", LAG_FIELDS, values, "Step response", "y", setpoint=values[0])

    @app.callback(
        [Output("rp-trend", "figure"), Output("rp-status", "children")],
        Input("rp-btn-run", "n_clicks"),
        [State(f"rp-{key}", "value") for key, _label, _default in REACTIVE_FIELDS],
        prevent_initial_call=True,
    )
    def run_reactive_power(n_clicks, *values):
        if not n_clicks:
            return no_update, no_update
        return _run(
            "/api/v1/simulation/reactive-power", REACTIVE_FIELDS, values,
            "Reactive power at POC", "Q_poc (var)", setpoint=values[0],
        )
