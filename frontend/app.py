"""PID Regulation Simulator - Plotly Dash Frontend Application.

Parameter forms and trajectory charts backed by the simulation API.
"""

import dash
from dash import html
import dash_bootstrap_components as dbc

from frontend.callbacks.simulation_callbacks import register_callbacks
from frontend.layouts.regulation import create_regulation_layout

app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    title="PID Regulation Simulator",
)

app.layout = dbc.Container(
    [
        # Header
        dbc.Navbar(
            dbc.Container(
                [
                    dbc.NavbarBrand("PID Regulation Simulator", className="ms-2"),
                ],
            ),
            color="primary",
            dark=True,
        ),

        html.Div(create_regulation_layout(), className="mt-3"),
    ],
    fluid=True,
)

register_callbacks(app)

server = app.server

if __name__ == "__main__":
    app.run(debug=True, host="0.0.0.0", port=8050)
