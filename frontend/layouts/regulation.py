"""Regulation dashboard layout.

Parameter forms and trajectory charts for the two closed-loop simulations:
- PID + first-order lag step response
- PID reactive power regulation at the point of connection
"""

from dash import html, dcc
import dash_bootstrap_components as dbc

# (input id suffix, label, default)
LAG_FIELDS = [
    ("Sp", "Setpoint Sp", 10.0),
    ("Tau", "Time constant Tau (s)", 1.0),
    ("K", "Static gain K", 1.0),
    ("P", "Kp", 5.0),
    ("Ki", "Ki", 10.0),
    ("Kd", "Kd", 0.0),
    ("dt", "Time step dt (s)", 0.001),
    ("N", "Steps N", 1000),
]

REACTIVE_FIELDS = [
    ("Qref", "Reactive power setpoint (var)", 1.0e6),
    ("Pdemand", "Active power demand (W)", 5.0e6),
    ("P", "Kp", 0.2),
    ("Ki", "Ki", 5.0),
    ("Kd", "Kd", 0.0),
    ("dt", "Time step dt (s)", 0.01),
    ("N", "Steps N", 500),
]


def _field(prefix: str, key: str, label: str, default: float):
    return dbc.Col(
        [
            dbc.Label(label, html_for=f"{prefix}-{key}"),
            dbc.Input(id=f"{prefix}-{key}", type="number", value=default, step="any"),
        ],
        md=3,
        className="mb-2",
    )


def _form(prefix: str, fields, button_label: str):
    return dbc.Card(
        [
            dbc.CardHeader("Parameters"),
            dbc.CardBody(
                [
                    dbc.Row([_field(prefix, key, label, default) for key, label, default in fields]),
                    dbc.Button(button_label, id=f"{prefix}-btn-run", color="success", className="mt-2"),
                    html.Div(id=f"{prefix}-status", className="mt-2 text-muted"),
                ]
            ),
        ],
        color="dark",
        outline=True,
        className="mb-3",
    )


def create_regulation_layout():
    return dbc.Container(
        [
            dbc.Tabs(
                [
                    dbc.Tab(
                        [
                            _form("lag", LAG_FIELDS, "Simulate step response"),
                            dcc.Graph(id="lag-trend", config={"displayModeBar": False}),
                        ],
                        label="First-order lag",
                        tab_id="tab-lag",
                    ),
                    dbc.Tab(
                        [
                            _form("rp", REACTIVE_FIELDS, "Simulate reactive power"),
                            dcc.Graph(id="rp-trend", config={"displayModeBar": False}),
                        ],
                        label="Reactive power at POC",
                        tab_id="tab-rp",
                    ),
                ],
                active_tab="tab-lag",
                className="mb-3",
            ),
        ],
        fluid=True,
    )
