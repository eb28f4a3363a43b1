from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from grid_browser.config.model import AppSettings
from grid_browser.ui.ids import IDs


def build_navbar(settings: AppSettings) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(settings.ui_title, className="mb-0"),
                        html.Small(settings.source_url, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                dbc.Button(
                    "Reload",
                    id=IDs.Control.RELOAD_BTN,
                    n_clicks=0,
                    color="secondary",
                    outline=True,
                    size="sm",
                ),
            ],
        ),
        className="mb-3",
    )
