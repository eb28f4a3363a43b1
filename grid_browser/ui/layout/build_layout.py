from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from grid_browser.ui.ids import IDs
from grid_browser.ui.layout.build_grid_panel import build_grid_panel
from grid_browser.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from grid_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    return dbc.Container(
        fluid=True,
        className="gb-root",
        children=[
            build_navbar(ctx.settings),

            # Per-page grid state (filters, sort, page, page size)
            dcc.Store(id=IDs.Store.GRID_STATE, storage_type="memory"),

            build_grid_panel(ctx.settings.grid),
        ],
    )
