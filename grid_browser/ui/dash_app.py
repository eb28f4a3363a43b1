from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from grid_browser.config.loader import load_app_config
from grid_browser.services.fetch_service import DatasetFetcher
from grid_browser.services.grid_service import GridService
from grid_browser.ui.layout.build_layout import build_layout
from grid_browser.ui.callbacks.callbacks_grid import register_grid_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(config_root: Path | str = Path("config"), fetch_on_start: bool = True) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    settings = load_app_config(config_root)

    # 2) Initialize Service Layer
    fetcher = DatasetFetcher(settings.source_url, timeout=settings.timeout)
    grid_service = GridService(settings.grid, fetcher=fetcher)

    # 3) Fetch once; a failure leaves the grid empty until the user reloads
    if fetch_on_start and not grid_service.refresh():
        logger.warning(
            "Starting with an empty grid",
            extra={"source_url": settings.source_url, "error": grid_service.last_error},
        )

    # 4) App Context
    ctx = AppConfig(
        config_root=config_root,
        settings=settings,
        grid_service=grid_service,
    )

    # Explicitly resolve the assets folder so styles.css is found from any cwd
    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = settings.ui_title

    app.layout = build_layout(ctx)

    register_grid_callbacks(app, ctx)

    return app
