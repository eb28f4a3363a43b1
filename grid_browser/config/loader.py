from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from grid_browser.config.model import (
    AppSettings,
    DEFAULT_SOURCE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_UI_TITLE,
)
from grid_browser.core.configs import GridOptions
from grid_browser.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

SOURCE_URL_ENV = "GRID_BROWSER_SOURCE_URL"


def load_app_config(root: Path) -> AppSettings:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    global.json holds:

    - ui_title: title for UI, defaults to 'Countries'
    - source_url: dataset URL, overridable with env var GRID_BROWSER_SOURCE_URL
    - timeout: fetch timeout in seconds, defaults to 30
    - grid: GridOptions fields (columns, sortable, filterable, page_size, ...)

    :param root: Directory containing 'global.json'.
    :return: An AppSettings instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid JSON or the grid options are inconsistent.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    grid_raw = raw.get("grid") or {}
    if not isinstance(grid_raw, dict):
        raise ConfigError("'grid' must be a JSON object")

    try:
        grid = GridOptions.from_dict(grid_raw)
    except TypeError as e:
        raise ConfigError(f"Invalid grid options: {e}") from e

    source_url = os.getenv(SOURCE_URL_ENV) or raw.get("source_url", DEFAULT_SOURCE_URL)

    try:
        timeout = float(raw.get("timeout", DEFAULT_TIMEOUT))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout: {raw.get('timeout')!r}") from e

    settings = AppSettings(
        ui_title=raw.get("ui_title", DEFAULT_UI_TITLE),
        source_url=source_url,
        timeout=timeout,
        grid=grid,
    )

    logger.info(
        "Global config loaded",
        extra={
            "source_url": settings.source_url,
            "columns": list(grid.columns),
            "page_size": grid.page_size,
        },
    )
    return settings
