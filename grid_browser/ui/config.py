from dataclasses import dataclass
from pathlib import Path

from grid_browser.config.model import AppSettings
from grid_browser.services.grid_service import GridService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config root, parsed settings and the grid
    service. Passed into layout + callback registration functions instead of
    using module-level globals.
    """
    config_root: Path
    settings: AppSettings
    grid_service: GridService
