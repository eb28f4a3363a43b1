from __future__ import annotations

from dataclasses import dataclass, field

from grid_browser.core.configs import GridOptions

DEFAULT_UI_TITLE = "Countries"
DEFAULT_SOURCE_URL = "https://restcountries.com/v2/all"
DEFAULT_TIMEOUT = 30.0


@dataclass
class AppSettings:
    """
    Parsed global.json.

    - ui_title: navbar / browser tab title
    - source_url: where the dataset is fetched from (a JSON array of records)
    - timeout: seconds before the fetch gives up
    - grid: options for the grid controller
    """

    ui_title: str = DEFAULT_UI_TITLE
    source_url: str = DEFAULT_SOURCE_URL
    timeout: float = DEFAULT_TIMEOUT
    grid: GridOptions = field(default_factory=GridOptions)
