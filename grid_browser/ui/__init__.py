"""
UI adapters for the grid browser.

Currently provides a Dash-based web UI via create_dash_app().
The core engine has no Dash dependency; other renderers only need a GridView.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
