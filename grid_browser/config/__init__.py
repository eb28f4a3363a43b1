"""
Config package for grid_browser.

Responsible for:
- the app settings model (AppSettings)
- loading global.json (load_app_config)
"""

from .model import AppSettings
from .loader import load_app_config

__all__ = ["AppSettings", "load_app_config"]
