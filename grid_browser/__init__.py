"""
Top-level package for the grid browser.

Most code should import from submodules such as:
    grid_browser.core
    grid_browser.services
    grid_browser.ui
"""

__all__: list[str] = []
