"""
Core domain layer: dataset store, filter/sort/pagination engines,
grid state and the grid controller
"""

from .configs import GridOptions
from .controller import GridController
from .dataset import DatasetStore
from .state import FilterState, GridState, SortDirection, SortState
from .view import GridView

__all__ = [
    "DatasetStore",
    "FilterState",
    "GridController",
    "GridOptions",
    "GridState",
    "GridView",
    "SortDirection",
    "SortState",
]
