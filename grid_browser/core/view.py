from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .dataset import Row, cell_text
from .pagination import DisplayRange
from .state import SortState

STATUS_EMPTY = "empty"
STATUS_READY = "ready"


@dataclass(frozen=True)
class GridView:
    """
    Read-only projection handed to a renderer.

    A new instance is built after every command; renderers should discard
    any view older than the latest one they were given.
    """

    columns: Tuple[str, ...]
    headers: Tuple[str, ...]
    rows: Tuple[Row, ...]
    page_index: int
    total_pages: int
    page_size: int
    display_range: DisplayRange
    sort: SortState
    filters: Dict[str, Optional[str]]
    page_links: Tuple[int, ...]
    sortable: Tuple[str, ...]
    filterable: Tuple[str, ...]
    is_paginated: bool
    is_header_fixed: bool
    status: str = STATUS_EMPTY

    @property
    def is_ready(self) -> bool:
        return self.status == STATUS_READY

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0

    @property
    def has_next(self) -> bool:
        return self.page_index < self.total_pages - 1

    def sort_indicator(self, column: str) -> Optional[str]:
        """'asc' / 'desc' for the actively sorted column, else None."""
        if column != self.sort.column:
            return None
        return self.sort.direction.value

    def text_rows(self) -> List[List[str]]:
        """Page rows as display strings, one list per row in column order."""
        return [[cell_text(row.get(c)) for c in self.columns] for row in self.rows]
