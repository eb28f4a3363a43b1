from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple

from . import filter_engine, sort_engine
from .configs import GridOptions
from .dataset import DatasetStore, Row
from .pagination import clamp_page_index, page_links, paginate, total_pages_for
from .state import FilterState, GridState, SortDirection, SortState
from .view import STATUS_EMPTY, STATUS_READY, GridView

logger = logging.getLogger(__name__)


class GridController:
    """
    Owns the grid state and runs the filter -> sort -> paginate pipeline.

    Commands (load, set_filter, set_sort, set_page, next_page, previous_page,
    set_page_size) run synchronously to completion and return the new
    GridView. None of them raise: unknown columns and malformed arguments
    are ignored, page indices are clamped.

    The pipeline always runs in the same order: filtering first so sorting
    only sees the reduced set, pagination last over the final sequence.
    """

    def __init__(
        self,
        options: GridOptions,
        state: Optional[GridState] = None,
        store: Optional[DatasetStore] = None,
    ) -> None:
        self.options = options
        self.store = store if store is not None else DatasetStore(options.columns)
        self._state = self._normalise(state) if state is not None else self.initial_state(options)
        self._state = self._state.evolve(page_index=self._clamped(self._state.page_index))

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @staticmethod
    def initial_state(options: GridOptions) -> GridState:
        return GridState(
            sort=SortState(options.default_sort_column, SortDirection.ASC),
            filters=FilterState.for_columns(options.filterable),
            page_size=options.page_size,
            page_index=0,
        )

    @property
    def state(self) -> GridState:
        return self._state

    def _normalise(self, state: GridState) -> GridState:
        """Drop whatever in a restored state does not fit these options."""
        opts = self.options

        sort = state.sort
        if sort.column not in opts.sortable:
            sort = SortState(opts.default_sort_column, SortDirection.ASC)

        filters = FilterState.for_columns(opts.filterable)
        for column, term in state.filters.terms:
            if column in opts.filterable:
                filters = filters.with_term(column, term)

        page_size = _as_positive_int(state.page_size) or opts.page_size
        page_index = state.page_index if isinstance(state.page_index, int) else 0

        return GridState(sort=sort, filters=filters, page_size=page_size, page_index=page_index)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def apply(self) -> Tuple[Row, ...]:
        """Filter then sort the source rows, caching the derived sequence in the store."""
        rows = filter_engine.apply(self.store.source_rows(), self._state.filters)
        rows = sort_engine.apply(rows, self._state.sort)
        self.store.set_derived(rows)
        return rows

    def _derived(self) -> Tuple[Row, ...]:
        rows = self.store.derived_rows()
        if rows is None:
            rows = self.apply()
        return rows

    def _total_pages(self) -> int:
        count = len(self._derived())
        if not self.options.is_paginated:
            return 1 if count else 0
        return total_pages_for(count, self._state.page_size)

    def _clamped(self, index: int) -> int:
        return clamp_page_index(index, self._total_pages())

    def _set_page_index(self, index: int) -> None:
        self._state = self._state.evolve(page_index=self._clamped(index))

    def view(self) -> GridView:
        opts = self.options
        rows = self._derived()
        st = self._state

        if opts.is_paginated:
            page = paginate(rows, st.page_size, st.page_index)
        else:
            page = paginate(rows, max(len(rows), 1), 0)

        return GridView(
            columns=opts.columns,
            headers=tuple(opts.header_label(c) for c in opts.columns),
            rows=page.rows,
            page_index=st.page_index,
            total_pages=page.total_pages,
            page_size=st.page_size,
            display_range=page.display_range,
            sort=st.sort,
            filters=st.filters.as_dict(),
            page_links=page_links(page.total_pages, st.page_index, opts.page_link_window),
            sortable=opts.sortable,
            filterable=opts.filterable,
            is_paginated=opts.is_paginated,
            is_header_fixed=opts.is_header_fixed,
            status=STATUS_READY if self.store.is_loaded else STATUS_EMPTY,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def load(self, records: Iterable[Any]) -> GridView:
        self.store.load(records)
        self._state = self._state.evolve(page_index=0)
        self.apply()
        logger.debug("Grid loaded", extra={"n_rows": len(self.store)})
        return self.view()

    def set_filter(self, column: str, term: Optional[Any]) -> GridView:
        if column not in self.options.filterable:
            logger.debug("Ignoring filter on unknown column", extra={"column": column})
            return self.view()

        term = None if term is None else str(term)
        self._state = self._state.evolve(
            filters=self._state.filters.with_term(column, term),
            page_index=0,
        )
        self.apply()
        logger.debug("Filter set", extra={"column": column, "term": term})
        return self.view()

    def set_sort(self, column: str) -> GridView:
        if column not in self.options.sortable:
            logger.debug("Ignoring sort on unknown column", extra={"column": column})
            return self.view()

        current = self._state.sort
        if column == current.column:
            sort = SortState(column, current.direction.toggled())
        else:
            sort = SortState(column, SortDirection.ASC)

        self._state = self._state.evolve(sort=sort)
        self.apply()
        self._set_page_index(self._state.page_index)
        logger.debug("Sort set", extra={"column": column, "direction": sort.direction.value})
        return self.view()

    def set_page(self, index: Any) -> GridView:
        if not self.options.is_paginated:
            return self.view()
        if isinstance(index, bool):
            return self.view()
        try:
            index = int(index)
        except (TypeError, ValueError):
            logger.debug("Ignoring invalid page index", extra={"index": repr(index)})
            return self.view()

        self._set_page_index(index)
        return self.view()

    def next_page(self) -> GridView:
        if self.options.is_paginated and self._state.page_index < self._total_pages() - 1:
            self._state = self._state.evolve(page_index=self._state.page_index + 1)
        return self.view()

    def previous_page(self) -> GridView:
        if self.options.is_paginated and self._state.page_index > 0:
            self._state = self._state.evolve(page_index=self._state.page_index - 1)
        return self.view()

    def set_page_size(self, size: Any) -> GridView:
        size = _as_positive_int(size)
        if size is None:
            logger.debug("Ignoring invalid page size")
            return self.view()

        self._state = self._state.evolve(page_size=size)
        self._set_page_index(self._state.page_index)
        logger.debug("Page size set", extra={"page_size": size})
        return self.view()


def _as_positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        n = int(value)
    except (TypeError, ValueError):
        return None
    return n if n >= 1 else None
