from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from grid_browser.core.configs import GridOptions
from grid_browser.core.controller import GridController
from grid_browser.core.dataset import DatasetStore
from grid_browser.core.exceptions import FetchError
from grid_browser.core.state import GridState
from grid_browser.core.view import GridView
from grid_browser.services.fetch_service import DatasetFetcher

logger = logging.getLogger(__name__)


class GridCommand(str, Enum):
    SET_FILTER = "set_filter"
    SET_SORT = "set_sort"
    SET_PAGE = "set_page"
    NEXT_PAGE = "next_page"
    PREVIOUS_PAGE = "previous_page"
    SET_PAGE_SIZE = "set_page_size"


class GridService:
    """
    Shared service behind the UI.

    Holds the fetched source rows once for the whole app. Each browser
    session keeps its own GridState; every request rebuilds a controller
    from that state over a fork of the shared store, applies one command
    and hands back the new (state, view) pair.
    """

    def __init__(self, options: GridOptions, fetcher: Optional[DatasetFetcher] = None):
        self.options = options
        self.fetcher = fetcher
        self.store = DatasetStore(options.columns)
        self.last_error: Optional[str] = None

    def refresh(self) -> bool:
        """
        Fetch the dataset and replace the shared source rows.

        On failure the previous rows (or the empty store) are kept and a
        warning is logged.

        :return: True if new rows were loaded.
        """
        if self.fetcher is None:
            logger.warning("No dataset fetcher configured; nothing to refresh")
            return False

        try:
            records = self.fetcher.fetch()
        except FetchError as e:
            self.last_error = str(e)
            logger.warning(
                "Dataset fetch failed; keeping previous rows",
                extra={"error": str(e), "n_rows_kept": len(self.store)},
            )
            return False

        self.store.load(records)
        self.last_error = None
        return True

    def load_records(self, records) -> None:
        """Load rows directly, bypassing the fetcher (used by tests and scripts)."""
        self.store.load(records)
        self.last_error = None

    def controller(self, state: Optional[GridState] = None) -> GridController:
        return GridController(self.options, state=state, store=self.store.fork())

    def parse_state(self, data: Any) -> Optional[GridState]:
        """Stored state from the client, or None when it is missing or broken."""
        if not isinstance(data, dict) or not data:
            return None
        try:
            return GridState.from_dict(data)
        except (KeyError, TypeError, ValueError):
            logger.exception("Invalid grid-state: %r", data)
            return None

    def dispatch(
        self,
        state_data: Any,
        command: Optional[GridCommand] = None,
        *args: Any,
    ) -> Tuple[Dict[str, Any], GridView]:
        """
        Apply one command to a stored state.

        :param state_data: the client's serialised GridState (may be None)
        :param command: the command to run, or None to just render the state
        :param args: command arguments (column / term / index / size)
        :return: (new serialised state, new view)
        """
        ctrl = self.controller(self.parse_state(state_data))

        if command is None:
            view = ctrl.view()
        else:
            view = getattr(ctrl, GridCommand(command).value)(*args)

        return ctrl.state.to_dict(), view

    def reload(self, state_data: Any) -> Tuple[Dict[str, Any], GridView, bool]:
        """
        Refetch the dataset and re-render a stored state.

        A successful reload puts the session back on the first page; a failed
        one leaves both the rows and the state as they were.
        """
        loaded = self.refresh()
        state = self.parse_state(state_data)
        if loaded and state is not None:
            state = state.evolve(page_index=0)

        ctrl = self.controller(state)
        return ctrl.state.to_dict(), ctrl.view(), loaded
