from __future__ import annotations

__all__ = ["IDs", "sort_header_id", "filter_input_id", "page_link_id", "page_step_id"]


class IDs:
    class Store:
        GRID_STATE = "grid-state"

    class Control:
        RELOAD_BTN = "reload-btn"
        FETCH_STATUS = "fetch-status"

        PAGE_SIZE_SELECT = "page-size-select"
        PAGE_SIZE_CONTAINER = "page-size-container"

        GRID_TABLE = "grid-table"
        GRID_BODY = "grid-body"
        GRID_ENTRIES = "grid-entries"
        GRID_PAGINATION = "grid-pagination"

    class Pattern:
        # pattern-matching "type" strings
        SORT_HEADER = "grid-sort-header"
        FILTER_INPUT = "grid-filter-input"
        PAGE_LINK = "grid-page-link"
        PAGE_STEP = "grid-page-step"


def sort_header_id(column: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "column": column}


def filter_input_id(column: str) -> dict:
    return {"type": IDs.Pattern.FILTER_INPUT, "column": column}


def page_link_id(index: int) -> dict:
    return {"type": IDs.Pattern.PAGE_LINK, "index": index}


def page_step_id(step: str) -> dict:
    """step is 'prev' or 'next'"""
    return {"type": IDs.Pattern.PAGE_STEP, "step": step}
