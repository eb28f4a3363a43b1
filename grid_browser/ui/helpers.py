from __future__ import annotations

from typing import List, Optional

from dash import html

from grid_browser.core.view import GridView
from grid_browser.ui.ids import page_link_id, page_step_id

SORTABLE_CLASS = "sortable"


def sort_header_class(view: GridView, column: str) -> str:
    """
    CSS classes for a header cell: 'sortable' plus 'sort_asc' / 'sort_desc'
    on the actively sorted column.
    """
    if column not in view.sortable:
        return ""
    indicator = view.sort_indicator(column)
    if indicator is None:
        return SORTABLE_CLASS
    return f"{SORTABLE_CLASS} sort_{indicator}"


def render_body(view: GridView) -> List[html.Tr]:
    """One <tr> per page row, cells in Column Set order. Missing values render empty."""
    if not view.rows:
        message = "No matching rows." if view.is_ready else "No data loaded."
        return [
            html.Tr(
                html.Td(message, colSpan=len(view.columns), className="grid-empty"),
            )
        ]

    return [
        html.Tr([html.Td(text) for text in cells])
        for cells in view.text_rows()
    ]


def render_entries(view: GridView) -> str:
    if not view.is_paginated:
        return ""
    return view.display_range.describe()


def _step_class(base: str, enabled: bool) -> str:
    return base if enabled else f"{base} disabled"


def render_pagination(view: GridView) -> List[html.A]:
    """
    « prev, numbered page links, next ». Nothing when there is at most one page.
    """
    if not view.is_paginated or view.total_pages <= 1:
        return []

    links: List[html.A] = [
        html.A("«", id=page_step_id("prev"), n_clicks=0,
               className=_step_class("page-prev", view.has_previous)),
    ]
    for index in view.page_links:
        links.append(
            html.A(
                str(index + 1),
                id=page_link_id(index),
                n_clicks=0,
                className="selected" if index == view.page_index else "",
            )
        )
    links.append(
        html.A("»", id=page_step_id("next"), n_clicks=0,
               className=_step_class("page-next", view.has_next)),
    )
    return links


def fetch_status_text(view: GridView, last_error: Optional[str]) -> str:
    if last_error:
        return f"Could not load data: {last_error}"
    if not view.is_ready:
        return "No data loaded yet."
    return ""
