from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from grid_browser.core.configs import GridOptions
from grid_browser.ui.ids import IDs, filter_input_id, sort_header_id


def _build_header_rows(options: GridOptions) -> list:
    """
    Header row (sortable cells are clickable) and, if any column is
    filterable, a second row of search inputs.

    Both rows are static: callbacks only update the header classes, so the
    inputs keep focus while the user types.
    """
    header_cells = []
    for column in options.columns:
        label = options.header_label(column)
        if column in options.sortable:
            header_cells.append(
                html.Th(label, id=sort_header_id(column), n_clicks=0, className="sortable")
            )
        else:
            header_cells.append(html.Th(label))

    rows = [
        html.Tr(header_cells, className="sticky" if options.is_header_fixed else ""),
    ]

    if options.filterable:
        filter_cells = []
        for column in options.columns:
            if column in options.filterable:
                filter_cells.append(
                    html.Th(
                        dcc.Input(
                            id=filter_input_id(column),
                            type="text",
                            placeholder=f"Search {column}",
                            debounce=False,
                            value="",
                        )
                    )
                )
            else:
                filter_cells.append(html.Th())
        rows.append(html.Tr(filter_cells))

    return rows


def build_grid_panel(options: GridOptions) -> dbc.Card:
    """
    Grid page:

    - page-size select (only when paginated)
    - the table: header, filter row, body
    - "Showing X to Y of Z" and the pagination bar
    """
    page_size_select = html.Div(
        [
            html.Label("Rows per page", className="me-2"),
            dcc.Dropdown(
                id=IDs.Control.PAGE_SIZE_SELECT,
                options=[{"label": str(n), "value": n} for n in options.page_size_options],
                value=options.page_size,
                clearable=False,
                style={"width": "90px"},
            ),
        ],
        id=IDs.Control.PAGE_SIZE_CONTAINER,
        className="d-flex align-items-center mb-2",
        style={} if options.is_paginated else {"display": "none"},
    )

    table = html.Table(
        [
            html.Thead(_build_header_rows(options)),
            html.Tbody(id=IDs.Control.GRID_BODY),
        ],
        id=IDs.Control.GRID_TABLE,
        className="table table-sm grid-table",
    )

    footer = html.Div(
        [
            html.Div(id=IDs.Control.GRID_ENTRIES, className="text-muted small"),
            html.Div(id=IDs.Control.GRID_PAGINATION, className="grid-pagination"),
        ],
        className="d-flex justify-content-between align-items-center",
    )

    return dbc.Card(
        dbc.CardBody(
            [
                html.Div(id=IDs.Control.FETCH_STATUS, className="text-danger small mb-2"),
                page_size_select,
                html.Div(table, className="grid-scroll"),
                footer,
            ]
        ),
        className="grid-card",
    )
