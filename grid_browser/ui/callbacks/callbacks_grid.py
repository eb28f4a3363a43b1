from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import dash
from dash import ALL, Input, Output, State

from grid_browser.core.view import GridView
from grid_browser.services.grid_service import GridCommand, GridService
from grid_browser.ui.helpers import (
    fetch_status_text,
    render_body,
    render_entries,
    render_pagination,
    sort_header_class,
)
from grid_browser.ui.ids import IDs

if TYPE_CHECKING:
    from grid_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def handle_grid_event(
    service: GridService,
    triggered_id: Any,
    triggered_value: Any,
    state_data: Any,
) -> Optional[Tuple[Dict[str, Any], GridView]]:
    """
    Translate one UI event into a grid command.

    :param triggered_id: dash.ctx.triggered_id (None on the initial call)
    :param triggered_value: the new value of the triggering property
    :param state_data: the stored GridState dict
    :return: (new state dict, new view), or None when the event changes nothing
             (e.g. n_clicks=0 from a freshly rendered pagination link)
    """
    if triggered_id is None:
        return service.dispatch(state_data)

    if triggered_id == IDs.Control.RELOAD_BTN:
        if not triggered_value:
            return None
        state, view, _loaded = service.reload(state_data)
        return state, view

    if triggered_id == IDs.Control.PAGE_SIZE_SELECT:
        return service.dispatch(state_data, GridCommand.SET_PAGE_SIZE, triggered_value)

    if not isinstance(triggered_id, dict):
        logger.warning("Unexpected grid trigger: %r", triggered_id)
        return None

    kind = triggered_id.get("type")

    if kind == IDs.Pattern.FILTER_INPUT:
        return service.dispatch(
            state_data, GridCommand.SET_FILTER, triggered_id.get("column"), triggered_value
        )

    # Everything below is a click; newly created components report n_clicks=0
    if not triggered_value:
        return None

    if kind == IDs.Pattern.SORT_HEADER:
        return service.dispatch(state_data, GridCommand.SET_SORT, triggered_id.get("column"))

    if kind == IDs.Pattern.PAGE_LINK:
        return service.dispatch(state_data, GridCommand.SET_PAGE, triggered_id.get("index"))

    if kind == IDs.Pattern.PAGE_STEP:
        if triggered_id.get("step") == "next":
            return service.dispatch(state_data, GridCommand.NEXT_PAGE)
        return service.dispatch(state_data, GridCommand.PREVIOUS_PAGE)

    logger.warning("Unexpected grid trigger: %r", triggered_id)
    return None


def register_grid_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    service = ctx.grid_service

    @app.callback(
        Output(IDs.Store.GRID_STATE, "data"),
        Output(IDs.Control.GRID_BODY, "children"),
        Output(IDs.Control.GRID_ENTRIES, "children"),
        Output(IDs.Control.GRID_PAGINATION, "children"),
        Output({"type": IDs.Pattern.SORT_HEADER, "column": ALL}, "className"),
        Output(IDs.Control.FETCH_STATUS, "children"),
        Input({"type": IDs.Pattern.SORT_HEADER, "column": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.FILTER_INPUT, "column": ALL}, "value"),
        Input({"type": IDs.Pattern.PAGE_LINK, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_STEP, "step": ALL}, "n_clicks"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input(IDs.Control.RELOAD_BTN, "n_clicks"),
        State(IDs.Store.GRID_STATE, "data"),
    )
    def update_grid(_sort_clicks, _filter_values, _page_clicks, _step_clicks, _page_size,
                    _reload_clicks, state_data):
        triggered = dash.ctx.triggered[0] if dash.ctx.triggered else {}
        result = handle_grid_event(
            service,
            dash.ctx.triggered_id,
            triggered.get("value"),
            state_data,
        )
        if result is None:
            raise dash.exceptions.PreventUpdate

        state, view = result

        # One className per sortable header, in the order Dash matched them
        header_outputs = dash.ctx.outputs_list[4]
        header_classes = [sort_header_class(view, out["id"]["column"]) for out in header_outputs]

        return (
            state,
            render_body(view),
            render_entries(view),
            render_pagination(view),
            header_classes,
            fetch_status_text(view, service.last_error),
        )
