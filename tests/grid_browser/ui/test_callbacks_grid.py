from __future__ import annotations

from grid_browser.core.configs import GridOptions
from grid_browser.services.grid_service import GridService
from grid_browser.ui.callbacks.callbacks_grid import handle_grid_event
from grid_browser.ui.ids import IDs, filter_input_id, page_link_id, page_step_id, sort_header_id

ROWS = [{"name": f"n{i:02d}", "region": "Africa" if i < 7 else "Europe"} for i in range(12)]


def _service() -> GridService:
    service = GridService(
        GridOptions(columns=("name", "region"), sortable=("name",), filterable=("region",))
    )
    service.load_records(ROWS)
    return service


def test_initial_call_renders_default_state():
    state, view = handle_grid_event(_service(), None, None, None)

    assert view.page_index == 0
    assert view.total_pages == 3
    assert state["sort"] == {"column": "name", "direction": "asc"}


def test_sort_header_click_toggles_sort():
    service = _service()

    state, view = handle_grid_event(service, sort_header_id("name"), 1, None)

    assert view.sort.direction.value == "desc"
    assert [r["name"] for r in view.rows][0] == "n11"


def test_filter_keyup_sets_filter():
    state, view = handle_grid_event(_service(), filter_input_id("region"), "EUR", None)

    assert state["filters"]["region"] == "EUR"
    assert view.display_range.total == 5


def test_page_link_and_step_clicks():
    service = _service()

    state, view = handle_grid_event(service, page_link_id(2), 1, None)
    assert view.page_index == 2

    state, view = handle_grid_event(service, page_step_id("prev"), 1, state)
    assert view.page_index == 1

    state, view = handle_grid_event(service, page_step_id("next"), 3, state)
    assert view.page_index == 2


def test_page_size_select():
    state, view = handle_grid_event(_service(), IDs.Control.PAGE_SIZE_SELECT, 10, None)

    assert state["page_size"] == 10
    assert view.total_pages == 2


def test_freshly_rendered_links_do_not_trigger_updates():
    service = _service()

    assert handle_grid_event(service, page_link_id(1), 0, None) is None
    assert handle_grid_event(service, page_step_id("next"), None, None) is None
    assert handle_grid_event(service, sort_header_id("name"), 0, None) is None
    assert handle_grid_event(service, IDs.Control.RELOAD_BTN, 0, None) is None


def test_reload_without_fetcher_keeps_rows():
    service = _service()
    state, _ = handle_grid_event(service, page_link_id(1), 1, None)

    state, view = handle_grid_event(service, IDs.Control.RELOAD_BTN, 1, state)

    assert view.display_range.total == 12
    assert view.page_index == 1


def test_unknown_trigger_is_ignored():
    assert handle_grid_event(_service(), "something-else", 1, None) is None
    assert handle_grid_event(_service(), {"type": "other"}, 1, None) is None
