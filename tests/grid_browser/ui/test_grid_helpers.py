from __future__ import annotations

from grid_browser.core.configs import GridOptions
from grid_browser.core.controller import GridController
from grid_browser.ui.helpers import (
    fetch_status_text,
    render_body,
    render_entries,
    render_pagination,
    sort_header_class,
)
from grid_browser.ui.ids import IDs


def _controller(n: int = 12, **overrides) -> GridController:
    params = dict(
        columns=("name", "capital", "population"),
        sortable=("name", "population"),
        filterable=("capital",),
        page_size=5,
    )
    params.update(overrides)
    ctrl = GridController(GridOptions(**params))
    ctrl.load(
        [{"name": f"n{i:02d}", "capital": f"c{i}", "population": i} for i in range(n)]
    )
    return ctrl


def test_render_body_one_row_per_page_row_in_column_order():
    view = _controller().view()

    rows = render_body(view)

    assert len(rows) == 5
    assert [td.children for td in rows[0].children] == ["n00", "c0", "0"]


def test_render_body_shows_missing_values_as_empty_cells():
    ctrl = GridController(GridOptions(columns=("name", "capital"), sortable=("name",), filterable=()))
    view = ctrl.load([{"name": "Bouvet Island"}])

    rows = render_body(view)

    assert [td.children for td in rows[0].children] == ["Bouvet Island", ""]


def test_render_body_placeholder_when_empty():
    ctrl = _controller()
    view = ctrl.set_filter("capital", "nothing-matches")

    (row,) = render_body(view)

    assert row.children.children == "No matching rows."
    assert row.children.colSpan == 3


def test_entries_text():
    ctrl = _controller()

    assert render_entries(ctrl.view()) == "Showing 1 to 5 of 12"
    assert render_entries(ctrl.set_page(2)) == "Showing 11 to 12 of 12"
    assert render_entries(ctrl.set_filter("capital", "zzz")) == "Showing 0 to 0 of 0"


def test_pagination_links_and_selected_page():
    view = _controller().set_page(1)

    links = render_pagination(view)

    assert [a.children for a in links] == ["«", "1", "2", "3", "»"]
    assert links[0].id == {"type": IDs.Pattern.PAGE_STEP, "step": "prev"}
    assert links[2].id == {"type": IDs.Pattern.PAGE_LINK, "index": 1}
    assert links[2].className == "selected"
    assert links[1].className == ""


def test_no_pagination_bar_for_single_page_or_unpaginated_grid():
    assert render_pagination(_controller(3).view()) == []
    assert render_pagination(_controller(12, is_paginated=False).view()) == []
    assert render_entries(_controller(12, is_paginated=False).view()) == ""


def test_sort_header_classes():
    ctrl = _controller()
    view = ctrl.view()

    assert sort_header_class(view, "name") == "sortable sort_asc"
    assert sort_header_class(view, "population") == "sortable"
    assert sort_header_class(view, "capital") == ""

    view = ctrl.set_sort("name")
    assert sort_header_class(view, "name") == "sortable sort_desc"


def test_fetch_status_text():
    ready = _controller().view()
    empty = GridController(GridOptions()).view()

    assert fetch_status_text(ready, None) == ""
    assert fetch_status_text(empty, None) == "No data loaded yet."
    assert "boom" in fetch_status_text(ready, "boom")


def test_step_links_disabled_at_the_boundaries():
    ctrl = _controller()

    first = render_pagination(ctrl.view())
    middle = render_pagination(ctrl.set_page(1))
    last = render_pagination(ctrl.set_page(2))

    assert (first[0].className, first[-1].className) == ("page-prev disabled", "page-next")
    assert (middle[0].className, middle[-1].className) == ("page-prev", "page-next")
    assert (last[0].className, last[-1].className) == ("page-prev", "page-next disabled")
