from __future__ import annotations

import pytest

from grid_browser.core.pagination import (
    DisplayRange,
    clamp_page_index,
    page_links,
    paginate,
    total_pages_for,
)


def _rows(n):
    return tuple({"i": i} for i in range(n))


def test_scenario_c_first_and_last_page():
    rows = _rows(12)

    first = paginate(rows, 5, 0)
    last = paginate(rows, 5, 2)

    assert first.total_pages == 3
    assert first.rows == rows[0:5]
    assert first.display_range.as_tuple() == (1, 5, 12)
    assert last.rows == rows[10:12]
    assert last.display_range.as_tuple() == (11, 12, 12)


def test_empty_sequence_has_zero_pages_and_zero_range():
    page = paginate((), 5, 0)

    assert page.total_pages == 0
    assert page.rows == ()
    assert page.display_range == DisplayRange(0, 0, 0)
    assert page.display_range.describe() == "Showing 0 to 0 of 0"


def test_out_of_range_index_gives_empty_slice():
    page = paginate(_rows(3), 5, 4)

    assert page.rows == ()
    assert page.total_pages == 1


@pytest.mark.parametrize("n, size", [(1, 1), (7, 3), (10, 5), (11, 5), (50, 7)])
def test_concatenated_pages_cover_the_sequence(n, size):
    rows = _rows(n)
    total = total_pages_for(n, size)

    joined = []
    for i in range(total):
        joined.extend(paginate(rows, size, i).rows)

    assert tuple(joined) == rows


def test_total_pages_and_clamp():
    assert total_pages_for(0, 5) == 0
    assert total_pages_for(5, 5) == 1
    assert total_pages_for(6, 5) == 2

    assert clamp_page_index(-3, 4) == 0
    assert clamp_page_index(9, 4) == 3
    assert clamp_page_index(2, 0) == 0


def test_describe_range():
    assert DisplayRange(11, 12, 12).describe() == "Showing 11 to 12 of 12"


def test_page_links_window():
    assert page_links(0, 0) == ()
    assert page_links(1, 0) == ()
    assert page_links(3, 1) == (0, 1, 2)
    # Far from the end: window starts at the current page
    assert page_links(20, 4) == (4, 5, 6, 7, 8)
    # Near the end: last five pages
    assert page_links(20, 17) == (15, 16, 17, 18, 19)
    assert page_links(5, 0) == (0, 1, 2, 3, 4)
    assert page_links(10, 2, window=3) == (2, 3, 4)
