from __future__ import annotations

import locale
import logging

from grid_browser.core import sort_engine
from grid_browser.core.configs import GridOptions
from grid_browser.core.controller import GridController
from grid_browser.core.dataset import project_record
from grid_browser.core.state import SortDirection, SortState


def _rows(records, columns=("name", "region", "population")):
    return tuple(project_record(r, columns) for r in records)


def test_scenario_a_sort_by_name_ascending():
    rows = _rows([
        {"name": "Chad", "region": "Africa"},
        {"name": "Benin", "region": "Africa"},
        {"name": "Mali", "region": "Africa"},
    ])

    out = sort_engine.apply(rows, SortState("name", SortDirection.ASC))

    assert [r["name"] for r in out] == ["Benin", "Chad", "Mali"]


def test_descending_reverses_order():
    rows = _rows([{"name": "Chad"}, {"name": "Benin"}, {"name": "Mali"}])

    out = sort_engine.apply(rows, SortState("name", SortDirection.DESC))

    assert [r["name"] for r in out] == ["Mali", "Chad", "Benin"]


def test_scenario_d_numbers_sort_as_strings():
    rows = _rows([{"population": "9"}, {"population": "80"}, {"population": "700"}])

    out = sort_engine.apply(rows, SortState("population"))

    assert [r["population"] for r in out] == ["700", "80", "9"]


def test_numeric_values_sort_lexicographically():
    rows = _rows([{"population": 20}, {"population": 100}, {"population": 3}])

    out = sort_engine.apply(rows, SortState("population"))

    assert [r["population"] for r in out] == [100, 20, 3]


def test_sort_is_stable_for_equal_keys_in_both_directions():
    rows = _rows([
        {"name": "b", "region": "first"},
        {"name": "a", "region": "x"},
        {"name": "b", "region": "second"},
        {"name": "b", "region": "third"},
    ])

    asc = sort_engine.apply(rows, SortState("name", SortDirection.ASC))
    desc = sort_engine.apply(rows, SortState("name", SortDirection.DESC))

    assert [r["region"] for r in asc if r["name"] == "b"] == ["first", "second", "third"]
    assert [r["region"] for r in desc if r["name"] == "b"] == ["first", "second", "third"]


def test_sort_does_not_mutate_input():
    rows = list(_rows([{"name": "b"}, {"name": "a"}]))
    before = list(rows)

    out = sort_engine.apply(rows, SortState("name"))

    assert rows == before
    assert out is not rows


def test_missing_values_sort_as_empty_text():
    rows = _rows([{"name": "b"}, {}, {"name": "a"}])

    out = sort_engine.apply(rows, SortState("name"))

    assert [r["name"] for r in out] == [None, "a", "b"]


def test_nul_character_in_value_does_not_break_sort():
    rows = _rows([{"name": "Chad"}, {"name": "Be\x00nin"}, {"name": "Mali"}])

    out = sort_engine.apply(rows, SortState("name"))

    assert [r["name"] for r in out] == ["Be\x00nin", "Chad", "Mali"]


def test_sort_key_is_total_for_any_json_string():
    for value in ("\x00", "a\x00b", "\ud800", "x\udfffy", ""):
        row = project_record({"name": value}, ("name",))
        sort_engine.sort_key(row, "name")


def test_controller_loads_rows_with_nul_characters():
    ctrl = GridController(GridOptions(columns=("name",), sortable=("name",), filterable=()))

    view = ctrl.load([{"name": "Chad"}, {"name": "Be\x00nin"}])

    assert [r["name"] for r in view.rows] == ["Be\x00nin", "Chad"]


def _fake_setlocale(env_name):
    def setlocale(category, value=None):
        if value == "" and env_name is None:
            raise locale.Error("unsupported locale setting")
        return env_name if value == "" else "C"

    return setlocale


def test_configure_collation_uses_environment_locale(monkeypatch, caplog):
    monkeypatch.setattr(locale, "setlocale", _fake_setlocale("en_US.UTF-8"))

    with caplog.at_level(logging.WARNING):
        assert sort_engine.configure_collation() == "en_US.UTF-8"

    assert caplog.records == []


def test_configure_collation_warns_on_code_point_locale(monkeypatch, caplog):
    monkeypatch.setattr(locale, "setlocale", _fake_setlocale("POSIX"))

    with caplog.at_level(logging.WARNING):
        assert sort_engine.configure_collation() == "POSIX"

    assert "code point" in caplog.text


def test_configure_collation_falls_back_to_c_on_bad_locale(monkeypatch, caplog):
    monkeypatch.setattr(locale, "setlocale", _fake_setlocale(None))

    with caplog.at_level(logging.WARNING):
        assert sort_engine.configure_collation() == "C"

    assert "Unsupported locale" in caplog.text
    assert "code point" in caplog.text
