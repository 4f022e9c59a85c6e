from __future__ import annotations

import logging

from board import Cube
from buildings import Building
from ui_state import ViewerState


def test_starts_on_first_building():
    state = ViewerState()
    assert state.building is Building.WELL
    assert state.template is Building.WELL.placement_templates()[0]
    assert state.board.is_empty()


def test_template_navigation_wraps():
    state = ViewerState()
    state.next_template(-1)
    assert state.template_idx == len(state.templates) - 1
    state.next_template()
    assert state.template_idx == 0


def test_building_navigation_resets_template():
    state = ViewerState()
    state.next_template()
    state.next_building()
    assert state.building is Building.THEATER
    assert state.template_idx == 0
    state.next_building(-2)
    assert state.building is list(Building)[-1]


def test_place_current():
    state = ViewerState()
    assert state.place_current()
    for (x, y), resource in state.template.required.items():
        assert state.board.get(x, y) == Cube(resource)
    assert state.last_error is None


def test_place_twice_reports_error(caplog):
    state = ViewerState()
    state.place_current()
    with caplog.at_level(logging.WARNING, logger="ui_state"):
        assert not state.place_current()
    assert "already occupied" in state.last_error
    assert "cannot place" in caplog.text


def test_clear_board():
    state = ViewerState()
    state.place_current()
    state.place_current()
    state.clear_board()
    assert state.board.is_empty()
    assert state.last_error is None
