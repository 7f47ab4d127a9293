from __future__ import annotations

import pytest

from multirange import defaults
from multirange.converters import data_to_state, options_to_data
from multirange.grid import cell_counts, make_grid


def _data(**overrides):
    return options_to_data({**defaults.default_options(), **overrides})


def test_hidden_grid_has_no_marks() -> None:
    grid = make_grid(_data(grid=False))
    assert not grid.is_visible
    assert grid.marks == ()
    assert grid.css_class == "range-slider__grid"


def test_cell_counts_are_cumulative() -> None:
    assert cell_counts((3, 4, 5)) == [3, 12, 60]


def test_single_level_grid() -> None:
    grid = make_grid(_data(min=0, max=200, grid={"is_visible": True, "num_cells": [4]}))

    assert [m.position for m in grid.marks] == [0, 25, 50, 75, 100]
    assert [m.value for m in grid.marks] == [0, 50, 100, 150, 200]
    assert [m.label for m in grid.marks] == ["0", "50", "100", "150", "200"]
    assert {m.level for m in grid.marks} == {0}


def test_nested_levels_report_each_tick_once_at_coarsest_level() -> None:
    grid = make_grid(_data(grid={"is_visible": True, "num_cells": [2, 2]}))

    assert [(m.position, m.level) for m in grid.marks] == [
        (0, 0),
        (25, 1),
        (50, 0),
        (75, 1),
        (100, 0),
    ]
    assert [m.label for m in grid.marks if m.level == 1] == ["", ""]


def test_grid_is_part_of_state() -> None:
    state = data_to_state(_data(orientation="vertical", grid={"is_visible": True, "num_cells": [3]}))

    assert state.grid.is_visible
    assert state.grid.orientation == "vertical"
    assert len(state.grid.marks) == 4
    assert state.grid.marks[1].position == pytest.approx(100 / 3)


def test_visible_grid_without_levels_stays_visible() -> None:
    grid = make_grid(_data(grid={"is_visible": True, "num_cells": []}))

    assert grid.is_visible
    assert grid.marks == ()


def test_largest_allowed_grid() -> None:
    grid = make_grid(_data(grid={"is_visible": True, "num_cells": [10, defaults.GRID_MAX_CELLS // 10]}))

    assert len(grid.marks) == defaults.GRID_MAX_CELLS + 1
    assert grid.marks[-1].position == 100
    assert [m.level for m in grid.marks[:101:100]] == [0, 0]
