"""Tests for options -> data -> options conversion."""

from __future__ import annotations

from fractions import Fraction

import pytest

from multirange import defaults
from multirange.converters import data_to_options, options_to_data
from multirange.helpers import closest_to_step, fill_list, relative_position, to_list
from multirange.slider_types import GridData, SliderData, frozen_map
from multirange.validators import check_range_slider_options


def _options(**overrides):
    return {**defaults.default_options(), **overrides}


def test_scalar_value_is_lifted_to_single_handle() -> None:
    data = options_to_data(_options(value=40, tooltips=False))

    assert data.handle_ids == ("handle_0",)
    assert dict(data.handles) == {"handle_0": 40}
    assert dict(data.tooltips) == {"tooltip_0": False}


def test_ids_are_sequential_and_paired_with_maps() -> None:
    data = options_to_data(_options(value=[10, 20, 30]))

    assert data.handle_ids == ("handle_0", "handle_1", "handle_2")
    assert data.tooltip_ids == ("tooltip_0", "tooltip_1", "tooltip_2")
    assert data.interval_ids == tuple(f"interval_{i}" for i in range(4))
    assert set(data.handles) == set(data.handle_ids)
    assert set(data.tooltips) == set(data.tooltip_ids)
    assert set(data.intervals) == set(data.interval_ids)
    assert data.active_handle_id is None
    assert data.tooltip_collisions == ()


def test_tooltips_and_intervals_are_padded_with_defaults() -> None:
    data = options_to_data(_options(value=[0, 50, 100], tooltips=[False], intervals=[True]))

    assert [data.tooltips[t] for t in data.tooltip_ids] == [
        False,
        defaults.TOOLTIP_VALUE,
        defaults.TOOLTIP_VALUE,
    ]
    assert [data.intervals[i] for i in data.interval_ids] == [
        True,
        defaults.INTERVAL_VALUE,
        defaults.INTERVAL_VALUE,
        defaults.INTERVAL_VALUE,
    ]


def test_values_are_snapped_then_clamped() -> None:
    data = options_to_data(_options(value=[-12, 13, 27, 117], min=0, max=100, step=10))

    assert data.values == (0, 10, 30, 100)


def test_step_snapping_rounds_half_up() -> None:
    assert closest_to_step(10, 5) == 10
    assert closest_to_step(10, -5) == 0
    assert closest_to_step(10, 15) == 20
    assert closest_to_step(0.1, 0.35) == pytest.approx(0.4)
    assert closest_to_step(0.1, 0.34) == pytest.approx(0.3)
    assert closest_to_step(0, 1.2345) == 1.2345


def test_snapping_keeps_decimal_steps_clean() -> None:
    assert closest_to_step(0.1, 0.7000000001) == 0.7
    assert closest_to_step(0.25, 1.3) == 1.25


def test_fractions_snap_exactly() -> None:
    assert closest_to_step(1, Fraction(5, 2)) == 3
    assert closest_to_step(Fraction(1, 4), 0.3) == 0.25

    options = _options(value=[Fraction(1, 3), Fraction(5, 2)])
    assert check_range_slider_options(options).is_ok
    assert options_to_data(options).values == (0, 3)


def test_grid_round_trips_through_data() -> None:
    options = _options(grid={"is_visible": True, "num_cells": [2, 5]})

    data = options_to_data(options)

    assert data.grid == GridData(is_visible=True, num_cells=(2, 5))
    assert data_to_options(data)["grid"] == {"is_visible": True, "num_cells": [2, 5]}


def test_boolean_grid_uses_default_cell_count() -> None:
    data = options_to_data(_options(grid=True))
    assert data.grid == GridData(is_visible=True, num_cells=tuple(defaults.GRID_NUM_CELLS))


def test_data_maps_are_read_only() -> None:
    data = options_to_data(_options(value=[10, 20]))
    with pytest.raises(TypeError):
        data.handles["handle_0"] = 99  # type: ignore[index]


def test_data_to_options() -> None:
    data = SliderData(
        handles=frozen_map({"handle_0": 50}),
        handle_ids=("handle_0",),
        active_handle_id=None,
        min=0,
        max=100,
        step=1,
        css_class="range-slider",
        orientation="horizontal",
        tooltips=frozen_map({"tooltip_0": True}),
        tooltip_ids=("tooltip_0",),
        tooltip_formatter=defaults.default_tooltip_formatter,
        tooltip_collisions=(),
        intervals=frozen_map({"interval_0": True, "interval_1": False}),
        interval_ids=("interval_0", "interval_1"),
        grid=GridData(is_visible=False, num_cells=(5,)),
    )

    assert data_to_options(data) == {
        "value": [50],
        "min": 0,
        "max": 100,
        "step": 1,
        "css_class": "range-slider",
        "orientation": "horizontal",
        "tooltips": [True],
        "tooltip_formatter": defaults.default_tooltip_formatter,
        "intervals": [True, False],
        "grid": {"is_visible": False, "num_cells": [5]},
    }


def test_data_to_options_follows_id_order_not_map_order() -> None:
    data = SliderData(
        handles=frozen_map({"handle_3": 70, "handle_1": 0, "handle_0": -20, "handle_2": 60}),
        handle_ids=("handle_0", "handle_1", "handle_2", "handle_3"),
        min=-100,
        max=100,
        step=5,
        css_class="range-slider",
        orientation="vertical",
        tooltips=frozen_map({f"tooltip_{i}": True for i in reversed(range(4))}),
        tooltip_ids=tuple(f"tooltip_{i}" for i in range(4)),
        tooltip_formatter=defaults.default_tooltip_formatter,
        intervals=frozen_map({f"interval_{i}": i == 2 for i in reversed(range(5))}),
        interval_ids=tuple(f"interval_{i}" for i in range(5)),
        grid=GridData(is_visible=True, num_cells=(3, 4, 5)),
    )

    options = data_to_options(data)

    assert options["value"] == [-20, 0, 60, 70]
    assert options["tooltips"] == [True, True, True, True]
    assert options["intervals"] == [False, False, True, False, False]
    assert options["grid"] == {"is_visible": True, "num_cells": [3, 4, 5]}


def test_round_trip_preserves_configuration() -> None:
    options = _options(
        value=[-20, 0, 60, 70],
        min=-100,
        max=100,
        step=5,
        orientation="vertical",
        css_class="my-slider",
        tooltips=[True, False, True, True],
        intervals=[False, True, False, True, False],
        grid={"is_visible": True, "num_cells": [3, 4]},
    )

    assert data_to_options(options_to_data(options)) == options


def test_list_helpers() -> None:
    assert to_list(3) == [3]
    assert to_list((1, 2)) == [1, 2]
    assert fill_list([1], 3, 0) == [1, 0, 0]
    assert fill_list([1, 2, 3], 2, 0) == [1, 2, 3]
    assert relative_position(0, 200, 50) == 25
    assert relative_position(5, 5, 5) == 0
