"""Pure conversions between options, data and render state.

``options_to_data``
    Normalize user options into identity-keyed :class:`SliderData`.
``data_to_options``
    Project data back to the options it was built from.
``data_to_state``
    Derive the render-only :class:`SliderState`, including merged tooltips
    for collision groups and interval geometry.

Examples
--------
>>> from multirange.converters import options_to_data, data_to_state
>>> from multirange.defaults import default_options
>>> opts = {**default_options(), "value": [20, 80], "intervals": [False, True]}
>>> data = options_to_data(opts)
>>> data.handle_ids
('handle_0', 'handle_1')
>>> [(i.from_position, i.to_position) for i in data_to_state(data).intervals]
[(0.0, 20.0), (20.0, 80.0), (80.0, 100.0)]
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Sequence

from . import defaults
from .grid import make_grid
from .helpers import (
    clamp,
    closest_to_step,
    fill_list,
    make_id,
    relative_position,
    sliding_pairs,
    to_list,
)
from .slider_types import (
    GridData,
    HandleView,
    IntervalView,
    RangeSliderOptions,
    SliderData,
    SliderState,
    TooltipView,
    TrackView,
    frozen_map,
)


# SECTION: options -> data
# =============================================================================

def normalize_grid(grid: Any) -> GridData:
    if isinstance(grid, bool):
        return GridData(is_visible=grid, num_cells=tuple(defaults.GRID_NUM_CELLS))
    return GridData(
        is_visible=bool(grid["is_visible"]),
        num_cells=tuple(int(n) for n in grid["num_cells"]),
    )


def normalize_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Lift scalars to lists and pad tooltips and intervals to the handle count."""
    merged = {**defaults.DEFAULT_OPTIONS, **options}
    values = to_list(merged["value"])
    return {
        **merged,
        "value": values,
        # one tooltip per handle
        "tooltips": fill_list(to_list(merged["tooltips"]), len(values), defaults.TOOLTIP_VALUE),
        # one interval more than handles
        "intervals": fill_list(
            to_list(merged["intervals"]), len(values) + 1, defaults.INTERVAL_VALUE
        ),
    }


def options_to_data(options: RangeSliderOptions) -> SliderData:
    """Build fresh :class:`SliderData` from structurally valid options.

    Values are snapped to the nearest multiple of ``step`` and clamped to
    ``[min, max]``. Ids are generated sequentially, so calling this twice on
    the same options yields the same ids.
    """
    op = normalize_options(options)
    handle_ids = tuple(make_id("handle", i) for i in range(len(op["value"])))
    tooltip_ids = tuple(make_id("tooltip", i) for i in range(len(op["tooltips"])))
    interval_ids = tuple(make_id("interval", i) for i in range(len(op["intervals"])))

    handles = {
        handle_id: clamp(op["min"], op["max"], closest_to_step(op["step"], value))
        for handle_id, value in zip(handle_ids, op["value"])
    }

    return SliderData(
        min=op["min"],
        max=op["max"],
        step=op["step"],
        orientation=op["orientation"],
        css_class=op["css_class"],
        tooltip_formatter=op["tooltip_formatter"],
        handles=frozen_map(handles),
        handle_ids=handle_ids,
        tooltips=frozen_map(zip(tooltip_ids, op["tooltips"])),
        tooltip_ids=tooltip_ids,
        intervals=frozen_map(zip(interval_ids, op["intervals"])),
        interval_ids=interval_ids,
        grid=normalize_grid(op["grid"]),
        # collisions are only known after the renderer lays out tooltips
        active_handle_id=None,
        tooltip_collisions=(),
    )


# SECTION: data -> options
# =============================================================================

def data_to_options(data: SliderData) -> RangeSliderOptions:
    """Return the options ``data`` represents, ordered by the id tuples."""
    return {
        "value": [data.handles[h] for h in data.handle_ids],
        "min": data.min,
        "max": data.max,
        "step": data.step,
        "orientation": data.orientation,
        "css_class": data.css_class,
        "tooltips": [data.tooltips[t] for t in data.tooltip_ids],
        "tooltip_formatter": data.tooltip_formatter,
        "intervals": [data.intervals[i] for i in data.interval_ids],
        "grid": {"is_visible": data.grid.is_visible, "num_cells": list(data.grid.num_cells)},
    }


# SECTION: data -> state
# =============================================================================

def _position(data: SliderData, handle_id: str) -> float:
    return relative_position(data.min, data.max, data.handles[handle_id])


def make_handles(data: SliderData) -> List[HandleView]:
    role = "handle"
    css_class = f"{data.css_class}__{role}"
    return [
        HandleView(
            id=handle_id,
            orientation=data.orientation,
            position=_position(data, handle_id),
            is_active=data.active_handle_id == handle_id,
            css_class=css_class,
            role=role,
        )
        for handle_id in data.handle_ids
    ]


def merged_tooltip_content(data: SliderData, group: Sequence[TooltipView]) -> str:
    """Join the values of ``group`` with ``" - "`` or ``"; "`` connectors.

    Two adjacent values are joined with a dash when the interval between
    their handles is visible, and with a semicolon otherwise.
    """
    parts: List[str] = []
    for tooltip in group:
        for handle_id in tooltip.handle_ids:
            handle_idx = data.handle_ids.index(handle_id)
            interval_id = data.interval_ids[handle_idx + 1]
            parts.append(data.tooltip_formatter(data.handles[handle_id]))
            parts.append(" - " if data.intervals[interval_id] else "; ")
    # drop the connector after the last value
    return "".join(parts[:-1])


def collision_runs(tooltips: Sequence[TooltipView]) -> List[List[TooltipView]]:
    """Group consecutive colliding tooltips, in handle order."""
    runs: List[List[TooltipView]] = []
    current: List[TooltipView] = []
    for tooltip in tooltips:
        if tooltip.has_collisions:
            current.append(tooltip)
        elif current:
            runs.append(current)
            current = []
    if current:
        runs.append(current)
    return runs


def make_tooltips(data: SliderData) -> List[TooltipView]:
    role = "tooltip"
    css_class = f"{data.css_class}__{role}"

    tooltips = [
        TooltipView(
            id=tooltip_id,
            handle_ids=(handle_id,),
            content=data.tooltip_formatter(data.handles[handle_id]),
            orientation=data.orientation,
            has_collisions=any(tooltip_id in group for group in data.tooltip_collisions),
            is_visible=data.tooltips[tooltip_id],
            position=_position(data, handle_id),
            css_class=css_class,
            role=role,
        )
        for handle_id, tooltip_id in zip(data.handle_ids, data.tooltip_ids)
    ]

    # Each run of overlapping tooltips is shown as one merged tooltip; the
    # renderer hides the colliding originals.
    merged = [
        TooltipView(
            id=make_id("tooltip-merged", idx),
            handle_ids=tuple(h for t in group for h in t.handle_ids),
            content=merged_tooltip_content(data, group),
            orientation=data.orientation,
            has_collisions=False,
            is_visible=True,
            position=(group[0].position + group[-1].position) / 2,
            css_class=css_class,
            role="tooltip-merged",
        )
        for idx, group in enumerate(collision_runs(tooltips))
    ]

    return tooltips + merged


def make_intervals(data: SliderData) -> List[IntervalView]:
    role = "interval"
    css_class = f"{data.css_class}__{role}"

    stops = [("first", 0.0)]
    stops += [(handle_id, _position(data, handle_id)) for handle_id in data.handle_ids]
    stops.append(("last", 100.0))

    return [
        IntervalView(
            id=interval_id,
            from_position=start[1],
            to_position=stop[1],
            handle_ids=(start[0], stop[0]),
            orientation=data.orientation,
            is_visible=data.intervals[interval_id],
            css_class=css_class,
            role=role,
        )
        for interval_id, (start, stop) in zip(data.interval_ids, sliding_pairs(stops))
    ]


def data_to_state(data: SliderData) -> SliderState:
    """Derive the render state. Pure: equal data gives equal state."""
    return SliderState(
        css_class=data.css_class,
        track=TrackView(orientation=data.orientation, css_class=f"{data.css_class}__track"),
        handles=tuple(make_handles(data)),
        tooltips=tuple(make_tooltips(data)),
        intervals=tuple(make_intervals(data)),
        grid=make_grid(data),
    )
