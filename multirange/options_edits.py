"""Pure edits of an options mapping, as made by a configuration panel.

Each function takes an options mapping and returns a *new* mapping; the
input is never modified. Text coming from panel inputs is parsed with
:func:`multirange.input_convert.parse_number`, so a bad entry raises
``ValueError`` before any option is touched.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Tuple, Union

from . import defaults
from .helpers import to_list
from .input_convert import parse_number


def _grid_dict(options: Mapping[str, Any]) -> Dict[str, Any]:
    grid = options.get("grid", defaults.DEFAULT_OPTIONS["grid"])
    if isinstance(grid, bool):
        return {"is_visible": grid, "num_cells": list(defaults.GRID_NUM_CELLS)}
    return {"is_visible": grid["is_visible"], "num_cells": list(grid["num_cells"])}


def _replace_at(items: List[Any], index: int, value: Any) -> List[Any]:
    if not -len(items) <= index < len(items):
        raise IndexError(f"Index {index} out of range for {len(items)} items.")
    items = list(items)
    items[index] = value
    return items


def set_grid_visibility(options: Mapping[str, Any], is_visible: bool) -> Dict[str, Any]:
    grid = _grid_dict(options)
    grid["is_visible"] = bool(is_visible)
    return {**options, "grid": grid}


def set_grid_cell_count(
    options: Mapping[str, Any], level: int, count: Union[int, str]
) -> Dict[str, Any]:
    """Set the number of cells of one grid level; ``count`` must be a positive integer."""
    count = parse_number(count, integer=True)
    if count < 1:
        raise ValueError(f"Grid cell count must be positive, got {count}.")
    grid = _grid_dict(options)
    grid["num_cells"] = _replace_at(grid["num_cells"], level, count)
    return {**options, "grid": grid}


def set_interval_visibility(
    options: Mapping[str, Any], index: int, is_visible: bool
) -> Dict[str, Any]:
    intervals = to_list(options.get("intervals", defaults.INTERVAL_VALUE))
    return {**options, "intervals": _replace_at(intervals, index, bool(is_visible))}


def set_tooltip_visibility(
    options: Mapping[str, Any], index: int, is_visible: bool
) -> Dict[str, Any]:
    tooltips = to_list(options.get("tooltips", defaults.TOOLTIP_VALUE))
    return {**options, "tooltips": _replace_at(tooltips, index, bool(is_visible))}


def set_handle_value(
    options: Mapping[str, Any], index: int, value: Union[float, str]
) -> Dict[str, Any]:
    values = to_list(options["value"])
    return {**options, "value": _replace_at(values, index, parse_number(value))}


def set_number_option(options: Mapping[str, Any], name: str, value: Union[float, str]) -> Dict[str, Any]:
    """Set ``min``, ``max`` or ``step`` from a number or numeric text."""
    if name not in ("min", "max", "step"):
        raise KeyError(f"{name!r} is not a numeric option.")
    return {**options, name: parse_number(value)}


def interval_bounds(options: Mapping[str, Any]) -> List[Tuple[float, float]]:
    """Values each interval spans, using ``min`` / ``max`` for the outer ends.

    One pair per interval entry, in order; entries beyond the handle count
    collapse to ``(max, max)``.
    """
    values = to_list(options["value"])
    intervals = to_list(options.get("intervals", defaults.INTERVAL_VALUE))
    stops = [options["min"], *values] + [options["max"]] * max(1, len(intervals) - len(values))
    return list(zip(stops, stops[1:]))[: len(intervals)]
