"""Cross-field integrity checks over normalized :class:`SliderData`.

The model consults :func:`check_data_integrity` before committing any
change. Every check runs and the errors accumulate, so a single rejected
proposal reports all of the invariants it would break.
"""

from __future__ import annotations

import math
from typing import Callable, List, Optional

from . import defaults
from .errors import (
    IntegrityError,
    err_grid_cells_not_in_range,
    err_ids_do_not_match_entries,
    err_intervals_do_not_match_values,
    err_min_is_greater_than_max,
    err_step_not_in_range,
    err_tooltips_do_not_match_values,
    err_value_not_in_range,
)
from .result import Err, Ok, Result
from .slider_types import SliderData


def check_min_is_less_than_or_equal_to_max(data: SliderData) -> Optional[IntegrityError]:
    if data.min > data.max:
        return err_min_is_greater_than_max(data.min, data.max)
    return None


def check_values_in_range(data: SliderData) -> Optional[IntegrityError]:
    outside = [v for v in _values(data) if not data.min <= v <= data.max]
    return err_value_not_in_range(outside) if outside else None


def check_step_in_range(data: SliderData) -> Optional[IntegrityError]:
    if data.step < 0 or data.step > data.max - data.min:
        return err_step_not_in_range(data.step)
    return None


def check_tooltips_match_values(data: SliderData) -> Optional[IntegrityError]:
    num_tooltips = len(data.tooltip_ids)
    num_values = len(data.handle_ids)
    if num_tooltips != 1 and num_tooltips != num_values:
        return err_tooltips_do_not_match_values(num_tooltips, num_values)
    return None


def check_intervals_match_values(data: SliderData) -> Optional[IntegrityError]:
    num_intervals = len(data.interval_ids)
    num_values = len(data.handle_ids)
    if num_intervals != num_values + 1:
        return err_intervals_do_not_match_values(num_intervals, num_values)
    return None


def check_ids_match_entries(data: SliderData) -> Optional[IntegrityError]:
    problems = []
    for name, ids, entries in (
        ("handles", data.handle_ids, data.handles),
        ("tooltips", data.tooltip_ids, data.tooltips),
        ("intervals", data.interval_ids, data.intervals),
    ):
        if len(set(ids)) != len(ids):
            problems.append(f"duplicate {name} ids")
        if set(ids) != set(entries.keys()):
            problems.append(f"{name} ids and keys differ")
    if data.active_handle_id is not None and data.active_handle_id not in data.handles:
        problems.append(f"unknown active handle {data.active_handle_id!r}")
    if problems:
        return err_ids_do_not_match_entries("ids", "; ".join(problems))
    return None


def check_grid_cells_in_range(data: SliderData) -> Optional[IntegrityError]:
    num_cells = data.grid.num_cells
    if any(n < 1 for n in num_cells) or math.prod(num_cells) > defaults.GRID_MAX_CELLS:
        return err_grid_cells_not_in_range(num_cells, defaults.GRID_MAX_CELLS)
    return None


def _values(data: SliderData) -> List[float]:
    return [data.handles[h] for h in data.handle_ids if h in data.handles]


INTEGRITY_CHECKS: List[Callable[[SliderData], Optional[IntegrityError]]] = [
    check_min_is_less_than_or_equal_to_max,
    check_values_in_range,
    check_step_in_range,
    check_tooltips_match_values,
    check_intervals_match_values,
    check_ids_match_entries,
    check_grid_cells_in_range,
]


def check_data_integrity(data: SliderData) -> Result:
    """Return ``Ok(data)`` or ``Err(list_of_integrity_errors)``."""
    errors = [e for e in (check(data) for check in INTEGRITY_CHECKS) if e is not None]
    return Err(errors) if errors else Ok(data)
