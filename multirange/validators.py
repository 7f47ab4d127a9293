"""Structural validation of raw range slider options.

Each ``check_*`` function inspects one option field in isolation and returns
``Ok(value)`` or ``Err(ValidationError)``. None of them knows about
cross-field rules such as ``min <= max``; those live in
:mod:`multirange.integrity` and run on normalized data.

:func:`check_range_slider_options` validates a whole options mapping and
collects *every* field error instead of stopping at the first one.

Examples
--------
>>> from multirange.validators import check_min, check_orientation
>>> check_min(3).is_ok
True
>>> check_orientation("  vertical  ").is_ok
False
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from numbers import Integral, Real
from typing import Any, Callable, Dict, List

from . import defaults
from .errors import (
    ValidationError,
    err_incorrect_object_shape,
    err_not_a_boolean_or_list_of_booleans,
    err_not_a_list_of_cell_counts,
    err_not_a_css_class,
    err_not_a_number,
    err_not_a_number_or_list_of_numbers,
    err_not_callable,
    err_not_one_of,
)
from .result import Err, Ok, Result, lefts

REQUIRED_KEYS = ("value", "min", "max", "step", "orientation", "tooltips")
GRID_KEYS = ("is_visible", "num_cells")

_CSS_CLASS_RE = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


# --- predicates -----------------------------------------------------------

def is_number(v: Any) -> bool:
    """True for finite real numbers; booleans are not numbers here."""
    if not isinstance(v, Real) or isinstance(v, bool):
        return False
    try:
        return math.isfinite(v)
    except OverflowError:
        # integers too large for a float
        return False


def is_boolean(v: Any) -> bool:
    return isinstance(v, bool)


def _is_list(v: Any) -> bool:
    return isinstance(v, (list, tuple))


def is_list_of_numbers(v: Any) -> bool:
    return _is_list(v) and all(is_number(x) for x in v)


def is_list_of_booleans(v: Any) -> bool:
    return _is_list(v) and all(is_boolean(x) for x in v)


def is_list_of_cell_counts(v: Any) -> bool:
    """Non-empty list of positive integers whose product is at most ``GRID_MAX_CELLS``."""
    if not _is_list(v) or len(v) == 0:
        return False
    if not all(isinstance(n, Integral) and not isinstance(n, bool) and n > 0 for n in v):
        return False
    return math.prod(int(n) for n in v) <= defaults.GRID_MAX_CELLS


# --- field validators -----------------------------------------------------

def check_value(v: Any) -> Result:
    if is_number(v) or (is_list_of_numbers(v) and len(v) > 0):
        return Ok(v)
    return Err(err_not_a_number_or_list_of_numbers("value", v))


def check_min(v: Any) -> Result:
    return Ok(v) if is_number(v) else Err(err_not_a_number("min", v))


def check_max(v: Any) -> Result:
    return Ok(v) if is_number(v) else Err(err_not_a_number("max", v))


def check_step(v: Any) -> Result:
    return Ok(v) if is_number(v) else Err(err_not_a_number("step", v))


def check_orientation(v: Any) -> Result:
    """Accept exactly ``"horizontal"`` or ``"vertical"``; surrounding whitespace is rejected."""
    if isinstance(v, str) and v in defaults.ORIENTATIONS:
        return Ok(v)
    return Err(err_not_one_of("orientation", defaults.ORIENTATIONS, v))


def check_tooltips(v: Any) -> Result:
    if is_boolean(v) or is_list_of_booleans(v):
        return Ok(v)
    return Err(err_not_a_boolean_or_list_of_booleans("tooltips", v))


def check_intervals(v: Any) -> Result:
    if is_boolean(v) or is_list_of_booleans(v):
        return Ok(v)
    return Err(err_not_a_boolean_or_list_of_booleans("intervals", v))


def check_grid(v: Any) -> Result:
    """Accept a boolean or a mapping with exactly ``is_visible`` and ``num_cells``.

    ``num_cells`` must be a non-empty list of positive integers whose product
    stays within ``defaults.GRID_MAX_CELLS``.
    """
    if is_boolean(v):
        return Ok(v)
    if not (
        isinstance(v, Mapping)
        and set(v.keys()) == set(GRID_KEYS)
        and is_boolean(v["is_visible"])
        and is_list_of_numbers(v["num_cells"])
    ):
        return Err(err_incorrect_object_shape('RangeSliderOptions["grid"]', GRID_KEYS, v))
    if not is_list_of_cell_counts(v["num_cells"]):
        return Err(err_not_a_list_of_cell_counts(v["num_cells"], defaults.GRID_MAX_CELLS))
    return Ok(v)


def check_css_class(v: Any) -> Result:
    if isinstance(v, str) and _CSS_CLASS_RE.fullmatch(v):
        return Ok(v)
    return Err(err_not_a_css_class("css_class", v))


def check_tooltip_formatter(v: Any) -> Result:
    return Ok(v) if callable(v) else Err(err_not_callable("tooltip_formatter", v))


FIELD_CHECKS: Dict[str, Callable[[Any], Result]] = {
    "value": check_value,
    "min": check_min,
    "max": check_max,
    "step": check_step,
    "orientation": check_orientation,
    "tooltips": check_tooltips,
    "css_class": check_css_class,
    "intervals": check_intervals,
    "grid": check_grid,
    "tooltip_formatter": check_tooltip_formatter,
}


def check_range_slider_options(v: Any) -> Result:
    """Validate a whole options mapping.

    Required keys are always checked (a missing one fails its check);
    optional keys are checked only when present.

    Returns
    -------
    Ok or Err
        ``Ok(options)`` when every field is valid, otherwise
        ``Err(list_of_validation_errors)`` with one entry per bad field.
        Non-mapping input yields a single ``INCORRECT_OBJECT_SHAPE`` error.
    """
    if not isinstance(v, Mapping):
        return Err([err_incorrect_object_shape("RangeSliderOptions", REQUIRED_KEYS, v)])

    results: List[Result] = []
    for name, check in FIELD_CHECKS.items():
        if name in REQUIRED_KEYS or name in v:
            results.append(check(v.get(name)))

    errors: List[ValidationError] = lefts(results)
    return Err(errors) if errors else Ok(v)
