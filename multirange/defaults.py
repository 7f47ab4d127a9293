"""Built-in defaults for range slider options and data.

Every default here is internally consistent: the data built from
``DEFAULT_OPTIONS`` always passes the integrity checks, so it can serve as
the fallback when user-supplied data does not.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple


def default_tooltip_formatter(value: float) -> str:
    """Format a handle value for display, dropping a trailing ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


CSS_CLASS = "range-slider"
ORIENTATION = "horizontal"
ORIENTATIONS: Tuple[str, str] = ("horizontal", "vertical")

# Padding values for short tooltip/interval lists.
TOOLTIP_VALUE = True
INTERVAL_VALUE = False

GRID_IS_VISIBLE = False
GRID_NUM_CELLS: Tuple[int, ...] = (5,)
# Upper bound on the product of all grid levels.
GRID_MAX_CELLS = 1000

DEFAULT_OPTIONS: Dict[str, Any] = {
    "value": [50],
    "min": 0,
    "max": 100,
    "step": 1,
    "orientation": ORIENTATION,
    "css_class": CSS_CLASS,
    "tooltips": [TOOLTIP_VALUE],
    "tooltip_formatter": default_tooltip_formatter,
    "intervals": [True, False],
    "grid": {"is_visible": GRID_IS_VISIBLE, "num_cells": list(GRID_NUM_CELLS)},
}


def default_options() -> Dict[str, Any]:
    """Return a fresh copy of :data:`DEFAULT_OPTIONS`."""
    options = dict(DEFAULT_OPTIONS)
    options["value"] = list(options["value"])
    options["tooltips"] = list(options["tooltips"])
    options["intervals"] = list(options["intervals"])
    options["grid"] = {
        "is_visible": DEFAULT_OPTIONS["grid"]["is_visible"],
        "num_cells": list(DEFAULT_OPTIONS["grid"]["num_cells"]),
    }
    return options


def default_data():
    """Return the :class:`~multirange.slider_types.SliderData` built from the defaults."""
    from .converters import options_to_data

    return options_to_data(default_options())
