"""Top-level public API for the ``multirange`` package.

The package is the data core of a multi-handle range slider: it validates
user options, normalizes them into identity-stable data held by a model,
and derives the view model a renderer draws from, for example:

>>> from multirange import RangeSlider
>>> slider = RangeSlider(value=[10, 60], step=5)
>>> [t.content for t in slider.state().tooltips]
['10', '60']

The lower-level building blocks (validators, integrity checks, converters
and the model) are exported as well for integrations that manage their own
configuration boundary.
"""

from .converters import data_to_options, data_to_state, options_to_data
from .defaults import DEFAULT_OPTIONS, default_data, default_options, default_tooltip_formatter
from .errors import (
    ErrorKind,
    IntegrityError,
    InvalidOptionsError,
    RangeSliderError,
    ValidationError,
)
from .grid import make_grid
from .helpers import orientation_to_origin, relative_position, value_from_position
from .input_convert import parse_number
from .integrity import check_data_integrity
from .model import CallbackObserver, ModelObserver, RangeSliderModel
from .range_slider import RangeSlider
from .result import Err, Ok
from .slider_types import (
    GridData,
    GridMark,
    GridView,
    HandleView,
    IntervalView,
    RangeSliderOptions,
    SliderData,
    SliderState,
    TooltipView,
    TrackView,
)
from .validators import (
    check_css_class,
    check_grid,
    check_intervals,
    check_max,
    check_min,
    check_orientation,
    check_range_slider_options,
    check_step,
    check_tooltip_formatter,
    check_tooltips,
    check_value,
)

__all__ = [
    "CallbackObserver",
    "DEFAULT_OPTIONS",
    "Err",
    "ErrorKind",
    "GridData",
    "GridMark",
    "GridView",
    "HandleView",
    "IntegrityError",
    "IntervalView",
    "InvalidOptionsError",
    "ModelObserver",
    "Ok",
    "RangeSlider",
    "RangeSliderError",
    "RangeSliderModel",
    "RangeSliderOptions",
    "SliderData",
    "SliderState",
    "TooltipView",
    "TrackView",
    "ValidationError",
    "check_css_class",
    "check_data_integrity",
    "check_grid",
    "check_intervals",
    "check_max",
    "check_min",
    "check_orientation",
    "check_range_slider_options",
    "check_step",
    "check_tooltip_formatter",
    "check_tooltips",
    "check_value",
    "data_to_options",
    "data_to_state",
    "default_data",
    "default_options",
    "default_tooltip_formatter",
    "make_grid",
    "options_to_data",
    "orientation_to_origin",
    "parse_number",
    "relative_position",
    "value_from_position",
]
