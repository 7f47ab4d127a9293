"""High-level range slider: the boundary between user options and the model.

:class:`RangeSlider` validates options, builds the model and turns the
intents of the input and layout layers (move a handle, start or stop a drag,
report tooltip collisions) into model proposals. Renderers subscribe to the
model and call :meth:`RangeSlider.state` to get a fresh view model.

Examples
--------
>>> from multirange import RangeSlider
>>> slider = RangeSlider(value=[20, 80], intervals=[False, True, False])
>>> slider.move_handle("handle_0", 33.4).handles["handle_0"]
33.0
>>> [h.position for h in slider.state().handles]
[33.0, 80.0]
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from typing import Any, Dict, Optional, Sequence

from .converters import data_to_options, data_to_state, options_to_data
from .defaults import default_options
from .errors import InvalidOptionsError
from .helpers import clamp, closest_to_step, to_list, value_from_position
from .model import ModelObserver, RangeSliderModel
from .result import Err
from .slider_types import RangeSliderOptions, SliderData, SliderState, TooltipId
from .validators import check_range_slider_options

logger = logging.getLogger(__name__)


def build_data(options: Mapping[str, Any]) -> SliderData:
    """Validate ``options`` and convert them, raising :class:`InvalidOptionsError`."""
    result = check_range_slider_options(options)
    if isinstance(result, Err):
        raise InvalidOptionsError(result.error)
    return options_to_data(options)


class RangeSlider:
    """Range slider core with a validated configuration boundary.

    Parameters
    ----------
    options : mapping, optional
        Range slider options. Missing keys take their defaults.
    **overrides :
        Individual options, applied over ``options``.

    Raises
    ------
    InvalidOptionsError
        If any option is structurally invalid. All problems are reported.
    """

    def __init__(self, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> None:
        merged = {**default_options(), **(options or {}), **overrides}
        data = build_data(merged)
        self._model = RangeSliderModel(data)
        if self._model.data is not data:
            # Structurally valid but inconsistent options (e.g. min > max).
            logger.warning("Range slider options are inconsistent; using defaults.")

    @property
    def model(self) -> RangeSliderModel:
        return self._model

    @property
    def data(self) -> SliderData:
        return self._model.data

    def options(self) -> RangeSliderOptions:
        return data_to_options(self._model.data)

    def state(self) -> SliderState:
        return data_to_state(self._model.data)

    # --- configuration --------------------------------------------------

    def apply_options(self, options: Mapping[str, Any]) -> SliderData:
        """Merge ``options`` over the current ones and rebuild the data.

        Ids are regenerated. When the handle count shrinks, carried-over
        tooltip and interval flags are trimmed to fit. Structural errors
        raise :class:`InvalidOptionsError`; integrity errors are reported to
        observers and leave the current data in place.
        """
        current = self.options()
        merged = {**current, **options}
        count = len(to_list(merged["value"]))
        if "tooltips" not in options:
            merged["tooltips"] = current["tooltips"][:count]
        if "intervals" not in options:
            merged["intervals"] = current["intervals"][: count + 1]
        return self._model.reset(build_data(merged))

    # --- input layer intents --------------------------------------------

    def move_handle(self, handle_id: str, value: float) -> SliderData:
        """Move one handle to ``value``, snapped to ``step``.

        The handle cannot pass its neighbours and becomes the active handle.
        """
        data = self._model.data
        if handle_id not in data.handles:
            raise KeyError(f"Unknown handle id {handle_id!r}.")

        def _handles(d: SliderData) -> Dict[str, float]:
            idx = d.handle_ids.index(handle_id)
            lower = d.handles[d.handle_ids[idx - 1]] if idx > 0 else d.min
            upper = d.handles[d.handle_ids[idx + 1]] if idx + 1 < len(d.handle_ids) else d.max
            handles = dict(d.handles)
            handles[handle_id] = clamp(lower, upper, closest_to_step(d.step, value))
            return handles

        return self._model.propose({"handles": _handles, "active_handle_id": lambda _d: handle_id})

    def move_handle_to_position(self, handle_id: str, position: float) -> SliderData:
        """Move a handle to a relative ``position`` (percent of the track)."""
        data = self._model.data
        return self.move_handle(
            handle_id, value_from_position(data.min, data.max, data.step, position)
        )

    def activate_handle(self, handle_id: Optional[str]) -> SliderData:
        """Mark ``handle_id`` as being dragged; ``None`` ends the drag."""
        if handle_id is not None and handle_id not in self._model.data.handles:
            raise KeyError(f"Unknown handle id {handle_id!r}.")
        return self._model.propose({"active_handle_id": lambda _d: handle_id})

    def report_collisions(self, groups: Sequence[Sequence[TooltipId]]) -> SliderData:
        """Store the tooltip collision groups measured by the renderer."""
        return self._model.propose({"tooltip_collisions": lambda _d: groups})

    # --- observers ------------------------------------------------------

    def subscribe(self, observer: ModelObserver, observer_id: Optional[Hashable] = None) -> Hashable:
        return self._model.subscribe(observer, observer_id)

    def unsubscribe(self, observer_id: Hashable) -> None:
        self._model.unsubscribe(observer_id)
