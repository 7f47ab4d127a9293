"""Value types for the range slider pipeline.

Three layers of representation flow through the package:

``RangeSliderOptions``
    The user-facing configuration mapping. Lists may be scalars and may be
    shorter than the number of handles.
``SliderData``
    The normalized internal form held by the model. Every handle, tooltip
    and interval has a stable id, and each id map is paired with an ordered
    id tuple that fixes iteration order.
``SliderState``
    The render-only view model derived from ``SliderData``. Positions are
    relative percentages of the ``[min, max]`` span.

All ``SliderData`` and ``SliderState`` values are frozen; maps are exposed as
read-only :class:`types.MappingProxyType` views so committed data cannot be
changed behind the model's back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, FrozenSet, List, Mapping, Optional, Sequence, Tuple, TypedDict, Union

HandleId = str
TooltipId = str
IntervalId = str
RelativePosition = float
TooltipFormatter = Callable[[float], str]


class GridOptions(TypedDict):
    is_visible: bool
    num_cells: List[int]


class RangeSliderOptions(TypedDict, total=False):
    value: Union[float, List[float]]
    min: float
    max: float
    step: float
    orientation: str
    css_class: str
    tooltips: Union[bool, List[bool]]
    tooltip_formatter: TooltipFormatter
    intervals: Union[bool, List[bool]]
    grid: Union[bool, GridOptions]


def frozen_map(entries: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return a read-only copy of ``entries`` preserving insertion order."""
    return MappingProxyType(dict(entries))


@dataclass(frozen=True)
class GridData:
    is_visible: bool
    num_cells: Tuple[int, ...]


@dataclass(frozen=True)
class SliderData:
    """Normalized, identity-keyed slider data.

    Invariants (enforced by :func:`multirange.integrity.check_data_integrity`):
    ``len(handle_ids) == len(tooltip_ids)``,
    ``len(interval_ids) == len(handle_ids) + 1`` and every id tuple is in
    bijection with the keys of its map.
    """

    min: float
    max: float
    step: float
    orientation: str
    css_class: str
    tooltip_formatter: TooltipFormatter
    handles: Mapping[HandleId, float]
    handle_ids: Tuple[HandleId, ...]
    tooltips: Mapping[TooltipId, bool]
    tooltip_ids: Tuple[TooltipId, ...]
    intervals: Mapping[IntervalId, bool]
    interval_ids: Tuple[IntervalId, ...]
    grid: GridData
    active_handle_id: Optional[HandleId] = None
    tooltip_collisions: Tuple[FrozenSet[TooltipId], ...] = ()

    @property
    def values(self) -> Tuple[float, ...]:
        """Handle values in ``handle_ids`` order."""
        return tuple(self.handles[h] for h in self.handle_ids)


# --- State ----------------------------------------------------------------

@dataclass(frozen=True)
class TrackView:
    orientation: str
    css_class: str


@dataclass(frozen=True)
class HandleView:
    id: HandleId
    orientation: str
    position: RelativePosition
    is_active: bool
    css_class: str
    role: str = "handle"


@dataclass(frozen=True)
class TooltipView:
    id: TooltipId
    handle_ids: Tuple[HandleId, ...]
    content: str
    orientation: str
    has_collisions: bool
    is_visible: bool
    position: RelativePosition
    css_class: str
    role: str = "tooltip"


@dataclass(frozen=True)
class IntervalView:
    id: IntervalId
    from_position: RelativePosition
    to_position: RelativePosition
    handle_ids: Tuple[str, str]
    orientation: str
    is_visible: bool
    css_class: str
    role: str = "interval"


@dataclass(frozen=True)
class GridMark:
    position: RelativePosition
    level: int
    value: float
    label: str


@dataclass(frozen=True)
class GridView:
    is_visible: bool
    orientation: str
    css_class: str
    marks: Tuple[GridMark, ...] = ()


@dataclass(frozen=True)
class SliderState:
    css_class: str
    track: TrackView
    handles: Tuple[HandleView, ...]
    tooltips: Tuple[TooltipView, ...]
    intervals: Tuple[IntervalView, ...]
    grid: GridView = field(default_factory=lambda: GridView(False, "horizontal", ""))

    def tooltip(self, tooltip_id: TooltipId) -> TooltipView:
        """Return the tooltip view with ``tooltip_id`` or raise ``KeyError``."""
        for tooltip in self.tooltips:
            if tooltip.id == tooltip_id:
                return tooltip
        raise KeyError(f"Unknown tooltip id {tooltip_id!r}.")

    @property
    def merged_tooltips(self) -> Tuple[TooltipView, ...]:
        return tuple(t for t in self.tooltips if t.role == "tooltip-merged")


def as_collision_groups(groups: Sequence[Sequence[TooltipId]]) -> Tuple[FrozenSet[TooltipId], ...]:
    """Normalize renderer-reported collision groups to a tuple of frozensets."""
    return tuple(frozenset(group) for group in groups)
