"""The range slider model: single owner of the committed :class:`SliderData`.

Changes go through :meth:`RangeSliderModel.propose`, which evaluates a
proposal against the current data, runs the integrity checks and either
commits the whole candidate or nothing at all. Observers are notified
synchronously *after* a commit, so reading the model from inside a
notification always sees the committed value.

Examples
--------
>>> from multirange.model import RangeSliderModel
>>> model = RangeSliderModel()
>>> model.get("min")
0
>>> _ = model.propose({"min": lambda d: 1000})  # rejected: min > max
>>> model.get("min")
0
"""

from __future__ import annotations

import dataclasses
import logging
import warnings
from collections.abc import Hashable, Mapping
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Union, runtime_checkable

from .defaults import default_data
from .errors import IntegrityError
from .integrity import check_data_integrity
from .result import Err
from .slider_types import SliderData, as_collision_groups, frozen_map

logger = logging.getLogger(__name__)

Proposal = Mapping[str, Callable[[SliderData], Any]]

DATA_FIELDS = tuple(f.name for f in dataclasses.fields(SliderData))
_MAP_FIELDS = ("handles", "tooltips", "intervals")
_ID_FIELDS = ("handle_ids", "tooltip_ids", "interval_ids")


@runtime_checkable
class ModelObserver(Protocol):
    def on_update(self, data: SliderData) -> None: ...

    def on_integrity_error(self, errors: Sequence[IntegrityError]) -> None: ...


def _coerce_field(name: str, value: Any) -> Any:
    """Store collection fields in their immutable form."""
    if name in _MAP_FIELDS:
        return frozen_map(value)
    if name in _ID_FIELDS:
        return tuple(value)
    if name == "tooltip_collisions":
        return as_collision_groups(value)
    return value


def merge_data(base: SliderData, changes: Mapping[str, Any]) -> SliderData:
    """Return ``base`` with ``changes`` applied; unknown fields raise ``KeyError``."""
    unknown = [name for name in changes if name not in DATA_FIELDS]
    if unknown:
        raise KeyError(f"Unknown slider data field(s): {', '.join(map(repr, unknown))}.")
    return dataclasses.replace(
        base, **{name: _coerce_field(name, value) for name, value in changes.items()}
    )


class RangeSliderModel:
    """Holds the committed slider data and notifies observers of changes.

    Parameters
    ----------
    data : SliderData or mapping, optional
        Full data, or a partial ``{field: value}`` mapping merged over the
        built-in defaults. If the result fails integrity the model starts
        from the defaults instead.
    """

    def __init__(self, data: Union[SliderData, Mapping[str, Any], None] = None) -> None:
        self._observers: Dict[Hashable, ModelObserver] = {}
        self._observer_counter: int = 0

        defaults = default_data()
        if data is None:
            candidate = defaults
        elif isinstance(data, SliderData):
            candidate = data
        else:
            candidate = merge_data(defaults, data)

        result = check_data_integrity(candidate)
        if isinstance(result, Err):
            logger.warning(
                "Initial slider data failed integrity checks (%s); falling back to defaults.",
                "; ".join(e.message for e in result.error),
            )
            candidate = defaults
        self._data: SliderData = candidate

    # --- reading --------------------------------------------------------

    @property
    def data(self) -> SliderData:
        """The committed data. Immutable, so safe to hand out."""
        return self._data

    def get(self, key: str) -> Any:
        if key not in DATA_FIELDS:
            raise KeyError(f"Unknown slider data field {key!r}.")
        return getattr(self._data, key)

    # --- writing --------------------------------------------------------

    def set(self, key: str, value: Any) -> "RangeSliderModel":
        self.propose({key: lambda _data: value})
        return self

    def propose(self, proposal: Proposal) -> SliderData:
        """Apply ``proposal`` atomically.

        Every function in ``proposal`` receives the *current* data and
        returns the new value for its field. The candidate is committed only
        if it passes every integrity check.

        Returns
        -------
        SliderData
            The new data on success, or the unchanged data on rejection.

        Raises
        ------
        KeyError
            If ``proposal`` names a field ``SliderData`` does not have.
        """
        unknown = [name for name in proposal if name not in DATA_FIELDS]
        if unknown:
            raise KeyError(f"Unknown slider data field(s): {', '.join(map(repr, unknown))}.")
        current = self._data
        changes = {name: fn(current) for name, fn in proposal.items()}
        return self._commit(merge_data(current, changes))

    def reset(self, data: SliderData) -> SliderData:
        """Replace the data wholesale, gated by the same integrity checks."""
        return self._commit(data)

    def _commit(self, candidate: SliderData) -> SliderData:
        result = check_data_integrity(candidate)
        if isinstance(result, Err):
            logger.debug("Rejected slider data change: %s", [e.kind.value for e in result.error])
            self._notify("on_integrity_error", list(result.error))
            return self._data
        self._data = candidate
        self._notify("on_update", candidate)
        return candidate

    # --- observers ------------------------------------------------------

    def subscribe(self, observer: ModelObserver, observer_id: Optional[Hashable] = None) -> Hashable:
        """Register ``observer`` and return its id.

        Auto-generated ids look like ``"observer:1"``. Re-using an id
        replaces the previous observer; an explicit ``"observer:N"`` id moves
        the auto counter past ``N``.
        """
        if not isinstance(observer, ModelObserver):
            raise TypeError(
                "observer must implement on_update(data) and on_integrity_error(errors)."
            )
        if observer_id is None:
            self._observer_counter += 1
            observer_id = f"observer:{self._observer_counter}"
        else:
            hash(observer_id)
            self._bump_counter(observer_id)
        self._observers[observer_id] = observer
        return observer_id

    def unsubscribe(self, observer_id: Hashable) -> None:
        self._observers.pop(observer_id, None)

    def observers(self) -> Dict[Hashable, ModelObserver]:
        return self._observers.copy()

    def _bump_counter(self, observer_id: Hashable) -> None:
        if isinstance(observer_id, str) and observer_id.startswith("observer:"):
            suffix = observer_id.split(":", 1)[1]
            if suffix.isdigit():
                self._observer_counter = max(self._observer_counter, int(suffix))

    def _notify(self, method: str, payload: Any) -> None:
        for observer_id, observer in list(self._observers.items()):
            try:
                getattr(observer, method)(payload)
            except Exception as e:
                warnings.warn(f"Observer {observer_id} failed: {e}")


class CallbackObserver:
    """Adapt two plain callables to the :class:`ModelObserver` protocol."""

    def __init__(
        self,
        on_update: Optional[Callable[[SliderData], None]] = None,
        on_integrity_error: Optional[Callable[[List[IntegrityError]], None]] = None,
    ) -> None:
        self._on_update = on_update
        self._on_integrity_error = on_integrity_error

    def on_update(self, data: SliderData) -> None:
        if self._on_update is not None:
            self._on_update(data)

    def on_integrity_error(self, errors: Sequence[IntegrityError]) -> None:
        if self._on_integrity_error is not None:
            self._on_integrity_error(list(errors))
