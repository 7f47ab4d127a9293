"""Small pure helpers shared by the converters."""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from numbers import Rational, Real
from typing import Any, List, Sequence, TypeVar

T = TypeVar("T")


def to_list(value: Any) -> List[Any]:
    """Lift a scalar to a one-element list; copy lists and tuples."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def fill_list(items: Sequence[T], length: int, fill: T) -> List[T]:
    """Return ``items`` padded with ``fill`` up to ``length``.

    Lists already at least ``length`` long are copied unchanged.
    """
    if len(items) >= length:
        return list(items)
    return list(items) + [fill] * (length - len(items))


def make_id(prefix: str, index: int) -> str:
    return f"{prefix}_{index}"


_HALF = Decimal("0.5")


def _to_decimal(x: Real) -> Decimal:
    """Exact decimal for rationals, shortest float text for other reals."""
    if isinstance(x, Rational):
        return Decimal(int(x.numerator)) / Decimal(int(x.denominator))
    return Decimal(repr(float(x)))


def closest_to_step(step: float, value: float) -> float:
    """Snap ``value`` to the nearest multiple of ``step``.

    Ties round half up (toward +infinity): with ``step=10``, ``5`` snaps to
    ``10`` and ``-5`` snaps to ``0``. The arithmetic is done on the decimal
    text of both numbers, so ``0.35`` with ``step=0.1`` is a real tie and
    snaps to ``0.4``. A ``step`` of ``0`` disables snapping.
    """
    if step == 0:
        return value
    exact_step = _to_decimal(step)
    index = (_to_decimal(value) / exact_step + _HALF).to_integral_value(rounding=ROUND_FLOOR)
    snapped = index * exact_step
    if isinstance(value, int) and isinstance(step, int):
        return int(snapped)
    return float(snapped)


def clamp(lower: float, upper: float, value: float) -> float:
    return max(lower, min(value, upper))


def relative_position(min_: float, max_: float, value: float) -> float:
    """Return ``value`` as a percentage of the ``[min_, max_]`` span.

    >>> relative_position(0, 200, 50)
    25.0

    A zero-width span maps every value to ``0``.
    """
    span = max_ - min_
    if span == 0:
        return 0.0
    return (value - min_) / span * 100


def value_from_position(min_: float, max_: float, step: float, position: float) -> float:
    """Inverse of :func:`relative_position`, snapped to ``step`` and clamped."""
    raw = min_ + (max_ - min_) * position / 100
    return clamp(min_, max_, closest_to_step(step, raw))


def orientation_to_origin(orientation: str) -> str:
    """Return the CSS edge positions are measured from."""
    return "left" if orientation == "horizontal" else "bottom"


def sliding_pairs(items: Sequence[T]) -> List[tuple]:
    """Consecutive pairs of ``items``: ``[a, b, c] -> [(a, b), (b, c)]``."""
    return list(zip(items, items[1:]))
