"""Two-variant result values returned by validators and the integrity checker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful check carrying the accepted value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed check carrying the error (or list of errors)."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]


def lefts(results: List[Result]) -> list:
    """Return the errors of every failed result, in order."""
    return [r.error for r in results if isinstance(r, Err)]
