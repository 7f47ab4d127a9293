"""Structured error values for option validation and data integrity.

Errors are plain immutable values, not exceptions. Validators and the
integrity checker collect them into lists so callers get every problem in a
single pass and can switch on :attr:`RangeSliderError.kind` instead of
parsing message text.

Only :class:`InvalidOptionsError` is an exception: it is raised by
:class:`~multirange.range_slider.RangeSlider` at the configuration boundary
and carries the collected validation errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Tuple


class ErrorKind(Enum):
    """Closed set of error variants."""

    # structural validation
    NOT_A_NUMBER = "not_a_number"
    NOT_A_NUMBER_OR_LIST_OF_NUMBERS = "not_a_number_or_list_of_numbers"
    NOT_ONE_OF = "not_one_of"
    NOT_A_BOOLEAN_OR_LIST_OF_BOOLEANS = "not_a_boolean_or_list_of_booleans"
    NOT_A_CSS_CLASS = "not_a_css_class"
    NOT_CALLABLE = "not_callable"
    INCORRECT_OBJECT_SHAPE = "incorrect_object_shape"
    NOT_A_LIST_OF_CELL_COUNTS = "not_a_list_of_cell_counts"

    # cross-field integrity
    MIN_IS_GREATER_THAN_MAX = "min_is_greater_than_max"
    VALUE_NOT_IN_RANGE = "value_not_in_range"
    STEP_NOT_IN_RANGE = "step_not_in_range"
    TOOLTIPS_DO_NOT_MATCH_VALUES = "tooltips_do_not_match_values"
    INTERVALS_DO_NOT_MATCH_VALUES = "intervals_do_not_match_values"
    IDS_DO_NOT_MATCH_ENTRIES = "ids_do_not_match_entries"
    GRID_CELLS_NOT_IN_RANGE = "grid_cells_not_in_range"


_TEMPLATES = {
    ErrorKind.NOT_A_NUMBER: "{field} should be a number, but {type} given instead",
    ErrorKind.NOT_A_NUMBER_OR_LIST_OF_NUMBERS: (
        "{field} should be a number or a non-empty list of numbers, but {type} given instead"
    ),
    ErrorKind.NOT_ONE_OF: "{field} should be one of: {expected}, but {value!r} given instead",
    ErrorKind.NOT_A_BOOLEAN_OR_LIST_OF_BOOLEANS: (
        "{field} should be a boolean or a list of booleans, but {value!r} given instead"
    ),
    ErrorKind.NOT_A_CSS_CLASS: "{field} should be a valid css class name, but {value!r} given instead",
    ErrorKind.NOT_CALLABLE: "{field} should be callable, but {type} given instead",
    ErrorKind.INCORRECT_OBJECT_SHAPE: "{field} should be an object with keys: {expected}",
    ErrorKind.NOT_A_LIST_OF_CELL_COUNTS: (
        "{field} should be a non-empty list of positive integers "
        "with at most {expected} cells in total, but {value!r} given instead"
    ),
    ErrorKind.MIN_IS_GREATER_THAN_MAX: "(min <= max)",
    ErrorKind.VALUE_NOT_IN_RANGE: "(min <= value <= max)",
    ErrorKind.STEP_NOT_IN_RANGE: "(0 <= step <= max - min)",
    ErrorKind.TOOLTIPS_DO_NOT_MATCH_VALUES: "(len(tooltips) == 1 or len(tooltips) == len(value))",
    ErrorKind.INTERVALS_DO_NOT_MATCH_VALUES: "(len(intervals) == len(value) + 1)",
    ErrorKind.IDS_DO_NOT_MATCH_ENTRIES: "{field}: ids do not match entries ({expected})",
    ErrorKind.GRID_CELLS_NOT_IN_RANGE: "(0 < num_cells and prod(num_cells) <= {expected})",
}


@dataclass(frozen=True)
class RangeSliderError:
    """A single validation or integrity problem.

    Parameters
    ----------
    kind : ErrorKind
        Which rule was violated.
    field : str
        Name of the offending option or data field.
    value : Any, optional
        The rejected value, when there is a single one.
    expected : str, optional
        Short description of what would have been accepted.
    """

    kind: ErrorKind
    field: str
    value: Any = None
    expected: str = ""

    @property
    def message(self) -> str:
        return _TEMPLATES[self.kind].format(
            field=self.field,
            value=self.value,
            type=type(self.value).__name__,
            expected=self.expected,
        )

    def __str__(self) -> str:
        return self.message


class ValidationError(RangeSliderError):
    """Structural problem with one raw ``Options`` field."""


class IntegrityError(RangeSliderError):
    """Violated cross-field invariant of normalized ``Data``."""


class InvalidOptionsError(ValueError):
    """Raised when options fail validation at the configuration boundary."""

    def __init__(self, errors: Sequence[ValidationError]) -> None:
        self.errors: Tuple[ValidationError, ...] = tuple(errors)
        lines = "\n".join(f"  - {e.message}" for e in self.errors)
        super().__init__(f"Invalid range slider options:\n{lines}")


# --- constructors ---------------------------------------------------------

def _option_field(name: str) -> str:
    return f'RangeSliderOptions["{name}"]'


def err_not_a_number(name: str, value: Any) -> ValidationError:
    return ValidationError(ErrorKind.NOT_A_NUMBER, _option_field(name), value, "finite number")


def err_not_a_number_or_list_of_numbers(name: str, value: Any) -> ValidationError:
    return ValidationError(
        ErrorKind.NOT_A_NUMBER_OR_LIST_OF_NUMBERS,
        _option_field(name),
        value,
        "finite number or non-empty list of finite numbers",
    )


def err_not_one_of(name: str, choices: Sequence[Any], value: Any) -> ValidationError:
    return ValidationError(
        ErrorKind.NOT_ONE_OF, _option_field(name), value, ", ".join(map(str, choices))
    )


def err_not_a_boolean_or_list_of_booleans(name: str, value: Any) -> ValidationError:
    return ValidationError(
        ErrorKind.NOT_A_BOOLEAN_OR_LIST_OF_BOOLEANS,
        _option_field(name),
        value,
        "boolean or list of booleans",
    )


def err_not_a_css_class(name: str, value: Any) -> ValidationError:
    return ValidationError(
        ErrorKind.NOT_A_CSS_CLASS, _option_field(name), value, "^[A-Za-z][A-Za-z0-9_-]*$"
    )


def err_not_callable(name: str, value: Any) -> ValidationError:
    return ValidationError(ErrorKind.NOT_CALLABLE, _option_field(name), value, "callable")


def err_incorrect_object_shape(name: str, keys: Sequence[str], value: Any) -> ValidationError:
    return ValidationError(ErrorKind.INCORRECT_OBJECT_SHAPE, name, value, ", ".join(keys))


def err_not_a_list_of_cell_counts(value: Any, max_cells: int) -> ValidationError:
    return ValidationError(
        ErrorKind.NOT_A_LIST_OF_CELL_COUNTS,
        'RangeSliderOptions["grid"]["num_cells"]',
        value,
        str(max_cells),
    )


def err_min_is_greater_than_max(min_: float, max_: float) -> IntegrityError:
    return IntegrityError(ErrorKind.MIN_IS_GREATER_THAN_MAX, "min", (min_, max_))


def err_value_not_in_range(values: Sequence[float]) -> IntegrityError:
    return IntegrityError(ErrorKind.VALUE_NOT_IN_RANGE, "handles", tuple(values))


def err_step_not_in_range(step: float) -> IntegrityError:
    return IntegrityError(ErrorKind.STEP_NOT_IN_RANGE, "step", step)


def err_tooltips_do_not_match_values(num_tooltips: int, num_values: int) -> IntegrityError:
    return IntegrityError(
        ErrorKind.TOOLTIPS_DO_NOT_MATCH_VALUES, "tooltips", num_tooltips, f"1 or {num_values}"
    )


def err_intervals_do_not_match_values(num_intervals: int, num_values: int) -> IntegrityError:
    return IntegrityError(
        ErrorKind.INTERVALS_DO_NOT_MATCH_VALUES, "intervals", num_intervals, str(num_values + 1)
    )


def err_ids_do_not_match_entries(field: str, detail: str) -> IntegrityError:
    return IntegrityError(ErrorKind.IDS_DO_NOT_MATCH_ENTRIES, field, None, detail)


def err_grid_cells_not_in_range(num_cells: Sequence[int], max_cells: int) -> IntegrityError:
    return IntegrityError(
        ErrorKind.GRID_CELLS_NOT_IN_RANGE, "grid", tuple(num_cells), str(max_cells)
    )
