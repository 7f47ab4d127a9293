from __future__ import annotations

from multirange.converters import options_to_data
from multirange.defaults import default_options
from multirange.errors import ErrorKind, IntegrityError
from multirange.integrity import check_data_integrity
from multirange.model import merge_data
from multirange.result import Err, Ok
from multirange.slider_types import GridData


def _data(**overrides):
    return options_to_data({**default_options(), **overrides})


def _kinds(result) -> list:
    assert isinstance(result, Err)
    return [e.kind for e in result.error]


def test_default_data_is_consistent() -> None:
    data = _data()
    assert check_data_integrity(data) == Ok(data)


def test_min_greater_than_max_accumulates_related_errors() -> None:
    data = merge_data(_data(), {"min": 1000})

    kinds = _kinds(check_data_integrity(data))

    assert kinds == [
        ErrorKind.MIN_IS_GREATER_THAN_MAX,
        ErrorKind.VALUE_NOT_IN_RANGE,
        ErrorKind.STEP_NOT_IN_RANGE,
    ]


def test_value_out_of_range_reports_offending_values() -> None:
    data = merge_data(_data(value=[10, 20]), {"handles": {"handle_0": -5, "handle_1": 20}})

    result = check_data_integrity(data)

    assert _kinds(result) == [ErrorKind.VALUE_NOT_IN_RANGE]
    assert result.error[0].value == (-5,)
    assert isinstance(result.error[0], IntegrityError)


def test_step_bounds() -> None:
    assert check_data_integrity(merge_data(_data(), {"step": 0})).is_ok
    assert check_data_integrity(merge_data(_data(), {"step": 100})).is_ok
    assert _kinds(check_data_integrity(merge_data(_data(), {"step": -1}))) == [
        ErrorKind.STEP_NOT_IN_RANGE
    ]
    assert _kinds(check_data_integrity(merge_data(_data(), {"step": 101}))) == [
        ErrorKind.STEP_NOT_IN_RANGE
    ]


def test_single_tooltip_is_allowed_for_many_handles() -> None:
    data = merge_data(
        _data(value=[10, 20, 30]),
        {"tooltips": {"tooltip_0": True}, "tooltip_ids": ["tooltip_0"]},
    )
    assert check_data_integrity(data).is_ok


def test_tooltip_count_mismatch() -> None:
    data = merge_data(
        _data(value=[10, 20, 30]),
        {
            "tooltips": {"tooltip_0": True, "tooltip_1": True},
            "tooltip_ids": ["tooltip_0", "tooltip_1"],
        },
    )
    assert _kinds(check_data_integrity(data)) == [ErrorKind.TOOLTIPS_DO_NOT_MATCH_VALUES]


def test_interval_count_mismatch() -> None:
    data = merge_data(
        _data(value=[10, 20]),
        {"intervals": {"interval_0": True}, "interval_ids": ["interval_0"]},
    )
    assert _kinds(check_data_integrity(data)) == [ErrorKind.INTERVALS_DO_NOT_MATCH_VALUES]


def test_ids_must_match_map_keys() -> None:
    data = merge_data(_data(value=[10, 20]), {"handle_ids": ["handle_0", "handle_9"]})

    result = check_data_integrity(data)

    assert ErrorKind.IDS_DO_NOT_MATCH_ENTRIES in _kinds(result)
    assert "handles ids and keys differ" in result.error[-1].message


def test_unknown_active_handle_is_rejected() -> None:
    data = merge_data(_data(), {"active_handle_id": "handle_7"})
    assert _kinds(check_data_integrity(data)) == [ErrorKind.IDS_DO_NOT_MATCH_ENTRIES]


def test_grid_cell_counts_are_bounded() -> None:
    assert check_data_integrity(merge_data(_data(), {"grid": GridData(True, (10, 100))})).is_ok

    for num_cells in ((0,), (-3,), (2**32, 2**32), (10, 101)):
        data = merge_data(_data(), {"grid": GridData(True, num_cells)})
        result = check_data_integrity(data)
        assert _kinds(result) == [ErrorKind.GRID_CELLS_NOT_IN_RANGE]
        assert result.error[0].value == num_cells
