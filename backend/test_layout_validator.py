"""Tests for layout input validation and report content."""

import pytest

from layout.models import ColumnSpec, Justification, PageGeometry, RowRecord
from layout.report_content import AMOUNTS, DATES, expense_rows, rows_from_columns
from validators.layout_validator import (
    LayoutContractError,
    validate_column_specs,
    validate_geometry,
    validate_parallel_lengths,
    validate_text_widths,
)


def test_valid_geometry_passes():
    validate_geometry(PageGeometry(width=595.0, height=842.0, margin=60.0))


@pytest.mark.parametrize("geometry", [
    PageGeometry(width=-1.0, height=842.0, margin=60.0),
    PageGeometry(width=595.0, height=842.0, margin=-5.0),
    PageGeometry(width=100.0, height=842.0, margin=50.0),
])
def test_invalid_geometry_is_rejected(geometry):
    with pytest.raises(LayoutContractError):
        validate_geometry(geometry)


def test_parallel_lengths_returns_shared_length():
    assert validate_parallel_lengths(a=[1, 2], b="xy") == 2
    assert validate_parallel_lengths() == 0


def test_parallel_lengths_names_every_column():
    with pytest.raises(LayoutContractError) as exc_info:
        validate_parallel_lengths(dates=[1, 2, 3], amounts=[1, 2])
    assert "dates=3" in str(exc_info.value)
    assert "amounts=2" in str(exc_info.value)


def test_contract_error_is_a_value_error():
    assert issubclass(LayoutContractError, ValueError)


def test_column_specs_need_offsets_when_left_justified():
    with pytest.raises(LayoutContractError, match="Date"):
        validate_column_specs([ColumnSpec("Date")])


def test_column_specs_reject_duplicates_and_empty():
    with pytest.raises(LayoutContractError):
        validate_column_specs([])
    with pytest.raises(LayoutContractError, match="Duplicate"):
        validate_column_specs([ColumnSpec("Date", 60.0), ColumnSpec("Date", 120.0)])


def test_right_justified_column_needs_no_offset():
    validate_column_specs([ColumnSpec("Amount", justification=Justification.RIGHT)])


def test_text_widths_must_be_non_negative():
    validate_text_widths([0.0, 12.5])
    with pytest.raises(LayoutContractError, match="row 1"):
        validate_text_widths([3.0, -0.5])


def test_expense_rows_zip_parallel_columns():
    rows = expense_rows()

    assert len(rows) == 3
    assert rows[1] == RowRecord("2022-02-17", '"ICU Expenses"', "Education", "USD", "438.21")
    assert [row.date for row in rows] == DATES
    assert [row.amount for row in rows] == AMOUNTS


def test_rows_from_columns_rejects_ragged_input():
    with pytest.raises(LayoutContractError, match="amounts=2"):
        rows_from_columns(DATES, ["a", "b", "c"], ["x", "y", "z"], ["USD"] * 3, ["1.00", "2.00"])


def test_row_record_is_immutable():
    row = expense_rows()[0]
    with pytest.raises(AttributeError):
        row.amount = "0.00"
