"""Tests for the report layout engine."""

import pytest

from layout.engine import (
    COLUMN_DROP,
    HEADER_DROP,
    ROW_PITCH,
    TITLE_DROP,
    build_page_layouts,
    compute_column_positions,
    compute_header_row_positions,
    compute_right_justified_column_positions,
    compute_rows_per_page,
    compute_subtitle_position,
    compute_title_position,
)
from layout.models import Justification, PageGeometry, RowRecord
from layout.report_content import COLUMNS, REPORT_SUBTITLE, REPORT_TITLE, expense_rows
from validators.layout_validator import LayoutContractError

A4 = PageGeometry(width=595.2755905511812, height=841.8897637795277, margin=60.0)


def fake_measure(text, font_name, font_size):
    """Half an em per character, so widths are easy to predict."""
    return len(text) * font_size * 0.5


@pytest.mark.parametrize("page_width,title_width", [
    (595.0, 0.0),
    (595.0, 100.0),
    (612.0, 87.5),
    (100.0, 100.0),
])
def test_title_is_centered(page_width, title_width):
    x = compute_title_position(page_width, title_width)
    assert x + title_width / 2 == pytest.approx(page_width / 2)


def test_title_wider_than_page_goes_negative():
    assert compute_title_position(100.0, 300.0) == -100.0


def test_negative_title_width_is_rejected():
    with pytest.raises(LayoutContractError):
        compute_title_position(595.0, -1.0)


@pytest.mark.parametrize("title_y", [791.89, 100.0, 0.0])
def test_subtitle_sits_ten_points_below_title(title_y):
    _, y = compute_subtitle_position(595.0, 90.0, 200.0, title_y)
    assert y == title_y - 10


def test_subtitle_x_offsets_by_half_the_width_delta():
    x, _ = compute_subtitle_position(600.0, 100.0, 300.0, 700.0)
    # (600 - 100) / 2 - (300 - 100) / 2
    assert x == pytest.approx(150.0)
    # which centers the subtitle on the page
    assert x + 300.0 / 2 == pytest.approx(600.0 / 2)


def test_header_row_has_five_labels_and_an_underline():
    headers, underline = compute_header_row_positions(COLUMNS, 741.89, A4, fake_measure)

    assert [h.text for h in headers] == ["DATE", "EXPENSE", "ACCOUNT", "CURRENCY", "AMOUNT"]
    assert all(h.y == 741.89 for h in headers)
    assert [h.x for h in headers[:4]] == [60.0, 120.0, 240.0, 400.0]

    amount = headers[4]
    assert amount.justification is Justification.RIGHT
    assert amount.x == pytest.approx(A4.width - 60.0 - fake_measure("AMOUNT", "Helvetica", 8.0))

    assert underline.x1 == 60.0
    assert underline.x2 == pytest.approx(A4.width - 60.0)
    assert underline.y1 == underline.y2 == pytest.approx(741.89 - 4)


def test_column_positions_step_down_by_row_pitch():
    dates = ["2022-02-16", "2022-02-17", "2022-02-18"]
    instructions = compute_column_positions(dates, 60, 600)

    assert [i.position for i in instructions] == [(60, 600), (60, 590), (60, 580)]
    assert [i.text for i in instructions] == dates


def test_column_positions_for_empty_column():
    assert compute_column_positions([], 60, 600) == []


def test_right_justified_positions():
    instructions = compute_right_justified_column_positions(
        ["32.33", "438.21", "3.57"], [15.0, 18.0, 12.0], 500, 700
    )

    assert [i.position for i in instructions] == [(485.0, 700), (482.0, 690), (488.0, 680)]
    assert all(i.justification is Justification.RIGHT for i in instructions)


def test_right_justified_values_end_at_target():
    widths = [15.0, 18.0, 12.0]
    instructions = compute_right_justified_column_positions(["a", "b", "c"], widths, 535.28, 725.89)

    for instruction, width in zip(instructions, widths):
        assert instruction.x + width == pytest.approx(535.28)


def test_right_justified_rejects_mismatched_widths():
    with pytest.raises(LayoutContractError, match="values=3, text_widths=2"):
        compute_right_justified_column_positions(["32.33", "438.21", "3.57"], [15.0, 18.0], 500, 700)


def test_right_justified_rejects_negative_widths():
    with pytest.raises(LayoutContractError):
        compute_right_justified_column_positions(["x"], [-1.0], 500, 700)


def test_rows_per_page():
    geometry = PageGeometry(width=595.0, height=200.0, margin=60.0)
    # baselines at 84, 74, 64 fit; 54 would cross the margin
    assert compute_rows_per_page(geometry, 84.0) == 3
    assert compute_rows_per_page(geometry, 10.0) == 1


def test_reference_layout_is_a_single_page():
    pages = build_page_layouts(A4, REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, expense_rows(), fake_measure)

    assert len(pages) == 1
    page = pages[0]
    # title, subtitle, 5 headers, 5 columns x 3 rows
    assert len(page.text) == 2 + 5 + 15
    assert len(page.lines) == 1

    title, subtitle = page.text[0], page.text[1]
    assert title.text == REPORT_TITLE
    assert title.y == pytest.approx(A4.height - TITLE_DROP)
    assert (title.font_name, title.font_size) == ("Helvetica-Bold", 10.0)
    assert subtitle.y == pytest.approx(title.y - 10)
    assert (subtitle.font_name, subtitle.font_size) == ("Helvetica", 9.0)

    headers = page.text[2:7]
    assert all(h.y == pytest.approx(A4.height - HEADER_DROP) for h in headers)


def test_reference_layout_cells():
    pages = build_page_layouts(A4, REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, expense_rows(), fake_measure)
    cells = {i.text: i for i in pages[0].text[7:]}
    start_y = A4.height - COLUMN_DROP

    assert cells["2022-02-16"].position == pytest.approx((60.0, start_y))
    assert cells['"ICU Expenses"'].position == pytest.approx((120.0, start_y - ROW_PITCH))
    assert cells["Cloud Services"].position == pytest.approx((240.0, start_y - 2 * ROW_PITCH))
    assert cells["CHF"].x == 400.0

    amount = cells["438.21"]
    assert amount.x + fake_measure("438.21", "Helvetica", 8.0) == pytest.approx(A4.width - 60.0)
    assert amount.y == pytest.approx(start_y - ROW_PITCH)


def test_rows_overflowing_the_page_continue_on_next_page():
    geometry = PageGeometry(width=595.0, height=200.0, margin=60.0)
    rows = [RowRecord(f"2022-03-{day:02d}", "Lunch", "Meals", "USD", "12.00") for day in range(1, 8)]

    pages = build_page_layouts(geometry, REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, rows, fake_measure)

    assert [p.page_number for p in pages] == [1, 2, 3]
    cell_counts = [len(p.text) - 7 for p in pages]
    assert cell_counts == [15, 15, 5]
    for page in pages:
        assert page.text[0].text == REPORT_TITLE
        assert [h.text for h in page.text[2:7]][0] == "DATE"
        assert all(i.y >= geometry.margin for i in page.text)

    dates = [i.text for p in pages for i in p.text[7:] if i.x == 60.0]
    assert dates == [row.date for row in rows]


def test_no_rows_still_draws_headers():
    pages = build_page_layouts(A4, REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, [], fake_measure)
    assert len(pages) == 1
    assert len(pages[0].text) == 7


def test_column_count_must_match_row_fields():
    with pytest.raises(LayoutContractError):
        build_page_layouts(A4, REPORT_TITLE, REPORT_SUBTITLE, COLUMNS[:4], expense_rows(), fake_measure)


def test_negative_geometry_is_rejected():
    geometry = PageGeometry(width=595.0, height=-1.0, margin=60.0)
    with pytest.raises(LayoutContractError, match="height"):
        build_page_layouts(geometry, REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, [], fake_measure)
