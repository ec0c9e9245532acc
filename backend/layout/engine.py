"""
Report Layout Engine
Computes where every string of the expense report is drawn.

All functions are pure. Text widths depend on the font and therefore come from
the renderer, either as precomputed widths or through a ``measure`` callable
with the signature ``measure(text, font_name, font_size) -> float``.

Coordinates follow PDF conventions: origin at the bottom-left corner, y grows
upwards, and (x, y) is the left end of the text baseline.
"""

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import fields

from .models import (
    BODY_FONT,
    BODY_FONT_SIZE,
    ColumnSpec,
    DrawInstruction,
    Justification,
    LineInstruction,
    PageGeometry,
    PageLayout,
    RowRecord,
)
from validators.layout_validator import (
    LayoutContractError,
    validate_column_specs,
    validate_geometry,
    validate_parallel_lengths,
    validate_text_widths,
)

logger = logging.getLogger(__name__)

MeasureFn = Callable[[str, str, float], float]

ROW_PITCH = 10.0
SUBTITLE_GAP = 10.0
UNDERLINE_GAP = 4.0

# Distances from the top edge of the page
TITLE_DROP = 50.0
HEADER_DROP = 100.0
COLUMN_DROP = 116.0

TITLE_FONT = "Helvetica-Bold"
TITLE_FONT_SIZE = 10.0
SUBTITLE_FONT = "Helvetica"
SUBTITLE_FONT_SIZE = 9.0


def compute_title_position(page_width: float, title_width: float) -> float:
    """
    Return the x that centers a title of ``title_width`` on the page.

    A title wider than the page yields a negative x and is drawn partly
    off-page; this is not corrected.

    Raises:
        LayoutContractError: If title_width is negative
    """
    if title_width < 0:
        raise LayoutContractError(f"Title width must be non-negative, got {title_width}")
    return (page_width - title_width) / 2


def compute_subtitle_position(
    page_width: float,
    title_width: float,
    subtitle_width: float,
    title_y: float
) -> tuple[float, float]:
    """
    Place the subtitle one line below the title.

    The subtitle is shifted left of the title's x by half of the width
    difference between the two strings, which centers it on the page.
    """
    if subtitle_width < 0:
        raise LayoutContractError(f"Subtitle width must be non-negative, got {subtitle_width}")

    delta = subtitle_width - title_width
    x = compute_title_position(page_width, title_width) - delta / 2
    return x, title_y - SUBTITLE_GAP


def compute_header_row_positions(
    column_specs: Sequence[ColumnSpec],
    header_y: float,
    geometry: PageGeometry,
    measure: MeasureFn
) -> tuple[list[DrawInstruction], LineInstruction]:
    """
    Compute the header row and its underline.

    Left-justified headers start at their column's x offset. Right-justified
    headers end at the right margin, so their label is measured with the body
    font.

    Returns:
        (one instruction per column, the underline)
    """
    validate_column_specs(column_specs)

    headers = []
    for column in column_specs:
        if column.is_right_justified:
            label_width = measure(column.label, BODY_FONT, BODY_FONT_SIZE)
            x = geometry.right_edge - label_width
        else:
            x = column.x_offset
        headers.append(DrawInstruction(column.label, x, header_y, column.justification))

    underline_y = header_y - UNDERLINE_GAP
    underline = LineInstruction(geometry.margin, underline_y, geometry.right_edge, underline_y)
    return headers, underline


def compute_column_positions(
    values: Sequence[str],
    x_offset: float,
    start_y: float
) -> list[DrawInstruction]:
    """Stack values downwards from start_y at a fixed x, one row pitch apart."""
    return [
        DrawInstruction(text, x_offset, start_y - ROW_PITCH * index)
        for index, text in enumerate(values)
    ]


def compute_right_justified_column_positions(
    values: Sequence[str],
    text_widths: Sequence[float],
    target_x: float,
    start_y: float
) -> list[DrawInstruction]:
    """
    Stack values downwards from start_y so each one ends exactly at target_x.

    Args:
        values: Cell texts
        text_widths: Measured width of each cell text, same order
        target_x: x coordinate the right edge of every value aligns to
        start_y: Baseline of the first row

    Raises:
        LayoutContractError: If values and text_widths differ in length
    """
    validate_parallel_lengths(values=values, text_widths=text_widths)
    validate_text_widths(text_widths)

    return [
        DrawInstruction(text, target_x - width, start_y - ROW_PITCH * index, Justification.RIGHT)
        for index, (text, width) in enumerate(zip(values, text_widths))
    ]


def compute_rows_per_page(geometry: PageGeometry, start_y: float) -> int:
    """Number of rows whose baseline stays on or above the bottom margin (at least 1)."""
    if start_y < geometry.margin:
        return 1
    return math.floor((start_y - geometry.margin) / ROW_PITCH) + 1


def _paginate(rows: Sequence[RowRecord], per_page: int) -> list[Sequence[RowRecord]]:
    if not rows:
        return [[]]
    return [rows[i:i + per_page] for i in range(0, len(rows), per_page)]


def build_page_layouts(
    geometry: PageGeometry,
    title: str,
    subtitle: str,
    columns: Sequence[ColumnSpec],
    rows: Sequence[RowRecord],
    measure: MeasureFn
) -> list[PageLayout]:
    """
    Lay out the full report.

    Every page repeats the title, subtitle and header row. Rows that would
    fall below the bottom margin continue on the next page.

    Args:
        geometry: Page dimensions and margin
        title: Report title
        subtitle: Line drawn under the title
        columns: Ordered column specs, one per RowRecord field
        rows: Expense rows
        measure: Renderer text measurement

    Returns:
        One PageLayout per page

    Raises:
        LayoutContractError: If geometry or columns are malformed
    """
    validate_geometry(geometry)
    validate_column_specs(columns)
    validate_parallel_lengths(columns=columns, row_fields=fields(RowRecord))

    title_y = geometry.height - TITLE_DROP
    header_y = geometry.height - HEADER_DROP
    start_y = geometry.height - COLUMN_DROP

    # Title block and headers are identical on every page
    title_width = measure(title, TITLE_FONT, TITLE_FONT_SIZE)
    subtitle_width = measure(subtitle, SUBTITLE_FONT, SUBTITLE_FONT_SIZE)
    subtitle_x, subtitle_y = compute_subtitle_position(
        geometry.width, title_width, subtitle_width, title_y
    )
    title_block = [
        DrawInstruction(
            title,
            compute_title_position(geometry.width, title_width),
            title_y,
            font_name=TITLE_FONT,
            font_size=TITLE_FONT_SIZE,
        ),
        DrawInstruction(
            subtitle,
            subtitle_x,
            subtitle_y,
            font_name=SUBTITLE_FONT,
            font_size=SUBTITLE_FONT_SIZE,
        ),
    ]
    headers, underline = compute_header_row_positions(columns, header_y, geometry, measure)

    per_page = compute_rows_per_page(geometry, start_y)
    chunks = _paginate(list(rows), per_page)
    logger.debug(f"Laying out {len(rows)} rows on {len(chunks)} page(s), {per_page} rows per page")

    pages = []
    for page_number, chunk in enumerate(chunks, 1):
        cells = []
        for index, column in enumerate(columns):
            values = [row.values()[index] for row in chunk]
            if column.is_right_justified:
                widths = [measure(text, BODY_FONT, BODY_FONT_SIZE) for text in values]
                cells.extend(compute_right_justified_column_positions(
                    values, widths, geometry.right_edge, start_y
                ))
            else:
                cells.extend(compute_column_positions(values, column.x_offset, start_y))

        pages.append(PageLayout(
            page_number=page_number,
            text=tuple(title_block + headers + cells),
            lines=(underline,),
        ))

    return pages
