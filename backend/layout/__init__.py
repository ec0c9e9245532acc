"""
Layout Module - Page geometry and text placement for the expense report.
"""

from .models import (
    ColumnSpec,
    DrawInstruction,
    Justification,
    LineInstruction,
    PageGeometry,
    PageLayout,
    RowRecord
)

from .engine import (
    build_page_layouts,
    compute_column_positions,
    compute_header_row_positions,
    compute_right_justified_column_positions,
    compute_rows_per_page,
    compute_subtitle_position,
    compute_title_position
)

from .report_content import (
    COLUMNS,
    REPORT_SUBTITLE,
    REPORT_TITLE,
    expense_rows,
    rows_from_columns
)

__all__ = [
    'ColumnSpec',
    'DrawInstruction',
    'Justification',
    'LineInstruction',
    'PageGeometry',
    'PageLayout',
    'RowRecord',
    'build_page_layouts',
    'compute_column_positions',
    'compute_header_row_positions',
    'compute_right_justified_column_positions',
    'compute_rows_per_page',
    'compute_subtitle_position',
    'compute_title_position',
    'COLUMNS',
    'REPORT_SUBTITLE',
    'REPORT_TITLE',
    'expense_rows',
    'rows_from_columns',
]
