"""
Output Module - PDF rendering and file output.
"""

from .writer import (
    DocumentCreationError,
    PDFReportWriter,
    RenderingError,
    generate_expense_report
)

__all__ = [
    'DocumentCreationError',
    'PDFReportWriter',
    'RenderingError',
    'generate_expense_report',
]
