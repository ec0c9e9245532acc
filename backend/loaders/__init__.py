"""
Loaders Module - Reading rendered PDFs back for verification.
"""

from .pdf_loader import (
    load_pdf,
    verify_report,
    PDFLoadError
)

__all__ = [
    'load_pdf',
    'verify_report',
    'PDFLoadError',
]
