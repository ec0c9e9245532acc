"""
PDF Loader Module
Reads rendered reports back with PyMuPDF (fitz) to check what was drawn.
"""

import fitz  # PyMuPDF
import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class PDFLoadError(Exception):
    """Custom exception for PDF loading errors."""
    pass


def load_pdf(file_path: str) -> str:
    """
    Extract text from all pages of a PDF file.

    Args:
        file_path: Path to the PDF file

    Returns:
        Combined text from all pages as a single string

    Raises:
        PDFLoadError: If the PDF cannot be loaded or read
    """
    pdf_path = Path(file_path)
    if not pdf_path.exists():
        logger.error(f"PDF file not found: {file_path}")
        raise PDFLoadError(f"PDF file not found: {file_path}")

    if not pdf_path.suffix.lower() == '.pdf':
        logger.error(f"File is not a PDF: {file_path}")
        raise PDFLoadError(f"File is not a PDF: {file_path}")

    doc = None
    try:
        doc = fitz.open(file_path)

        if doc.page_count == 0:
            logger.error(f"PDF has no pages: {file_path}")
            raise PDFLoadError(f"PDF has no pages: {file_path}")

        logger.info(f"Loading PDF: {file_path} ({doc.page_count} pages)")

        text_chunks = []
        for page in doc:
            text = page.get_text()
            logger.debug(f"Page {page.number + 1}: extracted {len(text)} characters")
            text_chunks.append(text)

        return "\n".join(text_chunks)

    except fitz.FileDataError as e:
        logger.error(f"Invalid or corrupted PDF file: {file_path}", exc_info=True)
        raise PDFLoadError(f"Invalid or corrupted PDF file: {file_path}") from e

    except PDFLoadError:
        raise

    except Exception as e:
        logger.error(f"Unexpected error loading PDF {file_path}: {e}", exc_info=True)
        raise PDFLoadError(f"Failed to load PDF {file_path}: {str(e)}") from e

    finally:
        if doc is not None:
            doc.close()
            logger.debug(f"PDF document closed: {file_path}")


def verify_report(file_path: str, expected_strings: Iterable[str]) -> list[str]:
    """
    Check that every expected string appears in a rendered PDF.

    Args:
        file_path: Path to the rendered report
        expected_strings: Texts that were drawn

    Returns:
        The expected strings missing from the document, in input order

    Raises:
        PDFLoadError: If the PDF cannot be read
    """
    text = load_pdf(file_path)
    missing = [expected for expected in expected_strings if expected not in text]

    if missing:
        logger.warning(f"{len(missing)} string(s) missing from {file_path}: {missing}")
    else:
        logger.info(f"Verified report contents: {file_path}")

    return missing
