"""
PDF Report Writer Module
Draws computed page layouts with ReportLab and saves the finished document.
"""

import io
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas
from layout.engine import build_page_layouts
from layout.models import ColumnSpec, PageGeometry, PageLayout, RowRecord
from layout.report_content import COLUMNS, REPORT_SUBTITLE, REPORT_TITLE, expense_rows

logger = logging.getLogger(__name__)


class DocumentCreationError(Exception):
    """Raised when the PDF document could not be initialized."""
    pass


class RenderingError(Exception):
    """Raised when drawing or saving the document fails."""
    pass


class PDFReportWriter:
    """Renders expense report layouts to a PDF file."""

    def __init__(self, output_path: str, page_size=A4, margin: float = 60.0):
        """
        Initialize PDF writer.

        Args:
            output_path: Path where PDF will be saved
            page_size: (width, height) in points (default: A4)
            margin: Left and right page margin in points
        """
        self.output_path = output_path
        self.page_size = page_size
        self.margin = margin

    @property
    def geometry(self) -> PageGeometry:
        width, height = self.page_size
        return PageGeometry(width=width, height=height, margin=self.margin)

    @staticmethod
    def measure_text_width(text: str, font_name: str, font_size: float) -> float:
        """Width of text in points when set in the given font."""
        return pdfmetrics.stringWidth(text, font_name, font_size)

    def layout(
        self,
        title: str,
        subtitle: str,
        columns: tuple[ColumnSpec, ...],
        rows: list[RowRecord]
    ) -> list[PageLayout]:
        """Compute page layouts using this writer's geometry and font metrics."""
        return build_page_layouts(
            self.geometry, title, subtitle, columns, rows, self.measure_text_width
        )

    def render(self, pages: list[PageLayout], title: Optional[str] = None) -> bytes:
        """
        Draw the pages into an in-memory PDF document.

        Args:
            pages: Page layouts in page order
            title: Optional document title for the PDF metadata

        Returns:
            The finished PDF as bytes

        Raises:
            DocumentCreationError: If the canvas cannot be created
            RenderingError: If any drawing operation fails
        """
        buffer = io.BytesIO()
        try:
            pdf = canvas.Canvas(buffer, pagesize=self.page_size)
        except Exception as e:
            logger.error(f"Cannot create PDF document: {e}", exc_info=True)
            raise DocumentCreationError(f"Cannot create PDF document: {e}") from e

        try:
            if title:
                pdf.setTitle(title)

            for page in pages:
                logger.debug(
                    f"Drawing page {page.page_number}: "
                    f"{len(page.text)} strings, {len(page.lines)} lines"
                )
                for instruction in page.text:
                    pdf.setFont(instruction.font_name, instruction.font_size)
                    pdf.drawString(instruction.x, instruction.y, instruction.text)

                for line in page.lines:
                    pdf.line(line.x1, line.y1, line.x2, line.y2)

                pdf.showPage()

            pdf.save()

        except Exception as e:
            logger.error(f"Error drawing PDF content: {e}", exc_info=True)
            raise RenderingError(f"Failed to render PDF document: {e}") from e

        return buffer.getvalue()

    def save(self, pdf_bytes: bytes) -> Path:
        """
        Write the document to output_path.

        The bytes go to a temporary file in the target directory first, which
        is then moved into place, so a failed write never leaves a partial
        PDF behind.

        Raises:
            RenderingError: If the file cannot be written
        """
        output_path = Path(self.output_path)
        tmp_path = None
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)

            with tempfile.NamedTemporaryFile(
                dir=output_path.parent,
                prefix=f".{output_path.stem}-",
                suffix=".tmp",
                delete=False
            ) as tmp_file:
                tmp_path = tmp_file.name
                tmp_file.write(pdf_bytes)

            os.replace(tmp_path, output_path)
            tmp_path = None

        except PermissionError as e:
            logger.error(f"Permission denied writing to {self.output_path}: {e}")
            raise RenderingError(
                f"Cannot write to {self.output_path}. File may be open or directory is read-only."
            ) from e

        except OSError as e:
            logger.error(f"OS error writing PDF: {e}", exc_info=True)
            raise RenderingError(f"Failed to write PDF file: {e}") from e

        finally:
            if tmp_path is not None:
                Path(tmp_path).unlink(missing_ok=True)

        logger.info(f"PDF report saved: {output_path} ({len(pdf_bytes)} bytes)")
        return output_path

    def generate_report(
        self,
        title: str,
        subtitle: str,
        columns: tuple[ColumnSpec, ...],
        rows: list[RowRecord]
    ) -> list[PageLayout]:
        """
        Lay out, render and save a report.

        Returns:
            The page layouts that were drawn

        Raises:
            LayoutContractError: If the input is malformed
            DocumentCreationError: If the document cannot be created
            RenderingError: If drawing or saving fails
        """
        logger.info(f"Generating PDF report: {self.output_path}")
        logger.info(f"Report contains {len(rows)} rows in {len(columns)} columns")

        pages = self.layout(title, subtitle, columns, rows)
        pdf_bytes = self.render(pages, title=title)
        self.save(pdf_bytes)

        logger.info(f"PDF report generated successfully: {self.output_path} ({len(pages)} page(s))")
        return pages


def generate_expense_report(
    output_path: str,
    page_size=A4,
    margin: float = 60.0
) -> list[PageLayout]:
    """
    Convenience function to generate the consolidated expense report.

    Args:
        output_path: Path where PDF will be saved
        page_size: (width, height) in points
        margin: Left and right page margin in points

    Returns:
        The page layouts that were drawn
    """
    writer = PDFReportWriter(output_path, page_size=page_size, margin=margin)
    return writer.generate_report(REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, expense_rows())
