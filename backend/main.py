"""
Expense Report Generator - Main Pipeline
Lays out, renders, saves and verifies the consolidated expense report.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from config import config
from logging_config import setup_logging
from layout.report_content import COLUMNS, REPORT_SUBTITLE, REPORT_TITLE, expense_rows
from output.writer import DocumentCreationError, PDFReportWriter, RenderingError
from validators.layout_validator import LayoutContractError

logger = logging.getLogger(__name__)

DEFAULT_REPORT_NAME = "expense_report"


def output_filename(invocation_name: str) -> str:
    """
    Derive the report file name from the name the program was invoked as.

    ``/usr/local/bin/expense-report`` becomes ``expense-report.pdf`` and
    ``backend/main.py`` becomes ``main.py.pdf``: the full program name is
    kept, including any extension. Only the directory part is dropped.
    """
    name = Path(invocation_name).name if invocation_name else ""
    return f"{name or DEFAULT_REPORT_NAME}.pdf"


class ExpenseReportGenerator:
    """Main orchestrator for the report pipeline."""

    def __init__(self, page_size=None, margin: Optional[float] = None, verify: Optional[bool] = None):
        """
        Initialize generator.

        Args:
            page_size: (width, height) in points, defaults to the configured page size
            margin: Page margin in points, defaults to PAGE_MARGIN
            verify: Read the saved PDF back and check its text, defaults to VERIFY_OUTPUT
        """
        self.page_size = page_size or config.get_page_size()
        self.margin = config.PAGE_MARGIN if margin is None else margin
        self.verify = config.VERIFY_OUTPUT if verify is None else verify
        self.stats = {
            "rows": 0,
            "pages": 0,
            "strings_drawn": 0,
            "lines_drawn": 0,
            "missing_strings": 0
        }

    def process(self, output_path: str) -> Path:
        """
        Generate the expense report at output_path.

        Raises:
            LayoutContractError: If the report content is malformed
            DocumentCreationError: If the PDF document cannot be created
            RenderingError: If drawing or saving fails
        """
        logger.info("=" * 80)
        logger.info("Starting Expense Report Pipeline")
        logger.info("=" * 80)

        # Step 1: Collect rows
        rows = expense_rows()
        self.stats["rows"] = len(rows)
        logger.info(f"Step 1: Loaded {len(rows)} expense rows")

        # Step 2: Layout
        writer = PDFReportWriter(output_path, page_size=self.page_size, margin=self.margin)
        logger.info(
            f"Step 2: Computing layout on {writer.geometry.width:.2f}x"
            f"{writer.geometry.height:.2f} page, margin {self.margin}"
        )
        pages = writer.layout(REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, rows)
        self.stats["pages"] = len(pages)
        self.stats["strings_drawn"] = sum(len(page.text) for page in pages)
        self.stats["lines_drawn"] = sum(len(page.lines) for page in pages)

        # Step 3: Render in memory
        logger.info(f"Step 3: Rendering {len(pages)} page(s)")
        pdf_bytes = writer.render(pages, title=REPORT_TITLE)

        # Step 4: Save
        logger.info(f"Step 4: Saving PDF report - {output_path}")
        saved_path = writer.save(pdf_bytes)

        # Step 5: Verify
        if self.verify:
            from loaders.pdf_loader import verify_report
            expected = [instruction.text for page in pages for instruction in page.text]
            missing = verify_report(str(saved_path), expected)
            self.stats["missing_strings"] = len(missing)

        self._print_summary()

        logger.info("=" * 80)
        logger.info("Pipeline completed successfully!")
        logger.info(f"Report saved to: {saved_path}")
        logger.info("=" * 80)
        return saved_path

    def _print_summary(self):
        """Print report summary."""
        logger.info("\n" + "=" * 80)
        logger.info("REPORT SUMMARY")
        logger.info("=" * 80)
        logger.info(f"Expense rows:        {self.stats['rows']}")
        logger.info(f"Pages:               {self.stats['pages']}")
        logger.info(f"Strings drawn:       {self.stats['strings_drawn']}")
        logger.info(f"Lines drawn:         {self.stats['lines_drawn']}")
        if self.verify:
            logger.info(f"Missing on readback: {self.stats['missing_strings']}")
        logger.info("=" * 80 + "\n")


def main():
    """Main entry point. Takes no flags; the output name follows the program name."""
    try:
        setup_logging(log_file="expense_report.log")
    except OSError as e:
        print(f"ERROR: cannot set up logging in {config.LOG_DIR}: {e}")
        sys.exit(1)

    try:
        output_path = config.get_output_path(output_filename(sys.argv[0]))
        generator = ExpenseReportGenerator()
        saved_path = generator.process(str(output_path))
        print(f"\n✅ Success! Report generated: {saved_path}")

    except LayoutContractError as e:
        logger.error(f"Invalid report layout: {e}")
        print(f"ERROR: invalid report layout: {e}")
        sys.exit(1)

    except DocumentCreationError as e:
        logger.error(f"Document creation failed: {e}")
        print(f"ERROR: cannot create PDF document: {e}")
        sys.exit(1)

    except RenderingError as e:
        logger.error(f"Rendering failed: {e}")
        print(f"ERROR: rendering failed: {e}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Processing failed: {e}", exc_info=True)
        print(f"ERROR: {e}")
        print("Check expense_report.log for details.")
        sys.exit(1)


if __name__ == "__main__":
    main()
