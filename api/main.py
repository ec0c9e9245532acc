"""
FastAPI Backend for the Expense Report Generator
RESTful API endpoints for laying out and rendering expense reports
"""

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.middleware.cors import CORSMiddleware
from pathlib import Path
from datetime import datetime
import logging
import sys

logger = logging.getLogger(__name__)

# Add backend to path
backend_path = Path(__file__).parent.parent / 'backend'
sys.path.insert(0, str(backend_path))

# Import backend modules
from config import config
from layout.report_content import COLUMNS, REPORT_SUBTITLE, REPORT_TITLE, expense_rows
from output.writer import DocumentCreationError, PDFReportWriter, RenderingError
from validators.layout_validator import LayoutContractError

# Initialize FastAPI app
app = FastAPI(
    title="Expense Report Generator API",
    description="Compute expense report layouts and render them to PDF",
    version=config.VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def reports_dir() -> Path:
    """Directory holding reports generated through the API."""
    path = config.OUTPUT_DIR / "api_reports"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _report_path(filename: str) -> Path:
    if Path(filename).name != filename or not filename.endswith(".pdf"):
        raise HTTPException(status_code=400, detail=f"Invalid report name: {filename}")

    report_path = reports_dir() / filename
    if not report_path.exists():
        raise HTTPException(status_code=404, detail="Report not found")
    return report_path


def _writer(output_path: Path) -> PDFReportWriter:
    try:
        page_size = config.get_page_size()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return PDFReportWriter(str(output_path), page_size=page_size, margin=config.PAGE_MARGIN)


@app.get("/")
async def root():
    """Root endpoint - API information"""
    return {
        "message": "Expense Report Generator API",
        "version": config.VERSION,
        "endpoints": {
            "GET /layout": "Computed text positions of the report",
            "POST /reports": "Render the report to a new PDF",
            "GET /reports": "List generated reports",
            "GET /reports/{filename}": "Download generated report",
            "DELETE /reports/{filename}": "Delete generated report",
            "GET /health": "Health check"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }


@app.get("/layout")
def get_layout():
    """
    Compute the report layout without rendering it.

    Returns page geometry and, per page, every string with its position and
    font, plus the header underline.
    """
    writer = _writer(reports_dir() / "layout.pdf")
    try:
        pages = writer.layout(REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, expense_rows())
    except LayoutContractError as e:
        logger.error(f"Invalid report layout: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "geometry": writer.geometry.to_dict(),
        "rows": [row.to_dict() for row in expense_rows()],
        "pages": [page.to_dict() for page in pages]
    }


@app.post("/reports")
def create_report():
    """Render the expense report and return a download link."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    report_filename = f"report_{timestamp}.pdf"
    writer = _writer(reports_dir() / report_filename)

    try:
        pages = writer.generate_report(REPORT_TITLE, REPORT_SUBTITLE, COLUMNS, expense_rows())
    except LayoutContractError as e:
        logger.error(f"Invalid report layout: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except (DocumentCreationError, RenderingError) as e:
        logger.error(f"Error generating report: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Report generation failed: {str(e)}")

    logger.info(f"Report generated: {report_filename}")

    return {
        "status": "success",
        "message": "Report generated successfully",
        "report": {
            "filename": report_filename,
            "download_url": f"/reports/{report_filename}",
            "generated_at": datetime.now().isoformat()
        },
        "summary": {
            "pages": len(pages),
            "strings_drawn": sum(len(page.text) for page in pages),
            "lines_drawn": sum(len(page.lines) for page in pages)
        }
    }


@app.get("/reports/{filename}")
async def download_report(filename: str):
    """
    Download a generated PDF report.

    - **filename**: Name of the report file to download
    """
    report_path = _report_path(filename)

    return FileResponse(
        path=str(report_path),
        media_type="application/pdf",
        filename=filename
    )


@app.get("/reports")
async def list_reports():
    """List all available reports"""
    reports = []

    for report_file in reports_dir().glob("*.pdf"):
        stat = report_file.stat()
        reports.append({
            "filename": report_file.name,
            "created_at": datetime.fromtimestamp(stat.st_ctime).isoformat(),
            "size_bytes": stat.st_size,
            "download_url": f"/reports/{report_file.name}"
        })

    # Sort by creation time (newest first)
    reports.sort(key=lambda x: x['created_at'], reverse=True)

    return {
        "total_reports": len(reports),
        "reports": reports
    }


@app.delete("/reports/{filename}")
async def delete_report(filename: str):
    """
    Delete a report file.

    - **filename**: Name of the report file to delete
    """
    report_path = _report_path(filename)

    try:
        report_path.unlink()
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"Error deleting report: {str(e)}")

    return {
        "status": "success",
        "message": f"Report {filename} deleted successfully"
    }


if __name__ == "__main__":
    import uvicorn
    from logging_config import setup_logging

    setup_logging()
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
