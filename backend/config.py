"""
Configuration settings for the Expense Report Generator.
Centralized configuration management for the application.
"""

import os
from pathlib import Path

from reportlab.lib.pagesizes import A4, LETTER


class Config:
    """Application configuration class."""

    # Application Settings
    APP_NAME = "Expense Report Generator"
    VERSION = "1.0.0"

    # Output Settings
    OUTPUT_DIR: Path = Path(os.getenv("OUTPUT_DIR", "./output"))
    LOG_DIR: Path = Path(os.getenv("LOG_DIR", "./logs"))
    VERIFY_OUTPUT: bool = os.getenv("VERIFY_OUTPUT", "true").lower() == "true"

    # Page Settings
    PAGE_SIZE: str = os.getenv("PAGE_SIZE", "A4").upper()
    PAGE_MARGIN: float = float(os.getenv("PAGE_MARGIN", "60"))

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # API Settings
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))

    PAGE_SIZES = {
        "A4": A4,
        "LETTER": LETTER,
    }

    @classmethod
    def ensure_directories(cls):
        """Ensure required directories exist."""
        cls.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_output_path(cls, filename: str) -> Path:
        """Get full path for output file."""
        cls.ensure_directories()
        return cls.OUTPUT_DIR / filename

    @classmethod
    def get_log_path(cls, filename: str) -> Path:
        """Get full path for log file."""
        cls.ensure_directories()
        return cls.LOG_DIR / filename

    @classmethod
    def get_page_size(cls) -> tuple[float, float]:
        """
        Resolve PAGE_SIZE to a (width, height) tuple in points.

        Raises:
            ValueError: If PAGE_SIZE is not a known page size
        """
        try:
            return cls.PAGE_SIZES[cls.PAGE_SIZE]
        except KeyError:
            raise ValueError(
                f"Unknown page size '{cls.PAGE_SIZE}'. "
                f"Allowed: {', '.join(cls.PAGE_SIZES)}"
            ) from None

    @classmethod
    def to_dict(cls) -> dict:
        """Convert configuration to dictionary."""
        return {
            "app_name": cls.APP_NAME,
            "version": cls.VERSION,
            "output_dir": str(cls.OUTPUT_DIR),
            "log_dir": str(cls.LOG_DIR),
            "verify_output": cls.VERIFY_OUTPUT,
            "page_size": cls.PAGE_SIZE,
            "page_margin": cls.PAGE_MARGIN,
            "log_level": cls.LOG_LEVEL,
        }


# Create a singleton instance
config = Config()
