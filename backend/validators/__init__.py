"""
Validators Module - Layout input contract checks.
"""

from .layout_validator import (
    LayoutContractError,
    validate_column_specs,
    validate_geometry,
    validate_parallel_lengths,
    validate_text_widths
)

__all__ = [
    'LayoutContractError',
    'validate_column_specs',
    'validate_geometry',
    'validate_parallel_lengths',
    'validate_text_widths',
]
