"""
Layout Validator Module
Rejects malformed layout input at the boundary instead of producing bad coordinates.
"""

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


class LayoutContractError(ValueError):
    """Raised when layout input violates a precondition."""
    pass


def validate_geometry(geometry) -> None:
    """
    Validate page geometry.

    Width, height and margin must be non-negative, and the margins on both
    sides must leave room for content.

    Raises:
        LayoutContractError: If any dimension is invalid
    """
    for name in ("width", "height", "margin"):
        value = getattr(geometry, name)
        if value < 0:
            logger.error(f"Negative page {name}: {value}")
            raise LayoutContractError(f"Page {name} must be non-negative, got {value}")

    if geometry.margin * 2 >= geometry.width:
        raise LayoutContractError(
            f"Margin {geometry.margin} leaves no room on a page {geometry.width} wide"
        )


def validate_parallel_lengths(**columns: Sequence) -> int:
    """
    Check that parallel sequences all have the same length.

    Args:
        **columns: Sequences keyed by column name

    Returns:
        The shared length

    Raises:
        LayoutContractError: If the lengths differ
    """
    lengths = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{name}={length}" for name, length in lengths.items())
        logger.error(f"Mismatched column lengths: {detail}")
        raise LayoutContractError(f"Parallel columns must have equal length ({detail})")

    return next(iter(lengths.values()), 0)


def validate_column_specs(columns: Sequence) -> None:
    """
    Validate the ordered column specs of a table.

    Raises:
        LayoutContractError: If there are no columns, names repeat, or a
            left-justified column has no x offset
    """
    if not columns:
        raise LayoutContractError("At least one column is required")

    seen = set()
    for column in columns:
        if column.name in seen:
            raise LayoutContractError(f"Duplicate column name: {column.name}")
        seen.add(column.name)

        if not column.is_right_justified and column.x_offset is None:
            raise LayoutContractError(
                f"Left-justified column '{column.name}' needs an x offset"
            )


def validate_text_widths(text_widths: Sequence[float]) -> None:
    """
    Measured widths must be non-negative.

    Raises:
        LayoutContractError: If a width is negative
    """
    for index, width in enumerate(text_widths):
        if width < 0:
            raise LayoutContractError(f"Text width at row {index} is negative: {width}")
