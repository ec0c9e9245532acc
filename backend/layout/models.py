"""
Layout Models Module
Immutable value types passed between the layout engine and the renderer.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Optional


BODY_FONT = "Helvetica"
BODY_FONT_SIZE = 8.0


class Justification(Enum):
    """Text anchor enumeration."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class PageGeometry:
    """Page dimensions and the margin shared by both page edges, in points."""
    width: float
    height: float
    margin: float

    @property
    def right_edge(self) -> float:
        return self.width - self.margin

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ColumnSpec:
    """
    One table column.

    Left-justified columns start at x_offset. Right-justified columns have no
    fixed offset; their text ends at the page's right margin.
    """
    name: str
    x_offset: Optional[float] = None
    justification: Justification = Justification.LEFT

    @property
    def label(self) -> str:
        """Header text drawn for this column."""
        return self.name.upper()

    @property
    def is_right_justified(self) -> bool:
        return self.justification is Justification.RIGHT


@dataclass(frozen=True)
class RowRecord:
    """A single expense line."""
    date: str
    expense_name: str
    account_name: str
    currency: str
    amount: str

    def values(self) -> tuple[str, str, str, str, str]:
        """Cell values in column order."""
        return (self.date, self.expense_name, self.account_name, self.currency, self.amount)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DrawInstruction:
    """A string to draw with its baseline origin at (x, y)."""
    text: str
    x: float
    y: float
    justification: Justification = Justification.LEFT
    font_name: str = BODY_FONT
    font_size: float = BODY_FONT_SIZE

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "justification": self.justification.value,
            "font_name": self.font_name,
            "font_size": self.font_size,
        }


@dataclass(frozen=True)
class LineInstruction:
    """A stroked line segment from (x1, y1) to (x2, y2)."""
    x1: float
    y1: float
    x2: float
    y2: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PageLayout:
    """Everything drawn on one page, in drawing order."""
    page_number: int
    text: tuple[DrawInstruction, ...] = field(default_factory=tuple)
    lines: tuple[LineInstruction, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "page_number": self.page_number,
            "text": [instruction.to_dict() for instruction in self.text],
            "lines": [line.to_dict() for line in self.lines],
        }
