"""N×N sliding puzzle state."""

from fifteen.engine import GridGenerator
from fifteen.models import (
    Direction,
    InvalidHeightError,
    InvalidWidthError,
    Position,
    PuzzleDataError,
    PuzzleGrid,
)

__all__ = [
    "Direction",
    "GridGenerator",
    "InvalidHeightError",
    "InvalidWidthError",
    "Position",
    "PuzzleDataError",
    "PuzzleGrid",
]
