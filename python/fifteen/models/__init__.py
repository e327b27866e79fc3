from fifteen.models.errors import InvalidHeightError, InvalidWidthError, PuzzleDataError
from fifteen.models.position import Position
from fifteen.models.puzzle import Direction, PuzzleGrid

__all__ = [
    "Direction",
    "InvalidHeightError",
    "InvalidWidthError",
    "Position",
    "PuzzleDataError",
    "PuzzleGrid",
]
