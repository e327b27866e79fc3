"""Grid model for the N×N sliding puzzle."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from fifteen.models.errors import InvalidHeightError, InvalidWidthError
from fifteen.models.position import Position

logger = logging.getLogger(__name__)

BLANK = 0
OUT_OF_BOUNDS = -1


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Offset from the blank to the tile that slides in the given direction.
_SLIDE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (1, 0),
    Direction.RIGHT: (-1, 0),
}


@dataclass
class PuzzleGrid:
    """An N×N sliding puzzle.

    Tiles are stored as ``size`` rows of ``size`` ints. 0 represents the
    blank. All coordinates are 1-based ``(x, y)`` pairs: ``x`` selects the
    column and ``y`` the row.
    """

    size: int
    tiles: list[list[int]]

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Grid size must be positive, got {self.size}.")
        if len(self.tiles) != self.size or any(
            len(row) != self.size for row in self.tiles
        ):
            raise ValueError(
                f"Expected {self.size} rows of {self.size} tiles for a "
                f"{self.size}×{self.size} grid."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, size: int) -> PuzzleGrid:
        """Create a grid with every cell blank."""
        return cls(size=size, tiles=[[BLANK] * size for _ in range(size)])

    @classmethod
    def solved(cls, size: int) -> PuzzleGrid:
        """Create the goal-state grid (tiles in order, blank bottom-right)."""
        grid = cls.empty(size)
        num = 1
        for row in grid.tiles:
            for c in range(size):
                row[c] = num
                num += 1
        grid.tiles[-1][-1] = BLANK
        return grid

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> PuzzleGrid:
        """Create a grid from a flat row-major tile list.

        Example::

            PuzzleGrid.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} grid, "
                f"got {len(flat)}."
            )
        tiles = [list(flat[r * size : (r + 1) * size]) for r in range(size)]
        return cls(size=size, tiles=tiles)

    def copy(self) -> PuzzleGrid:
        return PuzzleGrid(size=self.size, tiles=[row[:] for row in self.tiles])

    # -- coordinates ----------------------------------------------------------

    def _in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.size and 1 <= y <= self.size

    def index_of(self, x: int, y: int) -> int:
        """Row-major 0-based index of ``(x, y)``. Not bounds checked."""
        return (y - 1) * self.size + (x - 1)

    def coordinates_of(self, index: int) -> Position:
        """Inverse of :meth:`index_of`. Not bounds checked."""
        row, col = divmod(index, self.size)
        return Position(col + 1, row + 1)

    # -- cell access ----------------------------------------------------------

    def get(self, x: int, y: int) -> int:
        """Return the tile at ``(x, y)``, or -1 outside the grid."""
        if not self._in_bounds(x, y):
            return OUT_OF_BOUNDS
        return self.tiles[y - 1][x - 1]

    def set(self, x: int, y: int, value: int) -> None:
        """Write ``value`` at ``(x, y)``. Writes outside the grid are ignored."""
        if not self._in_bounds(x, y):
            return
        self.tiles[y - 1][x - 1] = value

    @property
    def cells(self) -> list[int]:
        """Flat row-major copy of the tiles."""
        return [v for row in self.tiles for v in row]

    def data(self) -> list[list[int]]:
        """Return the rows of the grid.

        The rows are the grid's own storage, so writing to them writes to
        the grid.
        """
        return list(self.tiles)

    def set_data(self, rows: Sequence[Sequence[int]]) -> None:
        """Replace every tile from ``size`` rows of ``size`` values.

        Raises :class:`InvalidHeightError` or :class:`InvalidWidthError`
        without touching the current tiles when the input has the wrong
        shape.
        """
        if len(rows) != self.size:
            raise InvalidHeightError(self.size, len(rows))
        new_tiles: list[list[int]] = []
        for i, row in enumerate(rows):
            if len(row) != self.size:
                raise InvalidWidthError(i + 1, self.size, len(row))
            new_tiles.append(list(row))
        self.tiles = new_tiles
        logger.debug("Replaced tiles of %d×%d grid", self.size, self.size)

    # -- queries --------------------------------------------------------------

    def find(self, value: int) -> Position | None:
        """Position of the first cell holding ``value`` in row-major order."""
        for r, row in enumerate(self.tiles):
            for c, v in enumerate(row):
                if v == value:
                    return Position(c + 1, r + 1)
        return None

    @property
    def blank(self) -> Position:
        """Position of the blank, or ``Position(0, 0)`` if there is none."""
        return self.find(BLANK) or Position(0, 0)

    def valid_moves(self) -> list[Position]:
        """Positions of the tiles that can slide into the blank."""
        return self.blank.valid_moves(self.size)

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(self.size):
            for c in range(self.size):
                if r == self.size - 1 and c == self.size - 1:
                    return self.tiles[r][c] == BLANK
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, x: int, y: int) -> bool:
        """Check if the tile at ``(x, y)`` is in its goal position."""
        if not self._in_bounds(x, y):
            return False
        val = self.get(x, y)
        if val == BLANK:
            return x == self.size and y == self.size
        return self.coordinates_of(val - 1) == Position(x, y)

    # -- moves ----------------------------------------------------------------

    def move(self, x: int, y: int) -> bool:
        """Move the tile at ``(x, y)`` into the blank next to it.

        Neighbours are tried left, right, above, below; only the first blank
        found is filled. Returns False, leaving the grid untouched, when
        ``(x, y)`` is outside the grid or has no blank neighbour.
        """
        if not self._in_bounds(x, y):
            return False
        val = self.get(x, y)
        for target in Position(x, y).neighbours():
            if self.get(target.x, target.y) == BLANK:
                self.set(target.x, target.y, val)
                self.set(x, y, BLANK)
                return True
        logger.debug("Rejected move of (%d, %d): no adjacent blank", x, y)
        return False

    def slide(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        dx, dy = _SLIDE_OFFSETS[direction]
        target = self.blank.offset(dx, dy)
        if not target.in_bounds(self.size):
            return False
        return self.move(target.x, target.y)

    def __str__(self) -> str:
        width = max(len(str(v)) for v in self.cells)
        return "\n".join(" ".join(f"{v:>{width}}" for v in row) for row in self.tiles)
