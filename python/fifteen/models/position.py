"""Grid coordinates for the puzzle."""

from __future__ import annotations

from dataclasses import dataclass

# Neighbour order: left, right, up, down. Moves check neighbours in this order.
_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Position:
    """A 1-based (x, y) coordinate on the grid.

    ``x`` is the column (1 at left), ``y`` is the row (1 at top).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, bound: int) -> bool:
        return 1 <= self.x <= bound and 1 <= self.y <= bound

    def neighbours(self) -> list[Position]:
        """Orthogonal neighbours, without any bounds check."""
        return [self.offset(dx, dy) for dx, dy in _OFFSETS]

    def valid_moves(self, bound: int) -> list[Position]:
        """Neighbours lying within a ``bound``×``bound`` grid."""
        return [p for p in self.neighbours() if p.in_bounds(bound)]
