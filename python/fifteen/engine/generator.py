"""Generates scrambled sliding puzzle grids."""

from __future__ import annotations

import logging
import random

from fifteen.models.position import Position
from fifteen.models.puzzle import PuzzleGrid

logger = logging.getLogger(__name__)


class GridGenerator:
    """Creates puzzles by random walks from the solved state."""

    @staticmethod
    def solved(size: int) -> PuzzleGrid:
        """Return the goal-state grid (all tiles in order, blank bottom-right)."""
        return PuzzleGrid.solved(size)

    @staticmethod
    def scramble(
        grid: PuzzleGrid,
        moves: int | None = None,
        rng: random.Random | None = None,
    ) -> int:
        """Scramble *grid* in-place using random valid moves.

        The previous move is never undone unless it is the only option.
        Returns the number of moves applied.
        """
        if moves is None:
            moves = grid.size * grid.size * 100
        rng = rng or random.Random()
        prev_blank: Position | None = None
        applied = 0

        for _ in range(moves):
            candidates = grid.valid_moves()
            if prev_blank in candidates and len(candidates) > 1:
                candidates.remove(prev_blank)
            if not candidates:
                break
            target = rng.choice(candidates)
            prev_blank = grid.blank
            if grid.move(target.x, target.y):
                applied += 1

        logger.debug("Scrambled %d×%d grid with %d moves", grid.size, grid.size, applied)
        return applied

    @staticmethod
    def generate(
        size: int, moves: int | None = None, seed: int | None = None
    ) -> PuzzleGrid:
        """Return a scrambled grid of the given size that is not already solved."""
        if size < 2:
            raise ValueError(f"Cannot scramble a {size}×{size} grid.")
        if moves is not None and moves < 1:
            raise ValueError(f"Need at least one move to scramble, got {moves}.")
        rng = random.Random(seed)
        grid = GridGenerator.solved(size)
        GridGenerator.scramble(grid, moves, rng)
        if grid.is_solved():
            # An odd number of moves never returns to the goal.
            target = rng.choice(grid.valid_moves())
            grid.move(target.x, target.y)
        return grid
