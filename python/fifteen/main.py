"""Sliding puzzle grid inspector.

Usage::

    fifteen                      # solved 4×4 grid
    fifteen -s 3 -n 50 --seed 7  # 3×3, scrambled with 50 random moves
    fifteen -m 3,4 -m 3,3        # move the tiles at (3, 4) then (3, 3)
    fifteen -d down -d right     # slide tiles into the blank
"""

import logging
import random
from typing import Optional

import rich.box
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from fifteen.engine import GridGenerator
from fifteen.models import Direction, Position, PuzzleGrid

DEFAULT_SIZE = 4
MIN_SIZE = 2
MAX_SIZE = 12

console = Console()
logger = logging.getLogger(__name__)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _parse_position(raw: str) -> Position:
    """Parse an ``X,Y`` pair."""
    try:
        x, y = (int(part) for part in raw.split(","))
    except ValueError:
        raise typer.BadParameter(f"Expected X,Y, got {raw!r}.", param_hint="--move") from None
    return Position(x, y)


def _render_grid(grid: PuzzleGrid) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = max(len(str(v)) for v in grid.cells)
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(grid.size):
        table.add_column(width=width + 1, justify="center")

    for y, row in enumerate(grid.data(), 1):
        cells: list[str] = []
        for x, val in enumerate(row, 1):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif grid.is_tile_correct(x, y):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _print_summary(grid: PuzzleGrid) -> None:
    console.print(_render_grid(grid))
    blank = grid.blank
    moves = ", ".join(f"({p.x}, {p.y})" for p in grid.valid_moves()) or "none"
    console.print(f"Blank: ({blank.x}, {blank.y})")
    console.print(f"Valid moves: {moves}")
    console.print(f"Solved: {'yes' if grid.is_solved() else 'no'}")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    scramble: int = typer.Option(
        0, "-n", "--scramble",
        min=0,
        help="Number of random moves applied to the solved grid.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    move: Optional[list[str]] = typer.Option(
        None, "-m", "--move",
        help="Move the tile at X,Y into the blank. Repeatable, applied in order.",
    ),
    slide: Optional[list[Direction]] = typer.Option(
        None, "-d", "--slide",
        help="Slide a tile into the blank. Repeatable, applied after --move.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug output to stderr.",
    ),
) -> None:
    """Sliding puzzle grid inspector."""
    _configure_logging(verbose)
    logger.debug("Building %d×%d grid", size, size)

    targets = [_parse_position(raw) for raw in move or []]

    grid = GridGenerator.solved(size)
    if scramble:
        GridGenerator.scramble(grid, scramble, random.Random(seed))

    for target in targets:
        if not grid.move(target.x, target.y):
            console.print(
                f"[yellow]Cannot move tile at ({target.x}, {target.y}).[/yellow]"
            )

    for direction in slide or []:
        if not grid.slide(direction):
            console.print(f"[yellow]Cannot slide {direction.value}.[/yellow]")

    _print_summary(grid)


if __name__ == "__main__":
    app()
