"""Errors raised when replacing grid contents."""

from __future__ import annotations


class PuzzleDataError(ValueError):
    """Bulk grid input does not match the grid dimensions."""


class InvalidHeightError(PuzzleDataError):
    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"invalid input height: expected {expected} rows, got {got}.")
        self.expected = expected
        self.got = got


class InvalidWidthError(PuzzleDataError):
    def __init__(self, row: int, expected: int, got: int) -> None:
        super().__init__(
            f"invalid input width: row {row} has {got} values, expected {expected}."
        )
        self.row = row
        self.expected = expected
        self.got = got
