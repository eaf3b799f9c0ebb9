"""Exceptions raised by the puzzle engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eightpuzzle.models.state import State


class PuzzleError(Exception):
    """Base class for every engine error."""


class InvalidState(PuzzleError, ValueError):
    """Cell values are not a permutation of 0-8."""


class IllegalMove(PuzzleError):
    """The requested tile is not orthogonally adjacent to the blank."""

    def __init__(self, tile: int, state: State) -> None:
        super().__init__(f"Tile {tile} cannot slide into the blank.")
        self.tile = tile
        self.state = state


class SolveCancelled(PuzzleError):
    """A solve was cancelled between node expansions."""
