"""Tracks the live board of a game in progress."""

from __future__ import annotations

from eightpuzzle.engine.moves import is_solved
from eightpuzzle.models.state import GOAL_STATE, State


class GameState:
    """Holds the current board and the move counter."""

    def __init__(self, board: State = GOAL_STATE) -> None:
        self.board = board
        self.moves: int = 0

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    def reset(self, board: State = GOAL_STATE) -> None:
        """Replace the board and discard the move history."""
        self.board = board
        self.moves = 0

    @property
    def is_solved(self) -> bool:
        return is_solved(self.board)
