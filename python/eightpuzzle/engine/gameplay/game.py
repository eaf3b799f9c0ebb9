"""Core gameplay logic: processes host requests and checks the win condition."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from eightpuzzle.config import Settings
from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gamesolver import Algorithm, SolveJob, Solver
from eightpuzzle.engine.gamestate import GameState
from eightpuzzle.engine.moves import apply_move
from eightpuzzle.engine.playback import MovePlayer
from eightpuzzle.errors import IllegalMove
from eightpuzzle.models.state import State

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session.

    The board starts solved.  The host serialises every call; nothing
    here is thread-safe.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self.state = GameState(GameGenerator.solved())

    @classmethod
    def from_board(cls, board: State, settings: Settings | None = None) -> GamePlay:
        """Create a game session from an existing board."""
        game = cls(settings)
        game.state.reset(board)
        return game

    # -- host requests --------------------------------------------------------

    def request_move(self, tile: int) -> bool:
        """Slide *tile* into the blank.

        Returns True if the move was legal and applied.  An illegal move
        leaves the board and counter untouched.
        """
        try:
            self.state.board = apply_move(self.state.board, tile)
        except IllegalMove as exc:
            logger.debug("Ignored move: %s", exc)
            return False
        self.state.increment_moves()
        return True

    def request_shuffle(
        self, step_count: int | None = None, rng: random.Random | None = None
    ) -> State:
        """Scramble the live board in place and reset the move counter."""
        steps = self.settings.shuffle_steps if step_count is None else step_count
        board = GameGenerator.shuffle(self.state.board, steps, rng)
        self.state.reset(board)
        return board

    def request_solve(self, algorithm: Algorithm | None = None) -> list[int] | None:
        """Return a move list for the live board, or ``None``."""
        return Solver.solve(
            self.state.board,
            self._algorithm(algorithm),
            max_expansions=self.settings.max_expansions,
        )

    def request_solve_async(self, algorithm: Algorithm | None = None) -> SolveJob:
        """Like ``request_solve`` but runs on a worker thread."""
        return SolveJob(
            self.state.board,
            self._algorithm(algorithm),
            max_expansions=self.settings.max_expansions,
        )

    def hint(self, algorithm: Algorithm | None = None) -> int | None:
        return Solver.hint(
            self.state.board,
            self._algorithm(algorithm),
            max_expansions=self.settings.max_expansions,
        )

    def restart(self) -> None:
        self.state.reset(GameGenerator.solved())

    # -- playback -------------------------------------------------------------

    def play(self, moves: Iterable[int]) -> MovePlayer:
        """Wrap *moves* in a player for the host to step through."""
        return MovePlayer(moves)

    def replay_step(self, tile: int) -> None:
        """Apply one replayed move; it counts like a player move.

        Unlike ``request_move`` an illegal step raises ``IllegalMove``,
        since a replayed sequence no longer matches the board.
        """
        self.state.board = apply_move(self.state.board, tile)
        self.state.increment_moves()

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> State:
        return self.state.board

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    # -- helpers --------------------------------------------------------------

    def _algorithm(self, algorithm: Algorithm | None) -> Algorithm:
        return Algorithm(algorithm or self.settings.algorithm)
