"""8-puzzle solver front door."""

from __future__ import annotations

import logging
import threading
import time
from enum import StrEnum

from eightpuzzle.engine.gamesolver.astar import solve_astar
from eightpuzzle.engine.gamesolver.bfs import solve_bfs
from eightpuzzle.engine.moves import is_solved
from eightpuzzle.errors import SolveCancelled
from eightpuzzle.models.state import BLANK, State

logger = logging.getLogger(__name__)


class Algorithm(StrEnum):
    BEST_FIRST = "astar"
    BREADTH_FIRST = "bfs"


_SEARCHES = {
    Algorithm.BEST_FIRST: solve_astar,
    Algorithm.BREADTH_FIRST: solve_bfs,
}


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(
        state: State,
        algorithm: Algorithm = Algorithm.BEST_FIRST,
        max_expansions: int | None = None,
        cancel: threading.Event | None = None,
    ) -> list[int] | None:
        """Return a move sequence that solves *state*.

        ``[]`` when already solved, ``None`` when no solution was found.
        Raises ``SolveCancelled`` if *cancel* is already set.
        """
        if cancel is not None and cancel.is_set():
            raise SolveCancelled("Solve cancelled before it started")
        if is_solved(state):
            return []

        algorithm = Algorithm(algorithm)
        started = time.perf_counter()
        moves = _SEARCHES[algorithm](state, max_expansions=max_expansions, cancel=cancel)
        elapsed = time.perf_counter() - started

        if moves is None:
            logger.info("%s found no solution for %s (%.3fs)", algorithm.value, state, elapsed)
        else:
            logger.info(
                "%s solved %s in %d moves (%.3fs)",
                algorithm.value, state, len(moves), elapsed,
            )
        return moves

    @staticmethod
    def hint(
        state: State,
        algorithm: Algorithm = Algorithm.BEST_FIRST,
        max_expansions: int | None = None,
    ) -> int | None:
        """Return the next tile to move, or ``None`` if solved / no solution."""
        if is_solved(state):
            return None
        moves = Solver.solve(state, algorithm, max_expansions=max_expansions)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(state: State) -> bool:
        """Return True if *state* can reach the goal.

        On an odd-width board a state is solvable iff its tile sequence
        has an even number of inversions.
        """
        flat = [v for v in state.cells if v != BLANK]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions % 2 == 0
