"""Run a solve off the interactive thread.

A ``SolveJob`` is one-shot: it delivers a single move list (or ``None``)
and can be cancelled; cancellation takes effect at the next node
expansion.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor

from eightpuzzle.engine.gamesolver.solver import Algorithm, Solver
from eightpuzzle.models.state import State

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def _shared_executor() -> ThreadPoolExecutor:
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="solver")
        return _executor


class SolveJob:
    def __init__(
        self,
        state: State,
        algorithm: Algorithm = Algorithm.BEST_FIRST,
        max_expansions: int | None = None,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.state = state
        self.algorithm = Algorithm(algorithm)
        self._cancel = threading.Event()
        pool = executor or _shared_executor()
        self._future: Future[list[int] | None] = pool.submit(
            Solver.solve, state, self.algorithm, max_expansions, self._cancel
        )

    def cancel(self) -> None:
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def done(self) -> bool:
        return self._future.done()

    def result(self, timeout: float | None = None) -> list[int] | None:
        """Block for the outcome.

        Raises ``SolveCancelled`` if the job was cancelled before it
        finished and ``concurrent.futures.TimeoutError`` on timeout.
        """
        return self._future.result(timeout=timeout)
