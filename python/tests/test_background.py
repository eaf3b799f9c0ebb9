from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from eightpuzzle.engine.gamesolver import Algorithm, SolveJob
from eightpuzzle.engine.gamesolver import astar as astar_module
from eightpuzzle.errors import SolveCancelled
from eightpuzzle.models.state import GOAL_STATE, State


@pytest.fixture
def executor():
    pool = ThreadPoolExecutor(max_workers=1)
    yield pool
    pool.shutdown(wait=True)


def test_delivers_result(executor: ThreadPoolExecutor) -> None:
    job = SolveJob(State((1, 2, 3, 4, 5, 6, 0, 7, 8)), Algorithm.BEST_FIRST, executor=executor)
    assert job.result(timeout=30) == [7, 8]
    assert job.done()
    assert not job.cancelled


def test_solved_board(executor: ThreadPoolExecutor) -> None:
    job = SolveJob(GOAL_STATE, executor=executor)
    assert job.result(timeout=30) == []


def test_no_solution_is_none(executor: ThreadPoolExecutor) -> None:
    job = SolveJob(
        State((1, 2, 3, 4, 5, 6, 8, 7, 0)),
        Algorithm.BEST_FIRST,
        max_expansions=100,
        executor=executor,
    )
    assert job.result(timeout=30) is None


def test_cancel_between_expansions(
    executor: ThreadPoolExecutor, monkeypatch: pytest.MonkeyPatch
) -> None:
    started = threading.Event()
    release = threading.Event()
    real_successors = astar_module.successors

    def slow_successors(state: State):
        started.set()
        release.wait(timeout=10)
        return real_successors(state)

    monkeypatch.setattr(astar_module, "successors", slow_successors)

    job = SolveJob(State((8, 6, 7, 2, 5, 4, 3, 0, 1)), Algorithm.BEST_FIRST, executor=executor)
    assert started.wait(timeout=10)
    job.cancel()
    release.set()

    with pytest.raises(SolveCancelled):
        job.result(timeout=30)
    assert job.cancelled


def test_cancel_before_start(executor: ThreadPoolExecutor) -> None:
    release = threading.Event()
    blocker = executor.submit(release.wait, 10)

    job = SolveJob(GOAL_STATE, executor=executor)
    job.cancel()
    release.set()
    blocker.result(timeout=10)

    with pytest.raises(SolveCancelled):
        job.result(timeout=30)
    assert job.cancelled
