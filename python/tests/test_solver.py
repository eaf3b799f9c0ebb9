"""Solver test suite: parametric fixtures.

Boards with known optimal lengths live in ``<project_root>/fixtures/``.
Each returned move list is replayed through the real game engine to
verify it reaches the goal.
"""

from __future__ import annotations

import json
import random
import threading
from pathlib import Path

import pytest

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.gamesolver import Algorithm, Solver, solve_astar, solve_bfs
from eightpuzzle.errors import SolveCancelled
from eightpuzzle.models.state import GOAL_STATE, State

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

UNSOLVABLE = State((1, 2, 3, 4, 5, 6, 8, 7, 0))


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS_3x3 = _load("3x3.json")


# -- helpers ------------------------------------------------------------------


def _assert_solves(state: State, moves: list[int] | None, label: str) -> None:
    """Replay *moves* through the game engine and check for a win."""
    assert moves is not None, f"No solution returned ({label})"
    assert all(isinstance(m, int) for m in moves), "Every move must be a tile number"

    game = GamePlay.from_board(state)
    for i, tile in enumerate(moves):
        ok = game.request_move(tile)
        assert ok, f"Move {i} (tile {tile}) was illegal on {game.board} ({label})"

    assert game.is_won, f"Board not solved after {len(moves)} moves ({label})"
    assert game.moves == len(moves)


# -- fixture boards -----------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS_3x3, ids=_ids)
def test_bfs_is_optimal(board_data: dict) -> None:
    state = State(tuple(board_data["cells"]))
    moves = solve_bfs(state)
    _assert_solves(state, moves, board_data["id"])
    assert len(moves) == board_data["optimal"]


@pytest.mark.parametrize("board_data", _BOARDS_3x3, ids=_ids)
def test_astar_is_optimal(board_data: dict) -> None:
    state = State(tuple(board_data["cells"]))
    moves = solve_astar(state)
    _assert_solves(state, moves, board_data["id"])
    assert len(moves) == board_data["optimal"]


# -- scenarios ----------------------------------------------------------------


def test_single_slide_left() -> None:
    state = State((1, 2, 3, 4, 5, 6, 7, 0, 8))
    assert solve_bfs(state) == [8]
    assert solve_astar(state) == [8]


def test_goal_needs_no_moves() -> None:
    assert solve_bfs(GOAL_STATE) == []
    assert solve_astar(GOAL_STATE) == []
    assert Solver.solve(GOAL_STATE) == []


@pytest.mark.parametrize("seed", range(10))
def test_shuffled_boards_agree_on_length(seed: int) -> None:
    state = GameGenerator.shuffle(GOAL_STATE, 30, random.Random(seed))
    bfs_moves = solve_bfs(state)
    astar_moves = solve_astar(state)
    _assert_solves(state, bfs_moves, f"bfs seed {seed}")
    _assert_solves(state, astar_moves, f"astar seed {seed}")
    assert len(astar_moves) == len(bfs_moves)
    assert len(bfs_moves) <= 30


def test_bfs_reports_no_solution_for_unsolvable_board() -> None:
    assert solve_bfs(UNSOLVABLE) is None


def test_astar_reports_no_solution_for_unsolvable_board() -> None:
    assert solve_astar(UNSOLVABLE) is None


def test_expansion_cap_gives_up() -> None:
    hard = State((8, 6, 7, 2, 5, 4, 3, 0, 1))
    assert solve_astar(hard, max_expansions=10) is None
    assert solve_bfs(hard, max_expansions=10) is None
    assert solve_astar(UNSOLVABLE, max_expansions=500) is None


def test_cancelled_search_raises() -> None:
    cancel = threading.Event()
    cancel.set()
    state = State((1, 2, 3, 4, 5, 6, 0, 7, 8))
    with pytest.raises(SolveCancelled):
        solve_astar(state, cancel=cancel)
    with pytest.raises(SolveCancelled):
        solve_bfs(state, cancel=cancel)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_cancel_before_start_wins_over_solved_board(algorithm: Algorithm) -> None:
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(SolveCancelled):
        Solver.solve(GOAL_STATE, algorithm, cancel=cancel)


# -- facade -------------------------------------------------------------------


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_solver_dispatches(algorithm: Algorithm) -> None:
    state = State((1, 2, 3, 4, 0, 6, 7, 5, 8))
    moves = Solver.solve(state, algorithm)
    _assert_solves(state, moves, algorithm.value)
    assert moves == Solver.solve(state, algorithm.value)


def test_hint_is_first_move() -> None:
    state = State((1, 2, 3, 4, 5, 6, 0, 7, 8))
    assert Solver.hint(state) == 7
    assert Solver.hint(GOAL_STATE) is None


def test_hint_honours_expansion_cap() -> None:
    hard = State((8, 6, 7, 2, 5, 4, 3, 0, 1))
    assert Solver.hint(hard, max_expansions=1) is None


@pytest.mark.parametrize(
    "cells, expected",
    [
        ((1, 2, 3, 4, 5, 6, 7, 8, 0), True),
        ((1, 2, 3, 4, 5, 6, 8, 7, 0), False),
        ((8, 6, 7, 2, 5, 4, 3, 0, 1), True),
        ((2, 1, 3, 4, 5, 6, 7, 8, 0), False),
    ],
)
def test_is_solvable(cells: tuple[int, ...], expected: bool) -> None:
    assert Solver.is_solvable(State(cells)) is expected
