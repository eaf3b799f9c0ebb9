"""Move legality and application.

A move is named by the tile that slides into the blank, so the same
sequence replays correctly whatever direction the host uses to animate it.
"""

from __future__ import annotations

from collections.abc import Iterable

from eightpuzzle.errors import IllegalMove
from eightpuzzle.models.state import CELLS, GOAL_STATE, SIZE, State, position


def _neighbour_cells(index: int) -> tuple[int, ...]:
    r, c = position(index)
    out: list[int] = []
    if r > 0:
        out.append(index - SIZE)
    if r < SIZE - 1:
        out.append(index + SIZE)
    if c > 0:
        out.append(index - 1)
    if c < SIZE - 1:
        out.append(index + 1)
    return tuple(out)


# Cells orthogonally adjacent to each cell: above, below, left, right.
NEIGHBOURS: tuple[tuple[int, ...], ...] = tuple(
    _neighbour_cells(i) for i in range(CELLS)
)


def is_adjacent_cells(a: int, b: int) -> bool:
    """True iff cells *a* and *b* are one row or one column apart."""
    ar, ac = position(a)
    br, bc = position(b)
    return abs(ar - br) + abs(ac - bc) == 1


def adjacent_moves(state: State) -> frozenset[int]:
    """Return every tile that can slide into the blank."""
    return frozenset(state[i] for i in NEIGHBOURS[state.blank_index])


def apply_move(state: State, tile: int) -> State:
    """Slide *tile* into the blank and return the new state.

    Raises ``IllegalMove`` if *tile* is not next to the blank.
    """
    if not 1 <= tile < CELLS:
        raise IllegalMove(tile, state)
    blank = state.blank_index
    index = state.index_of(tile)
    if not is_adjacent_cells(blank, index):
        raise IllegalMove(tile, state)
    return state.swapped(blank, index)


def successors(state: State) -> list[tuple[int, State]]:
    """Return ``(tile, next_state)`` for every legal move, in a fixed order."""
    blank = state.blank_index
    return [(state[i], state.swapped(blank, i)) for i in NEIGHBOURS[blank]]


def is_solved(state: State) -> bool:
    return state == GOAL_STATE


def replay(state: State, moves: Iterable[int]) -> State:
    """Apply *moves* in order; the first illegal one raises ``IllegalMove``."""
    for tile in moves:
        state = apply_move(state, tile)
    return state
