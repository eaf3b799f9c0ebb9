"""Admissible distance estimate used by the best-first solver."""

from __future__ import annotations

from eightpuzzle.models.state import BLANK, CELLS, State, position

# Goal (row, col) for each tile value; the blank has no goal cost.
_GOAL_POS: dict[int, tuple[int, int]] = {
    v: position(v - 1) for v in range(1, CELLS)
}


def manhattan(state: State) -> int:
    """Sum of Manhattan distances of every tile to its goal cell."""
    dist = 0
    for index, tile in enumerate(state.cells):
        if tile == BLANK:
            continue
        r, c = position(index)
        gr, gc = _GOAL_POS[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
