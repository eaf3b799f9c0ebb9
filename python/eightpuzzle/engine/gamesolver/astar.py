"""Best-first (A*) solver guided by the Manhattan heuristic."""

from __future__ import annotations

import heapq
import itertools
import logging
import threading

from eightpuzzle.engine.gamesolver.heuristic import manhattan
from eightpuzzle.engine.gamesolver.nodes import Node, NodeArena
from eightpuzzle.engine.moves import successors
from eightpuzzle.errors import SolveCancelled
from eightpuzzle.models.state import State

logger = logging.getLogger(__name__)


def solve_astar(
    start: State,
    max_expansions: int | None = None,
    cancel: threading.Event | None = None,
) -> list[int] | None:
    """Return the tiles to move to reach the goal, or ``None``.

    The open heap is ordered by ``f = g + h``; equal ``f`` values pop in
    insertion order.  A state is closed when popped, not when pushed, so
    it may sit in the heap several times with different ``g``.

    ``None`` means the open set emptied (unsolvable start) or
    *max_expansions* was reached.  Raises ``SolveCancelled`` if *cancel*
    is set; it is checked between expansions.
    """
    arena = NodeArena()
    counter = itertools.count()
    root = arena.add(Node(state=start, h=manhattan(start)))
    open_heap: list[tuple[int, int, int]] = [(arena[root].f, next(counter), root)]
    closed: set[int] = set()
    expanded = 0

    while open_heap:
        if cancel is not None and cancel.is_set():
            raise SolveCancelled("A* cancelled")

        _, _, index = heapq.heappop(open_heap)
        node = arena[index]
        key = node.state.key
        if key in closed:
            continue

        if node.h == 0:
            moves = arena.path_to(index)
            logger.debug(
                "A* solved in %d moves (%d expanded, %d nodes)",
                len(moves), expanded, len(arena),
            )
            return moves

        if max_expansions is not None and expanded >= max_expansions:
            logger.warning("A* gave up after %d expansions", expanded)
            return None

        closed.add(key)
        expanded += 1

        g = node.g + 1
        for tile, child in successors(node.state):
            if child.key in closed:
                continue
            child_index = arena.add(
                Node(state=child, parent=index, move=tile, g=g, h=manhattan(child))
            )
            heapq.heappush(open_heap, (arena[child_index].f, next(counter), child_index))

    logger.debug("A* exhausted the state space after %d expansions", expanded)
    return None
