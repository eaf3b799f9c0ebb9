"""Breadth-first solver; returns a shortest move sequence."""

from __future__ import annotations

import logging
import threading
from collections import deque

from eightpuzzle.engine.gamesolver.nodes import Node, NodeArena
from eightpuzzle.engine.moves import successors
from eightpuzzle.errors import SolveCancelled
from eightpuzzle.models.state import GOAL_STATE, State

logger = logging.getLogger(__name__)


def solve_bfs(
    start: State,
    max_expansions: int | None = None,
    cancel: threading.Event | None = None,
) -> list[int] | None:
    """Return the tiles to move to reach the goal, or ``None``.

    States are marked visited when enqueued, so none is queued twice and
    the first goal dequeued is at minimum depth.
    """
    arena = NodeArena()
    queue: deque[int] = deque([arena.add(Node(state=start))])
    visited: set[int] = {start.key}
    expanded = 0

    while queue:
        if cancel is not None and cancel.is_set():
            raise SolveCancelled("BFS cancelled")

        index = queue.popleft()
        node = arena[index]
        if node.state == GOAL_STATE:
            moves = arena.path_to(index)
            logger.debug(
                "BFS solved in %d moves (%d expanded, %d visited)",
                len(moves), expanded, len(visited),
            )
            return moves

        if max_expansions is not None and expanded >= max_expansions:
            logger.warning("BFS gave up after %d expansions", expanded)
            return None
        expanded += 1

        for tile, child in successors(node.state):
            if child.key in visited:
                continue
            visited.add(child.key)
            queue.append(arena.add(Node(state=child, parent=index, move=tile)))

    logger.debug("BFS exhausted %d states without reaching the goal", len(visited))
    return None
