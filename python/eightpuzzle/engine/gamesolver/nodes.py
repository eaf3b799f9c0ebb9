"""Search nodes stored in a per-solve arena.

Each node records its parent's arena index instead of a reference, so
a finished search is just a list that can be dropped in one go.
"""

from __future__ import annotations

from dataclasses import dataclass

from eightpuzzle.models.state import State

ROOT = -1


@dataclass(slots=True)
class Node:
    state: State
    parent: int = ROOT
    move: int | None = None
    g: int = 0
    h: int = 0

    @property
    def f(self) -> int:
        return self.g + self.h


class NodeArena:
    """Append-only node storage for a single solve call."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def add(self, node: Node) -> int:
        self._nodes.append(node)
        return len(self._nodes) - 1

    def path_to(self, index: int) -> list[int]:
        """Walk parents back to the root; return moves in execution order."""
        moves: list[int] = []
        while index != ROOT:
            node = self._nodes[index]
            if node.move is not None:
                moves.append(node.move)
            index = node.parent
        moves.reverse()
        return moves
