from eightpuzzle.engine.moves.rules import (
    NEIGHBOURS,
    adjacent_moves,
    apply_move,
    is_adjacent_cells,
    is_solved,
    replay,
    successors,
)

__all__ = [
    "NEIGHBOURS",
    "adjacent_moves",
    "apply_move",
    "is_adjacent_cells",
    "is_solved",
    "replay",
    "successors",
]
