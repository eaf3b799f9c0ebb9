"""8-puzzle state model and solvers."""

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.gamesolver import Algorithm, SolveJob, Solver
from eightpuzzle.errors import IllegalMove, InvalidState, PuzzleError, SolveCancelled
from eightpuzzle.models.state import GOAL_STATE, State

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "GOAL_STATE",
    "GameGenerator",
    "GamePlay",
    "IllegalMove",
    "InvalidState",
    "PuzzleError",
    "SolveCancelled",
    "SolveJob",
    "Solver",
    "State",
]
