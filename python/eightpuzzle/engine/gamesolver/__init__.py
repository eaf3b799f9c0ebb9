from eightpuzzle.engine.gamesolver.astar import solve_astar
from eightpuzzle.engine.gamesolver.background import SolveJob
from eightpuzzle.engine.gamesolver.bfs import solve_bfs
from eightpuzzle.engine.gamesolver.heuristic import manhattan
from eightpuzzle.engine.gamesolver.solver import Algorithm, Solver

__all__ = ["Algorithm", "SolveJob", "Solver", "manhattan", "solve_astar", "solve_bfs"]
