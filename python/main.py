#!/usr/bin/env python3
"""8-Puzzle engine command line.

Usage::

    python main.py solve 123456708              # A* solution
    python main.py solve 867254301 -a bfs       # breadth-first
    python main.py shuffle --steps 40 --seed 7  # print a scramble
    python main.py play                         # interactive Rich session
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eightpuzzle.config import Settings  # noqa: E402
from eightpuzzle.engine.gamegenerator import GameGenerator  # noqa: E402
from eightpuzzle.engine.gameplay import GamePlay  # noqa: E402
from eightpuzzle.engine.gamesolver import Algorithm, Solver  # noqa: E402
from eightpuzzle.errors import InvalidState  # noqa: E402
from eightpuzzle.models.state import State  # noqa: E402

app = typer.Typer(add_completion=False, help="8-Puzzle engine.")


# -- helpers ------------------------------------------------------------------


def _settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="EIGHTPUZZLE_*") from exc


def _parse_state(text: str) -> State:
    try:
        return State.parse(text)
    except InvalidState as exc:
        raise typer.BadParameter(str(exc), param_hint="CELLS") from exc


def _print_board(state: State) -> None:
    from frontend.cli.app import console, render_board

    console.print(render_board(state))


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver progress at DEBUG level.",
    ),
) -> None:
    """8-Puzzle engine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@app.command()
def solve(
    cells: str = typer.Argument(..., help="Nine digits, row-major, 0 = blank."),
    algorithm: Optional[Algorithm] = typer.Option(
        None, "-a", "--algorithm",
        help="Search algorithm (default from EIGHTPUZZLE_ALGORITHM or astar).",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        help="Give up after this many node expansions.",
    ),
) -> None:
    """Print the tiles to move, in order, to solve CELLS."""
    settings = _settings()
    state = _parse_state(cells)
    cap = max_expansions if max_expansions is not None else settings.max_expansions

    moves = Solver.solve(state, algorithm or Algorithm(settings.algorithm), max_expansions=cap)
    if moves is None:
        typer.echo("No solution found.")
        raise typer.Exit(code=1)
    if not moves:
        typer.echo("Already solved.")
        return

    noun = "move" if len(moves) == 1 else "moves"
    typer.echo(f"{len(moves)} {noun}: " + " ".join(str(m) for m in moves))


@app.command()
def shuffle(
    steps: Optional[int] = typer.Option(
        None, "-n", "--steps",
        min=0,
        help="Random legal moves to apply (default 100).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for a repeatable scramble."),
    start: Optional[str] = typer.Option(None, "--start", help="Board to shuffle (default: solved)."),
) -> None:
    """Print a scrambled, solvable board."""
    settings = _settings()
    board = _parse_state(start) if start else GameGenerator.solved()
    count = settings.shuffle_steps if steps is None else steps

    result = GameGenerator.shuffle(board, count, GameGenerator.seeded(seed))
    _print_board(result)
    typer.echo(str(result))


@app.command()
def play(
    steps: Optional[int] = typer.Option(
        None, "-n", "--steps",
        min=0,
        help="Shuffle this many steps before starting (default: start solved).",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for shuffles."),
    delay: Optional[float] = typer.Option(
        None, "--delay",
        min=0.0,
        help="Seconds between replayed solution moves.",
    ),
) -> None:
    """Play interactively in the terminal."""
    from frontend.cli.app import run

    settings = _settings()
    rng = GameGenerator.seeded(seed)
    game = GamePlay(settings)
    if steps:
        game.request_shuffle(steps, rng)

    run(game, delay=settings.playback_delay if delay is None else delay, rng=rng)


if __name__ == "__main__":
    app()
