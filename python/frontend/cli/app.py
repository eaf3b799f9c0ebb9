"""Rich terminal host: board rendering and an interactive play loop.

The engine does the puzzle work; this module only draws the board,
reads commands, and paces solution playback.
"""

from __future__ import annotations

import random
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.gamesolver import Algorithm
from eightpuzzle.errors import SolveCancelled
from eightpuzzle.models.state import BLANK, SIZE, State

console = Console()

_SOLVE_KEYS = {"a": Algorithm.BEST_FIRST, "b": Algorithm.BREADTH_FIRST}


# -- board rendering ----------------------------------------------------------


def render_board(board: State) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(SIZE):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * SIZE + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _draw(game: GamePlay, status: str = "", title: str = "8-Puzzle") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")

    controls = Text()
    controls.append("  1-8", style="bold cyan")
    controls.append("  move tile   ", style="dim")
    controls.append("S", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("H", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("A/B", style="bold cyan")
    controls.append("  solve A*/BFS   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    style = "bold green" if game.is_won else "bright_blue"
    panel = Panel(
        Group(Align.center(render_board(game.board)), Align.center(stats)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style=style,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- solver helpers -----------------------------------------------------------


def _auto_solve(game: GamePlay, algorithm: Algorithm, delay: float) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"

    job = game.request_solve_async(algorithm)
    try:
        with console.status(f"Searching with {algorithm.value}… (Ctrl-C to cancel)"):
            moves = job.result()
    except KeyboardInterrupt:
        job.cancel()
        try:
            job.result()
        except SolveCancelled:
            pass
        return "[yellow]Solve cancelled.[/yellow]"

    if moves is None:
        return "[red]No solution found.[/red]"

    player = game.play(moves)
    try:
        for tile in player:
            game.replay_step(tile)
            _draw(
                game,
                f"[cyan]Solving… move {player.position}/{len(player)}[/cyan] "
                f"[dim](tile {tile})[/dim]",
                title=f"Auto-Solve ({algorithm.value})",
            )
            time.sleep(delay)
    except KeyboardInterrupt:
        player.cancel()
        return f"[yellow]Playback stopped after {player.position} moves.[/yellow]"

    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


def _apply_hint(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    tile = game.hint()
    if tile is None:
        return "[yellow]No hint available.[/yellow]"
    game.request_move(tile)
    return f"[cyan]Hint:[/cyan] moved [bold]{tile}[/bold]"


# -- public entry point -------------------------------------------------------


def run(game: GamePlay, delay: float, rng: random.Random | None = None) -> None:
    """Interactive loop; returns when the player quits."""
    status = ""
    while True:
        if game.is_won and game.moves:
            status = status or f"[bold green]Solved in {game.moves} moves![/bold green]"
        _draw(game, status)
        status = ""

        key = Prompt.ask("  Command", console=console).strip().lower()

        if not key:
            continue
        if key.isdigit():
            if not game.request_move(int(key)):
                status = f"[red]Tile {key} is not next to the blank.[/red]"
        elif key == "s":
            game.request_shuffle(rng=rng)
            status = "[yellow]Shuffled![/yellow]"
        elif key in _SOLVE_KEYS:
            status = _auto_solve(game, _SOLVE_KEYS[key], delay)
        elif key == "h":
            status = _apply_hint(game)
        elif key == "r":
            game.restart()
            status = "[yellow]Restarted.[/yellow]"
        elif key == "q":
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        else:
            status = f"[red]Unknown command {key!r}.[/red]"
