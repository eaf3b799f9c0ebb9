"""Step-by-step replay of a move sequence.

The player only hands out moves.  The host applies each one to its
board, waits however long it likes between steps, and keeps other input
disabled until playback finishes or is cancelled.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class MovePlayer:
    """Ordered, finite, restartable sequence of tile moves.

    Usage::

        player = MovePlayer(moves)
        for tile in player:
            game.replay_step(tile)
            time.sleep(delay)
    """

    def __init__(self, moves: Iterable[int]) -> None:
        self._moves: tuple[int, ...] = tuple(moves)
        self._position = 0
        self._cancelled = False

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[int]:
        while True:
            tile = self.next_move()
            if tile is None:
                return
            yield tile

    # -- stepping -------------------------------------------------------------

    def next_move(self) -> int | None:
        """Return the next move, or ``None`` when finished or cancelled."""
        if self.finished:
            return None
        tile = self._moves[self._position]
        self._position += 1
        return tile

    def cancel(self) -> None:
        self._cancelled = True

    def restart(self) -> None:
        self._position = 0
        self._cancelled = False

    # -- queries --------------------------------------------------------------

    @property
    def moves(self) -> tuple[int, ...]:
        return self._moves

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return 0 if self._cancelled else len(self._moves) - self._position

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def finished(self) -> bool:
        return self._cancelled or self._position >= len(self._moves)
