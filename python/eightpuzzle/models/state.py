"""Immutable board state for the 8-puzzle."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from eightpuzzle.errors import InvalidState

SIZE = 3
CELLS = SIZE * SIZE
BLANK = 0

_VALUES = frozenset(range(CELLS))
_CELLS_TEXT = re.compile(r"\s*(?:[0-9]+|[0-9](?:[\s,]+[0-9])*)\s*")


def position(index: int) -> tuple[int, int]:
    """Return ``(row, col)`` for a row-major cell index."""
    return divmod(index, SIZE)


@dataclass(frozen=True, slots=True)
class State:
    """One configuration of the nine cells, stored row-major.

    ``0`` is the blank.  Equality and hashing are structural; a state is
    never mutated once built, moves produce new states.

    Example::

        State((1, 2, 3, 4, 5, 6, 7, 0, 8))
    """

    cells: tuple[int, ...]
    key: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if (
            len(cells) != CELLS
            or any(type(v) is not int for v in cells)
            or set(cells) != _VALUES
        ):
            raise InvalidState(
                f"Expected a permutation of 0-{CELLS - 1}, got {list(cells)}."
            )
        key = 0
        for v in cells:
            key = key * CELLS + v
        object.__setattr__(self, "cells", cells)
        object.__setattr__(self, "key", key)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> State:
        return cls(tuple(v for row in rows for v in row))

    @classmethod
    def from_key(cls, key: int) -> State:
        """Inverse of :attr:`key` (base-9 digits, most significant first)."""
        digits = [0] * CELLS
        for i in range(CELLS - 1, -1, -1):
            key, digits[i] = divmod(key, CELLS)
        if key:
            raise InvalidState("Packed key out of range.")
        return cls(tuple(digits))

    @classmethod
    def parse(cls, text: str) -> State:
        """Parse ``"123456780"`` or single digits split by commas or whitespace."""
        if not _CELLS_TEXT.fullmatch(text):
            raise InvalidState(f"Cannot read a board from {text!r}.")
        return cls(tuple(int(d) for d in re.findall(r"[0-9]", text)))

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.cells.index(BLANK)

    def index_of(self, tile: int) -> int:
        return self.cells.index(tile)

    def rows(self) -> list[tuple[int, ...]]:
        return [self.cells[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def is_tile_correct(self, index: int) -> bool:
        """Check if the value at *index* sits in its goal cell."""
        val = self.cells[index]
        if val == BLANK:
            return index == CELLS - 1
        return index == val - 1

    def swapped(self, i: int, j: int) -> State:
        """Return a new state with cells *i* and *j* exchanged."""
        cells = list(self.cells)
        cells[i], cells[j] = cells[j], cells[i]
        return State(tuple(cells))

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __str__(self) -> str:
        return "".join(str(v) for v in self.cells)


GOAL_STATE = State((1, 2, 3, 4, 5, 6, 7, 8, 0))
