"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import logging
import random

from eightpuzzle.engine.moves import adjacent_moves, apply_move
from eightpuzzle.models.state import GOAL_STATE, State

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 100


class GameGenerator:
    """Creates solvable puzzles by random-walking from a solvable state.

    Every step is a legal move, so the result is always reachable from
    the start and no parity check is needed.
    """

    @staticmethod
    def solved() -> State:
        """Return the goal state (tiles in order, blank bottom-right)."""
        return GOAL_STATE

    @staticmethod
    def seeded(seed: int | None) -> random.Random:
        return random.Random(seed)

    @staticmethod
    def shuffle(
        start: State, step_count: int, rng: random.Random | None = None
    ) -> State:
        """Apply *step_count* uniformly random legal moves to *start*."""
        if step_count < 0:
            raise ValueError(f"step_count must be >= 0, got {step_count}.")
        rng = rng or random.Random()

        state = start
        for _ in range(step_count):
            # Sorted so a seeded generator gives the same walk on every run.
            tile = rng.choice(sorted(adjacent_moves(state)))
            state = apply_move(state, tile)

        logger.debug("Shuffled %d steps: %s -> %s", step_count, start, state)
        return state

    @staticmethod
    def generate(
        step_count: int = DEFAULT_STEPS, rng: random.Random | None = None
    ) -> State:
        """Return a scrambled board that is not already solved."""
        if step_count < 1:
            raise ValueError("generate() needs at least one step.")
        rng = rng or random.Random()
        while True:
            state = GameGenerator.shuffle(GOAL_STATE, step_count, rng)
            if state != GOAL_STATE:
                return state
