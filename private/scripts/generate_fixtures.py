#!/usr/bin/env python3
"""Regenerate the 3×3 solver fixtures.

Run from the project root::

    uv run python private/scripts/generate_fixtures.py

Keeps the handcrafted boards already in ``fixtures/3x3.json`` and adds
seeded random scrambles.  The ``optimal`` length of every new board
comes from the breadth-first solver, which is exact for unit-cost moves.
"""

from __future__ import annotations

import json
import random
import sys
from pathlib import Path

# Resolve paths: this script lives in <project_root>/private/scripts/
SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent.parent
PYTHON_ROOT = PROJECT_ROOT / "python"

if str(PYTHON_ROOT) not in sys.path:
    sys.path.insert(0, str(PYTHON_ROOT))

from eightpuzzle.engine.gamegenerator import GameGenerator  # noqa: E402
from eightpuzzle.engine.gamesolver import solve_bfs  # noqa: E402
from eightpuzzle.models.state import GOAL_STATE  # noqa: E402

FIXTURE = PROJECT_ROOT / "fixtures" / "3x3.json"
SEED = 42
RANDOM_BOARDS = 40
SHUFFLE_STEPS = (10, 20, 40, 100)


def _random_boards(existing: set[tuple[int, ...]]) -> list[dict]:
    rng = random.Random(SEED)
    out: list[dict] = []
    while len(out) < RANDOM_BOARDS:
        steps = SHUFFLE_STEPS[len(out) % len(SHUFFLE_STEPS)]
        state = GameGenerator.shuffle(GOAL_STATE, steps, rng)
        if state == GOAL_STATE or state.cells in existing:
            continue
        existing.add(state.cells)
        moves = solve_bfs(state)
        assert moves is not None, "Shuffled board has no solution"
        out.append(
            {"id": f"random-{len(out):03d}", "cells": list(state.cells), "optimal": len(moves)}
        )
    return out


def main() -> None:
    boards: list[dict] = []
    if FIXTURE.exists():
        boards = [b for b in json.loads(FIXTURE.read_text()) if not b["id"].startswith("random-")]

    seen = {tuple(b["cells"]) for b in boards}
    boards.extend(_random_boards(seen))

    FIXTURE.parent.mkdir(parents=True, exist_ok=True)
    FIXTURE.write_text(json.dumps(boards, indent=2) + "\n")
    print(f"Wrote {len(boards)} boards to {FIXTURE}")


if __name__ == "__main__":
    main()
