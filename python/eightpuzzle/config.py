"""Runtime settings with environment overrides.

The CLI options in ``main.py`` take precedence over these values.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

ENV_PREFIX = "EIGHTPUZZLE_"


@dataclass(frozen=True)
class Settings:
    shuffle_steps: int = 100
    max_expansions: int | None = None
    playback_delay: float = 0.25
    algorithm: str = "astar"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``EIGHTPUZZLE_*`` variables.

        Unset variables keep their defaults; malformed ones raise
        ``ValueError``.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str) -> str | None:
            raw = env.get(ENV_PREFIX + name)
            return raw.strip() if raw and raw.strip() else None

        steps = _get("SHUFFLE_STEPS")
        cap = _get("MAX_EXPANSIONS")
        delay = _get("PLAYBACK_DELAY")
        algorithm = _get("ALGORITHM")

        settings = cls(
            shuffle_steps=int(steps) if steps is not None else defaults.shuffle_steps,
            max_expansions=int(cap) if cap is not None else defaults.max_expansions,
            playback_delay=float(delay) if delay is not None else defaults.playback_delay,
            algorithm=algorithm.lower() if algorithm is not None else defaults.algorithm,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.shuffle_steps < 0:
            raise ValueError("shuffle_steps must be >= 0")
        if self.max_expansions is not None and self.max_expansions < 1:
            raise ValueError("max_expansions must be >= 1")
        if self.playback_delay < 0:
            raise ValueError("playback_delay must be >= 0")
        if self.algorithm not in ("astar", "bfs"):
            raise ValueError(f"Unknown algorithm {self.algorithm!r}")
