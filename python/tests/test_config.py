from __future__ import annotations

import pytest

from eightpuzzle.config import Settings


def test_defaults() -> None:
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.shuffle_steps == 100
    assert settings.max_expansions is None
    assert settings.algorithm == "astar"


def test_environment_overrides() -> None:
    settings = Settings.from_env(
        {
            "EIGHTPUZZLE_SHUFFLE_STEPS": "25",
            "EIGHTPUZZLE_MAX_EXPANSIONS": "5000",
            "EIGHTPUZZLE_PLAYBACK_DELAY": "0",
            "EIGHTPUZZLE_ALGORITHM": "BFS",
        }
    )
    assert settings == Settings(
        shuffle_steps=25, max_expansions=5000, playback_delay=0.0, algorithm="bfs"
    )


def test_blank_values_keep_defaults() -> None:
    assert Settings.from_env({"EIGHTPUZZLE_SHUFFLE_STEPS": "  "}) == Settings()


@pytest.mark.parametrize(
    "name, value",
    [
        ("EIGHTPUZZLE_SHUFFLE_STEPS", "many"),
        ("EIGHTPUZZLE_SHUFFLE_STEPS", "-1"),
        ("EIGHTPUZZLE_MAX_EXPANSIONS", "0"),
        ("EIGHTPUZZLE_PLAYBACK_DELAY", "-0.5"),
        ("EIGHTPUZZLE_ALGORITHM", "dijkstra"),
    ],
)
def test_malformed_values(name: str, value: str) -> None:
    with pytest.raises(ValueError):
        Settings.from_env({name: value})
