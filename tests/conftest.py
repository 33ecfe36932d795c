"""Shared pytest fixtures for prop analytics tests."""

import json

import pytest

from nba_prop_analytics.analytics.models import GameStatRecord
from nba_prop_analytics.monitoring import clear_analysis_context, configure_logging

POOLE_GAME_LOG = [
    {"date": "4/13", "opponent": "vs CLE", "pts": 18, "reb": 3, "ast": 5, "threePM": 3, "stl": 1, "blk": 0},
    {"date": "4/11", "opponent": "@ MIA", "pts": 24, "reb": 4, "ast": 6, "threePM": 4, "stl": 0, "blk": 0},
    {"date": "4/9", "opponent": "vs CHI", "pts": 19, "reb": 2, "ast": 4, "threePM": 2, "stl": 1, "blk": 0},
    {"date": "4/7", "opponent": "@ ATL", "pts": 22, "reb": 3, "ast": 7, "threePM": 5, "stl": 0, "blk": 0},
    {"date": "4/5", "opponent": "vs NYK", "pts": 16, "reb": 2, "ast": 3, "threePM": 2, "stl": 1, "blk": 0},
]


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure structlog for test output."""
    configure_logging("development")
    yield
    clear_analysis_context()


@pytest.fixture
def poole_games():
    """Five-game log (newest first) with three home and two away games."""
    return [GameStatRecord(**game) for game in POOLE_GAME_LOG]


@pytest.fixture
def make_games():
    """Build a points-only game log from a newest-first list of values.

    Games alternate home ("vs") and away ("@") starting with home.
    """

    def _make(points: list[int]) -> list[GameStatRecord]:
        return [
            GameStatRecord(
                date=f"G{i + 1}",
                opponent="vs BOS" if i % 2 == 0 else "@ BOS",
                pts=value,
            )
            for i, value in enumerate(points)
        ]

    return _make


@pytest.fixture
def poole_file(tmp_path):
    """Player payload JSON file with a gameLog list."""
    path = tmp_path / "poole.json"
    path.write_text(json.dumps({"name": "Jordan Poole", "gameLog": POOLE_GAME_LOG}))
    return path


@pytest.fixture
def poole_game_log():
    """Raw dashboard game-log payload (list of dicts)."""
    return [dict(game) for game in POOLE_GAME_LOG]
