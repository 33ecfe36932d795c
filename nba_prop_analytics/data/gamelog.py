"""Load player game logs from JSON.

Accepted document shapes:
- a list of game records
- a player object with a "gameLog" list (the dashboard's player payload)
- a list of player objects, from which one is selected by name

Game records use the dashboard field names (pts, reb, ast, threePM, stl, blk).
"""

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from nba_prop_analytics.analytics.models import GameStatRecord
from nba_prop_analytics.monitoring import get_logger

log = get_logger()

_GAME_LOG_ADAPTER = TypeAdapter(list[GameStatRecord])


def _is_player(entry: Any) -> bool:
    return isinstance(entry, dict) and "gameLog" in entry


def parse_game_log(document: Any, player: str | None = None) -> list[GameStatRecord]:
    """Validate a decoded JSON document into a newest-first game log.

    Args:
        document: Decoded JSON (list of games, player object or list of players)
        player: Player name to select when the document lists several players

    Returns:
        List of GameStatRecord in document order

    Raises:
        ValueError: If the shape is unrecognized or the player is not found
        pydantic.ValidationError: If a game record is malformed
    """
    if _is_player(document):
        games = document["gameLog"]
    elif isinstance(document, list) and document and all(_is_player(e) for e in document):
        if player is None:
            if len(document) > 1:
                names = [e.get("name", "?") for e in document]
                raise ValueError(f"Multiple players in game log, choose one of: {names}")
            games = document[0]["gameLog"]
        else:
            wanted = player.strip().lower()
            match = next(
                (e for e in document if str(e.get("name", "")).lower() == wanted), None
            )
            if match is None:
                raise ValueError(f"Player '{player}' not found in game log")
            games = match["gameLog"]
    elif isinstance(document, list):
        games = document
    else:
        raise ValueError(
            "Game log must be a list of games, a player object with 'gameLog', "
            "or a list of player objects"
        )

    return _GAME_LOG_ADAPTER.validate_python(games)


def load_game_log(path: str | Path, player: str | None = None) -> list[GameStatRecord]:
    """Read and validate a JSON game-log file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or has an unrecognized shape
    """
    path = Path(path)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    games = parse_game_log(document, player=player)
    log.info("game_log_loaded", path=str(path), player=player, games=len(games))
    return games
