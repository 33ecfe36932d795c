"""Game-log loading from JSON files."""

from nba_prop_analytics.data.gamelog import load_game_log, parse_game_log

__all__ = ["load_game_log", "parse_game_log"]
