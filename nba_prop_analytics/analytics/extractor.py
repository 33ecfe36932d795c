"""Map a prop type onto the numeric value it takes in a game.

Unknown prop names are still evaluated as Points, as the dashboard always
has, but the fallback is explicit and logged rather than silent.
"""

from typing import Iterable

from nba_prop_analytics.analytics.models import GameStatRecord, PropType
from nba_prop_analytics.monitoring import get_logger

log = get_logger()


def resolve_prop_type(prop: PropType | str) -> PropType:
    """Resolve a prop given as a member, its label ("Pts+Reb") or its name.

    Args:
        prop: PropType member, display label or enum member name

    Returns:
        Matching PropType, or PropType.POINTS when nothing matches
    """
    if isinstance(prop, PropType):
        return prop
    try:
        return PropType(prop)
    except ValueError:
        pass
    try:
        return PropType[str(prop).upper()]
    except KeyError:
        log.warning("unknown_prop_type", prop=prop, fallback=PropType.POINTS.value)
        return PropType.POINTS


def extract_value(game: GameStatRecord, prop: PropType | str) -> int:
    """Value of the prop's statistic for one game (sum of fields for composites)."""
    prop_type = resolve_prop_type(prop)
    return sum(getattr(game, field) for field in prop_type.components)


def extract_values(games: Iterable[GameStatRecord], prop: PropType | str) -> list[int]:
    """Value sequence for a game log, one entry per game in the same order."""
    prop_type = resolve_prop_type(prop)
    return [extract_value(game, prop_type) for game in games]
