"""Trend, streak and recent-form heuristics.

Value sequences are newest-first, so the "recent" half of a sequence is
its leading slice.
"""

from typing import Sequence

from nba_prop_analytics.analytics.descriptive import average, round_half_up
from nba_prop_analytics.analytics.models import RecentForm, Streak, StreakType

RECENT_FORM_WINDOW = 5
MIN_TREND_GAMES = 3


def trend(values: Sequence[float]) -> int:
    """Percent change of the recent half's mean over the older half's mean.

    The recent half is the first floor(n/2) values; the older half is the
    rest, so for odd n the older half holds the extra game.

    Returns:
        Rounded percent change. 0 when fewer than 3 values are given or the
        older half averages 0.
    """
    if len(values) < MIN_TREND_GAMES:
        return 0
    split = len(values) // 2
    recent_avg = average(values[:split])
    older_avg = average(values[split:])
    if older_avg == 0:
        return 0
    return round_half_up((recent_avg - older_avg) / older_avg * 100)


def streak(values: Sequence[float], line: float) -> Streak:
    """Run of consecutive hits or misses counting back from the latest game."""
    if not values:
        return Streak()

    first_hit = values[0] > line
    count = 0
    for value in values:
        if (value > line) != first_hit:
            break
        count += 1

    return Streak(type=StreakType.HIT if first_hit else StreakType.MISS, count=count)


def recent_form(
    values: Sequence[float], line: float, window: int = RECENT_FORM_WINDOW
) -> RecentForm:
    """Hit rate and trend over the latest `window` games."""
    # Local import: betting imports this module for trend()
    from nba_prop_analytics.analytics.betting import hit_rate

    recent = list(values[:window])
    rate = hit_rate(recent, line)
    return RecentForm(
        hits=rate.hits,
        total=rate.total,
        percentage=rate.percentage,
        trend=trend(recent),
    )
