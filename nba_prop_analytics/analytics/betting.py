"""Betting metrics derived from a prop value sequence.

Edge and expected value are measured against a fixed odds model
(OddsAssumptions), by default a 50% break-even hit rate and a 0.91 unit
payout for a -110 line. Neither comes from live market prices.
"""

from typing import Sequence

from nba_prop_analytics.analytics.descriptive import average, round_half_up
from nba_prop_analytics.analytics.extractor import extract_values
from nba_prop_analytics.analytics.models import (
    DEFAULT_ODDS,
    Confidence,
    GameStatRecord,
    HitRate,
    HomeAwaySplit,
    OddsAssumptions,
    PropType,
    Recommendation,
    SplitStats,
)
from nba_prop_analytics.analytics.trend import trend

# Sample sizes below which confidence is capped
LOW_CONFIDENCE_GAMES = 5
MEDIUM_CONFIDENCE_GAMES = 10


def hit_rate(values: Sequence[float], line: float) -> HitRate:
    """Count games strictly over the line; a tie is a miss."""
    hits = sum(1 for v in values if v > line)
    total = len(values)
    percentage = round_half_up(hits / total * 100) if total else 0
    return HitRate(hits=hits, total=total, percentage=percentage)


def edge(
    values: Sequence[float], line: float, odds: OddsAssumptions = DEFAULT_ODDS
) -> float:
    """Hit-rate percentage points above the break-even rate."""
    return hit_rate(values, line).percentage - odds.break_even_pct


def confidence(values: Sequence[float], line: float) -> Confidence:
    """Confidence label from sample size and how lopsided the hit rate is.

    Fewer than 5 games is Low, 5-9 games is Medium. From 10 games on, a hit
    rate above 60% or below 40% is High and anything between is Medium.
    """
    n = len(values)
    if n < LOW_CONFIDENCE_GAMES:
        return Confidence.LOW
    if n < MEDIUM_CONFIDENCE_GAMES:
        return Confidence.MEDIUM

    pct = hit_rate(values, line).percentage
    if pct > 60 or pct < 40:
        return Confidence.HIGH
    return Confidence.MEDIUM


def recommendation(
    values: Sequence[float], line: float, odds: OddsAssumptions = DEFAULT_ODDS
) -> Recommendation:
    """First matching label in priority order.

    Hit-rate rules always outrank trend rules:
        hit rate > 60 and edge > 5    -> Strong Over
        hit rate > 55 and edge > 0    -> Over
        hit rate < 40 and edge < -5   -> Strong Under
        hit rate < 45 and edge < 0    -> Under
        trend > 10                    -> Trending Up
        trend < -10                   -> Trending Down
        otherwise                     -> No Edge
    """
    pct = hit_rate(values, line).percentage
    value_edge = edge(values, line, odds)

    if pct > 60 and value_edge > 5:
        return Recommendation.STRONG_OVER
    if pct > 55 and value_edge > 0:
        return Recommendation.OVER
    if pct < 40 and value_edge < -5:
        return Recommendation.STRONG_UNDER
    if pct < 45 and value_edge < 0:
        return Recommendation.UNDER

    value_trend = trend(values)
    if value_trend > 10:
        return Recommendation.TRENDING_UP
    if value_trend < -10:
        return Recommendation.TRENDING_DOWN
    return Recommendation.NO_EDGE


def probability(values: Sequence[float], line: float) -> float:
    """Hit rate as a 0.0-1.0 probability."""
    return hit_rate(values, line).percentage / 100


def expected_value(
    values: Sequence[float], line: float, odds: OddsAssumptions = DEFAULT_ODDS
) -> float:
    """Expected profit per unit staked on the over.

    EV = p × payout - (1 - p) × 1
    """
    p = probability(values, line)
    return p * odds.payout - (1 - p)


def _split_stats(
    games: Sequence[GameStatRecord], prop: PropType | str, line: float
) -> SplitStats:
    values = extract_values(games, prop)
    return SplitStats(
        hit_rate=hit_rate(values, line),
        average=average(values),
        games=len(games),
    )


def home_away_split(
    games: Sequence[GameStatRecord], prop: PropType | str, line: float
) -> HomeAwaySplit:
    """Hit rate and average computed separately for home and away games.

    Games whose venue is unknown (is_home is None) count toward neither side.
    """
    home_games = [g for g in games if g.is_home is True]
    away_games = [g for g in games if g.is_home is False]
    return HomeAwaySplit(
        home=_split_stats(home_games, prop, line),
        away=_split_stats(away_games, prop, line),
    )
