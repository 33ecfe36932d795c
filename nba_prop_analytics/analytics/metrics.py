"""Assemble the full MetricsRecord for a player's game log."""

from typing import Sequence

from nba_prop_analytics.analytics import betting, descriptive
from nba_prop_analytics.analytics.extractor import extract_values, resolve_prop_type
from nba_prop_analytics.analytics.models import (
    DEFAULT_ODDS,
    GameStatRecord,
    MetricsRecord,
    OddsAssumptions,
    Period,
    PropType,
)
from nba_prop_analytics.analytics.trend import recent_form, streak, trend
from nba_prop_analytics.monitoring import get_logger

log = get_logger()


def default_metrics() -> MetricsRecord:
    """Zeroed record returned when there are no games to analyse."""
    return MetricsRecord()


def calculate_betting_metrics(
    games: Sequence[GameStatRecord] | None,
    prop: PropType | str,
    line: float,
    period: Period | int | str = Period.LAST_20,
    odds: OddsAssumptions = DEFAULT_ODDS,
) -> MetricsRecord:
    """Compute every prop metric over the most recent games of a log.

    Args:
        games: Game log, newest first. None or empty yields default_metrics()
        prop: Prop to evaluate (unknown names are evaluated as Points)
        line: Betting line; a game hits when its value is strictly above it
        period: Window of most recent games (5, 10 or 20)
        odds: Odds model for edge, recommendation and expected value

    Returns:
        MetricsRecord for the windowed games

    Raises:
        ValueError: If period is not a supported window
    """
    window = Period.parse(period)
    if not games:
        log.debug("betting_metrics_default", reason="empty_game_log")
        return default_metrics()

    prop_type = resolve_prop_type(prop)
    windowed = window.truncate(games)
    values = extract_values(windowed, prop_type)

    record = MetricsRecord(
        hit_rate=betting.hit_rate(values, line),
        average=descriptive.average(values),
        median=descriptive.median(values),
        standard_deviation=descriptive.standard_deviation(values),
        consistency=descriptive.consistency(values),
        trend=trend(values),
        volatility=descriptive.volatility(values),
        edge=betting.edge(values, line, odds),
        confidence=betting.confidence(values, line),
        recommendation=betting.recommendation(values, line, odds),
        streak=streak(values, line),
        recent_form=recent_form(values, line),
        home_away_split=betting.home_away_split(windowed, prop_type, line),
        percentile=descriptive.percentile(values, line),
        probability=betting.probability(values, line),
        expected_value=betting.expected_value(values, line, odds),
    )

    log.debug(
        "betting_metrics_calculated",
        prop=prop_type.value,
        line=line,
        period=window.value,
        games=len(values),
        hit_pct=record.hit_rate.percentage,
        recommendation=record.recommendation.value,
    )
    return record
