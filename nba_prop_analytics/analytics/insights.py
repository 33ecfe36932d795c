"""Turn a MetricsRecord into short labeled insights.

Rules are independent and evaluated in a fixed order: hit rate, trend,
consistency, streak, recent form. Each rule adds at most one insight.
"""

from typing import Sequence

from nba_prop_analytics.analytics.metrics import calculate_betting_metrics
from nba_prop_analytics.analytics.models import (
    DEFAULT_ODDS,
    GameStatRecord,
    Insight,
    InsightType,
    MetricsRecord,
    OddsAssumptions,
    Period,
    PropType,
    StreakType,
)

HIGH_HIT_RATE = 60
LOW_HIT_RATE = 40
TREND_THRESHOLD = 10
HIGH_CONSISTENCY = 80
LOW_CONSISTENCY = 50
MIN_STREAK = 3
HOT_FORM = 70
COLD_FORM = 30


def _hit_rate_insight(metrics: MetricsRecord) -> Insight | None:
    pct = metrics.hit_rate.percentage
    if pct > HIGH_HIT_RATE:
        return Insight(
            type=InsightType.POSITIVE,
            title="Strong Hit Rate",
            message=f"{pct}% hit rate suggests value on the Over",
        )
    if pct < LOW_HIT_RATE:
        return Insight(
            type=InsightType.NEGATIVE,
            title="Low Hit Rate",
            message=f"{pct}% hit rate suggests value on the Under",
        )
    return None


def _trend_insight(metrics: MetricsRecord) -> Insight | None:
    if metrics.trend > TREND_THRESHOLD:
        return Insight(
            type=InsightType.POSITIVE,
            title="Positive Trend",
            message=f"Player is trending up (+{metrics.trend}% vs earlier games)",
        )
    if metrics.trend < -TREND_THRESHOLD:
        return Insight(
            type=InsightType.NEGATIVE,
            title="Negative Trend",
            message=f"Player is trending down ({metrics.trend}% vs earlier games)",
        )
    return None


def _consistency_insight(metrics: MetricsRecord) -> Insight | None:
    if metrics.consistency > HIGH_CONSISTENCY:
        return Insight(
            type=InsightType.NEUTRAL,
            title="High Consistency",
            message=f"Very consistent performance ({metrics.consistency}% consistency)",
        )
    if metrics.consistency < LOW_CONSISTENCY:
        return Insight(
            type=InsightType.WARNING,
            title="High Volatility",
            message=f"Inconsistent performance ({metrics.consistency}% consistency)",
        )
    return None


def _streak_insight(metrics: MetricsRecord) -> Insight | None:
    current = metrics.streak
    if current.count <= MIN_STREAK:
        return None
    is_hit = current.type == StreakType.HIT
    return Insight(
        type=InsightType.POSITIVE if is_hit else InsightType.NEGATIVE,
        title=f"{current.count}-Game {'Hit' if is_hit else 'Miss'} Streak",
        message=f"Currently on a {current.count}-game {current.type.value} streak",
    )


def _recent_form_insight(metrics: MetricsRecord) -> Insight | None:
    pct = metrics.recent_form.percentage
    if pct > HOT_FORM:
        return Insight(
            type=InsightType.POSITIVE,
            title="Hot Recent Form",
            message=f"{pct}% hit rate in last 5 games",
        )
    if pct < COLD_FORM:
        return Insight(
            type=InsightType.NEGATIVE,
            title="Cold Recent Form",
            message=f"{pct}% hit rate in last 5 games",
        )
    return None


_RULES = (
    _hit_rate_insight,
    _trend_insight,
    _consistency_insight,
    _streak_insight,
    _recent_form_insight,
)


def generate_insights(metrics: MetricsRecord) -> list[Insight]:
    """Insights for every rule that fires, in rule order.

    A record with no games (the default record) produces no insights.
    """
    if metrics.hit_rate.total == 0:
        return []

    insights = []
    for rule in _RULES:
        insight = rule(metrics)
        if insight is not None:
            insights.append(insight)
    return insights


def generate_betting_insights(
    games: Sequence[GameStatRecord] | None,
    prop: PropType | str,
    line: float,
    period: Period | int | str = Period.LAST_20,
    odds: OddsAssumptions = DEFAULT_ODDS,
) -> list[Insight]:
    """Compute metrics for a game log and return their insights."""
    return generate_insights(calculate_betting_metrics(games, prop, line, period, odds))
