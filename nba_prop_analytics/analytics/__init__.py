"""Prop analytics - hit rates, trends and edges over a player's game log.

This package provides:
- Pydantic models for game logs and metric results
- Stateless statistics over a prop value sequence
- MetricsRecord assembly and threshold-rule insights

Main entry points:
- calculate_betting_metrics: Full metrics for a game log, prop, line and period
- generate_insights: Labeled insights for a MetricsRecord
"""

from nba_prop_analytics.analytics.extractor import (
    extract_value,
    extract_values,
    resolve_prop_type,
)
from nba_prop_analytics.analytics.insights import (
    generate_betting_insights,
    generate_insights,
)
from nba_prop_analytics.analytics.metrics import (
    calculate_betting_metrics,
    default_metrics,
)
from nba_prop_analytics.analytics.models import (
    DEFAULT_ODDS,
    Confidence,
    GameStatRecord,
    HitRate,
    HomeAwaySplit,
    Insight,
    InsightType,
    MetricsRecord,
    OddsAssumptions,
    Period,
    PropType,
    RecentForm,
    Recommendation,
    SplitStats,
    Streak,
    StreakType,
)

__all__ = [
    # Entry points
    "calculate_betting_metrics",
    "default_metrics",
    "generate_insights",
    "generate_betting_insights",
    "extract_value",
    "extract_values",
    "resolve_prop_type",
    # Models
    "GameStatRecord",
    "PropType",
    "Period",
    "OddsAssumptions",
    "DEFAULT_ODDS",
    "HitRate",
    "Streak",
    "StreakType",
    "RecentForm",
    "SplitStats",
    "HomeAwaySplit",
    "Confidence",
    "Recommendation",
    "MetricsRecord",
    "Insight",
    "InsightType",
]
