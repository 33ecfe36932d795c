"""Tests for threshold-rule insights."""

from nba_prop_analytics.analytics.insights import (
    generate_betting_insights,
    generate_insights,
)
from nba_prop_analytics.analytics.metrics import (
    calculate_betting_metrics,
    default_metrics,
)
from nba_prop_analytics.analytics.models import (
    HitRate,
    InsightType,
    MetricsRecord,
    PropType,
    RecentForm,
    Streak,
    StreakType,
)


def _metrics(**overrides) -> MetricsRecord:
    """Record with 10 games and no rule firing unless overridden."""
    fields = {
        "hit_rate": HitRate(hits=5, total=10, percentage=50),
        "consistency": 65,
        "recent_form": RecentForm(hits=3, total=5, percentage=60),
    }
    fields.update(overrides)
    return MetricsRecord(**fields)


class TestGenerateInsights:
    """Tests for generate_insights."""

    def test_empty_record_has_no_insights(self):
        assert generate_insights(default_metrics()) == []

    def test_neutral_record_has_no_insights(self):
        assert generate_insights(_metrics()) == []

    def test_strong_hit_rate(self):
        insights = generate_insights(
            _metrics(hit_rate=HitRate(hits=7, total=10, percentage=70))
        )

        assert len(insights) == 1
        assert insights[0].type == InsightType.POSITIVE
        assert insights[0].title == "Strong Hit Rate"
        assert insights[0].message == "70% hit rate suggests value on the Over"

    def test_low_hit_rate(self):
        insights = generate_insights(
            _metrics(hit_rate=HitRate(hits=3, total=10, percentage=30))
        )
        assert [i.title for i in insights] == ["Low Hit Rate"]
        assert insights[0].type == InsightType.NEGATIVE

    def test_hit_rate_boundaries_do_not_fire(self):
        for pct in (40, 60):
            hit = HitRate(hits=pct // 10, total=10, percentage=pct)
            assert generate_insights(_metrics(hit_rate=hit)) == []

    def test_trend_messages(self):
        up = generate_insights(_metrics(trend=15))
        down = generate_insights(_metrics(trend=-12))

        assert up[0].message == "Player is trending up (+15% vs earlier games)"
        assert down[0].message == "Player is trending down (-12% vs earlier games)"
        assert down[0].type == InsightType.NEGATIVE

    def test_consistency(self):
        steady = generate_insights(_metrics(consistency=85))
        erratic = generate_insights(_metrics(consistency=40))

        assert steady[0].type == InsightType.NEUTRAL
        assert steady[0].title == "High Consistency"
        assert erratic[0].type == InsightType.WARNING
        assert erratic[0].title == "High Volatility"
        assert erratic[0].message == "Inconsistent performance (40% consistency)"

    def test_streak_needs_more_than_three_games(self):
        assert generate_insights(_metrics(streak=Streak(type=StreakType.HIT, count=3))) == []

        insights = generate_insights(_metrics(streak=Streak(type=StreakType.HIT, count=4)))
        assert insights[0].title == "4-Game Hit Streak"
        assert insights[0].message == "Currently on a 4-game hit streak"
        assert insights[0].type == InsightType.POSITIVE

    def test_miss_streak(self):
        insights = generate_insights(_metrics(streak=Streak(type=StreakType.MISS, count=6)))
        assert insights[0].title == "6-Game Miss Streak"
        assert insights[0].type == InsightType.NEGATIVE

    def test_recent_form(self):
        hot = generate_insights(_metrics(recent_form=RecentForm(hits=4, total=5, percentage=80)))
        cold = generate_insights(_metrics(recent_form=RecentForm(hits=1, total=5, percentage=20)))

        assert hot[0].title == "Hot Recent Form"
        assert hot[0].message == "80% hit rate in last 5 games"
        assert cold[0].title == "Cold Recent Form"

    def test_rules_are_independent_and_ordered(self):
        insights = generate_insights(
            _metrics(
                hit_rate=HitRate(hits=8, total=10, percentage=80),
                trend=20,
                consistency=90,
                streak=Streak(type=StreakType.HIT, count=5),
                recent_form=RecentForm(hits=5, total=5, percentage=100),
            )
        )

        assert [i.title for i in insights] == [
            "Strong Hit Rate",
            "Positive Trend",
            "High Consistency",
            "5-Game Hit Streak",
            "Hot Recent Form",
        ]


class TestFromGameLog:
    """Insights computed end to end from game logs."""

    def test_all_ties(self, make_games):
        metrics = calculate_betting_metrics(make_games([20] * 5), PropType.POINTS, 20)

        titles = [i.title for i in generate_insights(metrics)]

        assert titles == [
            "Low Hit Rate",
            "High Consistency",
            "5-Game Miss Streak",
            "Cold Recent Form",
        ]

    def test_poole_points(self, poole_games):
        insights = generate_betting_insights(poole_games, PropType.POINTS, 20.5, period=5)
        assert [i.title for i in insights] == ["Positive Trend", "High Consistency"]

    def test_empty_log(self):
        assert generate_betting_insights([], PropType.POINTS, 20.5) == []
