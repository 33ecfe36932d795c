"""Rich formatters for prop metrics and insights.

Formats MetricsRecord and Insight objects into terminal tables and panels
with color-coded recommendation, confidence and insight types.
"""

from rich.panel import Panel
from rich.table import Table

from nba_prop_analytics.analytics.models import (
    Confidence,
    Insight,
    InsightType,
    MetricsRecord,
    Recommendation,
    StreakType,
)

_INSIGHT_STYLES = {
    InsightType.POSITIVE: "green",
    InsightType.NEGATIVE: "red",
    InsightType.WARNING: "yellow",
    InsightType.NEUTRAL: "blue",
}


def format_signed(value: float, precision: int = 1, suffix: str = "") -> str:
    """Format a number with an explicit sign for positives (e.g., "+10.0%")."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.{precision}f}{suffix}"


def format_metrics_table(metrics: MetricsRecord, title: str = "Prop Metrics") -> Table:
    """Format the statistical metrics as a two-column Rich table."""
    table = Table(title=title, show_header=False, header_style="bold cyan")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    rate = metrics.hit_rate
    table.add_row("Hit Rate", f"{rate.hits}/{rate.total} ({rate.percentage}%)")
    table.add_row("Average", f"{metrics.average:.1f}")
    table.add_row("Median", f"{metrics.median:.1f}")
    table.add_row("Std Dev", f"{metrics.standard_deviation:.2f}")
    table.add_row("Consistency", f"{metrics.consistency}%")
    table.add_row("Volatility", f"{metrics.volatility}%")
    table.add_row("Trend", format_signed(metrics.trend, precision=0, suffix="%"))
    table.add_row("Percentile", f"{metrics.percentile}%")
    table.add_row("Probability", f"{metrics.probability:.2f}")
    table.add_row("Streak", _format_streak(metrics))

    form = metrics.recent_form
    table.add_row(
        "Recent Form",
        f"{form.hits}/{form.total} ({form.percentage}%), "
        f"trend {format_signed(form.trend, precision=0, suffix='%')}",
    )
    return table


def format_recommendation_panel(metrics: MetricsRecord) -> Panel:
    """Format recommendation, confidence, edge and EV as a Rich panel."""
    lines = [
        f"Recommendation: {_format_recommendation(metrics.recommendation)}",
        f"Confidence: {_format_confidence(metrics.confidence)}",
        f"Edge: {format_signed(metrics.edge, precision=1, suffix='%')}",
        f"Expected Value: {format_signed(metrics.expected_value, precision=3)}",
    ]
    return Panel(
        "\n".join(lines),
        title="[bold]Recommendation[/bold]",
        border_style="green" if metrics.expected_value > 0 else "yellow",
    )


def format_split_table(metrics: MetricsRecord) -> Table:
    """Format the home/away split as a Rich table."""
    table = Table(title="Home/Away Split", header_style="bold cyan")
    table.add_column("Venue", style="bold")
    table.add_column("Hit Rate", justify="right")
    table.add_column("Avg", justify="right")
    table.add_column("Games", justify="right")

    split = metrics.home_away_split
    for venue, stats in (("Home", split.home), ("Away", split.away)):
        table.add_row(
            venue,
            f"{stats.hit_rate.percentage}%",
            f"{stats.average:.1f}",
            str(stats.games),
        )
    return table


def format_insights_table(insights: list[Insight]) -> Table:
    """Format insights as a Rich table, with a placeholder row when empty."""
    table = Table(title="Betting Insights", header_style="bold cyan")
    table.add_column("Type", justify="center")
    table.add_column("Insight", style="bold")
    table.add_column("Details")

    if not insights:
        table.add_row("", "[dim]No insights available[/dim]", "")
        return table

    for insight in insights:
        style = _INSIGHT_STYLES.get(insight.type, "white")
        table.add_row(
            f"[{style}]{insight.type.value.upper()}[/{style}]",
            insight.title,
            insight.message,
        )
    return table


def _format_streak(metrics: MetricsRecord) -> str:
    current = metrics.streak
    if current.type == StreakType.NONE:
        return "-"
    label = "Hits" if current.type == StreakType.HIT else "Misses"
    return f"{current.count} {label} in a row"


def _format_recommendation(recommendation: Recommendation) -> str:
    """Color-code a recommendation label."""
    if recommendation in (Recommendation.STRONG_OVER, Recommendation.OVER):
        return f"[bold green]{recommendation.value}[/bold green]"
    if recommendation in (Recommendation.STRONG_UNDER, Recommendation.UNDER):
        return f"[bold red]{recommendation.value}[/bold red]"
    if recommendation in (Recommendation.TRENDING_UP, Recommendation.TRENDING_DOWN):
        return f"[yellow]{recommendation.value}[/yellow]"
    return f"[dim]{recommendation.value}[/dim]"


def _format_confidence(confidence: Confidence) -> str:
    """Color-code confidence level."""
    if confidence == Confidence.HIGH:
        return "[bold green]HIGH[/bold green]"
    elif confidence == Confidence.MEDIUM:
        return "[yellow]MEDIUM[/yellow]"
    else:
        return "[dim]LOW[/dim]"
