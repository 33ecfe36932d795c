"""Typer CLI entry point for player prop analytics.

- prop-analytics analyze poole.json --prop Points --line 20.5 --period 10
- prop-analytics insights roster.json --player "Jordan Poole" --prop Pts+Reb+Ast --line 30.5
- prop-analytics version
"""

import json
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file before settings are read
load_dotenv()

import typer
from rich.console import Console

from nba_prop_analytics import __version__
from nba_prop_analytics.analytics import (
    GameStatRecord,
    MetricsRecord,
    Period,
    PropType,
    calculate_betting_metrics,
    generate_insights,
)
from nba_prop_analytics.cli.formatters import (
    format_insights_table,
    format_metrics_table,
    format_recommendation_panel,
    format_split_table,
)
from nba_prop_analytics.config import get_settings
from nba_prop_analytics.data import load_game_log
from nba_prop_analytics.monitoring import (
    bind_analysis_context,
    clear_analysis_context,
    configure_logging,
    get_logger,
)

log = get_logger()

cli = typer.Typer(
    name="prop-analytics",
    help="""NBA Prop Analytics - hit rates, trends and edges for player props.

WHAT IT DOES:
  Evaluates a player's recent game log against a prop line and reports
  hit rate, averages, consistency, trend, streaks, home/away splits and
  a recommendation measured against an assumed -110 line.

QUICK START:
  prop-analytics analyze poole.json --prop Points --line 20.5
  prop-analytics analyze roster.json --player "Kyle Kuzma" --prop Pts+Reb --line 22.5 --period 5
  prop-analytics insights poole.json --line 19.5 --period 10
""",
    add_completion=False,
)

# Disable colors if NO_COLOR env var is set (standard convention)
console = Console(no_color=os.getenv("NO_COLOR") is not None)


def _compute(
    game_log: Path,
    player: str | None,
    prop: PropType,
    line: float,
    period: str | None,
) -> tuple[list[GameStatRecord], MetricsRecord, Period]:
    """Load the game log and compute metrics, exiting with code 1 on bad input."""
    settings = get_settings()
    try:
        window = Period.parse(period) if period is not None else settings.default_period
        games = load_game_log(game_log, player=player)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}", style="red")
        raise typer.Exit(code=1)

    bind_analysis_context(player=player, prop=prop.value, line=line, period=window.value)
    metrics = calculate_betting_metrics(
        games, prop, line, period=window, odds=settings.odds_assumptions()
    )
    return games, metrics, window


@cli.command()
def analyze(
    game_log: Path = typer.Argument(..., help="JSON game log (list of games, player object, or list of players)"),
    prop: PropType = typer.Option(PropType.POINTS, "--prop", "-p", help="Prop to evaluate"),
    line: float = typer.Option(20.5, "--line", "-l", help="Prop line; a game hits when strictly above it"),
    period: str = typer.Option(None, "--period", help="Most recent games to analyse: 5, 10 or 20 (default from PROP_DEFAULT_PERIOD)"),
    player: str = typer.Option(None, "--player", help="Player name when the file lists several players"),
    as_json: bool = typer.Option(False, "--json", help="Print metrics and insights as JSON"),
):
    """Compute the full metrics report for one player prop.

    \b
    EXAMPLES:
      prop-analytics analyze poole.json --line 20.5
      prop-analytics analyze poole.json -p "Pts+Reb+Ast" -l 30.5 --period 10
      prop-analytics analyze poole.json --json
    """
    try:
        games, metrics, window = _compute(game_log, player, prop, line, period)
        insights = generate_insights(metrics)

        if as_json:
            payload = {
                "metrics": metrics.model_dump(mode="json", by_alias=True),
                "insights": [i.model_dump(mode="json") for i in insights],
            }
            typer.echo(json.dumps(payload, indent=2))
            return

        title = f"{player + ' - ' if player else ''}{prop.value} {line} ({window.label})"
        console.print(format_metrics_table(metrics, title=title))
        console.print(format_recommendation_panel(metrics))
        console.print(format_split_table(metrics))
        console.print(format_insights_table(insights))
        log.info("analysis_rendered", games=len(games), insights=len(insights))
    finally:
        clear_analysis_context()


@cli.command()
def insights(
    game_log: Path = typer.Argument(..., help="JSON game log"),
    prop: PropType = typer.Option(PropType.POINTS, "--prop", "-p", help="Prop to evaluate"),
    line: float = typer.Option(20.5, "--line", "-l", help="Prop line"),
    period: str = typer.Option(None, "--period", help="Most recent games to analyse: 5, 10 or 20"),
    player: str = typer.Option(None, "--player", help="Player name when the file lists several players"),
):
    """Show only the betting insights for one player prop."""
    try:
        _, metrics, _ = _compute(game_log, player, prop, line, period)
        console.print(format_insights_table(generate_insights(metrics)))
    finally:
        clear_analysis_context()


@cli.command()
def version():
    """Show version and odds assumptions."""
    settings = get_settings()
    console.print(f"[bold cyan]NBA Prop Analytics[/bold cyan] v{__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Break-even hit rate: {settings.break_even_pct:.1f}%")
    console.print(f"  Payout per unit: {settings.payout:.2f}")
    console.print(f"  Default period: {settings.default_period.label}")
    console.print(f"  Log mode: {settings.log_mode}")


def main():
    """Entry point for CLI."""
    settings = get_settings()
    configure_logging(settings.log_mode, settings.log_level)

    cli()


if __name__ == "__main__":
    main()
