"""CLI package for prop analytics.

Provides terminal reports for player prop metrics and insights.
"""

from nba_prop_analytics.cli.main import cli

__all__ = ["cli"]
