"""Monitoring module for structured logging.

Provides structlog configuration with JSON output for production,
console output for development and per-analysis context binding.
"""

from nba_prop_analytics.monitoring.logging import (
    bind_analysis_context,
    clear_analysis_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_analysis_context",
    "clear_analysis_context",
]
