"""Structured logging configuration using structlog.

- JSON output in production mode (filterable, parseable)
- Colored console output in development mode (human-readable)
- Context binding so every event of one analysis carries player/prop/line

Usage:
    from nba_prop_analytics.monitoring import configure_logging, get_logger

    configure_logging("production")  # or "development"
    log = get_logger()
    log.info("game_log_loaded", games=20, path="poole.json")
"""

import logging
import sys

import structlog


def configure_logging(mode: str = "development", level: int | str = logging.INFO) -> None:
    """Configure structlog for the application.

    Args:
        mode: Either "production" (JSON output) or "development" (colored console)
        level: Minimum stdlib log level (e.g., logging.DEBUG or "DEBUG")
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if mode == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Logs go to stderr so `analyze --json` output stays parseable
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module name)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def bind_analysis_context(**context: object) -> None:
    """Bind fields (player, prop, line, ...) to all later events in this context.

    Usage:
        bind_analysis_context(player="Jordan Poole", prop="Points", line=20.5)
        log.info("metrics_rendered")  # includes player, prop and line
    """
    structlog.contextvars.bind_contextvars(**context)


def clear_analysis_context() -> None:
    """Drop all bound context fields."""
    structlog.contextvars.clear_contextvars()
