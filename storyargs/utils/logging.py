"""Structured logging setup for storyargs.

Uses structlog for JSON-structured logging with story IDs and
timestamps in every log entry.
"""

import logging

import structlog

from storyargs.config.settings import StoryArgsSettings, get_settings


def configure_logging(json_output: bool = True, level: str = "INFO") -> None:
    """Configure structlog for storyargs.

    Args:
        json_output: If True (default), render logs as JSON.
                     If False, use console-friendly output for development.
        level: Minimum level name to emit (DEBUG, INFO, WARNING, ERROR).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    level_num = getattr(logging, level.upper(), logging.INFO)
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(story_id: str | None = None) -> structlog.BoundLogger:
    """Get a logger, bound with story_id when one is given.

    Args:
        story_id: Story the log entries are about.

    Returns:
        A structlog BoundLogger.
    """
    logger = structlog.get_logger()
    if story_id:
        logger = logger.bind(story_id=story_id)
    return logger


def configure_logging_from_settings(settings: StoryArgsSettings | None = None) -> None:
    """Configure structlog from StoryArgsSettings (environment when omitted)."""
    settings = settings or get_settings()
    configure_logging(json_output=settings.json_logs, level=settings.log_level)
