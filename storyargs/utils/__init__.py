"""storyargs utilities — equality, logging, and shared helpers."""

from storyargs.utils.equality import deep_equal
from storyargs.utils.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)

__all__ = [
    "deep_equal",
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
]
