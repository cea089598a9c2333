"""Centralized environment-based settings for storyargs.

Reads configuration from environment variables with sensible defaults.

Usage:
    from storyargs.config.settings import get_settings
    settings = get_settings()
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class StoryArgsSettings:
    """Immutable application settings loaded from environment."""

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True

    # Store behaviour
    copy_on_read: bool = True


def get_settings() -> StoryArgsSettings:
    """Load settings from environment variables.

    Environment variables (all optional):
        STORYARGS_LOG_LEVEL: Logging level (default: INFO)
        STORYARGS_JSON_LOGS: Render logs as JSON (default: true)
        STORYARGS_COPY_ON_READ: ArgsStore.get returns deep copies (default: true)
    """
    def _bool(key: str, default: bool = False) -> bool:
        val = os.environ.get(key, "").lower()
        if val in ("1", "true", "yes"):
            return True
        if val in ("0", "false", "no"):
            return False
        return default

    return StoryArgsSettings(
        log_level=os.environ.get("STORYARGS_LOG_LEVEL", "INFO").upper(),
        json_logs=_bool("STORYARGS_JSON_LOGS", True),
        copy_on_read=_bool("STORYARGS_COPY_ON_READ", True),
    )
