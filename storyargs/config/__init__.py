"""storyargs configuration."""

from storyargs.config.settings import StoryArgsSettings, get_settings

__all__ = [
    "StoryArgsSettings",
    "get_settings",
]
