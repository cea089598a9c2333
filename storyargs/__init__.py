"""storyargs — per-story argument state for component explorers.

Tracks the current argument values of each story and reconciles them
with user updates, persisted values and regenerated default arguments.

storyargs does not configure logging on import. The store emits DEBUG
events through structlog, whose unconfigured default prints every level
to stdout, so applications should call ``configure_logging`` (or
``configure_logging_from_settings``) once at startup.
"""

from storyargs.exceptions import (
    ArgsNotFoundError,
    SchemaValidationError,
    StoryArgsError,
    StoryMismatchError,
)
from storyargs.schemas.story import ArgType, StoryDescriptor
from storyargs.storage.args_store import ArgsStore
from storyargs.utils.logging import configure_logging, configure_logging_from_settings

__version__ = "0.1.0"

__all__ = [
    "ArgsStore",
    "ArgType",
    "StoryDescriptor",
    "StoryArgsError",
    "ArgsNotFoundError",
    "StoryMismatchError",
    "SchemaValidationError",
    "configure_logging",
    "configure_logging_from_settings",
]
