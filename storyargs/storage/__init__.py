"""Storage layer — in-memory argument state per story."""

from storyargs.storage.args_store import ArgsStore

__all__ = [
    "ArgsStore",
]
