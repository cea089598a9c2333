"""ArgsStore — per-story initial and current argument values.

Holds two parallel tables keyed by story id: the initial args declared by
the story's implementation, and the current args a user sees and edits.
Current args are reconciled with user updates, persisted values, and
regenerated initial args when the implementation changes.

Not thread-safe: callers serialise access to a store instance.

The store logs only at DEBUG. Nothing here configures structlog;
see storyargs.utils.logging.configure_logging.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

import structlog

from storyargs.args.coercion import map_args_to_types
from storyargs.args.delta import apply_delta, args_delta
from storyargs.args.merge import combine_all
from storyargs.args.validation import validate_options
from storyargs.config.settings import StoryArgsSettings, get_settings
from storyargs.exceptions import ArgsNotFoundError, StoryMismatchError
from storyargs.schemas.story import StoryDescriptor, as_story_descriptor

logger = structlog.get_logger()

Args = dict[str, Any]
StoryLike = StoryDescriptor | Mapping[str, Any]


class ArgsStore:
    """Story id -> argument values, with reconciliation operations.

    Every value written is deep-copied, so stored args never alias caller
    objects or each other. Reads return deep copies unless copy_on_read
    is disabled, in which case callers must not mutate what they get.
    """

    def __init__(
        self,
        settings: StoryArgsSettings | None = None,
        *,
        copy_on_read: bool | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._copy_on_read = settings.copy_on_read if copy_on_read is None else copy_on_read
        self._initial_args: dict[str, Args] = {}
        self._args: dict[str, Args] = {}

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def set_initial(self, story_id: str, initial_args: Mapping[str, Any]) -> bool:
        """Seed a story's initial and current args.

        Only the first call for a story id takes effect. Returns True if
        the story was seeded, False if it already had args.
        """
        initial = copy.deepcopy(dict(initial_args))
        if self._initial_args.setdefault(story_id, initial) is not initial:
            logger.debug("Initial args already set, ignoring", story_id=story_id)
            return False

        self._args[story_id] = copy.deepcopy(initial)
        logger.debug("Initial args set", story_id=story_id, num_args=len(initial))
        return True

    def update(self, story_id: str, updated_args: Mapping[str, Any]) -> None:
        """Replace the current value of every key in ``updated_args``.

        Shallow: nested values replace the old value wholesale. Keys not
        mentioned keep their current value.

        Raises:
            ArgsNotFoundError: If the story was never seeded.
        """
        current = self._require(story_id)
        for key, value in updated_args.items():
            current[key] = copy.deepcopy(value)
        logger.debug("Args updated", story_id=story_id, keys=list(updated_args))

    def update_from_persisted(self, story: StoryLike, persisted_args: Mapping[str, Any]) -> None:
        """Apply externally persisted values after coercing and validating them.

        Keys the story declares no arg type for, values incompatible with
        their type, and values outside their arg's options are dropped
        silently. Surviving object values are deep-merged into the current
        value and sparse arrays only overwrite the positions they supply.

        Raises:
            ArgsNotFoundError: If the story was never seeded.
            SchemaValidationError: If ``story`` is not a valid descriptor.
        """
        story = as_story_descriptor(story)
        current = self._require(story.id)

        mapped = map_args_to_types(persisted_args, story.arg_types)
        validated = validate_options(mapped, story.arg_types)
        combined = combine_all(current, validated)

        current.update(combined)
        logger.debug(
            "Persisted args applied",
            story_id=story.id,
            applied=list(combined),
            received=len(persisted_args),
        )

    def reset_on_implementation_change(
        self,
        story: StoryLike,
        previous_story: StoryLike,
    ) -> list[str]:
        """Re-seed a story from regenerated initial args, keeping user changes.

        Keys whose current value differs from ``previous_story``'s initial
        args (including keys it never declared) keep their current value;
        all other keys take the new initial args, so defaults that were
        removed disappear and new ones are adopted. When the new story
        declares options, carried values it no longer allows are dropped
        in favour of the new initial value.

        Returns the sorted keys whose current values were carried over.

        Raises:
            StoryMismatchError: If the two stories have different ids.
            ArgsNotFoundError: If the story was never seeded.
        """
        story = as_story_descriptor(story)
        previous_story = as_story_descriptor(previous_story)
        if story.id != previous_story.id:
            raise StoryMismatchError(
                f"Cannot reset args of {story.id} from a different story: {previous_story.id}",
                story_id=story.id,
                other_id=previous_story.id,
            )

        current = self._require(story.id)
        delta = args_delta(previous_story.initial_args, current)
        if story.arg_types:
            delta = validate_options(delta, story.arg_types)

        self._initial_args[story.id] = copy.deepcopy(story.initial_args)
        self._args[story.id] = copy.deepcopy(apply_delta(story.initial_args, delta))

        carried = sorted(delta)
        logger.debug("Args reset on implementation change", story_id=story.id, carried=carried)
        return carried

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get(self, story_id: str) -> Args:
        """Current args of a story.

        Raises:
            ArgsNotFoundError: If the story was never seeded.
        """
        return self._read(self._require(story_id))

    def get_initial(self, story_id: str) -> Args:
        """Initial args a story was seeded (or last reset) with.

        Raises:
            ArgsNotFoundError: If the story was never seeded.
        """
        self._require(story_id)
        return self._read(self._initial_args[story_id])

    def has(self, story_id: str) -> bool:
        return story_id in self._args

    def story_ids(self) -> list[str]:
        """Seeded story ids, in seeding order."""
        return list(self._args)

    def __contains__(self, story_id: object) -> bool:
        return story_id in self._args

    def __len__(self) -> int:
        return len(self._args)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _require(self, story_id: str) -> Args:
        """The live current-args dict, or raise if the story is unknown."""
        try:
            return self._args[story_id]
        except KeyError:
            raise ArgsNotFoundError(
                f"No args known for {story_id} -- has it been rendered yet?",
                story_id=story_id,
            ) from None

    def _read(self, args: Args) -> Args:
        return copy.deepcopy(args) if self._copy_on_read else args
