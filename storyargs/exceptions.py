"""storyargs exception hierarchy.

All custom exceptions inherit from StoryArgsError, allowing callers
to catch broad or specific error categories as needed.
"""


class StoryArgsError(Exception):
    """Base exception for all storyargs errors."""

    def __init__(self, message: str = "", story_id: str | None = None) -> None:
        self.story_id = story_id
        super().__init__(message)


class ArgsNotFoundError(StoryArgsError, KeyError):
    """Raised when no argument state is known for a story id.

    Examples: reading, updating or resetting a story that was never
    seeded with set_initial.
    """

    def __str__(self) -> str:
        # KeyError would otherwise render the message quoted
        return str(self.args[0]) if self.args else ""


class StoryMismatchError(StoryArgsError):
    """Raised when two story descriptors that must share an id do not.

    Examples: reset_on_implementation_change called with a previous
    story belonging to a different id.
    """

    def __init__(
        self,
        message: str = "",
        story_id: str | None = None,
        other_id: str | None = None,
    ) -> None:
        self.other_id = other_id
        super().__init__(message, story_id)


class SchemaValidationError(StoryArgsError):
    """Raised when a story descriptor payload fails schema validation.

    Examples: arg type without a type descriptor, initial args that
    are not a mapping, missing story id.
    """
