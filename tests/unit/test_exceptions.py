"""Tests for the storyargs exception hierarchy."""

import pytest

from storyargs.exceptions import (
    ArgsNotFoundError,
    SchemaValidationError,
    StoryArgsError,
    StoryMismatchError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [ArgsNotFoundError, StoryMismatchError, SchemaValidationError],
    )
    def test_all_inherit_from_base(self, exc_type) -> None:
        assert issubclass(exc_type, StoryArgsError)

    def test_not_found_is_key_error(self) -> None:
        assert issubclass(ArgsNotFoundError, KeyError)

    def test_not_found_message_unquoted(self) -> None:
        exc = ArgsNotFoundError("No args known for id", story_id="id")
        assert str(exc) == "No args known for id"
        assert exc.story_id == "id"

    def test_mismatch_carries_both_ids(self) -> None:
        exc = StoryMismatchError("ids differ", story_id="a", other_id="b")
        assert exc.story_id == "a"
        assert exc.other_id == "b"

    def test_package_exports(self) -> None:
        import storyargs

        assert storyargs.ArgsNotFoundError is ArgsNotFoundError
        assert storyargs.__version__ == "0.1.0"
