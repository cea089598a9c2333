"""Shared test fixtures for storyargs tests.

Provides stores and story descriptors that can be reused across
test modules.
"""

import pytest

from storyargs.config.settings import StoryArgsSettings
from storyargs.schemas.story import StoryDescriptor
from storyargs.storage.args_store import ArgsStore


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------
SAMPLE_STORY_ID = "button--primary"


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def settings() -> StoryArgsSettings:
    """Default settings, independent of the test environment."""
    return StoryArgsSettings()


@pytest.fixture
def store(settings: StoryArgsSettings) -> ArgsStore:
    """An empty ArgsStore returning copies on read."""
    return ArgsStore(settings)


# ---------------------------------------------------------------------------
# Story fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sample_arg_types() -> dict:
    """Arg types covering every shape storyargs coerces."""
    return {
        "label": {"type": {"name": "string"}},
        "size": {"type": {"name": "string"}, "options": ["small", "medium", "large"]},
        "count": {"type": {"name": "number"}},
        "disabled": {"type": {"name": "boolean"}},
        "variant": {"type": {"name": "enum", "value": ["solid", "outline"]}},
        "style": {"type": {"name": "object", "value": {"name": "string"}}},
        "items": {"type": {"name": "array", "value": {"name": "string"}}},
        "onClick": {"type": {"name": "function"}},
    }


@pytest.fixture
def sample_initial_args() -> dict:
    """Initial args declared by the sample story."""
    return {
        "label": "Button",
        "size": "medium",
        "count": 1,
        "disabled": False,
        "style": {"color": "red"},
        "items": ["one", "two", "three"],
    }


@pytest.fixture
def sample_story(sample_arg_types: dict, sample_initial_args: dict) -> StoryDescriptor:
    """A valid StoryDescriptor built from camelCase registry keys."""
    return StoryDescriptor.model_validate(
        {
            "id": SAMPLE_STORY_ID,
            "argTypes": sample_arg_types,
            "initialArgs": sample_initial_args,
        }
    )


@pytest.fixture
def seeded_store(store: ArgsStore, sample_story: StoryDescriptor) -> ArgsStore:
    """A store seeded with the sample story's initial args."""
    store.set_initial(sample_story.id, sample_story.initial_args)
    return store
