"""storyargs schemas — typed contracts for stories and argument types."""

from storyargs.schemas.enums import SCALAR_TYPE_NAMES, TypeName
from storyargs.schemas.story import (
    ArgType,
    ArrayType,
    EnumType,
    ObjectType,
    OtherType,
    ScalarType,
    StoryDescriptor,
    TypeDescriptor,
    as_story_descriptor,
)

__all__ = [
    "SCALAR_TYPE_NAMES",
    "TypeName",
    "ArgType",
    "ArrayType",
    "EnumType",
    "ObjectType",
    "OtherType",
    "ScalarType",
    "StoryDescriptor",
    "TypeDescriptor",
    "as_story_descriptor",
]
