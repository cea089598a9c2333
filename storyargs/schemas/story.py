"""Story descriptor schema and argument type descriptors.

Produced by: the story registry (external)
Consumed by: ArgsStore.update_from_persisted, ArgsStore.reset_on_implementation_change

Type descriptors form a closed tagged union keyed on ``name``:
scalar (string/number/boolean), enum, object, array, and an opaque
catch-all for every other tag (function, symbol, union, ...).
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    ValidationError,
    field_validator,
)

from storyargs.exceptions import SchemaValidationError
from storyargs.schemas.enums import SCALAR_TYPE_NAMES, TypeName


class ScalarType(BaseModel):
    """A primitive argument; persisted values are coerced to it."""

    model_config = ConfigDict(frozen=True)

    name: Literal["string", "number", "boolean"] = Field(..., description="Primitive shape tag")


class EnumType(BaseModel):
    """An enumerated argument; persisted values pass through unchanged."""

    model_config = ConfigDict(frozen=True)

    name: Literal["enum"] = Field(default="enum")
    value: Optional[list[Any]] = Field(default=None, description="Declared enum members")


class ObjectType(BaseModel):
    """A mapping argument whose values share one descriptor."""

    model_config = ConfigDict(frozen=True)

    name: Literal["object"] = Field(default="object")
    value: Optional["TypeDescriptor"] = Field(
        default=None,
        description="Descriptor applied to every value of the mapping",
    )


class ArrayType(BaseModel):
    """A sequence argument whose elements share one descriptor."""

    model_config = ConfigDict(frozen=True)

    name: Literal["array"] = Field(default="array")
    value: Optional["TypeDescriptor"] = Field(
        default=None,
        description="Descriptor applied to every element of the sequence",
    )


class OtherType(BaseModel):
    """Any shape tag storyargs does not know how to restore."""

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., description="Shape tag, e.g. 'function' or 'symbol'")


def _type_tag(value: Any) -> str:
    """Pick the union member for a raw or already-built descriptor."""
    if isinstance(value, Mapping):
        name = value.get("name")
    else:
        name = getattr(value, "name", None)
    if isinstance(name, TypeName):
        name = name.value
    if not isinstance(name, str):
        return "other"
    if name in SCALAR_TYPE_NAMES:
        return "scalar"
    if name in (TypeName.ENUM.value, TypeName.OBJECT.value, TypeName.ARRAY.value):
        return name
    return "other"


TypeDescriptor = Annotated[
    Union[
        Annotated[ScalarType, Tag("scalar")],
        Annotated[EnumType, Tag("enum")],
        Annotated[ObjectType, Tag("object")],
        Annotated[ArrayType, Tag("array")],
        Annotated[OtherType, Tag("other")],
    ],
    Discriminator(_type_tag),
]

ObjectType.model_rebuild()
ArrayType.model_rebuild()


def _normalize_descriptor(value: Any) -> Any:
    """Expand the ``"string"`` shorthand into ``{"name": "string"}``."""
    if isinstance(value, TypeName):
        return {"name": value.value}
    if isinstance(value, str):
        return {"name": value}
    if isinstance(value, Mapping) and "value" in value:
        nested = value["value"]
        if isinstance(nested, (str, Mapping)):
            return {**value, "value": _normalize_descriptor(nested)}
    return value


class ArgType(BaseModel):
    """Declared metadata for one story argument."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Argument name, informational only")
    type: Optional[TypeDescriptor] = Field(
        default=None,
        description="Shape descriptor used for coercion (None = cannot be restored)",
    )
    options: Optional[list[Any]] = Field(
        default=None,
        description="Allow-list of permitted values (None = unrestricted)",
    )

    @field_validator("type", mode="before")
    @classmethod
    def expand_shorthand(cls, v: Any) -> Any:
        """Accept a bare shape tag in place of a descriptor mapping."""
        return _normalize_descriptor(v)


class StoryDescriptor(BaseModel):
    """The parts of a story the argument store needs.

    Accepts camelCase keys (``argTypes``, ``initialArgs``) as emitted
    by story registries, or the snake_case attribute names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Unique story identifier")
    arg_types: dict[str, ArgType] = Field(
        default_factory=dict,
        alias="argTypes",
        description="Argument name -> declared type and options",
    )
    initial_args: dict[str, Any] = Field(
        default_factory=dict,
        alias="initialArgs",
        description="Default argument values declared by the implementation",
    )

    @field_validator("arg_types", mode="before")
    @classmethod
    def drop_unparseable_arg_types(cls, v: Any) -> Any:
        """Keep only the arg types that parse; the rest count as undeclared."""
        if not isinstance(v, Mapping):
            return v
        parsed: dict[str, ArgType] = {}
        for key, raw in v.items():
            try:
                parsed[key] = ArgType.model_validate(raw)
            except ValidationError:
                continue
        return parsed


def as_story_descriptor(story: StoryDescriptor | Mapping[str, Any]) -> StoryDescriptor:
    """Return ``story`` as a StoryDescriptor, validating raw mappings.

    Raises:
        SchemaValidationError: If the mapping is not a valid story descriptor.
    """
    if isinstance(story, StoryDescriptor):
        return story
    try:
        return StoryDescriptor.model_validate(story)
    except ValidationError as exc:
        story_id = story.get("id") if isinstance(story, Mapping) else None
        raise SchemaValidationError(
            f"Invalid story descriptor: {exc}",
            story_id=story_id if isinstance(story_id, str) else None,
        ) from exc
