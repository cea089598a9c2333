"""Shared enumerations for storyargs schemas.

Defined here to keep the descriptor models and the coercion helpers
in agreement on the set of known shape tags.
"""

from enum import Enum


class TypeName(str, Enum):
    """Shape tag of an argument type descriptor.

    Scalar tags coerce persisted values to a primitive; OBJECT and ARRAY
    describe their members with a nested descriptor. Any tag outside this
    set is treated as opaque and can never be restored from persisted input.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    OBJECT = "object"
    ARRAY = "array"


SCALAR_TYPE_NAMES: frozenset[str] = frozenset(
    {TypeName.STRING.value, TypeName.NUMBER.value, TypeName.BOOLEAN.value}
)
