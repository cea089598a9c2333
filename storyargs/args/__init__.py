"""Argument helpers — coercion, merging, options validation and deltas.

All functions are pure: they never mutate their inputs.
"""

from storyargs.args.coercion import INCOMPATIBLE, map_args_to_types, map_value
from storyargs.args.delta import apply_delta, args_delta, changed_keys
from storyargs.args.merge import combine_all, combine_args
from storyargs.args.sparse import SparseArray
from storyargs.args.validation import is_allowed, validate_options

__all__ = [
    "INCOMPATIBLE",
    "map_args_to_types",
    "map_value",
    "apply_delta",
    "args_delta",
    "changed_keys",
    "combine_all",
    "combine_args",
    "SparseArray",
    "is_allowed",
    "validate_options",
]
