"""Tests for options allow-list validation."""

from storyargs.args.sparse import SparseArray
from storyargs.args.validation import is_allowed, validate_options
from storyargs.schemas.story import ArgType


def _arg_type(options=None, type_name="string") -> ArgType:
    return ArgType.model_validate({"type": type_name, "options": options})


class TestIsAllowed:
    def test_scalar_member(self):
        assert is_allowed("a", ["a", "b"])
        assert not is_allowed("c", ["a", "b"])

    def test_booleans_are_not_numbers(self):
        assert not is_allowed(True, [1, 2])
        assert is_allowed(1, [1, 2])

    def test_list_elements(self):
        assert is_allowed(["a", "b"], ["a", "b"])
        assert not is_allowed(["a", "z"], ["a", "b"])

    def test_list_as_option(self):
        assert is_allowed([1, 2], [[1, 2], [3]])

    def test_sparse_array_checks_present_elements(self):
        assert is_allowed(SparseArray({3: "b"}), ["a", "b"])
        assert not is_allowed(SparseArray({0: "a", 1: "z"}), ["a", "b"])

    def test_structured_option(self):
        assert is_allowed({"x": 1}, [{"x": 1}])


class TestValidateOptions:
    def test_drops_values_outside_options(self):
        arg_types = {"a": _arg_type(["a", "b"])}
        assert validate_options({"a": "random"}, arg_types) == {}

    def test_keeps_allowed_values(self):
        arg_types = {"a": _arg_type(["a", "b"])}
        assert validate_options({"a": "a"}, arg_types) == {"a": "a"}

    def test_unrestricted_args_pass(self):
        arg_types = {"a": _arg_type()}
        assert validate_options({"a": "anything"}, arg_types) == {"a": "anything"}

    def test_args_without_types_pass(self):
        assert validate_options({"a": 1}, {}) == {"a": 1}

    def test_filters_per_key(self):
        arg_types = {"a": _arg_type(["x"]), "b": _arg_type(["y"])}
        assert validate_options({"a": "x", "b": "z"}, arg_types) == {"a": "x"}
