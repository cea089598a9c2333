"""Tests for the initial-args delta used on implementation change."""

from storyargs.args.delta import apply_delta, args_delta, changed_keys


class TestChangedKeys:
    def test_untouched(self):
        assert changed_keys({"a": "1", "b": "1"}, {"a": "1", "b": "1"}) == []

    def test_edited_and_added(self):
        current = {"a": "update", "b": "1", "c": "update"}
        assert changed_keys({"a": "1", "b": "1"}, current) == ["a", "c"]

    def test_key_only_in_previous_is_unchanged(self):
        assert changed_keys({"a": "1", "gone": "x"}, {"a": "1"}) == []

    def test_structural_comparison(self):
        previous = {"obj": {"x": [1, 2]}}
        assert changed_keys(previous, {"obj": {"x": [1, 2]}}) == []
        assert changed_keys(previous, {"obj": {"x": [1, 3]}}) == ["obj"]

    def test_none_differs_from_missing(self):
        assert changed_keys({}, {"a": None}) == ["a"]


class TestApplyDelta:
    def test_delta_overrides_new_initial(self):
        previous = {"a": "1", "b": "1"}
        current = {"a": "update", "b": "1", "c": "update"}
        delta = args_delta(previous, current)
        assert delta == {"a": "update", "c": "update"}
        assert apply_delta({"a": "2", "d": "2"}, delta) == {"a": "update", "c": "update", "d": "2"}

    def test_empty_delta_adopts_new_initial(self):
        assert apply_delta({"a": "1", "c": "1"}, {}) == {"a": "1", "c": "1"}

    def test_inputs_not_mutated(self):
        new_initial = {"a": "1"}
        apply_delta(new_initial, {"a": "2"})
        assert new_initial == {"a": "1"}
