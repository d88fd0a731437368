"""Tests for machine definition validation functions."""

import pytest

from dfa_engine.errors import (
    EmptyTransitionFunctionError,
    MalformedTransitionKeyError,
    NonDeterministicTransitionError,
    StartHookNotCallableError,
    TransitionFunctionTypeError,
    UnknownDestinationStateError,
    UnknownFinalStateError,
    UnknownSourceStateError,
)
from dfa_engine.state.models import TransitionKey
from dfa_engine.state.validation import (
    is_member,
    transition_entries,
    validate_definition,
    validate_determinism,
    validate_final_states,
    validate_hooks,
    validate_transition_entries,
    validate_transition_key,
)


class TestIsMember:
    """Test membership helper."""

    def test_member(self):
        assert is_member("a", frozenset({"a"})) is True

    def test_non_member(self):
        assert is_member("b", frozenset({"a"})) is False

    def test_unhashable_is_not_member(self):
        assert is_member(["a"], frozenset({"a"})) is False


class TestTransitionEntries:
    """Test flattening of transition functions."""

    def test_mapping_keeps_insertion_order(self):
        entries = transition_entries({("B", "x"): "A", ("A", "x"): "B"})
        assert entries == [(("B", "x"), "A"), (("A", "x"), "B")]

    def test_entry_list(self):
        entries = transition_entries([[("A", "x"), "B"], (("B", "x"), "A")])
        assert entries == [(("A", "x"), "B"), (("B", "x"), "A")]

    def test_rejects_bare_values_in_list(self):
        with pytest.raises(TransitionFunctionTypeError) as exc_info:
            transition_entries(["A"])
        assert "entry" in exc_info.value.context

    def test_rejects_other_types(self):
        with pytest.raises(TransitionFunctionTypeError) as exc_info:
            transition_entries(42)
        assert exc_info.value.context == {"type": "int"}

    def test_rejects_empty(self):
        with pytest.raises(EmptyTransitionFunctionError):
            transition_entries({})


class TestTransitionKeyValidation:
    """Test key shape checks."""

    def test_tuple_normalized(self):
        key = validate_transition_key(("A", "x"), 0)
        assert isinstance(key, TransitionKey)
        assert key == TransitionKey("A", "x")

    @pytest.mark.parametrize("key", ["Ax", ["A", "x"], ("A",), ("A", "x", "y"), None])
    def test_malformed(self, key):
        with pytest.raises(MalformedTransitionKeyError) as exc_info:
            validate_transition_key(key, 3)
        assert exc_info.value.index == 3
        assert exc_info.value.key == key


class TestTransitionEntryValidation:
    """Test per-entry membership checks."""

    def test_valid_entries(self):
        validated = validate_transition_entries(
            [(("A", "x"), "B")], frozenset({"A", "B"}), frozenset({"x"})
        )
        assert validated == [(TransitionKey("A", "x"), "B")]

    def test_reports_failing_index(self):
        with pytest.raises(UnknownSourceStateError) as exc_info:
            validate_transition_entries(
                [(("A", "x"), "B"), (("C", "x"), "B")], frozenset({"A", "B"}), frozenset({"x"})
            )
        assert exc_info.value.index == 1
        assert exc_info.value.state == "C"

    def test_unknown_destination(self):
        with pytest.raises(UnknownDestinationStateError) as exc_info:
            validate_transition_entries([(("A", "x"), "Z")], frozenset({"A"}), frozenset({"x"}))
        assert exc_info.value.state == "Z"


class TestDeterminism:
    """Test duplicate key detection."""

    def test_unique_keys(self):
        validate_determinism([TransitionKey("A", "x"), TransitionKey("A", "y"), TransitionKey("B", "x")])

    def test_adjacent_duplicates(self):
        with pytest.raises(NonDeterministicTransitionError) as exc_info:
            validate_determinism([TransitionKey("A", "x"), TransitionKey("A", "x")])
        assert (exc_info.value.first_index, exc_info.value.second_index) == (0, 1)

    def test_reports_lowest_first_index(self):
        keys = [
            TransitionKey("A", "x"),
            TransitionKey("B", "x"),
            TransitionKey("C", "x"),
            TransitionKey("C", "x"),
            TransitionKey("B", "x"),
            TransitionKey("B", "x"),
        ]
        with pytest.raises(NonDeterministicTransitionError) as exc_info:
            validate_determinism(keys)
        assert (exc_info.value.first_index, exc_info.value.second_index) == (1, 4)

    def test_message_names_indexes(self):
        with pytest.raises(NonDeterministicTransitionError) as exc_info:
            validate_determinism([TransitionKey(1, 2), TransitionKey(0, 0), TransitionKey(1, 2)])
        assert str(exc_info.value) == (
            "Non-deterministic transition function. Entries at indexes '0' and '2'."
        )


class TestFinalStatesAndHooks:
    """Test final state and hook checks."""

    def test_empty_final_states(self):
        validate_final_states(frozenset(), frozenset({"A"}))

    def test_unknown_final_state(self):
        with pytest.raises(UnknownFinalStateError):
            validate_final_states({"B"}, frozenset({"A"}))

    def test_hooks_accept_any_callable(self):
        class Hook:
            def __call__(self, *args):
                pass

        validate_hooks(Hook(), print)

    def test_start_checked_before_end(self):
        with pytest.raises(StartHookNotCallableError):
            validate_hooks(None, None)


class TestValidateDefinition:
    """Test full definition validation."""

    def test_returns_normalized_entries(self, scenario_definition):
        entries = validate_definition(
            start_transition=lambda *args: None,
            end_transition=lambda *args: None,
            **scenario_definition,
        )

        assert len(entries) == 5
        assert all(isinstance(key, TransitionKey) for key, _ in entries)
        assert entries[0] == (TransitionKey("<START>", "a"), "<START>")

    def test_transitions_checked_before_final_states(self, scenario_definition):
        scenario_definition["transition_function"] = {("<START>", "a"): "<NOWHERE>"}
        scenario_definition["final_states"] = {"<NOWHERE>"}

        with pytest.raises(UnknownDestinationStateError):
            validate_definition(
                start_transition=print, end_transition=print, **scenario_definition
            )
