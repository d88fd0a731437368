"""
Validation of state machine definitions.

Each function checks one part of a definition and raises the matching
``MachineDefinitionError`` subclass. ``validate_definition`` runs them in the
order a machine is validated at construction and fails on the first defect.
"""

from collections.abc import Mapping, Set
from typing import Any, Iterable

from ..errors import (
    EmptyInputAlphabetError,
    EmptyStatesError,
    EmptyTransitionFunctionError,
    EndHookNotCallableError,
    FinalStatesTypeError,
    InputAlphabetTypeError,
    MalformedTransitionKeyError,
    NonDeterministicTransitionError,
    StartHookNotCallableError,
    StatesTypeError,
    TransitionFunctionTypeError,
    UnknownDestinationStateError,
    UnknownFinalStateError,
    UnknownInitialStateError,
    UnknownSourceStateError,
    UnknownTransitionSymbolError,
)
from .models import State, TransitionKey

TransitionEntries = list[tuple[TransitionKey, State]]


def is_member(item: Any, collection: Set) -> bool:
    """Membership test that treats unhashable items as absent."""
    try:
        return item in collection
    except TypeError:
        return False


def validate_input_alphabet(input_alphabet: Any) -> None:
    """Check the alphabet is a non-empty set."""
    if not isinstance(input_alphabet, Set):
        raise InputAlphabetTypeError(context={"type": type(input_alphabet).__name__})
    if len(input_alphabet) == 0:
        raise EmptyInputAlphabetError()


def validate_states(states: Any) -> None:
    """Check the state set is a non-empty set."""
    if not isinstance(states, Set):
        raise StatesTypeError(context={"type": type(states).__name__})
    if len(states) == 0:
        raise EmptyStatesError()


def validate_initial_state(initial_state: Any, states: Set) -> None:
    """Check the initial state is a known state."""
    if not is_member(initial_state, states):
        raise UnknownInitialStateError(initial_state)


def transition_entries(transition_function: Any) -> list[tuple[Any, Any]]:
    """
    Flatten a transition function into ``(key, next_state)`` entries.

    A transition function is either a ``Mapping`` or a list/tuple of
    two-item entries. Entries keep their iteration order, which is what the
    indexes in determinism errors refer to.

    Raises:
        TransitionFunctionTypeError: If the value has neither form
        EmptyTransitionFunctionError: If there are no entries
    """
    if isinstance(transition_function, Mapping):
        entries = list(transition_function.items())
    elif isinstance(transition_function, (list, tuple)):
        entries = []
        for entry in transition_function:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise TransitionFunctionTypeError(context={"entry": repr(entry)})
            entries.append((entry[0], entry[1]))
    else:
        raise TransitionFunctionTypeError(context={"type": type(transition_function).__name__})

    if not entries:
        raise EmptyTransitionFunctionError()

    return entries


def validate_transition_key(key: Any, index: int) -> TransitionKey:
    """Check a key is a hashable (state, symbol) pair and normalize it."""
    if not isinstance(key, tuple) or len(key) != 2:
        raise MalformedTransitionKeyError(key, index=index)
    try:
        hash(key)
    except TypeError:
        raise MalformedTransitionKeyError(key, index=index) from None
    return TransitionKey(*key)


def validate_transition_entries(
    entries: Iterable[tuple[Any, Any]],
    states: Set,
    input_alphabet: Set
) -> TransitionEntries:
    """
    Check every entry refers only to known states and symbols.

    All checks for one entry complete before the next entry is examined.

    Returns:
        The entries with keys normalized to ``TransitionKey``
    """
    validated = []

    for index, (key, next_state) in enumerate(entries):
        transition_key = validate_transition_key(key, index)
        if not is_member(transition_key.state, states):
            raise UnknownSourceStateError(transition_key.state, index=index)
        if not is_member(transition_key.symbol, input_alphabet):
            raise UnknownTransitionSymbolError(transition_key.symbol, index=index)
        if not is_member(next_state, states):
            raise UnknownDestinationStateError(next_state, index=index)
        validated.append((transition_key, next_state))

    return validated


def validate_determinism(keys: Iterable[TransitionKey]) -> None:
    """
    Check no two keys are structurally equal.

    Reports the first conflicting pair a row-major scan over all index pairs
    would find: the lowest index that has a duplicate, and its next duplicate.
    """
    positions: dict[TransitionKey, list[int]] = {}
    for index, key in enumerate(keys):
        positions.setdefault(key, []).append(index)

    duplicates = [indexes for indexes in positions.values() if len(indexes) > 1]
    if duplicates:
        first_index, second_index = min(duplicates)[:2]
        raise NonDeterministicTransitionError(first_index, second_index)


def validate_final_states(final_states: Any, states: Set) -> None:
    """Check the final states are a set of known states."""
    if not isinstance(final_states, Set):
        raise FinalStatesTypeError(context={"type": type(final_states).__name__})
    for final_state in final_states:
        if not is_member(final_state, states):
            raise UnknownFinalStateError(final_state)


def validate_hooks(start_transition: Any, end_transition: Any) -> None:
    """Check both transition hooks can be called."""
    if not callable(start_transition):
        raise StartHookNotCallableError(context={"type": type(start_transition).__name__})
    if not callable(end_transition):
        raise EndHookNotCallableError(context={"type": type(end_transition).__name__})


def validate_definition(
    input_alphabet: Any,
    states: Any,
    initial_state: Any,
    transition_function: Any,
    final_states: Any,
    start_transition: Any,
    end_transition: Any
) -> TransitionEntries:
    """
    Validate a complete machine definition.

    Args:
        input_alphabet: Set of permitted input symbols
        states: Set of possible states
        initial_state: Starting state
        transition_function: Mapping or entry list from (state, symbol) to next state
        final_states: Set of accepting states
        start_transition: Hook called before each transition
        end_transition: Hook called after each transition

    Returns:
        Transition entries keyed by ``TransitionKey``, in input order

    Raises:
        MachineDefinitionError: The subclass naming the first defect found
    """
    validate_input_alphabet(input_alphabet)
    validate_states(states)
    validate_initial_state(initial_state, states)

    entries = transition_entries(transition_function)
    validated = validate_transition_entries(entries, states, input_alphabet)
    validate_determinism(key for key, _ in validated)

    validate_final_states(final_states, states)
    validate_hooks(start_transition, end_transition)

    return validated
