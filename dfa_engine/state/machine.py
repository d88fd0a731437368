"""
Deterministic finite-state machine.

This module implements ``StateMachine``: a validated, immutable definition
(alphabet, states, transition function, final states) plus one mutable
current state, advanced one symbol at a time by ``provide``.
"""

from collections.abc import Set
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from ..errors import UnknownInputSymbolError
from ..logging.config import get_state_logger, log_state_transition
from .models import State, Symbol, TransitionHook, TransitionKey, TransitionRecord
from .validation import is_member, validate_definition

state_logger = get_state_logger(__name__)


def no_transition_hook(machine: "StateMachine", previous_state: State,
                       symbol: Symbol, next_state: State) -> None:
    """Default transition hook; does nothing."""


class StateMachine:
    """
    A deterministic finite-state machine with transition hooks.

    The definition is validated and copied at construction. If a transition is
    defined for the current state and a provided symbol, the machine:

    1. calls ``start_transition(machine, current_state, symbol, next_state)``
       while ``machine.state`` is still the current state,
    2. moves to the next state,
    3. calls ``end_transition(machine, previous_state, symbol, next_state)``
       while ``machine.state`` is already the next state.

    A valid symbol with no transition defined for the current state leaves the
    machine untouched, so partial transition functions are allowed.

    Example:
        >>> machine = StateMachine({"a"}, {"S", "F"}, "S", {("S", "a"): "F"}, {"F"})
        >>> machine.provide("a").is_in_final_state
        True
    """

    def __init__(
        self,
        input_alphabet: Set,
        states: Set,
        initial_state: State,
        transition_function: Any,
        final_states: Set = frozenset(),
        start_transition: TransitionHook = no_transition_hook,
        end_transition: TransitionHook = no_transition_hook,
        *,
        name: Optional[str] = None,
        log_transitions: bool = True
    ):
        """
        Construct and validate a new state machine.

        Args:
            input_alphabet: Set of permitted input symbols
            states: Set of possible states
            initial_state: Starting state, must be in ``states``
            transition_function: ``Mapping`` from ``(state, symbol)`` to the next
                state, or a list of ``((state, symbol), next_state)`` entries
            final_states: States in which ``is_in_final_state`` is true
            start_transition: Hook called before each transition
            end_transition: Hook called after each transition
            name: Label bound into this machine's log events
            log_transitions: Emit a ``state_transition`` log event per transition

        Raises:
            MachineDefinitionError: The subclass naming the first defect found
        """
        entries = validate_definition(
            input_alphabet,
            states,
            initial_state,
            transition_function,
            final_states,
            start_transition,
            end_transition,
        )

        self._name = name
        self._log_transitions = log_transitions
        self._input_alphabet = frozenset(input_alphabet)
        self._states = frozenset(states)
        self._final_states = frozenset(final_states)
        self._transition_function: Mapping[TransitionKey, State] = MappingProxyType(dict(entries))
        self._start_transition = start_transition
        self._end_transition = end_transition
        self._initial_state = initial_state
        self._state = initial_state

        state_logger.debug(
            "machine_created",
            machine=name,
            initial_state=str(initial_state),
            symbol_count=len(self._input_alphabet),
            state_count=len(self._states),
            transition_count=len(self._transition_function),
            final_state_count=len(self._final_states),
        )

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def initial_state(self) -> State:
        """The state the machine started in."""
        return self._initial_state

    @property
    def state(self) -> State:
        """The current state."""
        return self._state

    @property
    def is_in_final_state(self) -> bool:
        """True if the current state is a final state."""
        return self._state in self._final_states

    @property
    def input_alphabet(self) -> frozenset:
        return self._input_alphabet

    @property
    def states(self) -> frozenset:
        return self._states

    @property
    def final_states(self) -> frozenset:
        return self._final_states

    @property
    def transition_function(self) -> Mapping[TransitionKey, State]:
        """Read-only view of the transition function."""
        return self._transition_function

    def _check_symbol(self, symbol: Symbol) -> None:
        if not is_member(symbol, self._input_alphabet):
            raise UnknownInputSymbolError(
                symbol,
                current_state=self._state,
                context={"machine": self._name},
            )

    def transition_for(self, symbol: Symbol) -> Optional[TransitionRecord]:
        """
        Resolve the transition ``provide(symbol)`` would apply, without applying it.

        Returns:
            The transition from the current state, or None if none is defined

        Raises:
            UnknownInputSymbolError: If ``symbol`` is not in the input alphabet
        """
        self._check_symbol(symbol)

        key = TransitionKey(self._state, symbol)
        if key not in self._transition_function:
            return None

        return TransitionRecord(self._state, symbol, self._transition_function[key])

    def provide(self, symbol: Symbol) -> "StateMachine":
        """
        Provide an input symbol and possibly transition the machine.

        Args:
            symbol: The next input symbol

        Returns:
            This machine, so calls can be chained

        Raises:
            UnknownInputSymbolError: If ``symbol`` is not in the input alphabet
        """
        transition = self.transition_for(symbol)

        if transition is None:
            state_logger.debug(
                "transition_undefined",
                machine=self._name,
                state=str(self._state),
                symbol=str(symbol),
            )
            return self

        self._start_transition(self, *transition.as_tuple())
        self._state = transition.next_state
        self._end_transition(self, *transition.as_tuple())

        if self._log_transitions:
            log_state_transition(
                state_logger,
                machine_name=self._name,
                from_state=transition.previous_state,
                to_state=transition.next_state,
                symbol=symbol,
                context={"is_in_final_state": self.is_in_final_state},
            )

        return self

    def provide_all(self, symbols: Iterable[Symbol]) -> "StateMachine":
        """
        Provide each symbol in order.

        Stops at the first symbol that raises; earlier transitions stay applied.

        Returns:
            This machine
        """
        for symbol in symbols:
            self.provide(symbol)
        return self

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, state={self._state!r}, "
            f"is_in_final_state={self.is_in_final_state})"
        )
