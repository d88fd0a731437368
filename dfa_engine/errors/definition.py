"""
Machine definition error classifications.

These exceptions are raised while constructing a state machine. Each one names
a single, specific defect in the supplied definition so callers can tell them
apart. None of them are recoverable: no machine instance is created.
"""

from typing import Any, Dict, Optional


class MachineDefinitionError(Exception):
    """Base class for invalid state machine definitions."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InputAlphabetTypeError(MachineDefinitionError):
    """The input alphabet is not a set."""

    def __init__(self, message: str = "Input alphabet is not a set.", **kwargs):
        super().__init__(message, **kwargs)


class EmptyInputAlphabetError(MachineDefinitionError):
    """The input alphabet has no symbols."""

    def __init__(self, message: str = "Input alphabet is empty.", **kwargs):
        super().__init__(message, **kwargs)


class StatesTypeError(MachineDefinitionError):
    """The state set is not a set."""

    def __init__(self, message: str = "The 'states' argument must be a set.", **kwargs):
        super().__init__(message, **kwargs)


class EmptyStatesError(MachineDefinitionError):
    """The state set has no states."""

    def __init__(self, message: str = "The 'states' argument is empty.", **kwargs):
        super().__init__(message, **kwargs)


class UnknownInitialStateError(MachineDefinitionError):
    """The initial state is not a member of the state set."""

    def __init__(self, initial_state: Any, **kwargs):
        super().__init__(f"The initial state '{initial_state}' is unknown.", **kwargs)
        self.initial_state = initial_state


class TransitionFunctionTypeError(MachineDefinitionError):
    """The transition function is neither a mapping nor a sequence of entries."""

    def __init__(self, message: str = "The state transition function is not a mapping.", **kwargs):
        super().__init__(message, **kwargs)


class EmptyTransitionFunctionError(MachineDefinitionError):
    """The transition function has no entries."""

    def __init__(self, message: str = "The state transition function is empty.", **kwargs):
        super().__init__(message, **kwargs)


class MalformedTransitionKeyError(MachineDefinitionError):
    """A transition key is not a (state, symbol) pair."""

    def __init__(self, key: Any, index: Optional[int] = None, **kwargs):
        super().__init__("The current state and input is not a pair.", **kwargs)
        self.key = key
        self.index = index


class UnknownSourceStateError(MachineDefinitionError):
    """A transition key refers to a state outside the state set."""

    def __init__(self, state: Any, index: Optional[int] = None, **kwargs):
        super().__init__(f"The state '{state}' is unknown.", **kwargs)
        self.state = state
        self.index = index


class UnknownTransitionSymbolError(MachineDefinitionError):
    """A transition key refers to a symbol outside the input alphabet."""

    def __init__(self, symbol: Any, index: Optional[int] = None, **kwargs):
        super().__init__(f"The input '{symbol}' is unknown.", **kwargs)
        self.symbol = symbol
        self.index = index


class UnknownDestinationStateError(MachineDefinitionError):
    """A transition leads to a state outside the state set."""

    def __init__(self, state: Any, index: Optional[int] = None, **kwargs):
        super().__init__(f"The transition state '{state}' is unknown.", **kwargs)
        self.state = state
        self.index = index


class NonDeterministicTransitionError(MachineDefinitionError):
    """Two transition entries share a structurally equal key."""

    def __init__(self, first_index: int, second_index: int, **kwargs):
        super().__init__(
            "Non-deterministic transition function. "
            f"Entries at indexes '{first_index}' and '{second_index}'.",
            **kwargs
        )
        self.first_index = first_index
        self.second_index = second_index


class FinalStatesTypeError(MachineDefinitionError):
    """The final state set is not a set."""

    def __init__(self, message: str = "The 'final_states' argument is not a set.", **kwargs):
        super().__init__(message, **kwargs)


class UnknownFinalStateError(MachineDefinitionError):
    """A final state is not a member of the state set."""

    def __init__(self, state: Any, **kwargs):
        super().__init__(f"Unknown final state '{state}'.", **kwargs)
        self.state = state


class HookNotCallableError(MachineDefinitionError):
    """A transition hook cannot be called."""

    def __init__(self, hook_name: str, **kwargs):
        super().__init__(f"The {hook_name} transition function is not a function.", **kwargs)
        self.hook_name = hook_name


class StartHookNotCallableError(HookNotCallableError):
    """The start transition hook cannot be called."""

    def __init__(self, **kwargs):
        super().__init__("start", **kwargs)


class EndHookNotCallableError(HookNotCallableError):
    """The end transition hook cannot be called."""

    def __init__(self, **kwargs):
        super().__init__("end", **kwargs)
