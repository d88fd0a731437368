"""
Error classification system for state machine construction and input handling.

Every invalid machine definition maps to exactly one exception class, so the
cause of a failed construction can be identified without parsing messages.
"""

from .definition import (
    MachineDefinitionError,
    InputAlphabetTypeError,
    EmptyInputAlphabetError,
    StatesTypeError,
    EmptyStatesError,
    UnknownInitialStateError,
    TransitionFunctionTypeError,
    EmptyTransitionFunctionError,
    MalformedTransitionKeyError,
    UnknownSourceStateError,
    UnknownTransitionSymbolError,
    UnknownDestinationStateError,
    NonDeterministicTransitionError,
    FinalStatesTypeError,
    UnknownFinalStateError,
    HookNotCallableError,
    StartHookNotCallableError,
    EndHookNotCallableError,
)
from .runtime import (
    MachineRuntimeError,
    UnknownInputSymbolError,
)

__all__ = [
    # Definition Errors
    "MachineDefinitionError",
    "InputAlphabetTypeError",
    "EmptyInputAlphabetError",
    "StatesTypeError",
    "EmptyStatesError",
    "UnknownInitialStateError",
    "TransitionFunctionTypeError",
    "EmptyTransitionFunctionError",
    "MalformedTransitionKeyError",
    "UnknownSourceStateError",
    "UnknownTransitionSymbolError",
    "UnknownDestinationStateError",
    "NonDeterministicTransitionError",
    "FinalStatesTypeError",
    "UnknownFinalStateError",
    "HookNotCallableError",
    "StartHookNotCallableError",
    "EndHookNotCallableError",
    # Runtime Errors
    "MachineRuntimeError",
    "UnknownInputSymbolError",
]
