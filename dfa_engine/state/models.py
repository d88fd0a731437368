"""
State machine data models.

This module defines the immutable value types a machine definition is built
from: the structural (state, symbol) transition key and the record of a
completed transition.
"""

from dataclasses import dataclass
from typing import Any, Callable, Hashable, NamedTuple

State = Hashable
Symbol = Hashable

# hook(machine, previous_state, symbol, next_state)
TransitionHook = Callable[[Any, Any, Any, Any], Any]


class TransitionKey(NamedTuple):
    """
    Lookup key of a transition function entry.

    Equality and hashing are structural, so ``TransitionKey("A", "x")`` and
    the plain tuple ``("A", "x")`` identify the same entry.
    """
    state: State
    symbol: Symbol


@dataclass(frozen=True)
class TransitionRecord:
    """A single transition: where the machine was, what it read, where it went."""
    previous_state: State
    symbol: Symbol
    next_state: State

    def as_tuple(self) -> tuple[Any, Any, Any]:
        """The positional values passed to transition hooks."""
        return (self.previous_state, self.symbol, self.next_state)
