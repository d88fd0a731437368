"""
DFA Engine - Deterministic Finite-State Machine

A reusable deterministic finite-state machine for parsers, protocol handlers
and workflow trackers. Validates the full machine definition up front and
advances the current state one input symbol at a time, calling hooks before
and after every transition.
"""

from .state import StateMachine, TransitionKey, TransitionRecord

__version__ = "0.1.0"
__author__ = "DFA Engine Team"

__all__ = ["StateMachine", "TransitionKey", "TransitionRecord"]
