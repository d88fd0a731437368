"""
State machine module.

Provides the deterministic finite-state machine, its transition key and record
types, and validation of machine definitions.
"""
from .machine import StateMachine, no_transition_hook
from .models import TransitionKey, TransitionRecord

__all__ = ["StateMachine", "TransitionKey", "TransitionRecord", "no_transition_hook"]
