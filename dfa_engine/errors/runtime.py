"""
Runtime error classifications for state machine input handling.

A runtime error leaves the machine exactly as it was, so the caller may keep
feeding it valid input.
"""

from typing import Any, Dict, Optional


class MachineRuntimeError(Exception):
    """Base class for errors raised while driving a constructed machine."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class UnknownInputSymbolError(MachineRuntimeError):
    """A symbol outside the input alphabet was provided."""

    def __init__(self, symbol: Any, current_state: Any = None, **kwargs):
        super().__init__(f"Unknown input symbol '{symbol}' provided.", **kwargs)
        self.symbol = symbol
        self.current_state = current_state
