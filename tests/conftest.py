"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict

START = "<START>"
MID = "<MID>"
FINAL = "<FINAL>"


@pytest.fixture
def single_step_definition() -> Dict[str, Any]:
    """Smallest useful machine: one symbol moves START to FINAL."""
    return {
        "input_alphabet": {"a"},
        "states": {START, FINAL},
        "initial_state": START,
        "transition_function": {(START, "a"): FINAL},
        "final_states": {FINAL},
    }


@pytest.fixture
def scenario_definition() -> Dict[str, Any]:
    """Three-state machine over {a, b, c} that accepts in FINAL."""
    return {
        "input_alphabet": {"a", "b", "c"},
        "states": {START, MID, FINAL},
        "initial_state": START,
        "transition_function": {
            (START, "a"): START,
            (START, "b"): MID,
            (MID, "b"): MID,
            (MID, "a"): FINAL,
            (MID, "c"): START,
        },
        "final_states": {FINAL},
    }


@pytest.fixture
def scenario_symbols() -> list:
    """Input that walks the scenario machine through every state."""
    return ["a", "b", "b", "c", "b", "a"]
