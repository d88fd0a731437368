#!/usr/bin/env python3
"""
Basic Usage Example - DFA Engine

This script demonstrates the basic usage of the DFA engine. It shows how to:
- Define an input alphabet, states and a partial transition function
- Observe transitions through start and end hooks
- Chain input and check acceptance
- Handle rejected input and invalid definitions

Run: python examples/basic_usage.py
"""

from typing import Any

from dfa_engine import StateMachine
from dfa_engine.config.loader import ConfigLoader
from dfa_engine.errors import MachineDefinitionError, UnknownInputSymbolError
from dfa_engine.logging import configure_logging_from_config

START = "<START>"
MID = "<MID>"
FINAL = "<FINAL>"


def on_start(machine: StateMachine, current_state: Any, symbol: Any, next_state: Any) -> None:
    """Print the transition about to happen."""
    print(f"   {current_state} --{symbol}--> {next_state}  (machine.state={machine.state})")


def on_end(machine: StateMachine, previous_state: Any, symbol: Any, next_state: Any) -> None:
    """Print where the machine ended up."""
    marker = " [final]" if machine.is_in_final_state else ""
    print(f"   now in {machine.state}{marker}")


def build_machine(**kwargs: Any) -> StateMachine:
    """Create the three-state example machine."""
    return StateMachine(
        {"a", "b", "c"},
        {START, MID, FINAL},
        START,
        {
            (START, "a"): START,
            (START, "b"): MID,
            (MID, "b"): MID,
            (MID, "a"): FINAL,
            (MID, "c"): START,
        },
        {FINAL},
        on_start,
        on_end,
        name="example",
        **kwargs,
    )


def main():
    """Run the basic usage demo."""
    print("🚀 DFA Engine - Basic Usage Demo")
    print("=" * 50)

    config = ConfigLoader.create().merge_config({"logging": {"level": "WARNING"}})
    configure_logging_from_config(config)

    print("1. Building machine...")
    machine = build_machine(**config["machine"])
    print(f"   {machine!r}")
    print()

    print("2. Feeding a, b, b, c, b, a...")
    machine.provide("a").provide("b").provide("b").provide("c").provide("b").provide("a")
    print(f"   Accepted: {machine.is_in_final_state}")
    print()

    print("3. Undefined transitions are ignored...")
    machine.provide("c")
    print(f"   Still in {machine.state}")
    print()

    print("4. Unknown symbols are rejected...")
    try:
        machine.provide("z")
    except UnknownInputSymbolError as e:
        print(f"   ❌ {e}")
    print()

    print("5. Invalid definitions never construct...")
    try:
        StateMachine({"a"}, {START}, START, [((START, "a"), START), ((START, "a"), START)])
    except MachineDefinitionError as e:
        print(f"   ❌ {type(e).__name__}: {e}")
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
