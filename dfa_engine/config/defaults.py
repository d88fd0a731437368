"""Default configuration parameters for the DFA engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters passed to ``configure_logging``."""
    level: str = "INFO"                  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    format_json: bool = False            # JSON lines vs console renderer
    include_timestamp: bool = True
    include_caller: bool = False         # Filename and line number


@dataclass(frozen=True)
class MachineParams:
    """Per-machine behaviour defaults."""
    log_transitions: bool = True         # Emit a state_transition event per step


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    logging: LoggingParams
    machine: MachineParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        logging=LoggingParams(),
        machine=MachineParams(),
    )
