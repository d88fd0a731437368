"""
Configuration management for the DFA engine.
"""
from .defaults import DefaultConfig, LoggingParams, MachineParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "LoggingParams",
    "MachineParams",
    "ValidationError",
    "get_default_config",
]
