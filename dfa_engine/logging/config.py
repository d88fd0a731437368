"""
Centralized logging configuration for the DFA engine.

This module provides standardized logging configuration using structlog.
Machines log through the state logger defined here so that transition events
share one structured format regardless of the host application.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )
    # basicConfig leaves the level alone if the root logger already has handlers
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_config(config: dict[str, Any]) -> None:
    """
    Configure logging from the ``logging`` section of a merged configuration.

    Args:
        config: Configuration dictionary as returned by ``ConfigLoader.merge_config``
    """
    params = config.get("logging", {})
    configure_logging(
        level=params.get("level", "INFO"),
        format_json=params.get("format_json", False),
        include_timestamp=params.get("include_timestamp", True),
        include_caller=params.get("include_caller", False),
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_state_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger specifically configured for state transitions.

    The subsystem is passed as initial context, not bound, so the logger
    stays lazy and picks up whatever configuration is active when it is
    first used.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for state transitions
    """
    return structlog.get_logger(name, subsystem="state_machine")


def log_state_transition(
    logger: FilteringBoundLogger,
    machine_name: Optional[str],
    from_state: Any,
    to_state: Any,
    symbol: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a state transition with standardized format.

    States and symbols are rendered with ``str`` since they may be any
    hashable value.

    Args:
        logger: Structlog logger instance
        machine_name: Name of the transitioning machine, if any
        from_state: State before the transition
        to_state: State after the transition
        symbol: Input symbol that triggered the transition
        context: Additional context data
    """
    bound_logger = logger.bind(
        machine=machine_name,
        from_state=str(from_state),
        to_state=str(to_state),
        symbol=str(symbol),
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("state_transition")
