"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _validate_bool(params: dict[str, Any], field: str) -> list[ValidationError]:
        if field in params and not isinstance(params[field], bool):
            return [ValidationError(field=field, message="Must be a boolean", value=params[field])]
        return []

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for field in ("format_json", "include_timestamp", "include_caller"):
            errors.extend(ConfigValidator._validate_bool(params, field))

        return errors

    @staticmethod
    def validate_machine_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate machine parameters."""
        return ConfigValidator._validate_bool(params, "log_transitions")

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "machine" in config:
            errors.extend(ConfigValidator.validate_machine_params(config["machine"]))

        return errors
