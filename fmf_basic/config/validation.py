"""Configuration validation utilities."""

import codecs
from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_text_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate codec error handler names."""
        errors = []

        for handler in ("decode_errors", "encode_errors"):
            if handler not in params:
                continue
            value = params[handler]
            try:
                codecs.lookup_error(value)
            except (LookupError, TypeError):
                errors.append(ValidationError(
                    field=handler,
                    message="Must be a registered codec error handler",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "text" in config:
            errors.extend(ConfigValidator.validate_text_params(config["text"]))

        return errors
