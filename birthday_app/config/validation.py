"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import LOG_LEVELS, MONTH_NAMES, ORDERING_MODES


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_date_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate date format parameters."""
        errors = []

        if "separator" in params:
            value = params["separator"]
            if not isinstance(value, str) or len(value) != 1 or value.isdigit():
                errors.append(ValidationError(
                    field="separator",
                    message="Must be a single non-digit character",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_ordering_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ordering parameters."""
        errors = []

        if "mode" in params:
            value = params["mode"]
            if value not in ORDERING_MODES:
                errors.append(ValidationError(
                    field="mode",
                    message=f"Must be one of {', '.join(ORDERING_MODES)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_month_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate month grouping parameters."""
        errors = []

        if "locale" in params:
            value = params["locale"]
            if value not in MONTH_NAMES:
                errors.append(ValidationError(
                    field="locale",
                    message=f"Must be one of {', '.join(sorted(MONTH_NAMES))}",
                    value=value
                ))

        return errors

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

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "date" in config:
            errors.extend(ConfigValidator.validate_date_params(config["date"]))

        if "ordering" in config:
            errors.extend(ConfigValidator.validate_ordering_params(config["ordering"]))

        if "months" in config:
            errors.extend(ConfigValidator.validate_month_params(config["months"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
