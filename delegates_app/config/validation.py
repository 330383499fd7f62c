"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import BookstoreParams, ComposeParams, ConsoleParams, LoggingParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_SECTIONS = {
    "bookstore": BookstoreParams,
    "compose": ComposeParams,
    "console": ConsoleParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _validate_strings(params: dict[str, Any], names: tuple[str, ...]) -> list[ValidationError]:
        errors = []
        for name in names:
            if name in params and not isinstance(params[name], str):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a string",
                    value=params[name]
                ))
        return errors

    @staticmethod
    def validate_bookstore_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate bookstore demo parameters."""
        errors = ConfigValidator._validate_strings(
            params, ("header", "average_label", "currency_symbol")
        )

        # bool is an int subclass, reject it explicitly
        if "price_places" in params:
            value = params["price_places"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="price_places",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_compose_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate compose demo parameters."""
        errors = ConfigValidator._validate_strings(params, ("label_template",))

        if isinstance(params.get("label_template"), str) and "{name}" not in params["label_template"]:
            errors.append(ValidationError(
                field="label_template",
                message="Must contain the {name} placeholder",
                value=params["label_template"]
            ))

        return errors

    @staticmethod
    def validate_console_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate console parameters."""
        errors = ConfigValidator._validate_strings(params, ("exit_prompt",))

        if "pause_on_exit" in params and not isinstance(params["pause_on_exit"], bool):
            errors.append(ValidationError(
                field="pause_on_exit",
                message="Must be a boolean",
                value=params["pause_on_exit"]
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

        for name in ("format_json", "include_timestamp"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_known_fields(config: dict[str, Any]) -> list[ValidationError]:
        """Reject sections and keys that have no matching parameter."""
        errors = []

        for section, params in config.items():
            params_cls = _SECTIONS.get(section)
            if params_cls is None:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue

            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            known = {f.name for f in fields(params_cls)}
            for key in params:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=params[key]
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = ConfigValidator.validate_known_fields(config)
        if errors:
            return errors

        if "bookstore" in config:
            errors.extend(ConfigValidator.validate_bookstore_params(config["bookstore"]))

        if "compose" in config:
            errors.extend(ConfigValidator.validate_compose_params(config["compose"]))

        if "console" in config:
            errors.extend(ConfigValidator.validate_console_params(config["console"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
