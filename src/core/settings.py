"""Server configuration for the API server.

This module provides the ServerConfig dataclass that option components
apply into, and loading/validation functions for the settings file
(config/settings.yaml).

Design Principles:
    - Config-Driven: Defaults come from settings.yaml, flags override them
    - Fail-Fast: Invalid values cause immediate failure
    - Clear Errors: Error messages include field paths (e.g., 'observability.log_level')
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from core.egress_selector import EgressSelector
from core.scheme import CodecFactory


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ObservabilityConfig:
    """Observability and logging configuration.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Custom log format string
        log_file: Path to a log file, in addition to stderr
    """
    log_level: str = "INFO"
    log_format: str | None = None
    log_file: str | None = None


@dataclass
class ServerConfig:
    """Shared server configuration assembled during startup.

    Option components write their validated state into this object.

    Attributes:
        name: Server name used in logs
        observability: Observability configuration
        egress_selector: Egress selector for outbound connections
        tracer_provider: Tracing exporter wiring; not populated yet
        config_codecs: Decoder for versioned config files, set once at startup
    """
    name: str = "apiserver"
    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)
    egress_selector: EgressSelector | None = None
    tracer_provider: Any = None
    config_codecs: CodecFactory | None = None


class SettingsError(Exception):
    """Base exception for settings-related errors."""

    pass


class SettingsFileError(SettingsError):
    """Raised when settings file cannot be read or parsed."""

    pass


class SettingsValidationError(SettingsError):
    """Raised when settings validation fails."""

    def __init__(self, message: str, invalid_fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.invalid_fields = invalid_fields or []


def validate_settings(config: ServerConfig) -> None:
    """Validate a loaded server configuration.

    Args:
        config: ServerConfig to validate

    Raises:
        SettingsValidationError: If any field is invalid
    """
    invalid: list[str] = []

    if not isinstance(config.name, str) or not config.name.strip():
        invalid.append("server.name")

    level = config.observability.log_level
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        invalid.append("observability.log_level")

    if invalid:
        raise SettingsValidationError(
            f"Invalid configuration fields: {', '.join(invalid)}",
            invalid_fields=invalid,
        )


def _get_section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a top-level section, {} if absent.

    Raises:
        SettingsValidationError: If the section is not a mapping
    """
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise SettingsValidationError(
            f"Configuration section '{name}' must be a mapping, "
            f"got {type(section).__name__}",
            invalid_fields=[name],
        )
    return section


def _yaml_to_config(data: dict[str, Any]) -> ServerConfig:
    """Convert YAML dictionary to ServerConfig object."""
    server = _get_section(data, "server")
    observability = _get_section(data, "observability")

    return ServerConfig(
        name=server.get("name", "apiserver"),
        observability=ObservabilityConfig(
            log_level=observability.get("log_level", "INFO"),
            log_format=observability.get("log_format"),
            log_file=observability.get("log_file"),
        ),
    )


def load_settings(path: str | Path = "config/settings.yaml") -> ServerConfig:
    """Load server settings from a YAML file.

    Args:
        path: Path to the settings YAML file (default: config/settings.yaml)

    Returns:
        ServerConfig with all settings loaded

    Raises:
        SettingsFileError: If the file cannot be read or parsed
        SettingsValidationError: If a field is invalid

    Example:
        >>> config = load_settings()
        >>> print(config.observability.log_level)
        INFO
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise SettingsFileError(f"Settings file not found: {path}") from e
    except yaml.YAMLError as e:
        raise SettingsFileError(f"Invalid YAML in settings file: {e}") from e

    if not isinstance(data, dict):
        raise SettingsFileError(f"Settings file must contain a mapping: {path}")

    config = _yaml_to_config(data)
    validate_settings(config)

    return config
