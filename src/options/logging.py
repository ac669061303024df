"""Logging options for the API server."""

from core.egress_selector import EgressSelector
from core.settings import LOG_LEVELS, ServerConfig
from observability.logger import configure_logger
from options.base import ConfigApplier, Options, ValidationError
from options.flagset import FlagSet


class InvalidLogLevelError(ValidationError):
    """--log-level names an unknown level."""

    def __init__(self, level: str) -> None:
        super().__init__(
            f"log-level {level!r} is invalid; must be one of {', '.join(LOG_LEVELS)}"
        )
        self.level = level


class LoggingOptions(Options, ConfigApplier):
    """Log verbosity for the server process.

    Attributes:
        log_level: Logging level name, case-insensitive
    """

    def __init__(self, log_level: str = "INFO") -> None:
        self.log_level = log_level

    def add_flags(self, fs: FlagSet) -> None:
        fs.string_var(
            self, "log_level", "log-level", self.log_level,
            f"Log verbosity, one of {', '.join(LOG_LEVELS)}.",
        )

    def validate(self) -> list[Exception]:
        if self.log_level.upper() not in LOG_LEVELS:
            return [InvalidLogLevelError(self.log_level)]
        return []

    def apply_to(self, egress_selector: EgressSelector | None, config: ServerConfig) -> None:
        observability = config.observability
        observability.log_level = self.log_level.upper()
        configure_logger(
            level=observability.log_level,
            format=observability.log_format,
            log_file=observability.log_file,
        )
