"""Options - command-line option components of the API server.

Each component registers flags on a shared FlagSet, validates the parsed
values, and applies them into the ServerConfig.
"""

from options.base import (
    AggregateError,
    ConfigApplier,
    Options,
    OptionsError,
    ValidationError,
    add_flags,
    apply_to,
    validate,
)
from options.flagset import FlagRedefinedError, FlagSet, FlagSetError
from options.logging import InvalidLogLevelError, LoggingOptions
from options.server_run import ServerRunOptions
from options.tracing import (
    TracingConfigFileCheckError,
    TracingConfigFileNotFoundError,
    TracingOptions,
    new_tracing_options,
)

__all__ = [
    "AggregateError",
    "ConfigApplier",
    "FlagRedefinedError",
    "FlagSet",
    "FlagSetError",
    "InvalidLogLevelError",
    "LoggingOptions",
    "Options",
    "OptionsError",
    "ServerRunOptions",
    "TracingConfigFileCheckError",
    "TracingConfigFileNotFoundError",
    "TracingOptions",
    "ValidationError",
    "add_flags",
    "apply_to",
    "new_tracing_options",
    "validate",
]
