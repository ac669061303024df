"""Base capabilities for server option components.

An option component registers flags, validates the parsed values, and
applies them into the shared ServerConfig. A server may omit a component
entirely; the module-level helpers accept None and treat it as a
disabled component.

Design Principles:
    - Pluggable: All option components implement Options and ConfigApplier
    - Collect, Don't Raise: validate() returns failures for the caller to aggregate
    - Optional Components: add_flags/validate/apply_to are no-ops for None
"""

from abc import ABC, abstractmethod
from typing import Any

from core.egress_selector import EgressSelector
from core.settings import ServerConfig
from options.flagset import FlagSet


class OptionsError(Exception):
    """Base exception for option component errors."""

    pass


class ValidationError(OptionsError):
    """A single validation failure reported by an option component."""

    pass


class AggregateError(OptionsError):
    """Several option failures reported together.

    Attributes:
        errors: The individual failures, in the order they were reported
    """

    def __init__(self, errors: list[Exception]) -> None:
        self.errors = list(errors)
        if len(self.errors) == 1:
            message = str(self.errors[0])
        else:
            message = "[" + ", ".join(str(e) for e in self.errors) + "]"
        super().__init__(message)


class Options(ABC):
    """Flag registration and validation for one option component."""

    @abstractmethod
    def add_flags(self, fs: FlagSet) -> None:
        """Register this component's flags on fs."""
        ...

    @abstractmethod
    def validate(self) -> list[Exception]:
        """Check parsed values.

        Returns:
            Validation failures; empty if the values are valid
        """
        ...


class ConfigApplier(ABC):
    """Transfers validated option state into the server configuration."""

    @abstractmethod
    def apply_to(self, egress_selector: EgressSelector | None, config: ServerConfig) -> None:
        """Apply validated state into config.

        Raises:
            OptionsError: If the state cannot be applied
        """
        ...


def add_flags(fs: FlagSet, options: Options | None) -> None:
    """Register flags for options, if the component is present."""
    if options is None:
        return
    options.add_flags(fs)


def validate(options: Options | None) -> list[Exception]:
    """Validate options; an absent component is always valid."""
    if options is None:
        return []
    return options.validate()


def apply_to(
    options: Any,
    egress_selector: EgressSelector | None,
    config: ServerConfig,
) -> None:
    """Apply options into config, if the component is present."""
    if options is None:
        return
    options.apply_to(egress_selector, config)
