"""Run options for the API server.

ServerRunOptions composes the server's option components. Flags are
registered, validated and applied component by component; validation
failures from all components are collected before anything is applied.
"""

from typing import Any

from core.egress_selector import EgressSelector
from core.settings import ServerConfig
from observability.logger import get_logger
from options import base
from options.base import AggregateError
from options.flagset import FlagSet
from options.logging import LoggingOptions
from options.tracing import TracingOptions, new_tracing_options

logger = get_logger(__name__)

# Default for constructor arguments; an explicit None leaves the component out
_DEFAULT: Any = object()


class ServerRunOptions:
    """All option components of one server process.

    A component passed (or set) as None leaves its feature out of the
    server; it then registers no flags and always validates. Omitted
    components get their defaults.

    Attributes:
        logging: Logging options
        tracing: Tracing options
    """

    def __init__(
        self,
        logging: LoggingOptions | None = _DEFAULT,
        tracing: TracingOptions | None = _DEFAULT,
    ) -> None:
        self.logging: LoggingOptions | None = (
            LoggingOptions() if logging is _DEFAULT else logging
        )
        self.tracing: TracingOptions | None = (
            new_tracing_options() if tracing is _DEFAULT else tracing
        )

    @classmethod
    def from_config(cls, config: ServerConfig) -> "ServerRunOptions":
        """Create run options with defaults taken from loaded settings."""
        return cls(logging=LoggingOptions(log_level=config.observability.log_level))

    def _components(self) -> list:
        return [self.logging, self.tracing]

    def add_flags(self, fs: FlagSet) -> None:
        for component in self._components():
            base.add_flags(fs, component)

    def flags(self, name: str = "apiserver") -> FlagSet:
        """Create a FlagSet with every component's flags registered."""
        fs = FlagSet(name)
        self.add_flags(fs)
        return fs

    def validate(self) -> list[Exception]:
        """Validate every component, keeping failures in component order."""
        errs: list[Exception] = []
        for component in self._components():
            errs.extend(base.validate(component))
        return errs

    def apply_to(self, egress_selector: EgressSelector | None, config: ServerConfig) -> None:
        """Validate, then apply every component into config.

        Raises:
            AggregateError: If validation fails; config is left untouched
            OptionsError: If a component fails to apply
        """
        errs = self.validate()
        if errs:
            raise AggregateError(errs)

        config.egress_selector = egress_selector
        for component in self._components():
            base.apply_to(component, egress_selector, config)
        logger.debug("Applied run options to server config")
