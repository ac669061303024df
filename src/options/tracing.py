"""Tracing options for the API server.

Exposes --tracing-config-file, the path to an optional tracing exporter
configuration file. An empty path disables tracing.
"""

from core import path
from core.egress_selector import EgressSelector
from core.settings import ServerConfig
from observability.logger import get_logger
from options.base import ConfigApplier, Options, ValidationError
from options.flagset import FlagSet

logger = get_logger(__name__)

TRACING_CONFIG_FILE_FLAG = "tracing-config-file"


class TracingConfigFileNotFoundError(ValidationError):
    """The configured tracing config file does not exist."""

    def __init__(self, config_file: str) -> None:
        super().__init__(f"{TRACING_CONFIG_FILE_FLAG} {config_file} does not exist")
        self.config_file = config_file


class TracingConfigFileCheckError(ValidationError):
    """The existence check for the tracing config file failed."""

    def __init__(self, config_file: str, cause: OSError | ValueError) -> None:
        super().__init__(
            f"error checking if {TRACING_CONFIG_FILE_FLAG} {config_file} exists: {cause}"
        )
        self.config_file = config_file
        self.cause = cause
        self.__cause__ = cause


class TracingOptions(Options, ConfigApplier):
    """Configuration options for tracing exporters.

    Attributes:
        config_file: Path to the apiserver tracing configuration file
    """

    def __init__(self, config_file: str = "") -> None:
        self.config_file = config_file

    def add_flags(self, fs: FlagSet) -> None:
        """Register --tracing-config-file on fs."""
        fs.string_var(
            self, "config_file", TRACING_CONFIG_FILE_FLAG, self.config_file,
            "File with apiserver tracing configuration.",
        )

    def apply_to(self, egress_selector: EgressSelector | None, config: ServerConfig) -> None:
        """Leave config unchanged.

        Exporter wiring is not installed yet, so neither egress_selector
        nor config is touched.
        """
        logger.debug(f"Tracing options applied (config file: {self.config_file or 'none'})")

    def validate(self) -> list[Exception]:
        """Check that the configured file exists, following symlinks."""
        errs: list[Exception] = []
        if not self.config_file:
            return errs

        try:
            found = path.exists(path.LinkTreatment.FOLLOW_SYMLINK, self.config_file)
        except (OSError, ValueError) as e:
            # ValueError: the path cannot be passed to stat (e.g. embedded NUL)
            errs.append(TracingConfigFileCheckError(self.config_file, e))
        else:
            if not found:
                errs.append(TracingConfigFileNotFoundError(self.config_file))

        for err in errs:
            logger.debug(f"Tracing options validation failed: {err}")
        return errs

    def __repr__(self) -> str:
        return f"TracingOptions(config_file={self.config_file!r})"


def new_tracing_options() -> TracingOptions:
    """Create TracingOptions with tracing disabled."""
    return TracingOptions()
