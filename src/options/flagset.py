"""Shared command-line flag surface for server option components.

Option components register flags bound to their own attributes; after
parse() every bound attribute holds the parsed value (or its default).
Parsing is delegated to click.

Usage:
    fs = FlagSet("apiserver")
    fs.string_var(opts, "config_file", "tracing-config-file", "", "File with ...")
    fs.parse(["--tracing-config-file=/etc/tracing.yaml"])
"""

from typing import Any

import click

from observability.logger import get_logger

logger = get_logger(__name__)


class FlagSetError(Exception):
    """Base exception for flag registration errors."""

    pass


class FlagRedefinedError(FlagSetError):
    """Raised when two components register the same flag name."""

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name


class FlagSet:
    """A named set of flags shared by many option components."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._options: dict[str, click.Option] = {}
        # click parameter name -> (target object, attribute name)
        self._bindings: dict[str, tuple[Any, str]] = {}
        self.parsed = False

    def string_var(
        self,
        target: Any,
        attr: str,
        name: str,
        default: str,
        usage: str,
    ) -> None:
        """Register a string flag bound to target.attr.

        Args:
            target: Object that receives the parsed value
            attr: Attribute of target to write
            name: Flag name without leading dashes (e.g., 'tracing-config-file')
            default: Value written when the flag is not given
            usage: Help text

        Raises:
            FlagRedefinedError: If name is already registered
        """
        if name in self._options:
            raise FlagRedefinedError(f"{self.name} flag redefined: {name}", name=name)

        option = click.Option([f"--{name}"], type=str, default=default, help=usage)
        self._options[name] = option
        self._bindings[option.name] = (target, attr)
        logger.debug(f"Registered flag --{name} on {self.name}")

    def lookup(self, name: str) -> click.Option | None:
        return self._options.get(name)

    def has_flag(self, name: str) -> bool:
        return name in self._options

    def names(self) -> list[str]:
        return list(self._options)

    def _command(self) -> click.Command:
        return click.Command(
            self.name,
            params=list(self._options.values()),
            callback=lambda **values: values,
        )

    def parse(self, args: list[str]) -> bool:
        """Parse args and write values into bound targets.

        Args:
            args: Command-line arguments, without the program name

        Returns:
            False if help was requested and printed, True otherwise

        Raises:
            click.UsageError: If args contain unknown flags or bad values
        """
        result = self._command().main(
            args=list(args), prog_name=self.name, standalone_mode=False
        )
        self.parsed = True

        if not isinstance(result, dict):
            return False

        for param_name, value in result.items():
            target, attr = self._bindings[param_name]
            setattr(target, attr, value)
        return True

    def format_help(self) -> str:
        command = self._command()
        with click.Context(command, info_name=self.name) as ctx:
            return command.get_help(ctx)
