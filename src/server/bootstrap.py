"""API server startup sequence.

Loads settings, registers option flags, parses the command line,
validates every option component, and applies them into the server
configuration. Any validation failure refuses startup.
"""

import sys
from pathlib import Path

import click

from core.egress_selector import EgressSelector
from core.scheme import CodecFactory, new_config_codecs
from core.settings import ServerConfig, SettingsError, load_settings
from observability.logger import get_logger
from options.base import AggregateError, OptionsError
from options.server_run import ServerRunOptions

logger = get_logger(__name__)


def build_config(
    argv: list[str],
    settings_path: Path | None = None,
    egress_selector: EgressSelector | None = None,
    codecs: CodecFactory | None = None,
) -> ServerConfig | None:
    """Assemble the server configuration from settings and flags.

    Args:
        argv: Command-line arguments, without the program name
        settings_path: Optional settings YAML; built-in defaults if None
        egress_selector: Egress selector handed to option components
        codecs: Config codecs kept on the ServerConfig; built if None

    Returns:
        The applied ServerConfig, or None if help was printed

    Raises:
        SettingsError: If the settings file is missing or invalid
        click.UsageError: If argv cannot be parsed
        AggregateError: If option validation fails
        OptionsError: If an option component fails to apply
    """
    config = load_settings(settings_path) if settings_path else ServerConfig()
    config.config_codecs = codecs if codecs is not None else new_config_codecs()

    options = ServerRunOptions.from_config(config)
    fs = options.flags(config.name)
    if not fs.parse(argv):
        return None

    # validates every component before applying any of them
    options.apply_to(egress_selector or EgressSelector(), config)
    return config


def main(argv: list[str] | None = None, settings_path: Path | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments; defaults to sys.argv[1:]
        settings_path: Optional path to settings.yaml

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if argv is None:
        argv = sys.argv[1:]

    logger.info("API server - Starting...")

    # one registry per process, handed to components through ServerConfig
    codecs = new_config_codecs()
    logger.debug(f"Config API versions: {', '.join(codecs.scheme.group_versions())}")

    try:
        config = build_config(argv, settings_path, codecs=codecs)
    except SettingsError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except click.UsageError as e:
        logger.error(f"Invalid arguments: {e.format_message()}")
        return 1
    except AggregateError as e:
        for err in e.errors:
            logger.error(f"Invalid option: {err}")
        return 1
    except OptionsError as e:
        logger.error(f"Failed to apply options: {e}")
        return 1

    if config is None:
        return 0

    logger.info(f"Server configuration for {config.name} complete.")
    return 0
