"""Logging utilities for the API server.

Module loggers print to stderr on their own until the process configures
the root logger. From then on every record goes through the root
handlers only, so each line is written once.

Design Principles:
    - Observable: All components log through get_logger(__name__)
    - Single Sink: After configure_logger(), only root handlers emit
"""

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

# Marks handlers installed by get_logger so configure_logger can remove them
_MODULE_HANDLER_ATTR = "_apiserver_module_handler"

_root_configured = False


def _stderr_handler(format: str | None = None) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=format or DEFAULT_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _is_module_handler(handler: logging.Handler) -> bool:
    return getattr(handler, _MODULE_HANDLER_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a server module.

    Before configure_logger() runs, the logger gets its own stderr handler
    at INFO. Afterwards it is returned bare and inherits the root setup.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Validating options")
    """
    logger = logging.getLogger(name)

    if _root_configured:
        return logger

    if not logger.handlers:
        handler = _stderr_handler()
        setattr(handler, _MODULE_HANDLER_ATTR, True)
        logger.addHandler(handler)

    if not logger.level:
        logger.setLevel(logging.INFO)

    return logger


def configure_logger(
    level: str = "INFO",
    format: str | None = None,
    log_file: str | None = None
) -> None:
    """Configure the root logger for the process.

    Module handlers from get_logger() are removed and module levels reset,
    so records reach the root handlers exactly once.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        format: Custom log format string (optional)
        log_file: Path to log file (optional, for file logging)

    Example:
        >>> configure_logger(level="DEBUG", log_file="./apiserver.log")
    """
    global _root_configured

    log_level = LOG_LEVELS.get(level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = _stderr_handler(format)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(console_handler.formatter)
        root_logger.addHandler(file_handler)

    for logger in list(logging.Logger.manager.loggerDict.values()):
        if not isinstance(logger, logging.Logger):
            continue
        module_handlers = [h for h in logger.handlers if _is_module_handler(h)]
        if not module_handlers:
            continue
        for handler in module_handlers:
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    _root_configured = True
