"""Observability - logging for the API server."""

from observability.logger import configure_logger, get_logger

__all__ = ["configure_logger", "get_logger"]
