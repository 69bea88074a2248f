"""Logging utilities for openapi-filter."""

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler


def get_logger(name: str) -> logging.Logger:
    """Get a logger nested under the OpenAPIFilter namespace.

    Args:
        name: the name of the logger, which will be prefixed with 'OpenAPIFilter.'

    Returns:
        a configured logger instance
    """
    return logging.getLogger(f"OpenAPIFilter.{name}")


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
) -> None:
    """Configure logging for openapi-filter.

    Records are rendered on stderr; the level only applies to the
    OpenAPIFilter namespace so other libraries keep their own levels.

    Args:
        level: the log level to use
    """
    logging.basicConfig(
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )
    logging.getLogger("OpenAPIFilter").setLevel(level)
