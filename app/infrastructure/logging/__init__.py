"""Structured logging infrastructure.

This package provides centralized logging configuration for the translation
engine using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - add_app_info(): Processor stamping app name and version
    - build_processors(): Processor chain used by configure_logging()

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    add_app_info,
    build_processors,
    configure_logging,
    get_module_logger,
)

__all__ = [
    "add_app_info",
    "build_processors",
    "configure_logging",
    "get_module_logger",
]
