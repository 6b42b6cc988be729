"""Structlog configuration for the translation engine.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Once, at process start
    configure_logging()

    # Per module
    logger = get_module_logger()
    logger.warning("translation_key_not_found", key="cart.title")

Every entry carries ``app_name`` and ``app_version`` (the deployed GIT_SHA).
Under pytest nothing is emitted.

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Any, Callable, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import Settings

APP_NAME = "locale-key-resolver"

# Above CRITICAL: nothing reaches a handler
SILENT_LEVEL = logging.CRITICAL + 1

Processor = Callable[[Any, str, dict], dict]


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Create a processor that stamps application name and version on entries.

    Args:
        app_name: Name of the application.
        app_version: Version string, usually the deployed git SHA.

    Returns:
        A structlog processor function.
    """

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("app_version", app_version)
        return event_dict

    return processor


def build_processors(prod_mode: bool, app_version: str = "unknown") -> List[Processor]:
    """Build the structlog processor chain.

    Args:
        prod_mode: Render JSON when True, colored console output otherwise.
        app_version: Value stamped as app_version on every entry.

    Returns:
        Ordered list of processors, renderer last.
    """
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_info(APP_NAME, app_version),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _configure_silent() -> BoundLogger:
    logging.root.setLevel(SILENT_LEVEL)
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
    return structlog.stdlib.get_logger()


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL.
        is_production: Optional override for production mode (JSON output).
            Defaults to settings.is_production.
        settings: Optional Settings instance, loaded from the environment
            when not provided.

    Returns:
        Configured logger instance

    Example:
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    if _is_test_environment():
        return _configure_silent()

    settings = settings or Settings()
    prod_mode = settings.is_production if is_production is None else is_production

    structlog.configure(
        processors=build_processors(prod_mode, app_version=settings.GIT_SHA),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last dotted part) and ``module_path`` (full module
    name), e.g. component="translator",
    module_path="infrastructure.i18n.translator".

    Returns:
        Logger with module context
    """
    caller = inspect.currentframe()
    caller = caller.f_back if caller is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
