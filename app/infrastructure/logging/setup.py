"""structlog setup for the dictionary service.

Production (no PREFIX) renders one JSON object per line; other environments
use the console renderer. Output is suppressed entirely under pytest.
"""

import inspect
import logging
import sys
from typing import Any, Callable, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration.settings import settings
from infrastructure.logging.formatters import add_service_info, truncate_long_strings

SERVICE_NAME = "dictionary-service"


def _build_processors(production: bool) -> list[Callable[..., Any]]:
    processors: list[Callable[..., Any]] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        add_service_info(SERVICE_NAME, settings.GIT_SHA),
        # Malformed remote payloads can end up in error messages
        truncate_long_strings(),
    ]
    if production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name; settings.LOG_LEVEL when omitted.
        is_production: JSON output when True; settings.is_production when omitted.

    Returns:
        The root structlog logger.
    """
    if "pytest" in sys.modules:
        level = logging.CRITICAL + 1
        processors: list[Callable[..., Any]] = [structlog.processors.KeyValueRenderer()]
    else:
        level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
        production = settings.is_production if is_production is None else is_production
        processors = _build_processors(production)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module's name.

    In infrastructure/i18n/resolver.py the context is
    {"component": "resolver", "module_path": "infrastructure.i18n.resolver"}.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
