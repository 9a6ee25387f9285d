"""Structured logging for the dictionary service (structlog).

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("dictionary_refreshed", locale="ar")
"""

from infrastructure.logging.context import bind_request_context
from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = [
    "bind_request_context",
    "configure_logging",
    "get_module_logger",
]
