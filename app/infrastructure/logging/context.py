"""Request-scoped logging context.

The HTTP middleware wraps each request in bind_request_context so every log
line emitted while serving it carries the same correlation id.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra: Any,
) -> Iterator[str]:
    """Bind correlation id and request metadata for the duration of the block.

    Yields:
        The correlation id in effect (generated when none was given).
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    if request_path is not None:
        context["request_path"] = request_path
    if request_method is not None:
        context["request_method"] = request_method
    context.update(extra)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context)
