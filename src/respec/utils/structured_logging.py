r"""Structured logging utilities for request specs.

The request builder never logs on its own. These helpers let callers
turn request specs into machine-readable log records: a JSON formatter,
a correlation ID carried in a context variable, and a function that
logs the structured description of a ``RequestSpec``.

Example:
    Log the description of every built request as JSON:

    ```python
    import logging
    from respec.utils.structured_logging import StructuredFormatter, log_request_spec

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("myapp.backend")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    log_request_spec(logger, spec)
    wire = spec.build()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_request_spec",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from respec.spec import RequestSpec

# Correlation ID of the current context (thread-safe and async-safe)
_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "respec_correlation_id", default=None
)

# Attributes present on every log record, anything else came from ``extra``
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or None if not set.

    Example:
        ```pycon
        >>> from respec.utils.structured_logging import get_correlation_id, set_correlation_id
        >>> set_correlation_id("req-123")
        >>> get_correlation_id()
        'req-123'

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set (e.g., request ID, trace ID).
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record is rendered as one JSON object with the fields
    ``timestamp``, ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, plus ``correlation_id`` when set,
    ``exception`` when the record carries exception info, and every
    field passed through the ``extra`` parameter of the logging call.
    Values that are not JSON serializable are rendered with ``str``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from respec.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured_formatter")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Request built", extra={"method": "GET"})
        >>> json.loads(stream.getvalue())["method"]
        'GET'

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record timestamp as ISO 8601 UTC with milliseconds."""
        created = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        return f"{created}.{int(record.msecs):03d}Z"


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields to include in the record.
    """
    logger.log(level, message, extra=extra)


def log_request_spec(
    logger: logging.Logger, spec: RequestSpec, level: int = logging.DEBUG
) -> None:
    """Log the structured description of a request spec.

    The message is the spec's log description and the fields of
    ``RequestSpec.log_info`` are attached to the record.

    Args:
        logger: Logger to use.
        spec: The request spec to describe.
        level: Log level (default: logging.DEBUG).
    """
    if logger.isEnabledFor(level):
        log_structured(logger, level, spec.log_description, **spec.log_info())
