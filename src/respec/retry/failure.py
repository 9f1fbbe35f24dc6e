r"""Classification of failed request attempts.

Retry strategies decide on a ``FailureKind`` rather than on raw
responses or exceptions, which keeps them independent of the transport.
"""

from __future__ import annotations

__all__ = ["TRANSIENT_FAILURES", "FailureKind", "classify_failure"]

from enum import Enum

import httpx

from respec.config import RETRY_STATUS_CODES


class FailureKind(str, Enum):
    """Classification of why a request attempt failed."""

    TIMEOUT = "timeout"
    CONNECTION = "connection"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    PERMANENT_SERVER_ERROR = "permanent_server_error"
    CLIENT_ERROR = "client_error"
    UNKNOWN = "unknown"


# Failures that are usually resolved by trying again later
TRANSIENT_FAILURES = frozenset(
    {
        FailureKind.TIMEOUT,
        FailureKind.CONNECTION,
        FailureKind.RATE_LIMITED,
        FailureKind.SERVER_ERROR,
    }
)


def classify_failure(
    response: httpx.Response | None = None,
    error: BaseException | None = None,
) -> FailureKind:
    """Classify a failed attempt from its response or exception.

    The exception takes precedence over the response when both are
    given. Server errors count as transient only for the status codes
    in ``RETRY_STATUS_CODES``, other 5xx statuses such as 501 are
    classified as ``PERMANENT_SERVER_ERROR``.

    Args:
        response: The HTTP response of the failed attempt, if any.
        error: The exception raised by the failed attempt, if any.

    Returns:
        The failure classification.

    Example:
        ```pycon
        >>> import httpx
        >>> from respec.retry import classify_failure
        >>> classify_failure(response=httpx.Response(503))
        <FailureKind.SERVER_ERROR: 'server_error'>
        >>> classify_failure(response=httpx.Response(501))
        <FailureKind.PERMANENT_SERVER_ERROR: 'permanent_server_error'>
        >>> classify_failure(error=httpx.ReadTimeout("timed out"))
        <FailureKind.TIMEOUT: 'timeout'>

        ```
    """
    if error is not None:
        if isinstance(error, httpx.TimeoutException):
            return FailureKind.TIMEOUT
        if isinstance(error, httpx.TransportError):
            return FailureKind.CONNECTION
        return FailureKind.UNKNOWN
    if response is None:
        return FailureKind.UNKNOWN
    status_code = response.status_code
    if status_code == 429:
        return FailureKind.RATE_LIMITED
    if status_code == 408:
        return FailureKind.TIMEOUT
    if status_code in RETRY_STATUS_CODES:
        return FailureKind.SERVER_ERROR
    if 500 <= status_code < 600:
        return FailureKind.PERMANENT_SERVER_ERROR
    if 400 <= status_code < 500:
        return FailureKind.CLIENT_ERROR
    return FailureKind.UNKNOWN
