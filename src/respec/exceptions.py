r"""Exceptions raised while building wire requests.

All these errors are build-time validation failures. They are raised
before any network activity and are never worth retrying.
"""

from __future__ import annotations

__all__ = ["DataOnRetrievalRequestError", "InvalidEndpointError", "RequestBuildError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from respec.endpoint import Endpoint


class RequestBuildError(ValueError):
    """Base class for errors raised when a request spec cannot be built.

    Args:
        message: Descriptive error message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidEndpointError(RequestBuildError):
    """Raised when an endpoint URL is not a well-formed absolute URL.

    Args:
        endpoint: The endpoint whose URL could not be resolved.
        reason: Optional detail explaining why the URL was rejected.

    Attributes:
        endpoint: The endpoint whose URL could not be resolved.

    Example:
        ```pycon
        >>> from respec.endpoint import StaticEndpoint
        >>> from respec.exceptions import InvalidEndpointError
        >>> error = InvalidEndpointError(StaticEndpoint("not a url"))
        >>> error.endpoint.url
        'not a url'

        ```
    """

    def __init__(self, endpoint: Endpoint, reason: str | None = None) -> None:
        message = f"invalid endpoint URL {endpoint.url!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.endpoint = endpoint


class DataOnRetrievalRequestError(RequestBuildError):
    """Raised when a GET request resolves to a non-empty encoded body.

    This signals a caller logic error. The body is never dropped and the
    method is never upgraded silently.

    Args:
        method: The HTTP method of the request.
        url: The resolved URL of the request.

    Attributes:
        method: The HTTP method of the request.
        url: The resolved URL of the request.
    """

    def __init__(self, method: str, url: str) -> None:
        super().__init__(f"{method} request to {url} must not carry a body")
        self.method = method
        self.url = url
