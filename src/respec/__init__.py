r"""respec - Declarative HTTP request building with pluggable retry
strategies.

This package assembles fully-specified, validated outbound requests from
a declarative description. A ``RequestSpec`` describes one call (URL,
method, headers, query parameters, body, caching policy) and is turned
into a transport-ready ``WireRequest`` by the request builder. Each spec
carries a ``RetryStrategy`` that the transport consults after a failed
attempt.

Key Features:
    - Immutable request specs with override-copy for request variants
    - Validation of endpoint URLs and of GET requests carrying a body
    - Body encoding selected from the declared content type
    - Exponential, jittered, fixed-delay and no-retry strategies
    - Structured log records describing request specs
    - Adapter to ``httpx.Request`` for httpx-based transports

Example:
    ```pycon
    >>> from respec import HttpMethod, JsonPayload, RequestSpec, StaticEndpoint
    >>> base = RequestSpec(
    ...     StaticEndpoint("https://api.example.com/items", "create item"),
    ...     method=HttpMethod.POST,
    ... )
    >>> wire = base.copy(body=JsonPayload({"name": "pen"})).build()
    >>> wire.method, wire.headers["Content-Type"], wire.content
    ('POST', 'application/json', b'{"name":"pen"}')

    ```
"""

from __future__ import annotations

__all__ = [
    "UNSET",
    "BinaryPayload",
    "CachePolicy",
    "ContentType",
    "DataOnRetrievalRequestError",
    "Endpoint",
    "ExponentialBackoffStrategy",
    "FailureKind",
    "HttpMethod",
    "InvalidEndpointError",
    "JsonPayload",
    "RequestBuildError",
    "RequestFactory",
    "RequestSpec",
    "RetryStrategy",
    "StaticEndpoint",
    "WireRequest",
    "__version__",
    "build_request",
]

from importlib.metadata import PackageNotFoundError, version

from respec.builder import build_request
from respec.codec import BinaryPayload, JsonPayload
from respec.endpoint import Endpoint, StaticEndpoint
from respec.exceptions import (
    DataOnRetrievalRequestError,
    InvalidEndpointError,
    RequestBuildError,
)
from respec.factory import RequestFactory
from respec.retry import ExponentialBackoffStrategy, FailureKind, RetryStrategy
from respec.spec import UNSET, RequestSpec
from respec.types import CachePolicy, ContentType, HttpMethod
from respec.wire import WireRequest

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
