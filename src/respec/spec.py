r"""Declarative description of one outbound request.

A ``RequestSpec`` is an immutable value. Variants of a shared base spec
are derived with ``copy``, which inherits every field that is not
explicitly overridden and never shares mutable storage with its source.
"""

from __future__ import annotations

__all__ = ["UNSET", "RequestSpec"]

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from respec.builder import build_request
from respec.config import DEFAULT_TIMEOUT
from respec.endpoint import describe_endpoint
from respec.retry import ExponentialBackoffStrategy, RetryStrategy
from respec.types import CachePolicy, ContentType, HttpMethod

if TYPE_CHECKING:
    from collections.abc import Iterable

    from respec.codec import Payload
    from respec.endpoint import Endpoint
    from respec.wire import WireRequest


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


# Marks an override that was not provided, distinct from an explicit None
UNSET = _Unset.UNSET


@dataclass(frozen=True)
class RequestSpec:
    """Configuration describing one outbound request.

    Construction never fails on valid field types: every field except
    the endpoint has a default. The method/body invariant is enforced
    when the spec is built, not here, so a spec may temporarily hold a
    GET method together with a body.

    Args:
        endpoint: The destination of the request.
        timeout: Maximum seconds to wait for the server response
            (default: 10.0).
        method: The HTTP method (default: GET).
        query_parameters: Ordered ``(name, value)`` pairs appended to
            the URL. A mapping is accepted and read in iteration order.
        headers: Outgoing headers. ``Content-Type`` is always replaced
            by the declared content type when the spec is built.
        content_type: The declared body content type (default: JSON).
        cache_policy: The caching policy handed to the transport.
        body: Optional tagged body payload.
        session: Optional opaque auth context forwarded to the transport.
        retry_strategy: Strategy consulted by the transport after a
            failed attempt. Defaults to exponential backoff.

    Example:
        ```pycon
        >>> from respec import HttpMethod, JsonPayload, RequestSpec, StaticEndpoint
        >>> base = RequestSpec(
        ...     StaticEndpoint("https://api.example.com/items", "create item"),
        ...     method=HttpMethod.POST,
        ...     headers={"Authorization": "Bearer token"},
        ... )
        >>> spec = base.copy(body=JsonPayload({"name": "pen"}))
        >>> spec.method, spec.has_body, base.has_body
        (<HttpMethod.POST: 'POST'>, True, False)

        ```
    """

    endpoint: Endpoint
    timeout: float = DEFAULT_TIMEOUT
    method: HttpMethod = HttpMethod.GET
    query_parameters: tuple[tuple[str, str], ...] = ()
    headers: Mapping[str, str] = field(default_factory=dict)
    content_type: ContentType = ContentType.JSON
    cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_DEFAULT
    body: Payload | None = None
    session: Any = None
    retry_strategy: RetryStrategy = field(default_factory=ExponentialBackoffStrategy)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", HttpMethod(self.method))
        object.__setattr__(self, "content_type", ContentType(self.content_type))
        object.__setattr__(self, "cache_policy", CachePolicy(self.cache_policy))
        object.__setattr__(self, "query_parameters", _freeze_query(self.query_parameters))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def copy(
        self,
        *,
        timeout: float | _Unset = UNSET,
        method: HttpMethod | str | _Unset = UNSET,
        query_parameters: Iterable[tuple[str, str]] | Mapping[str, str] | _Unset = UNSET,
        headers: Mapping[str, str] | _Unset = UNSET,
        content_type: ContentType | str | _Unset = UNSET,
        cache_policy: CachePolicy | str | _Unset = UNSET,
        body: Payload | None | _Unset = UNSET,
        session: Any = UNSET,
        retry_strategy: RetryStrategy | _Unset = UNSET,
    ) -> RequestSpec:
        """Create a new spec with the specified fields overridden.

        Fields left to ``UNSET`` keep the current value. ``None`` is a
        real override value, for example ``body=None`` removes the body.
        The endpoint cannot be overridden, a request to another
        destination needs a new spec.

        Returns:
            A new ``RequestSpec``. The current spec is unchanged.

        Example:
            ```pycon
            >>> from respec import JsonPayload, RequestSpec, StaticEndpoint
            >>> spec = RequestSpec(StaticEndpoint("https://api.example.com/items"), timeout=5.0)
            >>> with_body = spec.copy(body=JsonPayload([1, 2]))
            >>> with_body.copy(body=None).body is None
            True
            >>> with_body.timeout
            5.0

            ```
        """
        overrides = {
            "timeout": timeout,
            "method": method,
            "query_parameters": query_parameters,
            "headers": headers,
            "content_type": content_type,
            "cache_policy": cache_policy,
            "body": body,
            "session": session,
            "retry_strategy": retry_strategy,
        }
        return replace(self, **{k: v for k, v in overrides.items() if v is not UNSET})

    def build(self) -> WireRequest:
        """Build the wire request described by this spec.

        Returns:
            The transport-ready wire request.

        Raises:
            InvalidEndpointError: If the endpoint URL is malformed.
            DataOnRetrievalRequestError: If a GET request resolves to a
                non-empty encoded body.
        """
        return build_request(self)

    @property
    def has_body(self) -> bool:
        """Indicate whether a body payload is set."""
        return self.body is not None

    @property
    def log_description(self) -> str:
        """A one-line description of the request for log messages."""
        return f"Backend request to {describe_endpoint(self.endpoint)}"

    def log_info(self) -> dict[str, Any]:
        """Return a structured, JSON-friendly description of the spec.

        The body itself and the session are not included.

        Returns:
            A dictionary suitable for the ``extra`` of a log record.

        Example:
            ```pycon
            >>> from respec import RequestSpec, StaticEndpoint
            >>> spec = RequestSpec(StaticEndpoint("https://api.example.com/me", "profile"))
            >>> info = spec.log_info()
            >>> info["endpoint"], info["method"], info["has_body"]
            ('profile', 'GET', False)

            ```
        """
        return {
            "endpoint": describe_endpoint(self.endpoint),
            "timeout": self.timeout,
            "method": self.method.value,
            "query_parameters": [list(item) for item in self.query_parameters],
            "headers": dict(self.headers),
            "content_type": self.content_type.value,
            "cache_policy": self.cache_policy.value,
            "has_body": self.has_body,
            "retry_strategy": self.retry_strategy.description,
        }


def _freeze_query(
    query_parameters: Iterable[tuple[str, str]] | Mapping[str, str],
) -> tuple[tuple[str, str], ...]:
    items = query_parameters.items() if isinstance(query_parameters, Mapping) else query_parameters
    return tuple((str(name), str(value)) for name, value in items)
