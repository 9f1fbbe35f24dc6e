r"""Request factory holding defaults shared by many call sites.

A ``RequestFactory`` is typically created once per backend, with the
authentication headers, timeout and retry strategy used by every call,
and then asked for one spec per call.
"""

from __future__ import annotations

__all__ = ["RequestFactory"]

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from respec.config import DEFAULT_TIMEOUT
from respec.retry import ExponentialBackoffStrategy, RetryStrategy
from respec.spec import RequestSpec
from respec.types import CachePolicy, ContentType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from respec.endpoint import Endpoint
    from respec.wire import WireRequest


@dataclass(frozen=True)
class RequestFactory:
    """Factory creating request specs from shared defaults.

    Args:
        timeout: Default timeout in seconds for created specs.
        headers: Default headers for created specs.
        content_type: Default content type for created specs.
        cache_policy: Default cache policy for created specs.
        session: Optional opaque auth context for created specs.
        retry_strategy: Default retry strategy for created specs.

    Example:
        ```pycon
        >>> from respec import HttpMethod, JsonPayload, RequestFactory, StaticEndpoint
        >>> factory = RequestFactory(headers={"Authorization": "Bearer token"}, timeout=30.0)
        >>> spec = factory.create(
        ...     StaticEndpoint("https://api.example.com/items"),
        ...     method=HttpMethod.POST,
        ...     body=JsonPayload({"name": "pen"}),
        ... )
        >>> spec.timeout, dict(spec.headers)
        (30.0, {'Authorization': 'Bearer token'})

        ```
    """

    timeout: float = DEFAULT_TIMEOUT
    headers: Mapping[str, str] = field(default_factory=dict)
    content_type: ContentType = ContentType.JSON
    cache_policy: CachePolicy = CachePolicy.USE_PROTOCOL_DEFAULT
    session: Any = None
    retry_strategy: RetryStrategy = field(default_factory=ExponentialBackoffStrategy)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def create(self, endpoint: Endpoint, **overrides: Any) -> RequestSpec:
        """Create a request spec for an endpoint.

        Args:
            endpoint: The destination of the request.
            **overrides: Per-call overrides accepted by
                ``RequestSpec.copy``.

        Returns:
            A new ``RequestSpec`` built from the factory defaults and the
            overrides.
        """
        spec = RequestSpec(
            endpoint=endpoint,
            timeout=self.timeout,
            headers=self.headers,
            content_type=self.content_type,
            cache_policy=self.cache_policy,
            session=self.session,
            retry_strategy=self.retry_strategy,
        )
        return spec.copy(**overrides) if overrides else spec

    def build(self, endpoint: Endpoint, **overrides: Any) -> WireRequest:
        """Create a request spec for an endpoint and build it.

        Args:
            endpoint: The destination of the request.
            **overrides: Per-call overrides accepted by
                ``RequestSpec.copy``.

        Returns:
            The transport-ready wire request.

        Raises:
            RequestBuildError: If the spec cannot be built.
        """
        return self.create(endpoint, **overrides).build()

    def with_headers(self, headers: Mapping[str, str]) -> RequestFactory:
        """Return a new factory with additional default headers.

        Args:
            headers: Headers merged over the current defaults.

        Returns:
            A new ``RequestFactory``. The current factory is unchanged.
        """
        return replace(self, headers={**self.headers, **headers})
