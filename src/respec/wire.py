r"""Transport-ready request descriptor produced by the request builder."""

from __future__ import annotations

__all__ = ["WireRequest"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

    from respec.types import CachePolicy


@dataclass(frozen=True)
class WireRequest:
    """Fully resolved request handed to the transport.

    Attributes:
        url: The resolved URL, query parameters included.
        method: The HTTP method token (e.g., "GET", "POST").
        headers: Read-only mapping of outgoing headers. It always
            contains the ``Content-Type`` header.
        cache_policy: The caching policy the transport should honor.
        timeout: Maximum seconds to wait for the server response.
        content: The encoded body bytes, or ``None`` if the request has
            no body.
        session: Opaque auth context forwarded to the transport.
    """

    url: httpx.URL
    method: str
    headers: Mapping[str, str]
    cache_policy: CachePolicy
    timeout: float
    content: bytes | None = None
    session: Any = None

    @property
    def body_size(self) -> int:
        """The number of encoded body bytes."""
        return len(self.content) if self.content is not None else 0

    def to_httpx(self) -> httpx.Request:
        """Convert the descriptor into an ``httpx.Request``.

        The timeout is attached as the ``timeout`` request extension,
        which httpx transports read for per-request timeouts.

        Returns:
            An ``httpx.Request`` ready to be sent with ``client.send``.

        Example:
            ```pycon
            >>> from respec import RequestSpec, StaticEndpoint
            >>> wire = RequestSpec(StaticEndpoint("https://api.example.com/items")).build()
            >>> request = wire.to_httpx()
            >>> request.method, str(request.url)
            ('GET', 'https://api.example.com/items')
            >>> request.headers["Content-Type"]
            'application/json'

            ```
        """
        return httpx.Request(
            self.method,
            self.url,
            headers=dict(self.headers),
            content=self.content,
            extensions={"timeout": httpx.Timeout(self.timeout).as_dict()},
        )
