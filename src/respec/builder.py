r"""Conversion of request specs into wire requests.

``build_request`` is a pure, synchronous transformation. It resolves the
endpoint URL, appends the query parameters, assembles the headers,
encodes the body and enforces the method/body invariant. It performs no
I/O and never logs.
"""

from __future__ import annotations

__all__ = ["build_request"]

from types import MappingProxyType
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

import httpx

from respec.codec import encode_body, is_empty_body
from respec.config import CONTENT_TYPE_HEADER
from respec.exceptions import DataOnRetrievalRequestError, InvalidEndpointError
from respec.types import HttpMethod
from respec.wire import WireRequest

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from respec.endpoint import Endpoint
    from respec.spec import RequestSpec
    from respec.types import ContentType


def build_request(spec: RequestSpec) -> WireRequest:
    """Build the wire request described by a request spec.

    Args:
        spec: The request spec to build.

    Returns:
        The transport-ready wire request.

    Raises:
        InvalidEndpointError: If the endpoint URL is not a well-formed
            absolute URL.
        DataOnRetrievalRequestError: If a GET request resolves to a
            non-empty encoded body.
        TypeError: If the body payload does not match the content type.

    Example:
        ```pycon
        >>> from respec import HttpMethod, JsonPayload, RequestSpec, StaticEndpoint
        >>> from respec.builder import build_request
        >>> spec = RequestSpec(
        ...     StaticEndpoint("https://api.example.com/items"),
        ...     method=HttpMethod.POST,
        ...     query_parameters=[("page", "2")],
        ...     body=JsonPayload({"name": "pen"}),
        ... )
        >>> wire = build_request(spec)
        >>> str(wire.url)
        'https://api.example.com/items?page=2'
        >>> wire.content
        b'{"name":"pen"}'

        ```
    """
    url = _append_query(_resolve_url(spec.endpoint), spec.query_parameters)
    headers = _assemble_headers(spec.headers, spec.content_type)
    content = encode_body(spec.content_type, spec.body)

    # checked on the encoded bytes, not on the presence of a payload
    if spec.method is HttpMethod.GET:
        if not is_empty_body(content):
            raise DataOnRetrievalRequestError(method=spec.method.value, url=str(url))
        content = None

    return WireRequest(
        url=url,
        method=spec.method.value,
        headers=headers,
        cache_policy=spec.cache_policy,
        timeout=spec.timeout,
        content=content,
        session=spec.session,
    )


def _resolve_url(endpoint: Endpoint) -> httpx.URL:
    try:
        url = httpx.URL(endpoint.url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidEndpointError(endpoint, str(exc)) from exc
    if not url.is_absolute_url:
        raise InvalidEndpointError(endpoint, "expected an absolute URL")
    return url


def _append_query(url: httpx.URL, query_parameters: Sequence[tuple[str, str]]) -> httpx.URL:
    if not query_parameters:
        return url
    # httpx.QueryParams groups repeated names, so the pairs are encoded in order here
    existing = url.query.decode("ascii")
    encoded = urlencode(list(query_parameters), quote_via=quote)
    query = f"{existing}&{encoded}" if existing else encoded
    return url.copy_with(query=query.encode("ascii"))


def _assemble_headers(headers: Mapping[str, str], content_type: ContentType) -> Mapping[str, str]:
    # the declared content type is the single source of truth for the header
    assembled = {
        name: value
        for name, value in headers.items()
        if name.lower() != CONTENT_TYPE_HEADER.lower()
    }
    assembled[CONTENT_TYPE_HEADER] = content_type.value
    return MappingProxyType(assembled)
