r"""Enumerations describing the wire-level shape of a request."""

from __future__ import annotations

__all__ = ["CachePolicy", "ContentType", "HttpMethod"]

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP method tokens.

    The value of each member is the exact token sent on the wire.

    Example:
        ```pycon
        >>> from respec.types import HttpMethod
        >>> HttpMethod.POST.value
        'POST'
        >>> HttpMethod("PATCH")
        <HttpMethod.PATCH: 'PATCH'>

        ```
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ContentType(str, Enum):
    """Supported request body content types.

    The value of each member is the ``Content-Type`` header value.

    Example:
        ```pycon
        >>> from respec.types import ContentType
        >>> ContentType.JSON.value
        'application/json'
        >>> ContentType.PNG.is_binary
        True

        ```
    """

    JSON = "application/json"
    JPEG = "image/jpeg"
    PNG = "image/png"

    @property
    def is_binary(self) -> bool:
        """Indicate whether bodies of this type are passed through as raw
        bytes."""
        return self in (ContentType.JPEG, ContentType.PNG)


class CachePolicy(str, Enum):
    """Caching policy handed to the transport.

    The builder does not translate the policy into headers, the transport
    decides how to honor it.
    """

    USE_PROTOCOL_DEFAULT = "use_protocol_default"
    RELOAD_IGNORING_LOCAL_CACHE = "reload_ignoring_local_cache"
    RELOAD_IGNORING_LOCAL_AND_REMOTE_CACHE = "reload_ignoring_local_and_remote_cache"
    RETURN_CACHE_ELSE_LOAD = "return_cache_else_load"
    RETURN_CACHE_DONT_LOAD = "return_cache_dont_load"
    RELOAD_REVALIDATING_CACHE = "reload_revalidating_cache"
