r"""Endpoint abstraction consumed by request specs.

An endpoint is an opaque destination descriptor that provides a URL
string and a human-readable description. Any object exposing these two
attributes can be used as an endpoint.
"""

from __future__ import annotations

__all__ = ["Endpoint", "StaticEndpoint", "describe_endpoint"]

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Endpoint(Protocol):
    """Protocol for request destinations.

    Attributes:
        url: The URL string of the destination. It is validated only
            when a request is built.
        description: A human-readable description used in log records.
    """

    @property
    def url(self) -> str: ...  # pragma: no cover

    @property
    def description(self) -> str: ...  # pragma: no cover


@dataclass(frozen=True)
class StaticEndpoint:
    """Endpoint with a fixed URL.

    Two static endpoints with the same URL compare equal, the
    description is not part of their identity.

    Args:
        url: The URL string of the destination.
        description: Optional human-readable description.

    Example:
        ```pycon
        >>> from respec.endpoint import StaticEndpoint
        >>> endpoint = StaticEndpoint("https://api.example.com/items", "list items")
        >>> endpoint == StaticEndpoint("https://api.example.com/items")
        True

        ```
    """

    url: str
    description: str = field(default="", compare=False)


def describe_endpoint(endpoint: Endpoint) -> str:
    """Return the log description of an endpoint.

    Args:
        endpoint: The endpoint to describe.

    Returns:
        The endpoint description, or its URL if the description is empty.

    Example:
        ```pycon
        >>> from respec.endpoint import StaticEndpoint, describe_endpoint
        >>> describe_endpoint(StaticEndpoint("https://api.example.com/me", "profile"))
        'profile'
        >>> describe_endpoint(StaticEndpoint("https://api.example.com/me"))
        'https://api.example.com/me'

        ```
    """
    return endpoint.description or endpoint.url
