r"""Body encoding for request specs.

A request body is modeled as a tagged payload: ``JsonPayload`` for JSON
values and ``BinaryPayload`` for raw, already-encoded bytes. The body
encoder is selected from the declared content type, and a payload whose
variant disagrees with the content type is a programming error.
"""

from __future__ import annotations

__all__ = [
    "BinaryPayload",
    "JsonPayload",
    "Payload",
    "encode_binary",
    "encode_body",
    "encode_json",
    "is_empty_body",
]

import json
from dataclasses import dataclass
from typing import Any, Union

from respec.types import ContentType

# Canonical encodings of JSON documents carrying no data
_EMPTY_JSON_BODIES = frozenset({b"{}", b"[]", b"null"})


@dataclass(frozen=True)
class JsonPayload:
    """Body payload holding a JSON-representable value.

    Args:
        value: Any value accepted by ``json.dumps``.
    """

    value: Any


@dataclass(frozen=True)
class BinaryPayload:
    """Body payload holding raw encoded bytes (e.g. an image).

    Args:
        data: The bytes sent as-is on the wire.
    """

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            msg = f"BinaryPayload expects bytes, got {type(self.data).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "data", bytes(self.data))


Payload = Union[JsonPayload, BinaryPayload]


def encode_json(payload: JsonPayload | None) -> bytes:
    """Encode a JSON payload into UTF-8 bytes.

    A missing payload encodes to an empty JSON object so the result is
    always a valid JSON document.

    Args:
        payload: The JSON payload, or ``None``.

    Returns:
        The compact UTF-8 JSON encoding of the payload value.

    Raises:
        TypeError: If ``payload`` is not a ``JsonPayload`` or its value
            is not JSON serializable.

    Example:
        ```pycon
        >>> from respec.codec import JsonPayload, encode_json
        >>> encode_json(JsonPayload({"name": "avatar", "size": [1, 2]}))
        b'{"name":"avatar","size":[1,2]}'
        >>> encode_json(None)
        b'{}'

        ```
    """
    if payload is None:
        return b"{}"
    if not isinstance(payload, JsonPayload):
        msg = f"JSON content requires a JsonPayload, got {type(payload).__name__}"
        raise TypeError(msg)
    return json.dumps(payload.value, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def encode_binary(payload: BinaryPayload | None) -> bytes | None:
    """Pass a binary payload through unchanged.

    Args:
        payload: The binary payload, or ``None``.

    Returns:
        The payload bytes, or ``None`` if there is no payload.

    Raises:
        TypeError: If ``payload`` is not a ``BinaryPayload``.

    Example:
        ```pycon
        >>> from respec.codec import BinaryPayload, encode_binary
        >>> encode_binary(BinaryPayload(b"raw-image"))
        b'raw-image'
        >>> encode_binary(None) is None
        True

        ```
    """
    if payload is None:
        return None
    if not isinstance(payload, BinaryPayload):
        msg = f"binary content requires a BinaryPayload, got {type(payload).__name__}"
        raise TypeError(msg)
    return payload.data


def encode_body(content_type: ContentType, payload: Payload | None) -> bytes | None:
    """Encode a body payload according to the declared content type.

    Args:
        content_type: The declared content type of the request.
        payload: The body payload, or ``None``.

    Returns:
        The encoded body bytes, or ``None`` for a binary request without
        payload.

    Raises:
        TypeError: If the payload variant does not match the content type.
    """
    if content_type is ContentType.JSON:
        return encode_json(payload)
    if content_type.is_binary:
        return encode_binary(payload)
    msg = f"unsupported content type: {content_type!r}"
    raise TypeError(msg)


def is_empty_body(encoded: bytes | None) -> bool:
    """Indicate whether an encoded body carries no data.

    Missing bodies, zero-length bodies and the encodings of an empty JSON
    object, an empty JSON array or a JSON null are all empty.

    Args:
        encoded: The encoded body bytes, or ``None``.

    Returns:
        ``True`` if the body is empty, otherwise ``False``.

    Example:
        ```pycon
        >>> from respec.codec import is_empty_body
        >>> is_empty_body(None), is_empty_body(b""), is_empty_body(b"{}")
        (True, True, True)
        >>> is_empty_body(b'{"a":1}')
        False

        ```
    """
    return not encoded or encoded in _EMPTY_JSON_BODIES
