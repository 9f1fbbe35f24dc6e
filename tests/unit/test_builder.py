r"""Unit tests for the request builder."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import httpx
import pytest
from coola.equality import objects_are_equal

from respec import (
    BinaryPayload,
    CachePolicy,
    ContentType,
    DataOnRetrievalRequestError,
    HttpMethod,
    InvalidEndpointError,
    JsonPayload,
    RequestBuildError,
    RequestSpec,
    StaticEndpoint,
    build_request,
)

if TYPE_CHECKING:
    from respec.endpoint import Endpoint

######################################
#     Tests for address handling     #
######################################


def test_build_request_resolves_url(endpoint: Endpoint) -> None:
    wire = build_request(RequestSpec(endpoint))
    assert isinstance(wire.url, httpx.URL)
    assert str(wire.url) == "https://api.example.com/items"


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "/relative/path",
        "api.example.com/items",
        "https://api.example.com/\x00items",
        "https://api.example.com/items\n",
        "https://api.example.com/\x7fitems",
    ],
)
def test_build_request_invalid_endpoint(url: str) -> None:
    endpoint = StaticEndpoint(url)
    with pytest.raises(InvalidEndpointError) as exc_info:
        build_request(RequestSpec(endpoint))
    assert exc_info.value.endpoint is endpoint


def test_build_request_invalid_endpoint_is_build_error() -> None:
    with pytest.raises(RequestBuildError, match=r"invalid endpoint URL"):
        RequestSpec(StaticEndpoint("")).build()


def test_build_request_invalid_endpoint_chains_cause() -> None:
    with pytest.raises(InvalidEndpointError) as exc_info:
        RequestSpec(StaticEndpoint("https://api.example.com/\x00")).build()
    assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)


#######################################
#     Tests for query parameters      #
#######################################


def test_build_request_query_order_and_duplicates(endpoint: Endpoint) -> None:
    spec = RequestSpec(endpoint, query_parameters=[("b", "2"), ("a", "1"), ("b", "3")])
    assert str(spec.build().url) == "https://api.example.com/items?b=2&a=1&b=3"


def test_build_request_query_appended_to_existing_query() -> None:
    spec = RequestSpec(
        StaticEndpoint("https://api.example.com/items?sort=name"),
        query_parameters=[("page", "2")],
    )
    assert str(spec.build().url) == "https://api.example.com/items?sort=name&page=2"


def test_build_request_query_values_are_encoded(endpoint: Endpoint) -> None:
    spec = RequestSpec(endpoint, query_parameters=[("q", "a&b=c")])
    wire = spec.build()
    assert wire.url.params.get_list("q") == ["a&b=c"]


def test_build_request_query_keeps_fragment() -> None:
    spec = RequestSpec(
        StaticEndpoint("https://api.example.com/items#top"), query_parameters=[("page", "1")]
    )
    assert str(spec.build().url) == "https://api.example.com/items?page=1#top"


def test_build_request_query_spaces_are_percent_encoded(endpoint: Endpoint) -> None:
    spec = RequestSpec(endpoint, query_parameters=[("q", "red pen"), ("tag", "a+b")])
    wire = spec.build()
    assert str(wire.url) == "https://api.example.com/items?q=red%20pen&tag=a%2Bb"
    assert wire.url.params.get_list("q") == ["red pen"]
    assert wire.url.params.get_list("tag") == ["a+b"]


def test_build_request_without_query(endpoint: Endpoint) -> None:
    spec = RequestSpec(endpoint, query_parameters=[])
    assert str(spec.build().url) == "https://api.example.com/items"


#############################
#     Tests for headers     #
#############################


def test_build_request_headers(endpoint: Endpoint) -> None:
    spec = RequestSpec(endpoint, headers={"Authorization": "Bearer token", "Accept": "*/*"})
    assert objects_are_equal(
        dict(spec.build().headers),
        {"Authorization": "Bearer token", "Accept": "*/*", "Content-Type": "application/json"},
    )


@pytest.mark.parametrize("content_type", list(ContentType))
def test_build_request_content_type_header(
    upload_endpoint: Endpoint, content_type: ContentType
) -> None:
    spec = RequestSpec(upload_endpoint, method=HttpMethod.PUT, content_type=content_type)
    assert spec.build().headers["Content-Type"] == content_type.value


@pytest.mark.parametrize("header_name", ["Content-Type", "content-type", "CONTENT-TYPE"])
def test_build_request_content_type_overrides_caller_header(
    upload_endpoint: Endpoint, header_name: str
) -> None:
    spec = RequestSpec(
        upload_endpoint,
        method=HttpMethod.PUT,
        headers={header_name: "text/plain", "Accept": "*/*"},
        content_type=ContentType.PNG,
        body=BinaryPayload(b"png"),
    )
    assert objects_are_equal(
        dict(spec.build().headers), {"Accept": "*/*", "Content-Type": "image/png"}
    )


def test_build_request_headers_are_read_only(endpoint: Endpoint) -> None:
    wire = RequestSpec(endpoint).build()
    with pytest.raises(TypeError):
        wire.headers["X-Extra"] = "1"


##########################
#     Tests for body     #
##########################


@pytest.mark.parametrize(
    "value",
    [{"name": "pen", "tags": ["a", "b"]}, [1, 2, 3], {"nested": {"ok": True, "n": None}}],
)
def test_build_request_json_body_round_trip(endpoint: Endpoint, value: object) -> None:
    spec = RequestSpec(endpoint, method=HttpMethod.POST, body=JsonPayload(value))
    assert objects_are_equal(json.loads(spec.build().content), value)


def test_build_request_json_without_payload(endpoint: Endpoint) -> None:
    wire = RequestSpec(endpoint, method=HttpMethod.POST).build()
    assert wire.content == b"{}"
    assert json.loads(wire.content) == {}


def test_build_request_binary_body_passthrough(upload_endpoint: Endpoint) -> None:
    data = b"\xff\xd8\xff\xe0 jpeg bytes"
    spec = RequestSpec(
        upload_endpoint,
        method=HttpMethod.PUT,
        content_type=ContentType.JPEG,
        body=BinaryPayload(data),
    )
    assert spec.build().content == data


def test_build_request_binary_without_payload(upload_endpoint: Endpoint) -> None:
    spec = RequestSpec(upload_endpoint, method=HttpMethod.DELETE, content_type=ContentType.PNG)
    wire = spec.build()
    assert wire.content is None
    assert wire.body_size == 0


def test_build_request_payload_mismatch(upload_endpoint: Endpoint) -> None:
    spec = RequestSpec(
        upload_endpoint,
        method=HttpMethod.PUT,
        content_type=ContentType.PNG,
        body=JsonPayload({"a": 1}),
    )
    with pytest.raises(TypeError):
        spec.build()


###########################################
#     Tests for the GET body invariant    #
###########################################


@pytest.mark.parametrize("body", [None, JsonPayload({}), JsonPayload([]), JsonPayload(None)])
def test_build_request_get_with_empty_json_body(
    endpoint: Endpoint, body: JsonPayload | None
) -> None:
    wire = RequestSpec(endpoint, body=body).build()
    assert wire.method == "GET"
    assert wire.content is None
    assert wire.body_size == 0


@pytest.mark.parametrize("value", [{"a": 1}, [0], "text", 0])
def test_build_request_get_with_json_body(endpoint: Endpoint, value: object) -> None:
    spec = RequestSpec(endpoint, body=JsonPayload(value))
    with pytest.raises(DataOnRetrievalRequestError) as exc_info:
        spec.build()
    assert exc_info.value.method == "GET"
    assert exc_info.value.url == "https://api.example.com/items"


def test_build_request_get_with_binary_body(upload_endpoint: Endpoint) -> None:
    spec = RequestSpec(upload_endpoint, content_type=ContentType.JPEG, body=BinaryPayload(b"x"))
    with pytest.raises(DataOnRetrievalRequestError, match=r"must not carry a body"):
        spec.build()


def test_build_request_get_with_empty_binary_body(upload_endpoint: Endpoint) -> None:
    spec = RequestSpec(upload_endpoint, content_type=ContentType.JPEG, body=BinaryPayload(b""))
    assert spec.build().content is None


def test_build_request_get_body_cleared_by_copy(endpoint: Endpoint) -> None:
    spec = RequestSpec(endpoint, body=JsonPayload({"a": 1}))
    assert spec.copy(body=None).build().content is None


def test_build_request_get_body_fixed_by_method_override(endpoint: Endpoint) -> None:
    spec = RequestSpec(endpoint, body=JsonPayload({"a": 1}))
    assert spec.copy(method=HttpMethod.POST).build().content == b'{"a":1}'


###############################
#     Tests for the output    #
###############################


def test_build_request_descriptor_fields(endpoint: Endpoint) -> None:
    session = object()
    spec = RequestSpec(
        endpoint,
        timeout=2.5,
        method=HttpMethod.PATCH,
        cache_policy=CachePolicy.RELOAD_REVALIDATING_CACHE,
        body=JsonPayload({"name": "ink"}),
        session=session,
    )
    wire = spec.build()
    assert wire.method == "PATCH"
    assert wire.timeout == 2.5
    assert wire.cache_policy is CachePolicy.RELOAD_REVALIDATING_CACHE
    assert wire.content == b'{"name":"ink"}'
    assert wire.body_size == len(b'{"name":"ink"}')
    assert wire.session is session


def test_build_request_is_repeatable(endpoint: Endpoint) -> None:
    spec = RequestSpec(endpoint, method=HttpMethod.POST, body=JsonPayload({"a": 1}))
    assert spec.build() == spec.build()
